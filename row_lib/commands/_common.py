# -*- coding: utf-8 -*-
"""Argument helpers shared by the CLI commands."""

from __future__ import annotations

import argparse
from pathlib import Path

from row_lib.engine import GeodesicGeometryEngine
from row_lib.engine import GeometryEngine
from row_lib.engine import default_engine


def add_input_argument(parser: argparse.ArgumentParser, help_text: str) -> None:
    parser.add_argument(
        "-i",
        "--input-file",
        type=Path,
        required=True,
        help=help_text,
    )


def add_output_argument(parser: argparse.ArgumentParser, help_text: str) -> None:
    parser.add_argument(
        "-o",
        "--output-file",
        type=Path,
        default=None,
        help=help_text,
    )


def add_engine_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--geodesic",
        metavar="CRS",
        default=None,
        help=(
            "Measure on the ellipsoid of CRS (e.g. EPSG:4326) instead of "
            "treating coordinates as planar meters"
        ),
    )


def engine_from_args(parsed_args: argparse.Namespace) -> GeometryEngine:
    if parsed_args.geodesic:
        return GeodesicGeometryEngine(parsed_args.geodesic)
    return default_engine()
