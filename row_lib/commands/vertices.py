# -*- coding: utf-8 -*-
"""Vertex analytics command.

Reads a centerline from GeoJSON and writes its per-vertex bearings, bends
and distances as CSV.
"""

import argparse
import logging

from row_lib.analytics import compute_vertex_analytics
from row_lib.commands._common import add_engine_argument
from row_lib.commands._common import add_input_argument
from row_lib.commands._common import add_output_argument
from row_lib.commands._common import engine_from_args
from row_lib.errors import RowError
from row_lib.export import vertices_to_csv
from row_lib.interface import RowInterface

logger = logging.getLogger(__name__)


def vertices(args: list[str]) -> int:
    """Entry point for the vertices command."""
    parser = argparse.ArgumentParser(
        prog="row vertices",
        description="Export per-vertex analytics of a GeoJSON centerline as CSV",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  row vertices -i centerline.geojson                 # Output to stdout
  row vertices -i centerline.geojson -o table.csv    # Output to file

Columns:
  Index, X, Y, Bearing, Bearing DMS, Bend Angle, Bend Direction,
  Segment Length (m), Distance From Start (m)
""",
    )

    add_input_argument(parser, "Input GeoJSON file holding a LineString")
    add_output_argument(parser, "Output CSV path (prints to stdout if not specified)")
    add_engine_argument(parser)

    parsed_args = parser.parse_args(args)

    if not parsed_args.input_file.exists():
        logger.error("Error: Input file not found: %s", parsed_args.input_file)
        return 1

    try:
        centerline = RowInterface.load_centerline(parsed_args.input_file)
        records = compute_vertex_analytics(
            centerline, engine=engine_from_args(parsed_args)
        )
        if not records:
            logger.warning("Centerline has fewer than 2 usable points")

        if parsed_args.output_file is None:
            print(vertices_to_csv(records))  # noqa: T201
        else:
            RowInterface.save_vertices_csv(records, parsed_args.output_file)

    except RowError:
        logger.exception("Unable to compute vertex analytics")
        return 1

    except Exception:
        logger.exception("Unknown Problem ...")
        return 1

    return 0
