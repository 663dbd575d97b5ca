# -*- coding: utf-8 -*-
"""Measure command: area and perimeter of a GeoJSON polygon."""

import argparse
import logging

from row_lib.commands._common import add_engine_argument
from row_lib.commands._common import add_input_argument
from row_lib.commands._common import engine_from_args
from row_lib.errors import RowError
from row_lib.interface import RowInterface
from row_lib.measure import calculate_area
from row_lib.measure import calculate_perimeter

logger = logging.getLogger(__name__)


def measure(args: list[str]) -> int:
    """Entry point for the measure command."""
    parser = argparse.ArgumentParser(
        prog="row measure",
        description="Print the area (m²) and perimeter (m) of a GeoJSON polygon",
    )

    add_input_argument(parser, "Input GeoJSON file holding a Polygon")
    add_engine_argument(parser)

    parsed_args = parser.parse_args(args)

    if not parsed_args.input_file.exists():
        logger.error("Error: Input file not found: %s", parsed_args.input_file)
        return 1

    try:
        polygon = RowInterface.load_polygon(parsed_args.input_file)
        engine = engine_from_args(parsed_args)
        area = calculate_area(polygon, engine=engine)
        perimeter = calculate_perimeter(polygon, engine=engine)

    except RowError:
        logger.exception("Unable to measure the polygon")
        return 1

    except Exception:
        logger.exception("Unknown Problem ...")
        return 1

    print(f"area_m2={area:.2f}")  # noqa: T201
    print(f"perimeter_m={perimeter:.2f}")  # noqa: T201
    return 0
