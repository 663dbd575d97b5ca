# -*- coding: utf-8 -*-
"""ROW polygon command.

Reads a centerline from GeoJSON and writes the right-of-way polygon built
from it as a GeoJSON Feature.
"""

import argparse
import logging

from row_lib.commands._common import add_engine_argument
from row_lib.commands._common import add_input_argument
from row_lib.commands._common import add_output_argument
from row_lib.commands._common import engine_from_args
from row_lib.constants import DEFAULT_LEFT_WIDTH
from row_lib.constants import DEFAULT_RIGHT_WIDTH
from row_lib.corridor import build_corridor
from row_lib.errors import RowError
from row_lib.export import line_to_feature
from row_lib.export import polygon_to_feature
from row_lib.export import to_geojson_string
from row_lib.interface import RowInterface

logger = logging.getLogger(__name__)


def polygon(args: list[str]) -> int:
    """Entry point for the polygon command."""
    parser = argparse.ArgumentParser(
        prog="row polygon",
        description="Build a right-of-way polygon from a GeoJSON centerline",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  row polygon -i centerline.geojson                    # Output to stdout
  row polygon -i centerline.geojson -o row.geojson     # Output to file
  row polygon -i centerline.geojson -l 15 -r 30        # Asymmetric corridor
  row polygon -i centerline.geojson --geodesic EPSG:4326

Notes:
  - The left width is applied on the right-hand side of the direction of
    travel and the right width on the left-hand side, as the offsets are
    built with positive and negative distances respectively
  - If the offset cannot be built the centerline itself is written
""",
    )

    add_input_argument(parser, "Input GeoJSON file holding a LineString")
    add_output_argument(
        parser, "Output GeoJSON file path (prints to stdout if not specified)"
    )
    parser.add_argument(
        "-l",
        "--left-width",
        type=float,
        default=DEFAULT_LEFT_WIDTH,
        help=f"Left width in meters (default: {DEFAULT_LEFT_WIDTH})",
    )
    parser.add_argument(
        "-r",
        "--right-width",
        type=float,
        default=DEFAULT_RIGHT_WIDTH,
        help=f"Right width in meters (default: {DEFAULT_RIGHT_WIDTH})",
    )
    add_engine_argument(parser)
    parser.add_argument(
        "--minify",
        action="store_true",
        help="Omit indentation in the GeoJSON output",
    )

    parsed_args = parser.parse_args(args)

    if not parsed_args.input_file.exists():
        logger.error("Error: Input file not found: %s", parsed_args.input_file)
        return 1

    try:
        centerline = RowInterface.load_centerline(parsed_args.input_file)
        corridor = build_corridor(
            centerline,
            parsed_args.left_width,
            parsed_args.right_width,
            engine=engine_from_args(parsed_args),
        )

        if corridor.polygon is not None:
            feature = polygon_to_feature(corridor.polygon)
            logger.info(
                "Area: %.2f m², perimeter: %.2f m", corridor.area, corridor.perimeter
            )
        else:
            feature = line_to_feature(centerline)

        if parsed_args.output_file is None:
            print(to_geojson_string(feature, minify=parsed_args.minify))  # noqa: T201
        else:
            RowInterface.save_geojson(
                feature, parsed_args.output_file, minify=parsed_args.minify
            )

    except RowError:
        logger.exception("Unable to build the ROW polygon")
        return 1

    except Exception:
        logger.exception("Unknown Problem ...")
        return 1

    return 0
