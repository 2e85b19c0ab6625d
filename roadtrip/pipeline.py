"""High-level pipeline orchestration for the road trip planner.

The pipeline is organized in several stages:

1. Input acquisition (road map text on stdin or a file, or CSV data).
2. Graph building (locations become vertices, road segments edges).
3. Trip planning (Dijkstra per start location and metric).
4. Output formatting (directions on stdout).

This module wires these stages together without implementing any
business logic. Each step delegates work to the adapters and services
resolved from the container.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from .config import RoadMapConfig, configure_logging
from .container import Container, get_container
from .domain.errors import DisconnectedMapError, RoadTripError
from .domain.models import RoadTripInput
from .ports.graph import RoadMapReaderPort, RoadMapRepositoryPort
from .ports.rendering import TripWriterPort
from .services import TripPlannerService

logger = logging.getLogger(__name__)

DISCONNECTED_MESSAGE = "Disconnected Map"


def run_pipeline(
    input_stream: TextIO,
    output_stream: TextIO,
    container: Optional[Container] = None,
) -> None:
    """Read a road map with trips from text and write their directions.

    A road map that is not strongly connected produces the single line
    ``Disconnected Map`` and no directions.

    Raises:
        RoadTripError: If the input is malformed or a trip cannot be planned.
    """
    container = container or get_container()
    reader: RoadMapReaderPort = container.resolve(RoadMapReaderPort)
    _plan_and_write(reader.read(input_stream), output_stream, container)


def run_csv_pipeline(
    output_stream: TextIO, container: Optional[Container] = None
) -> None:
    """Plan the trips stored next to a CSV road map and write their directions."""
    container = container or get_container()
    repository: RoadMapRepositoryPort = container.resolve(RoadMapRepositoryPort)
    road_trip = RoadTripInput(road_map=repository.load(), trips=repository.load_trips())
    _plan_and_write(road_trip, output_stream, container)


def _plan_and_write(
    road_trip: RoadTripInput, output_stream: TextIO, container: Container
) -> None:
    planner: TripPlannerService = container.resolve(TripPlannerService)
    writer: TripWriterPort = container.resolve(TripWriterPort)
    try:
        results = planner.plan(road_trip.road_map, road_trip.trips)
    except DisconnectedMapError:
        output_stream.write(DISCONNECTED_MESSAGE + "\n")
        return
    writer.write(results, output_stream)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roadtrip",
        description="Shortest distance and driving time directions on a road map.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        help="road map text file (default: read from stdin)",
    )
    parser.add_argument(
        "--csv",
        metavar="DIR",
        type=Path,
        help="read locations.csv, segments.csv and trips.csv from DIR instead",
    )
    parser.add_argument("--log-level", help="override RTR_LOG_LEVEL")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    container = get_container()
    observability = container.config.observability
    if args.log_level:
        observability = observability.model_copy(update={"level": args.log_level})

    try:
        configure_logging(observability)
        if args.csv is not None:
            from .adapters.graph import CSVRoadMapRepository

            container.register(
                RoadMapRepositoryPort,
                lambda: CSVRoadMapRepository(RoadMapConfig(data_dir=args.csv)),
            )
            run_csv_pipeline(sys.stdout, container)
        elif args.input is not None:
            reader: RoadMapReaderPort = container.resolve(RoadMapReaderPort)
            _plan_and_write(reader.read_path(args.input), sys.stdout, container)
        else:
            run_pipeline(sys.stdin, sys.stdout, container)
    except RoadTripError as e:
        logger.error("Trip planning failed", extra={"error": str(e)})
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
