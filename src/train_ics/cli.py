"""Command line entry point converting journey JSON into an iCalendar file."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from train_ics.adapters.config import AppConfig
from train_ics.adapters.hafas_json import JourneyParser
from train_ics.adapters.ics_calendar import IcsCalendarBuilder
from train_ics.application.services import JourneyCalendarService
from train_ics.domain.exceptions import TrainIcsError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``train-ics`` command."""
    parser = argparse.ArgumentParser(
        description="Convert a public transit journey (hafas-client JSON) into an iCalendar file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert a saved journey, writing the calendar to stdout
  train-ics journey.json

  # Read from stdin, add Träwelling and marudor links, write to a file
  cat journey.json | train-ics - --traewelling --marudor -o reise.ics
        """,
    )
    parser.add_argument("journey", help="Path to journey JSON, or '-' to read from stdin")
    parser.add_argument("-o", "--output", help="Write the calendar to this file (default: stdout)")
    parser.add_argument(
        "--tz-offset",
        type=int,
        default=None,
        help="Minutes subtracted from leg start/end times (default: from config)",
    )
    parser.add_argument("--timezone", default=None, help="IANA timezone for calendar events")
    parser.add_argument(
        "--traewelling", action="store_true", help="Append a Träwelling check-in link"
    )
    parser.add_argument("--travelynx", action="store_true", help="Append a Travelynx link")
    parser.add_argument("--marudor", action="store_true", help="Append a marudor.de link")
    parser.add_argument("--config", default=None, help="Path to TOML configuration file")
    return parser


def load_config(args: argparse.Namespace) -> AppConfig:
    """Build the configuration from environment, TOML file and command line flags."""
    config = AppConfig()
    if args.config:
        config.config_file = args.config
    config.load_config_file()

    if args.tz_offset is not None:
        config.departure_tz_offset = args.tz_offset
    if args.timezone:
        config.timezone = args.timezone
    if args.traewelling:
        config.include_traewelling_link = True
    if args.travelynx:
        config.include_travelynx_link = True
    if args.marudor:
        config.include_marudor_link = True
    return config


def read_journey_data(source: str) -> Any:
    """Read and decode journey JSON from a file path or stdin."""
    if source == "-":
        return json.load(sys.stdin)
    with open(Path(source), encoding="utf-8") as f:
        return json.load(f)


def convert(args: argparse.Namespace) -> str:
    """Run the conversion described by parsed arguments and return iCalendar text."""
    config = load_config(args)
    logging.getLogger().setLevel(config.log_level)

    journey = JourneyParser.parse_journey(read_journey_data(args.journey))
    service = JourneyCalendarService(
        IcsCalendarBuilder(timezone=config.timezone, product_id=config.calendar_product_id)
    )
    return service.to_ics(journey, config.departure_tz_offset, config.link_options())


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    args = build_parser().parse_args(argv)

    try:
        calendar_text = convert(args)
    except json.JSONDecodeError as e:
        logger.error(f"Journey is not valid JSON: {e}")
        return 1
    except (TrainIcsError, ValueError, OSError) as e:
        logger.error(f"Could not convert journey: {e}")
        return 1

    if args.output:
        Path(args.output).write_text(calendar_text, encoding="utf-8")
        logger.info(f"Wrote calendar to {args.output}")
    else:
        sys.stdout.write(calendar_text)
    return 0


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
