# main.py
import argparse
import logging
import sys

from config import LOG_LEVEL_NAME, ReportConfig, resolve_log_level
from errors import ArgumentError, FlightReportError
from exporter import render_text, write_report
from flight_filter import filter_flights
from loader import load
from server import run_server

logger = logging.getLogger(__name__)


class ReportArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing usage and exiting 2."""

    def error(self, message):
        raise ArgumentError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = ReportArgumentParser(
        prog="flight-report",
        description="Filter flight records by air time and print them or serve them as XML.",
    )
    # nargs="?" with const="" lets us tell "-o" apart from no -o at all
    parser.add_argument("-i", "--input", nargs="?", const="", help="input file")
    parser.add_argument("-o", "--output", nargs="?", const="", help="output file")
    parser.add_argument("-d", "--display", action="store_true", help="display output to console")
    parser.add_argument(
        "-a", "--airtime", nargs="?", const="",
        help="show only flights with AIR_TIME longer than value",
    )
    parser.add_argument(
        "-t", "--date", action="store_true",
        help="show FL_DATE before AIR_TIME and DISTANCE",
    )
    parser.add_argument("--host", help="HTTP server host (optional)")
    parser.add_argument("--port", help="HTTP server port (optional)")
    return parser


def run_batch(config: ReportConfig, records) -> None:
    """Filter once, then write the report to file and/or stdout."""
    result = filter_flights(records, config.airtime)
    text = render_text(result, config.show_date)

    if config.output_path:
        try:
            write_report(text, config.output_path)
        except OSError as e:
            raise FlightReportError(f"Cannot write output file: {e}") from e
        logger.debug("Wrote %d flights to %s", len(result), config.output_path)
    if config.display:
        print(text)


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=resolve_log_level(LOG_LEVEL_NAME), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        args, unknown = build_parser().parse_known_args(argv)
        if unknown:
            logger.debug("Ignoring unknown arguments: %s", unknown)
        config = ReportConfig.from_args(args)
        records = load(config.input_path)

        if not config.serve:
            run_batch(config, records)
            sys.exit(0)

        run_server(config, records)
    except FlightReportError as e:
        print(e.message, file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
