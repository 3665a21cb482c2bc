# config.py
import logging
import os
import re
from dataclasses import dataclass

from dotenv import load_dotenv

from errors import ArgumentError

load_dotenv()

# Cap on flights returned per HTTP response (batch mode is uncapped)
MAX_RESULTS = 1000

FILE_ENCODING = "utf-8"
XML_CONTENT_TYPE = "application/xml; charset=utf-8"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"

# Leading number as read by parseFloat: "60abc" -> 60, "Infinity" -> inf
LEADING_NUMBER = re.compile(r"\s*[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

LOG_LEVEL_NAME = os.getenv("LOG_LEVEL", "INFO")


@dataclass(frozen=True)
class ReportConfig:
    """Options for one run, built once at startup and shared by both modes."""

    input_path: str
    output_path: str | None = None
    display: bool = False
    airtime: float | None = None
    show_date: bool = False
    host: str | None = None
    port: int | None = None

    @property
    def serve(self) -> bool:
        return bool(self.host) and self.port is not None

    @classmethod
    def from_args(cls, args) -> "ReportConfig":
        """Validate parsed CLI arguments and freeze them.

        Raises ArgumentError with the user-facing message on the first problem.
        """
        if not args.input:
            raise ArgumentError("Please, specify input file")
        # -o / -a given without a value leave an empty string behind
        if args.output == "":
            raise ArgumentError("Please, specify output file path")

        airtime = None
        if args.airtime is not None:
            airtime = parse_number(args.airtime)
            if airtime is None:
                raise ArgumentError("Please, specify airtime value")

        port = None
        if args.host and args.port:
            port = parse_port(args.port)

        return cls(
            input_path=args.input,
            output_path=args.output,
            display=bool(args.display),
            airtime=airtime,
            show_date=bool(args.date),
            host=args.host or None,
            port=port,
        )


def parse_number(value: str | None) -> float | None:
    """Parse the leading float of value, ignoring any trailing text.

    '60abc' parses as 60.0; empty or non-numeric input gives None.
    """
    if value is None:
        return None
    match = LEADING_NUMBER.match(str(value))
    if not match:
        return None
    return float(match.group(0).replace("Infinity", "inf"))


def resolve_log_level(name: str) -> str:
    """Return name if logging knows it, otherwise fall back to INFO."""
    name = (name or "").strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return "INFO"


def parse_port(value: str) -> int:
    try:
        port = int(str(value).strip())
    except ValueError:
        raise ArgumentError("Port must be a number")
    if not 0 <= port <= 65535:
        raise ArgumentError("Port must be a number")
    return port
