# errors.py


class FlightReportError(Exception):
    """Base error; the message is shown to the user as-is."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ArgumentError(FlightReportError):
    """Missing or invalid command-line option."""


class InputError(FlightReportError):
    """Input file cannot be found or read."""


class ParseError(FlightReportError):
    """Input file is not JSON, a JSON array, or newline-delimited JSON."""


class RequestError(FlightReportError):
    """A single HTTP request failed while filtering or rendering."""
