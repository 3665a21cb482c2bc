# loader.py
import json
import os
from dataclasses import dataclass
from typing import Any

from config import FILE_ENCODING
from errors import InputError, ParseError
from records import FlightRecord, RecordSet


@dataclass(frozen=True)
class ParseResult:
    """Outcome of one parse strategy: either items or an error message."""

    ok: bool
    items: tuple[Any, ...] = ()
    error: str = ""


def parse_document(text: str) -> ParseResult:
    """Parse the whole text as one JSON value; a non-array is wrapped."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        return ParseResult(ok=False, error=str(e))
    if not isinstance(data, list):
        data = [data]
    return ParseResult(ok=True, items=tuple(data))


def parse_lines(text: str) -> ParseResult:
    """Parse newline-delimited JSON. One bad line fails the whole text."""
    items = []
    for lineno, line in enumerate(text.split("\n"), start=1):
        if not line.strip():
            continue
        try:
            items.append(json.loads(line))
        except json.JSONDecodeError as e:
            return ParseResult(ok=False, error=f"line {lineno}: {e}")
    return ParseResult(ok=True, items=tuple(items))


def parse_flights(text: str) -> RecordSet:
    """Parse a JSON array, single JSON object or NDJSON into records."""
    text = text.strip()
    result = parse_document(text)
    if not result.ok:
        result = parse_lines(text)
    if not result.ok:
        raise ParseError("Invalid JSON format in input file")
    return tuple(FlightRecord.from_json(item) for item in result.items)


def load(path: str) -> RecordSet:
    """Read and parse the flight file at path."""
    if not os.path.isfile(path):
        raise InputError("Cannot find input file")
    try:
        with open(path, encoding=FILE_ENCODING) as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Cannot read input file: {e}") from e
    return parse_flights(text)
