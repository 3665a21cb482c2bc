# records.py
from dataclasses import dataclass
from typing import Any

Number = int | float
# Numeric strings keep their source text ("12.50") so reports echo the input
Numeric = int | float | str


def _to_number(value: Any) -> Number | None:
    """Numeric value of a field, or None when it isn't numeric-ish."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _numeric_field(value: Any) -> Numeric | None:
    """Keep numbers and numeric strings as given; anything else is missing."""
    if _to_number(value) is None:
        return None
    return value


@dataclass(frozen=True)
class FlightRecord:
    air_time: Numeric | None = None
    distance: Numeric | None = None
    fl_date: str | None = None

    @property
    def air_time_value(self) -> Number | None:
        """air_time as a number, for comparisons."""
        return _to_number(self.air_time)

    @classmethod
    def from_json(cls, item: Any) -> "FlightRecord":
        """Build a record from one parsed JSON value. Extra keys are ignored."""
        if not isinstance(item, dict):
            return cls()
        fl_date = item.get("FL_DATE")
        return cls(
            air_time=_numeric_field(item.get("AIR_TIME")),
            distance=_numeric_field(item.get("DISTANCE")),
            fl_date=None if fl_date is None else str(fl_date),
        )


# Ordered, immutable sequence of records in input order
RecordSet = tuple[FlightRecord, ...]


@dataclass(frozen=True)
class QueryParameters:
    airtime_threshold: float | None = None
    show_date: bool = False
    result_cap: int | None = None
