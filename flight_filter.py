# flight_filter.py
import math

from records import QueryParameters, RecordSet


def filter_flights(records: RecordSet, threshold: float | None = None) -> RecordSet:
    """Keep flights with air_time strictly above threshold.

    No threshold (or a non-finite one) returns records unchanged, including
    those without air_time. With a threshold, missing air_time never passes.
    """
    if threshold is None or not math.isfinite(threshold):
        return records
    return tuple(
        r for r in records if r.air_time_value is not None and r.air_time_value > threshold
    )


def apply_query(records: RecordSet, query: QueryParameters) -> RecordSet:
    """Filter, then truncate to the result cap if one is set."""
    result = filter_flights(records, query.airtime_threshold)
    if query.result_cap is not None:
        result = result[: query.result_cap]
    return result
