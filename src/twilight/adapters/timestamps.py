# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Timestamp adapter: calendar values in, twilight results out.

Converts datetimes and Timestamp implementations to Unix milliseconds and
delegates to the pure domain classifier. The wall clock is read only by now().
"""
import numbers
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from twilight.domain.twilight import TwilightResult, calculate_twilight
from twilight.ports import Timestamp

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLISECOND = timedelta(milliseconds=1)


def _as_utc(dt: datetime) -> datetime:
    """Ensure datetime is timezone-aware (treat naive as UTC)."""
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


def to_epoch_millis(value) -> int:
    """
    Unix milliseconds of a timestamp-like value.

    Accepts int milliseconds, datetime (naive is UTC, sub-millisecond
    part floored) or any Timestamp implementation.

    Raises:
        TypeError: value is not convertible.
    """
    # bool is an int subclass but never a timestamp
    if isinstance(value, bool):
        raise TypeError("bool is not a timestamp")
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, datetime):
        return (_as_utc(value) - _UNIX_EPOCH) // _ONE_MILLISECOND
    if isinstance(value, Timestamp):
        return int(value.as_unix_timestamp_ms())
    raise TypeError(
        f"Cannot convert {type(value).__name__} to Unix milliseconds"
    )


def calculate(timestamp, latitude: float, longitude: float) -> TwilightResult:
    """Civil twilight for a timestamp-like value and location."""
    return calculate_twilight(to_epoch_millis(timestamp), latitude, longitude)


def now(
    latitude: float,
    longitude: float,
    clock: Callable[[], datetime] | None = None,
) -> TwilightResult:
    """
    Civil twilight at the current time for a location.

    Args:
        latitude: Latitude in degrees.
        longitude: Longitude in degrees.
        clock: Optional zero-argument callable returning the current
            datetime (default: UTC wall clock).
    """
    current = clock() if clock is not None else datetime.now(tz=timezone.utc)
    return calculate(current, latitude, longitude)
