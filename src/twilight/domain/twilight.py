# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Civil twilight classification.

Turns the civil twilight hour angle into sunrise/sunset instants and a
day/night state. Continuous day or night (no hour angle solution) yields
a state without twilight times.

No external dependencies — only stdlib math/dataclasses/datetime/enum.
"""
import logging
import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from enum import Enum

from twilight.domain.solar_geometry import (
    DAY_IN_MILLIS,
    UTC_2000,
    round_half_away,
    solar_geometry,
)

logger = logging.getLogger(__name__)

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class State(Enum):
    DAY = "day"
    NIGHT = "night"

    def __str__(self) -> str:
        return self.name.capitalize()


def ms_to_s_ns(ms: int) -> tuple[int, int]:
    """Split Unix milliseconds into (whole seconds, nanoseconds).

    Floor semantics: nanoseconds are always in [0, 1e9), so negative
    instants round the seconds component down.
    """
    seconds, millis = divmod(ms, 1000)
    return seconds, millis * 1_000_000


def _to_datetime(ms: int, tz) -> datetime:
    seconds, nanos = ms_to_s_ns(ms)
    if isinstance(tz, tzinfo):
        utc = _UNIX_EPOCH + timedelta(seconds=seconds, microseconds=nanos // 1000)
        return utc.astimezone(tz)
    return tz.from_timestamp(seconds, nanos)


@dataclass(frozen=True)
class TwilightTimes:
    """Civil twilight sunrise and sunset of one solar day, Unix milliseconds."""
    sunrise_ms: int
    sunset_ms: int

    def sunrise_time(self, tz=timezone.utc) -> datetime:
        """Sunrise as a datetime.

        Args:
            tz: A tzinfo, or a TimezoneConverter taking (seconds, nanos).
        """
        return _to_datetime(self.sunrise_ms, tz)

    def sunset_time(self, tz=timezone.utc) -> datetime:
        """Sunset as a datetime. See sunrise_time."""
        return _to_datetime(self.sunset_ms, tz)


@dataclass(frozen=True)
class TwilightResult:
    """Day/night state plus twilight times when the Sun rises and sets."""
    state: State
    times: TwilightTimes | None = None

    @property
    def twilight_times(self) -> TwilightTimes | None:
        """Twilight times, or None under polar day/night."""
        return self.times


def calculate_twilight(time_ms: int, latitude: float, longitude: float) -> TwilightResult:
    """Civil twilight state and times for an instant and location.

    The state is DAY strictly between sunrise and sunset; an instant equal
    to either bound is NIGHT.

    Args:
        time_ms: Unix time in milliseconds.
        latitude: Latitude in degrees (north positive).
        longitude: Longitude in degrees (east positive).

    Returns:
        TwilightResult. times is None when the day or night never ends
        for the given date and location.
    """
    geometry = solar_geometry(time_ms, latitude, longitude)

    if geometry.is_polar_night:
        return TwilightResult(state=State.NIGHT)
    if geometry.is_polar_day:
        return TwilightResult(state=State.DAY)

    hour_angle = math.acos(geometry.cos_hour_angle) / (2.0 * math.pi)

    sunset = round_half_away((geometry.solar_transit + hour_angle) * DAY_IN_MILLIS)
    sunrise = round_half_away((geometry.solar_transit - hour_angle) * DAY_IN_MILLIS)

    if not (math.isfinite(sunrise) and math.isfinite(sunset)):
        logger.debug(
            "Degenerate twilight for lat=%r lon=%r at %d ms", latitude, longitude, time_ms,
        )
        return TwilightResult(state=State.NIGHT)

    times = TwilightTimes(
        sunrise_ms=int(sunrise) + UTC_2000,
        sunset_ms=int(sunset) + UTC_2000,
    )
    state = State.DAY if times.sunrise_ms < time_ms < times.sunset_ms else State.NIGHT
    return TwilightResult(state=state, times=times)
