# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Vectorized civil twilight over many instants.

Same formula chain as solar_geometry/calculate_twilight, evaluated
element-wise with numpy for one location and an array of instants.
"""
from dataclasses import dataclass

import numpy as np

from twilight.domain.solar_geometry import (
    ALTITUDE_CORRECTION_CIVIL_TWILIGHT,
    C1,
    C2,
    C3,
    DAY_IN_MILLIS,
    DEGREES_TO_RADIANS,
    J0,
    MEAN_ANOMALY_AT_2000,
    MEAN_ANOMALY_RATE,
    OBLIQUITY,
    PERIHELION_LONGITUDE,
    UTC_2000,
)


@dataclass(frozen=True)
class TwilightSeries:
    """Civil twilight for a series of instants at one location.

    sunrise_ms/sunset_ms are float64 Unix milliseconds, NaN where the day
    or night never ends.
    """
    times_ms: np.ndarray
    is_day: np.ndarray
    sunrise_ms: np.ndarray
    sunset_ms: np.ndarray

    @property
    def has_times(self) -> np.ndarray:
        """Mask of instants with defined sunrise/sunset."""
        return ~np.isnan(self.sunrise_ms)


def _round_half_away(x: np.ndarray) -> np.ndarray:
    return np.sign(x) * np.floor(np.abs(x) + 0.5)


def twilight_series(times_ms, latitude: float, longitude: float) -> TwilightSeries:
    """Classify an array of Unix-millisecond instants as day or night.

    Args:
        times_ms: 1-D array-like of Unix times in milliseconds.
        latitude: Latitude in degrees.
        longitude: Longitude in degrees.

    Returns:
        TwilightSeries aligned with times_ms.
    """
    times = np.asarray(times_ms, dtype=np.int64)
    if times.ndim != 1:
        raise ValueError(f"times_ms must be 1-D, got shape {times.shape}")

    days = (times - UTC_2000).astype(np.float64) / DAY_IN_MILLIS

    mean_anomaly = MEAN_ANOMALY_AT_2000 + days * MEAN_ANOMALY_RATE
    true_anomaly = (
        mean_anomaly
        + C1 * np.sin(mean_anomaly)
        + C2 * np.sin(2.0 * mean_anomaly)
        + C3 * np.sin(3.0 * mean_anomaly)
    )
    solar_longitude = true_anomaly + PERIHELION_LONGITUDE + np.pi

    arc_longitude = -longitude / 360.0
    n = _round_half_away(days - J0 - arc_longitude)
    solar_transit = (
        n + J0 + arc_longitude
        + 0.0053 * np.sin(mean_anomaly)
        - 0.0069 * np.sin(2.0 * solar_longitude)
    )

    solar_declination = np.arcsin(np.sin(solar_longitude) * np.sin(OBLIQUITY))
    lat_rad = latitude * DEGREES_TO_RADIANS

    cos_hour_angle = (
        np.sin(ALTITUDE_CORRECTION_CIVIL_TWILIGHT)
        - np.sin(lat_rad) * np.sin(solar_declination)
    ) / (np.cos(lat_rad) * np.cos(solar_declination))

    defined = (cos_hour_angle > -1.0) & (cos_hour_angle < 1.0)
    hour_angle = np.arccos(np.where(defined, cos_hour_angle, 0.0)) / (2.0 * np.pi)

    sunset = _round_half_away((solar_transit + hour_angle) * DAY_IN_MILLIS) + UTC_2000
    sunrise = _round_half_away((solar_transit - hour_angle) * DAY_IN_MILLIS) + UTC_2000
    sunset = np.where(defined, sunset, np.nan)
    sunrise = np.where(defined, sunrise, np.nan)

    # NaN comparisons are False, so undefined rows fall back to polar-day test
    between = (sunrise < times) & (times < sunset)
    is_day = np.where(defined, between, cos_hour_angle <= -1.0)

    return TwilightSeries(
        times_ms=times,
        is_day=is_day,
        sunrise_ms=sunrise,
        sunset_ms=sunset,
    )
