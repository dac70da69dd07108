# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Low-precision solar geometry for civil twilight.

Mean anomaly, equation of center, ecliptic longitude, solar transit and
declination from a fixed-coefficient approximation referenced to
2000-01-01T12:00:00 UTC, followed by the hour angle at which the Sun
crosses the civil twilight altitude correction of 6°.

No external dependencies — only stdlib math/dataclasses.
"""
import math
from dataclasses import dataclass

UTC_2000: int = 946728000000  # Unix milliseconds at 2000-01-01T12:00:00 UTC
DAY_IN_MILLIS: int = 1000 * 60 * 60 * 24

DEGREES_TO_RADIANS: float = math.pi / 180.0

# Solar transit offset (days)
J0: float = 0.0009

# Civil twilight altitude correction, 6° (radians)
ALTITUDE_CORRECTION_CIVIL_TWILIGHT: float = 0.104719755

# Equation of center coefficients
C1: float = 0.0334196
C2: float = 0.000349066
C3: float = 0.000005236

OBLIQUITY: float = 0.40927971  # Mean axial tilt of the Earth (radians)

MEAN_ANOMALY_AT_2000: float = 6.240059968
MEAN_ANOMALY_RATE: float = 0.01720197  # radians per day
PERIHELION_LONGITUDE: float = 1.796593063


@dataclass(frozen=True)
class SolarGeometry:
    """Intermediate solar quantities for one instant and location.

    Angles are in radians. solar_transit is in fractional days since
    2000-01-01T12:00:00 UTC.
    """
    days_since_2000: float
    mean_anomaly: float
    true_anomaly: float
    solar_longitude: float
    solar_transit: float
    solar_declination: float
    cos_hour_angle: float

    @property
    def is_polar_night(self) -> bool:
        """The Sun stays below the civil twilight altitude all day."""
        return self.cos_hour_angle >= 1.0

    @property
    def is_polar_day(self) -> bool:
        """The Sun stays above the civil twilight altitude all day."""
        return self.cos_hour_angle <= -1.0


def round_half_away(value: float) -> float:
    """Round to the nearest integer, ties away from zero.

    Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    magnitude = abs(value)
    whole = math.floor(magnitude)
    # magnitude - whole is exact, so no 0.49999999999999994 artefacts
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(float(whole), value)


def solar_geometry(time_ms: int, latitude: float, longitude: float) -> SolarGeometry:
    """Solar geometry for civil twilight at an instant and location.

    Args:
        time_ms: Unix time in milliseconds (may be negative).
        latitude: Geodetic latitude in degrees (north positive).
        longitude: Longitude in degrees (east positive).

    Returns:
        SolarGeometry with the cosine of the civil twilight hour angle.
        A cos_hour_angle outside (-1, 1) means the Sun never crosses the
        twilight altitude on that day.
    """
    days_since_2000 = (time_ms - UTC_2000) / DAY_IN_MILLIS

    mean_anomaly = MEAN_ANOMALY_AT_2000 + days_since_2000 * MEAN_ANOMALY_RATE

    true_anomaly = (
        mean_anomaly
        + C1 * math.sin(mean_anomaly)
        + C2 * math.sin(2.0 * mean_anomaly)
        + C3 * math.sin(3.0 * mean_anomaly)
    )

    # Ecliptic longitude
    solar_longitude = true_anomaly + PERIHELION_LONGITUDE + math.pi

    arc_longitude = -longitude / 360.0
    n = round_half_away(days_since_2000 - J0 - arc_longitude)
    solar_transit = (
        n + J0 + arc_longitude
        + 0.0053 * math.sin(mean_anomaly)
        - 0.0069 * math.sin(2.0 * solar_longitude)
    )

    solar_declination = math.asin(math.sin(solar_longitude) * math.sin(OBLIQUITY))

    lat_rad = latitude * DEGREES_TO_RADIANS
    if math.isinf(lat_rad):
        # math.sin/cos raise on infinities; degrade to NaN instead
        lat_rad = math.nan

    cos_hour_angle = (
        math.sin(ALTITUDE_CORRECTION_CIVIL_TWILIGHT)
        - math.sin(lat_rad) * math.sin(solar_declination)
    ) / (math.cos(lat_rad) * math.cos(solar_declination))

    return SolarGeometry(
        days_since_2000=days_since_2000,
        mean_anomaly=mean_anomaly,
        true_anomaly=true_anomaly,
        solar_longitude=solar_longitude,
        solar_transit=solar_transit,
        solar_declination=solar_declination,
        cos_hour_angle=cos_hour_angle,
    )
