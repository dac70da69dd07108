# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Twilight

Civil twilight calculator: day/night state and sunrise/sunset instants for
a moment in time and a latitude/longitude, including polar day and polar
night. Pure computation, no network or timezone database needed for the
core; adapters add calendar conversion, geolocation and a CLI.
"""

from twilight.domain.solar_geometry import (
    UTC_2000,
    DAY_IN_MILLIS,
    SolarGeometry,
    solar_geometry,
    round_half_away,
)
from twilight.domain.twilight import (
    State,
    TwilightTimes,
    TwilightResult,
    calculate_twilight,
    ms_to_s_ns,
)
from twilight.domain.series import (
    TwilightSeries,
    twilight_series,
)
from twilight.domain.location import Location
from twilight.adapters.timestamps import (
    to_epoch_millis,
    calculate,
    now,
)

__version__ = "1.0.0"

__all__ = [
    "UTC_2000",
    "DAY_IN_MILLIS",
    "SolarGeometry",
    "solar_geometry",
    "round_half_away",
    "State",
    "TwilightTimes",
    "TwilightResult",
    "calculate_twilight",
    "ms_to_s_ns",
    "TwilightSeries",
    "twilight_series",
    "Location",
    "to_epoch_millis",
    "calculate",
    "now",
]
