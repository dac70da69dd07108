# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Geographic location value object."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """Latitude/longitude in degrees, with optional accuracy radius."""
    latitude: float
    longitude: float
    accuracy_m: float | None = None

    def __str__(self) -> str:
        sign_lat = "N" if self.latitude >= 0.0 else "S"
        sign_lng = "E" if self.longitude >= 0.0 else "W"
        return f"({self.latitude}°{sign_lat}, {self.longitude}°{sign_lng})"
