# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for the twilight calculator's collaborators.

Adapters implement these to supply instants, render local times and
look up the caller's location.
"""
from datetime import datetime
from typing import Protocol, runtime_checkable

from twilight.domain.location import Location


@runtime_checkable
class Timestamp(Protocol):
    """Port for anything convertible to Unix milliseconds."""

    def as_unix_timestamp_ms(self) -> int:
        """Unix time of this value, in milliseconds."""
        ...


@runtime_checkable
class TimezoneConverter(Protocol):
    """Port for rendering a Unix instant as a local calendar time."""

    def from_timestamp(self, seconds: int, nanos: int) -> datetime:
        """
        Convert a Unix instant to a local datetime.

        Args:
            seconds: Whole seconds since the Unix epoch (floor).
            nanos: Nanosecond remainder, 0 <= nanos < 1_000_000_000.
        """
        ...


@runtime_checkable
class LocationSource(Protocol):
    """Port for looking up the current geographic location."""

    def locate(self) -> Location:
        """Current location of the caller."""
        ...
