# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Timezone converter backed by the IANA timezone database (zoneinfo).

A converter without a zone uses the system local time, resolved per
instant so daylight saving offsets follow the date being rendered.
"""
from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo

from twilight.ports import TimezoneConverter

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class ZoneInfoConverter(TimezoneConverter):
    """
    Renders Unix instants in a given timezone.

    Args:
        tz: A tzinfo, an IANA zone name such as "Asia/Shanghai", or None
            for the system local zone.

    Raises:
        zoneinfo.ZoneInfoNotFoundError: Unknown zone name.
    """

    def __init__(self, tz: tzinfo | str | None = timezone.utc):
        self._tz = ZoneInfo(tz) if isinstance(tz, str) else tz

    @property
    def tz(self) -> tzinfo | None:
        """The configured zone; None means system local."""
        return self._tz

    def from_timestamp(self, seconds: int, nanos: int) -> datetime:
        # datetime resolution is microseconds
        utc = _UNIX_EPOCH + timedelta(seconds=seconds, microseconds=nanos // 1000)
        return utc.astimezone(self._tz)

    def localize(self, dt: datetime) -> datetime:
        """Aware datetimes are converted; naive ones are read as wall time in the zone."""
        if dt.tzinfo is not None:
            return dt.astimezone(self._tz)
        if self._tz is None:
            # naive astimezone() applies the local offset in force on that date
            return dt.astimezone()
        return dt.replace(tzinfo=self._tz)


def local_converter() -> ZoneInfoConverter:
    """Converter for the system local zone."""
    return ZoneInfoConverter(None)
