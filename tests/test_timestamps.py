# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the timestamp adapter (calculate/now entry points)."""
from datetime import datetime, timedelta, timezone

import numpy as np
import pytest

import twilight
from twilight.adapters.timestamps import calculate, now, to_epoch_millis
from twilight.domain.twilight import State, calculate_twilight
from twilight.ports import Timestamp


SHANGHAI_LAT = 31.228611
SHANGHAI_LON = 121.474722
SHANGHAI_TIME_MS = 1566703808294
SHANGHAI_TIME = datetime(2019, 8, 25, 3, 30, 8, 294000, tzinfo=timezone.utc)


class FixedTimestamp:
    """Minimal Timestamp implementation."""

    def __init__(self, ms):
        self._ms = ms

    def as_unix_timestamp_ms(self) -> int:
        return self._ms


# ── to_epoch_millis ───────────────────────────────────────────────

class TestToEpochMillis:

    def test_int_passthrough(self):
        assert to_epoch_millis(SHANGHAI_TIME_MS) == SHANGHAI_TIME_MS

    def test_negative_int(self):
        assert to_epoch_millis(-123) == -123

    def test_numpy_integer(self):
        value = to_epoch_millis(np.int64(SHANGHAI_TIME_MS))
        assert value == SHANGHAI_TIME_MS
        assert type(value) is int

    def test_aware_datetime(self):
        assert to_epoch_millis(SHANGHAI_TIME) == SHANGHAI_TIME_MS

    def test_datetime_other_offset(self):
        local = SHANGHAI_TIME.astimezone(timezone(timedelta(hours=8)))
        assert to_epoch_millis(local) == SHANGHAI_TIME_MS

    def test_naive_datetime_is_utc(self):
        naive = SHANGHAI_TIME.replace(tzinfo=None)
        assert to_epoch_millis(naive) == SHANGHAI_TIME_MS

    def test_sub_millisecond_floors(self):
        dt = datetime(1970, 1, 1, 0, 0, 0, 1999, tzinfo=timezone.utc)
        assert to_epoch_millis(dt) == 1
        before = datetime(1969, 12, 31, 23, 59, 59, 999500, tzinfo=timezone.utc)
        assert to_epoch_millis(before) == -1

    def test_timestamp_port(self):
        ts = FixedTimestamp(42)
        assert isinstance(ts, Timestamp)
        assert to_epoch_millis(ts) == 42

    def test_bool_rejected(self):
        with pytest.raises(TypeError):
            to_epoch_millis(True)

    def test_unsupported_type(self):
        with pytest.raises(TypeError, match="str"):
            to_epoch_millis("2019-08-25")


# ── calculate ─────────────────────────────────────────────────────

class TestCalculate:

    def test_datetime_matches_millis(self):
        via_dt = calculate(SHANGHAI_TIME, SHANGHAI_LAT, SHANGHAI_LON)
        via_ms = calculate_twilight(SHANGHAI_TIME_MS, SHANGHAI_LAT, SHANGHAI_LON)
        assert via_dt == via_ms
        assert via_dt.state == State.DAY

    def test_timestamp_port_matches_millis(self):
        via_port = calculate(FixedTimestamp(SHANGHAI_TIME_MS), SHANGHAI_LAT, SHANGHAI_LON)
        assert via_port == calculate(SHANGHAI_TIME_MS, SHANGHAI_LAT, SHANGHAI_LON)

    def test_package_reexport(self):
        assert twilight.calculate is calculate
        assert twilight.now is now


# ── now ───────────────────────────────────────────────────────────

class TestNow:

    def test_injected_clock(self):
        result = now(SHANGHAI_LAT, SHANGHAI_LON, clock=lambda: SHANGHAI_TIME)
        assert result == calculate_twilight(SHANGHAI_TIME_MS, SHANGHAI_LAT, SHANGHAI_LON)

    def test_wall_clock(self):
        before = datetime.now(tz=timezone.utc)
        result = now(0.0, 0.0)
        after = datetime.now(tz=timezone.utc)

        # Equator always has a sunrise and sunset
        assert result.times is not None
        low = calculate(before, 0.0, 0.0)
        high = calculate(after, 0.0, 0.0)
        assert result.state in (low.state, high.state)
