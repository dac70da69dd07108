# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for vectorized civil twilight over many instants."""
import numpy as np
import pytest

from twilight.domain.solar_geometry import DAY_IN_MILLIS, UTC_2000
from twilight.domain.twilight import State, calculate_twilight
from twilight.domain.series import TwilightSeries, twilight_series


SHANGHAI_LAT = (31 * 3600 + 13 * 60 + 43) / 3600.0
SHANGHAI_LON = (121 * 3600 + 28 * 60 + 29) / 3600.0
SHANGHAI_TIME_MS = 1566703808294


def _hourly(start_ms: int, hours: int) -> np.ndarray:
    return start_ms + np.arange(hours, dtype=np.int64) * 3_600_000


class TestTwilightSeries:

    def test_shapes(self):
        times = _hourly(SHANGHAI_TIME_MS, 48)
        series = twilight_series(times, SHANGHAI_LAT, SHANGHAI_LON)
        assert isinstance(series, TwilightSeries)
        assert series.is_day.shape == (48,)
        assert series.sunrise_ms.shape == (48,)
        assert series.sunset_ms.shape == (48,)
        assert series.is_day.dtype == np.bool_

    def test_matches_scalar_classifier(self):
        times = _hourly(SHANGHAI_TIME_MS, 72)
        series = twilight_series(times, SHANGHAI_LAT, SHANGHAI_LON)
        for i, t in enumerate(times):
            scalar = calculate_twilight(int(t), SHANGHAI_LAT, SHANGHAI_LON)
            assert bool(series.is_day[i]) == (scalar.state == State.DAY)
            assert series.sunrise_ms[i] == pytest.approx(scalar.times.sunrise_ms, abs=1)
            assert series.sunset_ms[i] == pytest.approx(scalar.times.sunset_ms, abs=1)

    def test_day_and_night_both_seen(self):
        series = twilight_series(_hourly(SHANGHAI_TIME_MS, 24), SHANGHAI_LAT, SHANGHAI_LON)
        assert series.is_day.any()
        assert (~series.is_day).any()

    def test_polar_rows(self):
        winter = UTC_2000 + 355 * DAY_IN_MILLIS
        summer = UTC_2000 + 172 * DAY_IN_MILLIS
        series = twilight_series([winter, summer], 80.0, 15.0)
        assert series.is_day.tolist() == [False, True]
        assert not series.has_times.any()
        assert np.isnan(series.sunrise_ms).all()
        assert np.isnan(series.sunset_ms).all()

    def test_mixed_polar_and_defined(self):
        """A year at 70°N contains polar and ordinary days."""
        times = UTC_2000 + np.arange(0, 366, 3, dtype=np.int64) * DAY_IN_MILLIS
        series = twilight_series(times, 70.0, 0.0)
        assert series.has_times.any()
        assert not series.has_times.all()
        for i, t in enumerate(times):
            scalar = calculate_twilight(int(t), 70.0, 0.0)
            assert bool(series.has_times[i]) == (scalar.times is not None)
            assert bool(series.is_day[i]) == (scalar.state == State.DAY)

    def test_empty(self):
        series = twilight_series([], 0.0, 0.0)
        assert series.is_day.shape == (0,)

    def test_rejects_2d(self):
        with pytest.raises(ValueError, match="1-D"):
            twilight_series(np.zeros((2, 2), dtype=np.int64), 0.0, 0.0)
