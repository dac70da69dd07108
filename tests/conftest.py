# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Shared fixtures."""
import os
import time

import pytest


@pytest.fixture
def eastern_local_time():
    """Switch the process local zone to US Eastern (POSIX rule, no tz database needed)."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset unavailable on this platform")
    saved = os.environ.get("TZ")
    os.environ["TZ"] = "EST5EDT,M3.2.0,M11.1.0"
    time.tzset()
    yield
    if saved is None:
        del os.environ["TZ"]
    else:
        os.environ["TZ"] = saved
    time.tzset()
