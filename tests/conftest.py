from __future__ import annotations

import time
from datetime import datetime

import pytest


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 15, 12, 0, 0)


@pytest.fixture(autouse=True)
def local_tz(monkeypatch):
    """Pin the process timezone (UTC by default); call the fixture to switch.

    Uses POSIX TZ strings such as ``ICT-7`` (UTC+7) so no tz database is needed.
    """

    def pin(tz: str) -> None:
        if not hasattr(time, "tzset"):
            pytest.skip("time.tzset is not available on this platform")
        monkeypatch.setenv("TZ", tz)
        time.tzset()

    if hasattr(time, "tzset"):
        pin("UTC0")
    yield pin
    monkeypatch.undo()
    if hasattr(time, "tzset"):
        time.tzset()
