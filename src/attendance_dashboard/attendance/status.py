from __future__ import annotations

from typing import Sequence

from ..core.enums import CheckStatus
from .model import AttendanceLog


def derive_status(logs: Sequence[AttendanceLog]) -> CheckStatus:
    """Status from the first log; the backend returns personal logs newest first."""
    if not logs:
        return CheckStatus.CHECKED_OUT

    latest = logs[0]
    if latest.check_in and not latest.check_out:
        return CheckStatus.CHECKED_IN
    return CheckStatus.CHECKED_OUT
