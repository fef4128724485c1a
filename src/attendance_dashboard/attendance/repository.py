from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceLog


class AttendanceRepository(Protocol):
    def list_all(self, *, token: str) -> Sequence[AttendanceLog]:
        """Admin-only: every log in the system."""

        raise NotImplementedError

    def list_mine(self, *, token: str) -> Sequence[AttendanceLog]:
        """Logs of the token's owner, newest first."""

        raise NotImplementedError

    def list_team(self, *, token: str) -> Sequence[AttendanceLog]:
        raise NotImplementedError

    def check_in(self, *, token: str) -> Optional[str]:
        """Record a check-in; returns the backend message, if any."""

        raise NotImplementedError

    def check_out(self, *, token: str) -> Optional[str]:
        raise NotImplementedError
