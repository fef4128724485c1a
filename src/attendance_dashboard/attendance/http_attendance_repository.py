from __future__ import annotations

from typing import Any, Optional, Sequence

from ..api.client import ApiClient
from ..core.exceptions import ApiError
from .model import AttendanceLog


class HttpAttendanceRepository:
    """AttendanceRepository backed by the attendance REST API."""

    def __init__(self, client: ApiClient):
        self._client = client

    def _fetch_logs(self, path: str, *, token: str) -> list[AttendanceLog]:
        body = self._client.get(path, token=token)
        if not isinstance(body, list):
            raise ApiError(f"GET {path} returned {type(body).__name__}, expected a list")

        try:
            return [AttendanceLog.from_api(item) for item in body]
        except (AttributeError, TypeError, ValueError) as e:
            raise ApiError(f"GET {path} returned a malformed log: {e}") from e

    @staticmethod
    def _message(body: Any) -> Optional[str]:
        if isinstance(body, dict):
            return body.get("message") or None
        return None

    def list_all(self, *, token: str) -> Sequence[AttendanceLog]:
        return self._fetch_logs("/admin/attendance", token=token)

    def list_mine(self, *, token: str) -> Sequence[AttendanceLog]:
        return self._fetch_logs("/attendance/me", token=token)

    def list_team(self, *, token: str) -> Sequence[AttendanceLog]:
        return self._fetch_logs("/attendance/team", token=token)

    def check_in(self, *, token: str) -> Optional[str]:
        return self._message(self._client.post("/attendance/checkin", token=token))

    def check_out(self, *, token: str) -> Optional[str]:
        return self._message(self._client.post("/attendance/checkout", token=token))
