from __future__ import annotations

from typing import Optional

from attendance_dashboard.attendance.model import AttendanceLog, LogUser
from attendance_dashboard.common.datetime_utils import parse_timestamp
from attendance_dashboard.core.exceptions import ApiError


def make_log(
    log_id: str = "1",
    *,
    user_id: Optional[str] = "u1",
    username: Optional[str] = "alice",
    check_in: Optional[str] = None,
    check_out: Optional[str] = None,
    created_at: Optional[str] = None,
    employee_id: Optional[str] = None,
) -> AttendanceLog:
    user = LogUser(user_id=user_id, username=username) if user_id or username else None
    return AttendanceLog(
        log_id=log_id,
        user=user,
        check_in=parse_timestamp(check_in),
        check_out=parse_timestamp(check_out),
        created_at=parse_timestamp(created_at),
        employee_id=employee_id,
    )


class InMemoryAttendance:
    """AttendanceRepository fake; set ``fail_*`` to an ApiError to simulate backend errors."""

    def __init__(self, *, all_logs=None, mine=None, team=None):
        self.all_logs = list(all_logs or [])
        self.mine = list(mine or [])
        self.team = list(team or [])
        self.fail_fetch: Optional[ApiError] = None
        self.fail_action: Optional[ApiError] = None
        self.calls: list[tuple[str, str]] = []

    def _list(self, name: str, token: str, logs):
        self.calls.append((name, token))
        if self.fail_fetch:
            raise self.fail_fetch
        return list(logs)

    def list_all(self, *, token: str):
        return self._list("list_all", token, self.all_logs)

    def list_mine(self, *, token: str):
        return self._list("list_mine", token, self.mine)

    def list_team(self, *, token: str):
        return self._list("list_team", token, self.team)

    def check_in(self, *, token: str):
        self.calls.append(("check_in", token))
        if self.fail_action:
            raise self.fail_action
        return "ok"

    def check_out(self, *, token: str):
        self.calls.append(("check_out", token))
        if self.fail_action:
            raise self.fail_action
        return "ok"
