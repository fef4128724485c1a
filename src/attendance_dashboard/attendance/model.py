from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_timestamp


@dataclass(frozen=True)
class LogUser:
    """Người dùng được backend nhúng vào bản ghi chấm công."""

    user_id: Optional[str]
    username: Optional[str]


@dataclass(frozen=True)
class AttendanceLog:
    """Bản ghi chấm công (bản sao chỉ đọc của dữ liệu backend)."""

    log_id: Optional[str]
    user: Optional[LogUser]
    check_in: Optional[datetime]
    check_out: Optional[datetime]
    created_at: Optional[datetime] = None
    employee_id: Optional[str] = None

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "AttendanceLog":
        raw_user = data.get("user")
        user = None
        if isinstance(raw_user, Mapping):
            uid = raw_user.get("_id", raw_user.get("id"))
            user = LogUser(
                user_id=str(uid) if uid is not None else None,
                username=raw_user.get("username"),
            )

        log_id = data.get("_id", data.get("id"))
        employee_id = data.get("employeeId")
        return cls(
            log_id=str(log_id) if log_id is not None else None,
            user=user,
            check_in=parse_timestamp(data.get("checkIn")),
            check_out=parse_timestamp(data.get("checkOut")),
            created_at=parse_timestamp(data.get("createdAt")),
            employee_id=str(employee_id) if employee_id is not None else None,
        )

    @property
    def username(self) -> Optional[str]:
        return self.user.username if self.user else None

    def to_dict(self) -> dict:
        def _iso(value: Optional[datetime]) -> Optional[str]:
            return value.isoformat() if value else None

        return {
            "id": self.log_id,
            "user": {"id": self.user.user_id, "username": self.user.username} if self.user else None,
            "employee_id": self.employee_id,
            "check_in": _iso(self.check_in),
            "check_out": _iso(self.check_out),
            "created_at": _iso(self.created_at),
        }


@dataclass(frozen=True)
class FilterCriteria:
    search_term: str = ""
    from_date: Optional[date] = None
    to_date: Optional[date] = None


@dataclass(frozen=True)
class MonthlySummary:
    total_days: int
    present_days: int
    absent_days: int
    total_hours: Decimal

    def to_dict(self) -> dict:
        return {
            "total_days": self.total_days,
            "present_days": self.present_days,
            "absent_days": self.absent_days,
            "total_hours": f"{self.total_hours:.2f}",
        }


@dataclass(frozen=True)
class TeamSummary:
    total_employees: int
    present_today: int
    absent_today: int
    late_arrivals: int

    def to_dict(self) -> dict:
        return {
            "total_employees": self.total_employees,
            "present_today": self.present_today,
            "absent_today": self.absent_today,
            "late_arrivals": self.late_arrivals,
        }
