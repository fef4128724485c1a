from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Sequence

from ..common.datetime_utils import now_local, utc_date
from ..core.constants import LATE_ARRIVAL_HOUR
from .model import AttendanceLog, MonthlySummary, TeamSummary

_HOURS_QUANT = Decimal("0.01")


def _worked_hours(log: AttendanceLog) -> Decimal:
    if not (log.check_in and log.check_out):
        return Decimal(0)
    seconds = (log.check_out - log.check_in).total_seconds()
    return Decimal(str(seconds)) / Decimal(3600)


def monthly_summary(logs: Sequence[AttendanceLog], *, now: Optional[datetime] = None) -> Optional[MonthlySummary]:
    """Personal summary for the calendar month containing ``now``."""
    if not logs:
        return None

    now = now or now_local()

    monthly_logs = []
    for log in logs:
        stamp = log.check_in or log.created_at
        if stamp and stamp.month == now.month and stamp.year == now.year:
            monthly_logs.append(log)

    total_days = len(monthly_logs)
    present_days = sum(1 for log in monthly_logs if log.check_in)
    total_hours = sum((_worked_hours(log) for log in monthly_logs), Decimal(0))

    return MonthlySummary(
        total_days=total_days,
        present_days=present_days,
        absent_days=total_days - present_days,
        total_hours=total_hours.quantize(_HOURS_QUANT, rounding=ROUND_HALF_UP),
    )


def _employee_key(log: AttendanceLog) -> Optional[str]:
    if log.user and log.user.user_id:
        return log.user.user_id
    return log.employee_id


def team_summary(logs: Sequence[AttendanceLog], *, now: Optional[datetime] = None) -> Optional[TeamSummary]:
    """Team summary for the current day.

    "Today" is the UTC calendar date on both sides; late arrivals use the
    local hour.

    ``present_today`` counts logs, not employees: two check-ins by the same
    person today are both counted, so ``absent_today`` can go negative.
    """
    if not logs:
        return None

    today = utc_date(now or now_local())

    total_employees = len({_employee_key(log) for log in logs})
    present_today = sum(1 for log in logs if log.check_in and utc_date(log.check_in) == today)
    late_arrivals = sum(1 for log in logs if log.check_in and log.check_in.hour > LATE_ARRIVAL_HOUR)

    return TeamSummary(
        total_employees=total_employees,
        present_today=present_today,
        absent_today=total_employees - present_today,
        late_arrivals=late_arrivals,
    )
