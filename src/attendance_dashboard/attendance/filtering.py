from __future__ import annotations

from typing import Sequence

from ..common.datetime_utils import locale_date_string, to_utc, utc_midnight
from .model import AttendanceLog, FilterCriteria


def _matches_search(log: AttendanceLog, term: str) -> bool:
    username = log.username
    if username and term in username.lower():
        return True
    if log.check_in and term in locale_date_string(log.check_in).lower():
        return True
    return False


def filter_logs(logs: Sequence[AttendanceLog], criteria: FilterCriteria) -> list[AttendanceLog]:
    """Narrow the admin log list by search term and check-in date range.

    Each step keeps the relative order of the previous one. Date bounds compare
    the check-in against UTC midnight of the given day, so ``to_date`` excludes
    check-ins later on that same UTC day. Logs without a check-in never satisfy a
    date bound.
    """
    filtered = list(logs)

    term = criteria.search_term.strip().lower()
    if term:
        filtered = [log for log in filtered if _matches_search(log, term)]

    if criteria.from_date:
        lower = utc_midnight(criteria.from_date)
        filtered = [log for log in filtered if log.check_in is not None and to_utc(log.check_in) >= lower]

    if criteria.to_date:
        upper = utc_midnight(criteria.to_date)
        filtered = [log for log in filtered if log.check_in is not None and to_utc(log.check_in) <= upper]

    return filtered
