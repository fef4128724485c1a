from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..attendance.filtering import filter_logs
from ..attendance.model import AttendanceLog, FilterCriteria
from ..attendance.repository import AttendanceRepository
from ..attendance.store import AttendanceLogStore
from ..core.enums import AdminTab
from ..core.exceptions import ApiError

logger = logging.getLogger(__name__)


class AdminDashboard:
    """Admin view: all attendance logs, filtered by search term and dates."""

    def __init__(self, attendance: AttendanceRepository, *, token: str):
        self._attendance = attendance
        self._token = token
        self._store = AttendanceLogStore()
        self._criteria = FilterCriteria()
        self._active_tab = AdminTab.ATTENDANCE

    @property
    def logs(self) -> list[AttendanceLog]:
        return self._store.logs

    @property
    def loading(self) -> bool:
        return self._store.loading

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    @property
    def active_tab(self) -> AdminTab:
        return self._active_tab

    @property
    def filtered_logs(self) -> list[AttendanceLog]:
        return filter_logs(self._store.logs, self._criteria)

    @property
    def records_label(self) -> str:
        return f"Showing {len(self.filtered_logs)} of {len(self._store.logs)} records"

    def load(self) -> None:
        generation = self._store.begin_fetch()
        try:
            logs = self._attendance.list_all(token=self._token)
        except ApiError as e:
            logger.warning("admin attendance fetch failed: %s", e)
            self._store.fail(generation)
            return
        self._store.commit(generation, logs)

    def select_tab(self, tab: AdminTab) -> None:
        self._active_tab = AdminTab(tab)

    def set_search(self, term: str) -> None:
        self._criteria = FilterCriteria(term or "", self._criteria.from_date, self._criteria.to_date)

    def set_date_range(self, *, from_date: Optional[date], to_date: Optional[date]) -> None:
        self._criteria = FilterCriteria(self._criteria.search_term, from_date, to_date)

    def to_dict(self) -> dict:
        data = {"active_tab": self._active_tab.value, "loading": self.loading}
        if self._active_tab != AdminTab.ATTENDANCE:
            return data

        filtered = self.filtered_logs
        data.update(
            {
                "filters": {
                    "search": self._criteria.search_term,
                    "from": self._criteria.from_date.isoformat() if self._criteria.from_date else "",
                    "to": self._criteria.to_date.isoformat() if self._criteria.to_date else "",
                },
                "total": len(self._store.logs),
                "showing": len(filtered),
                "records_label": self.records_label,
                "logs": [log.to_dict() for log in filtered],
            }
        )
        return data
