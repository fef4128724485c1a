from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Callable, Optional, Sequence

from ..attendance.export import logs_to_csv
from ..attendance.model import AttendanceLog, MonthlySummary, TeamSummary
from ..attendance.repository import AttendanceRepository
from ..attendance.service import ActionResult, AttendanceActionService
from ..attendance.status import derive_status
from ..attendance.store import AttendanceLogStore
from ..attendance.summary import monthly_summary, team_summary
from ..common.datetime_utils import now_local
from ..core.constants import CSV_REPORT_FILENAME, MESSAGE_DISMISS_SECONDS
from ..core.enums import CheckStatus
from ..core.exceptions import ApiError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FlashMessage:
    result: ActionResult
    expires_at: datetime

    def visible(self, now: datetime) -> bool:
        return now < self.expires_at


class EmployeeDashboard:
    """Employee view: personal logs, team logs and the check-in/out actions."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        token: str,
        actions: Optional[AttendanceActionService] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._attendance = attendance
        self._token = token
        self._actions = actions or AttendanceActionService(attendance)
        self._clock = clock

        self._personal = AttendanceLogStore()
        self._team = AttendanceLogStore()
        self._status = CheckStatus.CHECKED_OUT
        self._monthly: Optional[MonthlySummary] = None
        self._team_summary: Optional[TeamSummary] = None
        self._message: Optional[FlashMessage] = None
        self._selected_date: date = clock().date()

    @property
    def logs(self) -> list[AttendanceLog]:
        return self._personal.logs

    @property
    def team_logs(self) -> list[AttendanceLog]:
        return self._team.logs

    @property
    def loading(self) -> bool:
        return self._personal.loading

    @property
    def status(self) -> CheckStatus:
        return self._status

    @property
    def monthly_summary(self) -> Optional[MonthlySummary]:
        return self._monthly

    @property
    def team_summary(self) -> Optional[TeamSummary]:
        return self._team_summary

    @property
    def selected_date(self) -> date:
        return self._selected_date

    @property
    def can_check_in(self) -> bool:
        return self._status != CheckStatus.CHECKED_IN

    @property
    def can_check_out(self) -> bool:
        return self._status != CheckStatus.CHECKED_OUT

    def load(self) -> None:
        """Fetch personal and team logs concurrently."""
        personal_gen = self._personal.begin_fetch()
        team_gen = self._team.begin_fetch()

        with ThreadPoolExecutor(max_workers=2) as pool:
            personal = pool.submit(self._attendance.list_mine, token=self._token)
            team = pool.submit(self._attendance.list_team, token=self._token)
            self._settle_personal(personal_gen, personal.result)
            self._settle_team(team_gen, team.result)

    def refresh_personal(self) -> None:
        generation = self._personal.begin_fetch()
        self._settle_personal(generation, lambda: self._attendance.list_mine(token=self._token))

    def _settle_personal(self, generation: int, fetch: Callable[[], Sequence[AttendanceLog]]) -> None:
        try:
            logs = fetch()
        except ApiError as e:
            logger.warning("personal attendance fetch failed: %s", e)
            if self._personal.fail(generation):
                self._monthly = None
            return

        if not self._personal.commit(generation, logs):
            logger.debug("dropping stale personal attendance response (generation %s)", generation)
            return
        self._status = derive_status(logs)
        self._monthly = monthly_summary(logs, now=self._clock())

    def _settle_team(self, generation: int, fetch: Callable[[], Sequence[AttendanceLog]]) -> None:
        try:
            logs = fetch()
        except ApiError as e:
            logger.warning("team attendance fetch failed: %s", e)
            if self._team.fail(generation):
                self._team_summary = None
            return

        if not self._team.commit(generation, logs):
            logger.debug("dropping stale team attendance response (generation %s)", generation)
            return
        self._team_summary = team_summary(logs, now=self._clock())

    def check_in(self) -> ActionResult:
        result = self._actions.check_in(token=self._token)
        return self._after_action(result, CheckStatus.CHECKED_IN)

    def check_out(self) -> ActionResult:
        result = self._actions.check_out(token=self._token)
        return self._after_action(result, CheckStatus.CHECKED_OUT)

    def _after_action(self, result: ActionResult, target: CheckStatus) -> ActionResult:
        if result.ok:
            self._status = target
        self._message = FlashMessage(result, self._clock() + timedelta(seconds=MESSAGE_DISMISS_SECONDS))
        self.refresh_personal()
        return result

    @property
    def flash_message(self) -> Optional[FlashMessage]:
        return self._message

    def restore_message(self, message: Optional[FlashMessage]) -> None:
        """Carry a message over from an earlier request for the same user."""
        self._message = message

    def current_message(self, now: Optional[datetime] = None) -> Optional[ActionResult]:
        if self._message is None:
            return None
        if not self._message.visible(now or self._clock()):
            self._message = None
            return None
        return self._message.result

    def select_date(self, value: date) -> None:
        self._selected_date = value

    def export_csv(self) -> tuple[str, bytes]:
        return CSV_REPORT_FILENAME, logs_to_csv(self._personal.logs)

    def to_dict(self) -> dict:
        message = self.current_message()
        return {
            "status": self._status.value,
            "can_check_in": self.can_check_in,
            "can_check_out": self.can_check_out,
            "loading": self.loading,
            "message": message.to_dict() if message else None,
            "monthly_summary": self._monthly.to_dict() if self._monthly else None,
            "team_summary": self._team_summary.to_dict() if self._team_summary else None,
            "selected_date": self._selected_date.isoformat(),
            "logs": [log.to_dict() for log in self._personal.logs],
            "team_logs": [log.to_dict() for log in self._team.logs],
        }
