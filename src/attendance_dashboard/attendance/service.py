from __future__ import annotations

import logging
from dataclasses import dataclass

from ..core.enums import ResultKind
from ..core.exceptions import ApiError
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionResult:
    kind: ResultKind
    message: str

    @property
    def ok(self) -> bool:
        return self.kind == ResultKind.SUCCESS

    def to_dict(self) -> dict:
        return {"success": self.ok, "kind": self.kind.value, "message": self.message}


class AttendanceActionService:
    """Use case: check-in / check-out against the backend.

    The outcome is decided by the HTTP result alone; message text is never
    inspected.
    """

    CHECKIN_OK = "Check-in recorded successfully"
    CHECKOUT_OK = "Check-out recorded successfully"
    CHECKIN_FAILED = "Failed to check in. Please try again."
    CHECKOUT_FAILED = "Failed to check out. Please try again."

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def check_in(self, *, token: str) -> ActionResult:
        try:
            self._attendance.check_in(token=token)
        except ApiError as e:
            logger.info("check-in rejected: %s", e)
            return ActionResult(ResultKind.FAILURE, e.backend_message or self.CHECKIN_FAILED)
        return ActionResult(ResultKind.SUCCESS, self.CHECKIN_OK)

    def check_out(self, *, token: str) -> ActionResult:
        try:
            self._attendance.check_out(token=token)
        except ApiError as e:
            logger.info("check-out rejected: %s", e)
            return ActionResult(ResultKind.FAILURE, e.backend_message or self.CHECKOUT_FAILED)
        return ActionResult(ResultKind.SUCCESS, self.CHECKOUT_OK)
