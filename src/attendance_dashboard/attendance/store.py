from __future__ import annotations

from typing import Sequence

from .model import AttendanceLog


class AttendanceLogStore:
    """Log list owned by one view, guarded by a request generation.

    Every fetch calls :meth:`begin_fetch` and hands the returned generation back
    with its outcome. Only the latest generation may change the list; older
    responses are dropped.
    """

    def __init__(self):
        self._logs: tuple[AttendanceLog, ...] = ()
        self._generation = 0
        self._pending = False

    @property
    def logs(self) -> list[AttendanceLog]:
        return list(self._logs)

    @property
    def loading(self) -> bool:
        return self._pending

    def begin_fetch(self) -> int:
        self._generation += 1
        self._pending = True
        return self._generation

    def is_current(self, generation: int) -> bool:
        return generation == self._generation

    def commit(self, generation: int, logs: Sequence[AttendanceLog]) -> bool:
        if not self.is_current(generation):
            return False
        self._logs = tuple(logs)
        self._pending = False
        return True

    def fail(self, generation: int) -> bool:
        """Reset to empty after a failed fetch."""
        if not self.is_current(generation):
            return False
        self._logs = ()
        self._pending = False
        return True
