from __future__ import annotations

from enum import Enum


class CheckStatus(str, Enum):
    """Trạng thái hiện tại của nhân viên, suy ra từ bản ghi mới nhất."""

    CHECKED_IN = "checked-in"
    CHECKED_OUT = "checked-out"


class ResultKind(str, Enum):
    """Kết quả của một thao tác chấm công gửi lên backend."""

    SUCCESS = "success"
    FAILURE = "failure"


class AdminTab(str, Enum):
    ATTENDANCE = "attendance"
    USERS = "users"
