from __future__ import annotations

import csv
import io
from typing import Sequence

from .model import AttendanceLog

REPORT_FIELDS = [
    "id",
    "user_id",
    "username",
    "employee_id",
    "check_in",
    "check_out",
    "created_at",
]


def logs_to_csv(logs: Sequence[AttendanceLog]) -> bytes:
    """Serialize personal logs for the ``attendance-report.csv`` download.

    Encoded as utf-8-sig so spreadsheet apps pick the right charset.
    """

    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=REPORT_FIELDS)
    writer.writeheader()
    for log in logs:
        row = log.to_dict()
        user = row.pop("user") or {}
        row["user_id"] = user.get("id")
        row["username"] = user.get("username")
        writer.writerow({key: "" if row.get(key) is None else row[key] for key in REPORT_FIELDS})

    return out.getvalue().encode("utf-8-sig")
