from __future__ import annotations

from dataclasses import dataclass

from .api.client import ApiClient, ApiConfig
from .attendance.http_attendance_repository import HttpAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceActionService
from .dashboards.admin import AdminDashboard
from .dashboards.employee import EmployeeDashboard


@dataclass(frozen=True)
class Container:
    attendance_repo: AttendanceRepository
    action_service: AttendanceActionService

    def admin_dashboard(self, *, token: str) -> AdminDashboard:
        return AdminDashboard(self.attendance_repo, token=token)

    def employee_dashboard(self, *, token: str) -> EmployeeDashboard:
        return EmployeeDashboard(self.attendance_repo, token=token, actions=self.action_service)


def build_container(*, api_config: dict) -> Container:
    config = ApiConfig(
        base_url=str(api_config["base_url"]),
        timeout=float(api_config.get("timeout", 10)),
    )
    client = ApiClient.get_instance(config)

    attendance_repo = HttpAttendanceRepository(client)
    action_service = AttendanceActionService(attendance_repo)

    return Container(attendance_repo=attendance_repo, action_service=action_service)
