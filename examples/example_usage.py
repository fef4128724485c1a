"""Ví dụ: dùng dashboard controllers trực tiếp (không qua Flask).

Usage: API_TOKEN=<bearer token> python examples/example_usage.py
"""

import importlib
import os

from attendance_dashboard.config import get_settings_module
from attendance_dashboard.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(api_config=settings.API_CONFIG)

    dashboard = container.employee_dashboard(token=os.environ["API_TOKEN"])
    dashboard.load()
    print(dashboard.status.value, dashboard.monthly_summary, dashboard.team_summary)


if __name__ == "__main__":
    main()
