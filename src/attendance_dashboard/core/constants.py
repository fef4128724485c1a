"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

LATE_ARRIVAL_HOUR = 9
MESSAGE_DISMISS_SECONDS = 3
DEFAULT_API_TIMEOUT = 10
CSV_REPORT_FILENAME = "attendance-report.csv"
