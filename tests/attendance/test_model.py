from datetime import datetime, timezone

from attendance_dashboard.attendance.model import AttendanceLog, LogUser


def test_from_api_reads_backend_keys():
    log = AttendanceLog.from_api(
        {
            "_id": "abc",
            "user": {"_id": "u1", "username": "alice"},
            "checkIn": "2024-03-01T08:00:00",
            "checkOut": "2024-03-01T16:30:00",
            "createdAt": "2024-03-01T08:00:00",
        }
    )

    assert log.log_id == "abc"
    assert log.user == LogUser(user_id="u1", username="alice")
    assert log.username == "alice"
    assert log.check_in == datetime(2024, 3, 1, 8, 0)
    assert log.check_out == datetime(2024, 3, 1, 16, 30)
    assert log.employee_id is None


def test_from_api_handles_missing_user_and_nulls():
    log = AttendanceLog.from_api({"id": 7, "user": None, "checkIn": None, "checkOut": "", "employeeId": 42})

    assert log.log_id == "7"
    assert log.user is None
    assert log.username is None
    assert log.check_in is None
    assert log.check_out is None
    assert log.employee_id == "42"


def test_utc_timestamps_are_converted_to_local_time():
    log = AttendanceLog.from_api({"_id": "1", "checkIn": "2024-03-01T08:00:00.000Z"})

    expected = datetime(2024, 3, 1, 8, 0, tzinfo=timezone.utc).astimezone().replace(tzinfo=None)
    assert log.check_in == expected
    assert log.check_in.tzinfo is None


def test_to_dict_uses_iso_strings():
    log = AttendanceLog.from_api({"_id": "1", "user": {"id": "u1", "username": "bob"}, "checkIn": "2024-03-01T08:00"})

    assert log.to_dict() == {
        "id": "1",
        "user": {"id": "u1", "username": "bob"},
        "employee_id": None,
        "check_in": "2024-03-01T08:00:00",
        "check_out": None,
        "created_at": None,
    }
