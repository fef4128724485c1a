from __future__ import annotations

import json as jsonlib
from datetime import datetime

import pytest
import requests

from attendance_dashboard.api.client import ApiClient, ApiConfig
from attendance_dashboard.attendance.http_attendance_repository import HttpAttendanceRepository
from attendance_dashboard.core.exceptions import ApiError


class FakeResponse:
    def __init__(self, status_code: int, body=None):
        self.status_code = status_code
        self.content = jsonlib.dumps(body).encode() if body is not None else b""
        self._body = body

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self):
        if self._body is None:
            raise ValueError("no body")
        return self._body


class FakeSession:
    def __init__(self, responses):
        self._responses = dict(responses)
        self.requests = []

    def request(self, method, url, *, headers=None, json=None, timeout=None):
        self.requests.append({"method": method, "url": url, "headers": headers, "json": json, "timeout": timeout})
        outcome = self._responses[(method, url)]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def _repo(responses):
    session = FakeSession(responses)
    client = ApiClient(ApiConfig(base_url="http://backend.test/api/", timeout=3), session=session)
    return HttpAttendanceRepository(client), session


def test_list_mine_sends_bearer_token_and_parses_logs():
    body = [{"_id": "1", "user": {"_id": "u1", "username": "alice"}, "checkIn": "2024-03-01T08:00:00", "checkOut": None}]
    repo, session = _repo({("GET", "http://backend.test/api/attendance/me"): FakeResponse(200, body)})

    logs = repo.list_mine(token="secret")

    assert [log.log_id for log in logs] == ["1"]
    assert logs[0].check_in == datetime(2024, 3, 1, 8, 0)
    sent = session.requests[0]
    assert sent["headers"] == {"Authorization": "Bearer secret"}
    assert sent["timeout"] == 3


@pytest.mark.parametrize(
    "method_name, path",
    [("list_all", "/admin/attendance"), ("list_team", "/attendance/team")],
)
def test_list_endpoints(method_name, path):
    repo, session = _repo({("GET", f"http://backend.test/api{path}"): FakeResponse(200, [])})

    assert getattr(repo, method_name)(token="t") == []
    assert session.requests[0]["url"].endswith(path)


def test_check_in_returns_backend_message():
    repo, session = _repo({("POST", "http://backend.test/api/attendance/checkin"): FakeResponse(201, {"message": "Checked in"})})

    assert repo.check_in(token="t") == "Checked in"
    assert session.requests[0]["json"] == {}


def test_check_out_without_body_returns_none():
    repo, _ = _repo({("POST", "http://backend.test/api/attendance/checkout"): FakeResponse(200)})

    assert repo.check_out(token="t") is None


def test_error_status_carries_backend_message():
    repo, _ = _repo(
        {("POST", "http://backend.test/api/attendance/checkin"): FakeResponse(400, {"message": "Already checked in today"})}
    )

    with pytest.raises(ApiError) as exc:
        repo.check_in(token="t")

    assert exc.value.status_code == 400
    assert exc.value.backend_message == "Already checked in today"


def test_transport_error_becomes_api_error():
    repo, _ = _repo({("GET", "http://backend.test/api/attendance/team"): requests.exceptions.ConnectionError("down")})

    with pytest.raises(ApiError) as exc:
        repo.list_team(token="t")

    assert exc.value.status_code is None
    assert exc.value.backend_message is None


def test_non_list_body_is_rejected():
    repo, _ = _repo({("GET", "http://backend.test/api/attendance/me"): FakeResponse(200, {"logs": []})})

    with pytest.raises(ApiError):
        repo.list_mine(token="t")


def test_malformed_timestamp_is_rejected():
    repo, _ = _repo({("GET", "http://backend.test/api/attendance/me"): FakeResponse(200, [{"_id": "1", "checkIn": "yesterday"}])})

    with pytest.raises(ApiError):
        repo.list_mine(token="t")


def test_get_instance_follows_config_changes(monkeypatch):
    monkeypatch.setattr(ApiClient, "_instance", None)
    first = ApiClient.get_instance(ApiConfig(base_url="http://one.test/api"))

    assert ApiClient.get_instance(ApiConfig(base_url="http://one.test/api")) is first

    second = ApiClient.get_instance(ApiConfig(base_url="http://two.test/api"))
    assert second is not first
    assert second._url("/attendance/me") == "http://two.test/api/attendance/me"
