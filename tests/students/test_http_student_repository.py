from __future__ import annotations

import pytest
import requests

from src.attendance_chart.attendance_chart.core.exceptions import FetchFailure
from src.attendance_chart.attendance_chart.datasource.connection import ApiConfig, ApiConnection
from src.attendance_chart.attendance_chart.students.http_student_repository import HttpStudentRepository
from src.attendance_chart.attendance_chart.students.model import StudentRecord


class FakeResponse:
    def __init__(self, payload, status_code: int = 200):
        self._payload = payload
        self.status_code = status_code
        self.closed = False

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload

    def close(self):
        self.closed = True


class FakeSession:
    def __init__(self, responses: dict):
        self._responses = responses
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        resp = self._responses[url]
        if isinstance(resp, Exception):
            raise resp
        return resp


def _repo(resp) -> tuple[HttpStudentRepository, FakeSession]:
    config = ApiConfig(students_url="http://api/students", attendance_url="http://api/attendances", timeout=3)
    session = FakeSession({"http://api/students": resp})
    return HttpStudentRepository(ApiConnection(config, session=session)), session


def test_roster_is_parsed_in_source_order():
    repo, session = _repo(FakeResponse([{"id": 2, "name": "Bob"}, {"id": 1, "name": "Alice"}]))

    roster = repo.get_roster()

    assert roster == (StudentRecord(id=2, name="Bob"), StudentRecord(id=1, name="Alice"))
    assert session.calls == [("http://api/students", 3)]


def test_duplicate_ids_keep_first_record():
    repo, _ = _repo(FakeResponse([{"id": 1, "name": "Alice"}, {"id": 1, "name": "Alias"}]))
    assert repo.get_roster() == (StudentRecord(id=1, name="Alice"),)


def test_non_2xx_is_fetch_failure():
    resp = FakeResponse({"error": "boom"}, status_code=500)
    repo, _ = _repo(resp)

    with pytest.raises(FetchFailure) as exc:
        repo.get_roster()

    assert exc.value.source == "students"
    assert resp.closed


def test_transport_error_is_fetch_failure():
    repo, _ = _repo(requests.ConnectionError("unreachable"))
    with pytest.raises(FetchFailure):
        repo.get_roster()


def test_invalid_json_is_fetch_failure():
    repo, _ = _repo(FakeResponse(ValueError("not json")))
    with pytest.raises(FetchFailure):
        repo.get_roster()


def test_record_without_id_is_fetch_failure():
    repo, _ = _repo(FakeResponse([{"name": "Nobody"}]))
    with pytest.raises(FetchFailure):
        repo.get_roster()
