# tests/conftest.py

import pytest

from roster_api import Result, RosterClient


class FakeResponse:
    def __init__(self, status_code=200, payload=None, bad_json=False):
        self.status_code = status_code
        self._payload = payload
        self._bad_json = bad_json

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._bad_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class FakeSession:
    """Stands in for requests.Session; replies with queued responses or errors."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []

    def request(self, method, url, json=None, timeout=None):
        self.calls.append({"method": method, "url": url, "json": json, "timeout": timeout})
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


class FakeClient:
    """Duck-typed RosterClient for the modal flows; records every call."""

    def __init__(self, students=None, result=None):
        self.students = list(students or [])
        self.result = result or Result(True, "ok")
        self.calls = []

    def load_students(self):
        self.calls.append(("load_students",))
        return list(self.students)

    def load_stats(self):
        self.calls.append(("load_stats",))
        return {"total": len(self.students), "avg_marks": 0, "top_marks": 0, "branches": 0}

    def add_student(self, student):
        self.calls.append(("add_student", student))
        return self.result

    def update_student(self, position, fields):
        self.calls.append(("update_student", position, fields))
        return self.result

    def delete_student(self, position):
        self.calls.append(("delete_student", position))
        return self.result

    @property
    def mutations(self):
        return [c for c in self.calls if c[0] != "load_students" and c[0] != "load_stats"]


@pytest.fixture
def sample_students():
    return [
        {"roll": "S1", "name": "Ann", "age": "20", "branch": "CS", "marks": "40"},
        {"roll": "S2", "name": "Bob", "age": "21", "branch": "IT", "marks": "60"},
        {"roll": "S3", "name": "Cara", "age": "22", "branch": "ECE", "marks": "90"},
    ]


@pytest.fixture
def make_client():
    def _make(*replies):
        session = FakeSession(*replies)
        return RosterClient(base_url="http://roster.test/", session=session), session

    return _make


@pytest.fixture
def fake_client(sample_students):
    return FakeClient(sample_students)


@pytest.fixture
def make_fake_client(sample_students):
    def _make(result=None, students=None):
        return FakeClient(sample_students if students is None else students, result)

    return _make
