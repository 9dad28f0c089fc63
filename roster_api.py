# roster_api.py — HTTP client for the student roster backend
# -----------------------------------------------------------
# Every call converts transport and parse errors into a safe default value and
# logs them, so nothing here raises into the dashboard.

import logging
from typing import NamedTuple, Optional
from urllib.parse import quote

import requests

import roster_config

ZERO_STATS = {"total": 0, "avg_marks": 0, "top_marks": 0, "branches": 0}
EDITABLE_FIELDS = ("name", "age", "branch", "marks")


class Result(NamedTuple):
    success: bool
    message: str


class RosterClient:
    def __init__(self, base_url=None, session=None, timeout=None):
        self.base_url = (base_url or roster_config.API_BASE_URL).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else roster_config.REQUEST_TIMEOUT
        self.logger = logging.getLogger(__name__)

    def _request(self, method: str, path: str, payload=None) -> requests.Response:
        return self.session.request(
            method, f"{self.base_url}{path}", json=payload, timeout=self.timeout
        )

    # ---------- Reads ----------
    def load_students(self) -> list:
        """Full roster in backend order; [] on any failure."""
        try:
            data = self._request("GET", "/api/students").json()
        except (requests.RequestException, ValueError) as e:
            self.logger.error(f"Error loading students: {e}")
            return []
        if not isinstance(data, list):
            self.logger.error(f"Unexpected roster payload: {data!r}")
            return []
        return data

    def load_stats(self) -> dict:
        """Aggregate summary from the backend; all zeros on any failure."""
        try:
            data = self._request("GET", "/api/stats").json()
        except (requests.RequestException, ValueError) as e:
            self.logger.error(f"Error loading stats: {e}")
            return dict(ZERO_STATS)
        if not isinstance(data, dict):
            self.logger.error(f"Unexpected stats payload: {data!r}")
            return dict(ZERO_STATS)
        return {**ZERO_STATS, **data}

    def search_student(self, roll) -> Optional[dict]:
        """Look a single student up by roll; None when not found or on error."""
        try:
            res = self._request("GET", f"/api/students/{quote(str(roll), safe='')}")
            if not res.ok:
                return None
            data = res.json()
        except (requests.RequestException, ValueError) as e:
            self.logger.error(f"Error searching student {roll!r}: {e}")
            return None
        return data if isinstance(data, dict) else None

    # ---------- Mutations ----------
    def _mutate(self, method: str, path: str, fallback: str, payload=None) -> Result:
        try:
            res = self._request(method, path, payload)
            body = res.json()
        except (requests.RequestException, ValueError) as e:
            self.logger.error(f"{fallback} ({method} {path}): {e}")
            return Result(False, fallback)

        message = body.get("message") if isinstance(body, dict) else None
        if res.ok:
            self.logger.info(f"{method} {path} -> {res.status_code}")
            return Result(True, "" if message is None else str(message))

        self.logger.warning(f"{method} {path} rejected ({res.status_code}): {message}")
        return Result(False, fallback if message is None else str(message))

    def add_student(self, student: dict) -> Result:
        return self._mutate("POST", "/api/students", "Error adding student!", student)

    def update_student(self, position: int, fields: dict) -> Result:
        """Update the record at `position`; roll is immutable and never sent."""
        payload = {k: fields[k] for k in EDITABLE_FIELDS if k in fields}
        return self._mutate(
            "PUT", f"/api/students/index/{position}", "Error updating student!", payload
        )

    def delete_student(self, position: int) -> Result:
        return self._mutate(
            "DELETE", f"/api/students/index/{position}", "Error deleting student!"
        )
