from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import requests

from ..core.constants import DEFAULT_FETCH_TIMEOUT


@dataclass
class ApiConfig:
    students_url: str
    attendance_url: str
    timeout: float = DEFAULT_FETCH_TIMEOUT


class ApiConnection:
    """HTTP session factory, one per container.

    Note: one requests.Session is shared so both sources reuse pooled connections.
    """

    def __init__(self, config: ApiConfig, *, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session

    @property
    def config(self) -> ApiConfig:
        return self._config

    def session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update({"Accept": "application/json"})
        return self._session
