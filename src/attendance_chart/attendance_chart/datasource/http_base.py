from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List

import requests

from ..core.exceptions import FetchFailure
from .connection import ApiConnection

logger = logging.getLogger(__name__)


@contextmanager
def api_response(conn: ApiConnection, url: str, *, source: str) -> Iterator[requests.Response]:
    """GET url and yield the response; any transport error or non-2xx becomes FetchFailure."""
    try:
        resp = conn.session().get(url, timeout=conn.config.timeout)
    except requests.RequestException as e:
        logger.error("Fetch %s failed: %s", source, e)
        raise FetchFailure(f"Failed to fetch {source}", source=source) from e
    try:
        if not resp.ok:
            logger.error("Fetch %s failed: HTTP %s from %s", source, resp.status_code, url)
            raise FetchFailure(f"Failed to fetch {source} (HTTP {resp.status_code})", source=source)
        yield resp
    finally:
        resp.close()


def fetch_records(conn: ApiConnection, url: str, *, source: str) -> List[Dict[str, Any]]:
    """Fetch a JSON array of objects.

    Only the outer shape is checked: a payload that is not a list of mappings is unusable.
    """
    with api_response(conn, url, source=source) as resp:
        try:
            payload = resp.json()
        except ValueError as e:
            logger.error("Fetch %s returned invalid JSON: %s", source, e)
            raise FetchFailure(f"Failed to fetch {source} (invalid JSON)", source=source) from e

    if not isinstance(payload, list) or not all(isinstance(r, dict) for r in payload):
        logger.error("Fetch %s returned unexpected payload type %s", source, type(payload).__name__)
        raise FetchFailure(f"Failed to fetch {source} (unexpected payload)", source=source)
    return list(payload)
