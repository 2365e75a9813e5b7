"""
HTTP access to the shop backend that owns the book listings.

The backend exposes the whole catalogue at a single URL. Depending on
the endpoint it answers either with a bare JSON list of book records or
with a Spring-style page object whose ``content`` field holds that list;
``extract_records()`` accepts both.

Only the Python standard library is used for HTTP requests. Transport,
status and decoding problems are raised as ``FetchError`` so the catalogue
source can report why a load failed.
"""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.request
from typing import Any, Dict, List

from .errors import FetchError


logger = logging.getLogger(__name__)


def _http_get_json(url: str, timeout: float = 10.0) -> Any:
    """Perform an HTTP GET and return the parsed JSON body.

    Raises
    ------
    FetchError
        When the request fails, the status is not 200 or the body is
        not valid JSON.
    """
    request = urllib.request.Request(
        url,
        headers={
            'User-Agent': 'bookshop-catalog/1.0',
            'Accept': 'application/json',
        },
    )
    try:
        with urllib.request.urlopen(request, timeout=timeout) as response:
            if response.status != 200:
                raise FetchError(f"{url} returned status {response.status}")
            data = response.read().decode('utf-8', errors='ignore')
    except urllib.error.URLError as exc:
        logger.error("Error fetching %s: %s", url, exc)
        raise FetchError(f"could not reach {url}: {exc}") from exc
    except OSError as exc:
        logger.error("Error fetching %s: %s", url, exc)
        raise FetchError(f"could not read {url}: {exc}") from exc
    try:
        return json.loads(data)
    except ValueError as exc:
        raise FetchError(f"{url} did not return JSON") from exc


def extract_records(payload: Any) -> List[Dict[str, Any]]:
    """Return the list of book records held in a backend response.

    Non-dict entries are dropped. Anything that is neither a list nor an
    object with a ``content`` list is rejected with ``FetchError``.
    """
    if isinstance(payload, dict):
        payload = payload.get('content')
    if not isinstance(payload, list):
        raise FetchError("unexpected catalogue payload")
    return [entry for entry in payload if isinstance(entry, dict)]


def fetch_book_records(url: str, timeout: float = 10.0) -> List[Dict[str, Any]]:
    """GET the catalogue at ``url`` and return its raw book records."""
    payload = _http_get_json(url, timeout=timeout)
    records = extract_records(payload)
    logger.info("Fetched %d book records from %s", len(records), url)
    return records
