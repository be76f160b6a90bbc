"""Simple HTTP helper for fetching JSON from APIs."""

from typing import Any

import requests

from utils.config import Config
from utils.logging import get_logger

logger = get_logger("utils.http")


def fetch_json(url: str, timeout: int | None = None, **kwargs: Any) -> dict | None:
    """GET a URL and return the parsed JSON body, or None on any failure."""
    if timeout is None:
        timeout = Config.get_request_timeout()
    try:
        resp = requests.get(url, timeout=timeout, **kwargs)
    except requests.RequestException as e:
        logger.error("Request failed for %s: %s", url, e)
        return None
    if resp.status_code != 200:
        logger.error("HTTP %s for %s: %s", resp.status_code, url, resp.text[:200])
        return None
    try:
        return resp.json()
    except ValueError:
        logger.error("Invalid JSON from %s", url)
        return None
