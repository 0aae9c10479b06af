import logging
from typing import Optional
from urllib.parse import quote

import requests

from app.core.exceptions import TransportError

logger = logging.getLogger(__name__)

_DOT_SEGMENTS = {"", ".", ".."}

def path_segment(value: str) -> str:
    """
    Escapes one user supplied value as a single URL path segment.
    Empty and dot segments raise ValueError: requests and urllib3 would
    collapse them into the parent path even when percent-encoded.
    """
    if value in _DOT_SEGMENTS:
        raise ValueError(f"{value!r} is not a usable path segment")
    return quote(value, safe="")

def http_get(api: str, url: str, timeout: float, params: Optional[dict] = None) -> requests.Response:
    """
    GET against an upstream service. Connection failures and timeouts come back
    as TransportError; the caller decides what each status code means.
    """
    try:
        return requests.get(url, params=params, timeout=timeout)
    except requests.exceptions.RequestException as e:
        logger.error("%s unreachable at %s: %s", api, url, e)
        raise TransportError(api, url, message=str(e)) from e

def raise_for_upstream_status(api: str, response: requests.Response) -> None:
    if response.status_code >= 400:
        logger.error("%s responded %s for %s", api, response.status_code, response.url)
        raise TransportError(api, response.url, status_code=response.status_code)
