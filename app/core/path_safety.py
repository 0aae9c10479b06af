import logging
import re
from typing import Union
from urllib.parse import unquote

from app.schemas.download_schemas import Rejected, RejectionReason

logger = logging.getLogger(__name__)

MAX_DECODE_ROUNDS = 3
_DRIVE_PREFIX = re.compile(r"^[A-Za-z]:")
_FORBIDDEN_SEGMENTS = {"", ".", ".."}


class SafeKey(str):
    """A resource key that passed validate_resource_key."""


def _is_unsafe(key: str) -> bool:
    if not key or key.startswith("/") or _DRIVE_PREFIX.match(key):
        return True
    if "\\" in key or "\x00" in key:
        return True
    return any(segment in _FORBIDDEN_SEGMENTS for segment in key.split("/"))


def validate_resource_key(resource_key: str) -> Union[SafeKey, Rejected]:
    """
    Certifies that a user supplied resource key can only resolve underneath
    the resource root once joined with it.

    The key is checked as given and after every round of percent-decoding,
    so encoded forms such as "..%2f.." or "%252e%252e" are caught too.
    Nothing is ever stripped or corrected: a key is accepted unchanged or
    rejected with PATH_TRAVERSAL_ATTEMPT.
    """
    candidate = resource_key
    for _ in range(MAX_DECODE_ROUNDS + 1):
        if _is_unsafe(candidate):
            logger.warning("Rejected unsafe resource key %r", resource_key)
            return Rejected(reason=RejectionReason.PATH_TRAVERSAL_ATTEMPT)
        decoded = unquote(candidate)
        if decoded == candidate:
            return SafeKey(resource_key)
        candidate = decoded

    # still decoding to something new after MAX_DECODE_ROUNDS
    logger.warning("Rejected over-encoded resource key %r", resource_key)
    return Rejected(reason=RejectionReason.PATH_TRAVERSAL_ATTEMPT)
