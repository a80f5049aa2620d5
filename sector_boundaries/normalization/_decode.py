"""Decoding of raw boundary input.

Boundary columns arrive either as JSON text (form fields, most rows) or
as values the HTTP layer has already decoded.  Decoding never raises: a
value that is not JSON is simply "no boundary".
"""

from __future__ import annotations

import json
import logging

logger = logging.getLogger("sector_boundaries.normalization")

_MISSING = object()


def is_empty_input(raw: object) -> bool:
    """Whether *raw* carries nothing at all (``None``, ``""``, ``[]``, ``{}``)."""
    if raw is None:
        return True
    if isinstance(raw, str | bytes | list | tuple | dict):
        return len(raw) == 0
    return False


def decode_input(raw: object) -> object:
    """Return the decoded value of *raw*, or ``_MISSING`` if it is not JSON.

    Non-string values are returned unchanged.
    """
    if not isinstance(raw, str | bytes | bytearray):
        return raw
    try:
        return json.loads(raw)
    except (ValueError, UnicodeDecodeError, RecursionError) as exc:
        logger.warning("Boundary is not valid JSON, treating as absent: %s", exc)
        return _MISSING


def is_missing(value: object) -> bool:
    """Whether *value* is the decode-failure marker."""
    return value is _MISSING
