"""Caller identity taken from the request header."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from rest_framework.exceptions import ParseError  # type: ignore

DEFAULT_USER_ID_HEADER = "X-Sharer-User-Id"


def user_id_header_name() -> str:
    return getattr(settings, "SHAREIT_USER_ID_HEADER", DEFAULT_USER_ID_HEADER)


def actor_id_from_request(request) -> int:
    """Return the acting user's id or fail with a 400 request-format error."""

    header = user_id_header_name()
    raw = request.headers.get(header)
    if raw is None or not raw.strip():
        raise ParseError(f"Missing required header {header}")
    try:
        return int(raw)
    except ValueError:
        raise ParseError(f"Header {header} must be an integer, got {raw!r}")
