"""HTTP status helpers used when mapping error codes onto the wire."""

from __future__ import annotations

from enum import IntEnum
from http import HTTPStatus as _HTTPStatus

MAXIMUM_VALID_HTTP_CODE = 600
DEFAULT_HTTP_CODE = 422


class Status(IntEnum):
    """Enumeration of the HTTP status codes produced by the error factories."""

    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    NOT_ACCEPTABLE = 406
    UNSUPPORTED_MEDIA_TYPE = 415
    UNPROCESSABLE_ENTITY = 422
    INTERNAL_SERVER_ERROR = 500
    NOT_IMPLEMENTED = 501


_RECOGNIZED = frozenset(int(status) for status in _HTTPStatus)


def ensure_status(status: int | Status) -> int:
    """Normalize ``status`` to an ``int`` and ensure it is within the HTTP range."""

    code = int(status)
    if code < 100 or code >= MAXIMUM_VALID_HTTP_CODE:
        raise ValueError(f"Invalid HTTP status code: {status}")
    return code


def is_valid_status(code: int) -> bool:
    """Return ``True`` if ``code`` is a standard HTTP status below 600."""

    return code < MAXIMUM_VALID_HTTP_CODE and code in _RECOGNIZED


def as_http_code(code: int, default: int = DEFAULT_HTTP_CODE) -> int:
    """Map an error ``code`` onto a status line, falling back to ``default``."""

    if is_valid_status(code):
        return code
    return default


__all__ = [
    "DEFAULT_HTTP_CODE",
    "MAXIMUM_VALID_HTTP_CODE",
    "Status",
    "as_http_code",
    "ensure_status",
    "is_valid_status",
]
