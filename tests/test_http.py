from __future__ import annotations

import pytest

from apierrors.http import (
    DEFAULT_HTTP_CODE,
    Status,
    as_http_code,
    ensure_status,
    is_valid_status,
)


def test_ensure_status_validates_range() -> None:
    assert ensure_status(Status.NOT_FOUND) == 404
    assert ensure_status(422) == 422
    with pytest.raises(ValueError):
        ensure_status(99)
    with pytest.raises(ValueError):
        ensure_status(600)


def test_is_valid_status_uses_standard_table() -> None:
    assert is_valid_status(404)
    assert is_valid_status(Status.UNSUPPORTED_MEDIA_TYPE)
    assert not is_valid_status(499)
    assert not is_valid_status(601)
    assert not is_valid_status(1)


def test_as_http_code() -> None:
    assert as_http_code(405) == 405
    assert as_http_code(601) == DEFAULT_HTTP_CODE == 422
    assert as_http_code(601, 400) == 400
    assert as_http_code(1, 409) == 409

