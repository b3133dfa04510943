"""Rendering configuration."""

from __future__ import annotations

from typing import Any, Mapping

import msgspec
from msgspec import Struct

from .http import DEFAULT_HTTP_CODE, ensure_status


class ErrorConfig(Struct, frozen=True, forbid_unknown_fields=True):
    """Typed configuration for an :class:`~apierrors.responses.ErrorRenderer`.

    ``default_http_code`` is the status written for errors whose code is not
    a standard HTTP status, such as the validation codes at 600 and above.
    """

    default_http_code: int = DEFAULT_HTTP_CODE

    def __post_init__(self) -> None:
        ensure_status(self.default_http_code)

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> "ErrorConfig":
        return msgspec.convert(dict(config), type=cls)


DEFAULT_CONFIG = ErrorConfig()

__all__ = ["DEFAULT_CONFIG", "ErrorConfig"]
