"""Errors raised while reading raw request values into typed ones."""

from __future__ import annotations

from typing import Any

from .exceptions import APIError, quote
from .http import Status


class ParseError(APIError):
    """A raw value could not be parsed; ``reason`` holds the underlying failure."""

    def __init__(
        self,
        code: int,
        message: str,
        *,
        name: str = "",
        in_: str = "",
        value: str = "",
        reason: BaseException | None = None,
    ) -> None:
        super().__init__(code, message)
        self.name = name
        self.in_ = in_
        self.value = value
        self.reason = reason
        self.__cause__ = reason

    def to_dict(self) -> dict[str, Any]:
        body = super().to_dict()
        body.update(
            {
                "name": self.name,
                "in": self.in_,
                "value": self.value,
                "reason": str(self.reason) if self.reason is not None else "",
            }
        )
        return body


def new_parse_error(name: str, in_: str, value: str, reason: BaseException | None) -> ParseError:
    if in_:
        message = f"parsing {name} {in_} from {quote(value)} failed, because {reason}"
    else:
        message = f"parsing {name} from {quote(value)} failed, because {reason}"
    return ParseError(Status.BAD_REQUEST, message, name=name, in_=in_, value=value, reason=reason)


__all__ = ["ParseError", "new_parse_error"]
