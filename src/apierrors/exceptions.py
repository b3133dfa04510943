"""Core error types and the basic error factories."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Protocol, TypeVar, runtime_checkable

from .http import Status
from .serialization import json_encode

E = TypeVar("E", bound=BaseException)


@runtime_checkable
class ErrorValue(Protocol):
    """Anything exposing a numeric ``code`` and a textual ``message``."""

    @property
    def code(self) -> int: ...

    @property
    def message(self) -> str: ...


class APIError(Exception):
    """Error carrying a numeric code and a human readable message."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(message)
        self._code = int(code)
        self._message = message

    @property
    def code(self) -> int:
        return self._code

    @property
    def message(self) -> str:
        return self._message

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self._code!r}, message={self._message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Return the structured body of this error."""

        return {"code": self._code, "message": self._message}

    def to_json(self) -> bytes:
        return json_encode(self.to_dict())


class MethodNotAllowedError(APIError):
    """The requested method is not served by the matched route."""

    def __init__(self, code: int, message: str, allowed: Iterable[str] = ()) -> None:
        super().__init__(code, message)
        self.allowed: tuple[str, ...] = tuple(allowed)

    def to_dict(self) -> dict[str, Any]:
        body = super().to_dict()
        body["allowed"] = list(self.allowed)
        return body


def format_value(value: Any) -> str:
    """Render ``value`` for inclusion in an error message."""

    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    if isinstance(value, (list, tuple, set, frozenset)):
        return format_values(value)
    return str(value)


def format_values(values: Iterable[Any]) -> str:
    return "[" + " ".join(format_value(value) for value in values) + "]"


_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def _escape(char: str) -> str:
    if char in _ESCAPES:
        return _ESCAPES[char]
    if char.isprintable():
        return char
    point = ord(char)
    if point < 0x80:
        return f"\\x{point:02x}"
    if point < 0x10000:
        return f"\\u{point:04x}"
    return f"\\U{point:08x}"


def quote(value: Any) -> str:
    """Return ``value`` double quoted, with control and unprintable characters escaped."""

    return '"' + "".join(_escape(char) for char in str(value)) + '"'


def new_error(code: int, message: str, *args: Any) -> APIError:
    """Create an error with ``code``, formatting ``message`` with ``args`` when given."""

    if args:
        message = message % args
    return APIError(code, message)


def not_found(message: str = "", *args: Any) -> APIError:
    """Create a 404 error; an empty ``message`` ignores ``args``."""

    if not message:
        return APIError(Status.NOT_FOUND, "Not found")
    return new_error(Status.NOT_FOUND, message, *args)


def not_implemented(message: str) -> APIError:
    return APIError(Status.NOT_IMPLEMENTED, message)


def unauthenticated(scheme: str) -> APIError:
    return new_error(Status.UNAUTHORIZED, "unauthenticated for %s", scheme)


def method_not_allowed(requested: str, allowed: Iterable[str]) -> MethodNotAllowedError:
    """Report that ``requested`` is not one of the ``allowed`` methods."""

    methods = tuple(allowed)
    message = f"method {requested} is not allowed, but [{','.join(methods)}] are"
    return MethodNotAllowedError(Status.METHOD_NOT_ALLOWED, message, methods)


def iter_errors(err: BaseException | None) -> Iterator[BaseException]:
    """Yield ``err`` and every error reachable from it, depth first.

    Children come from an ``unwrap()`` method, returning either one error or
    a sequence of them, and from ``__cause__``. Composites that were never flattened are walked as well.
    """

    stack: list[Any] = [err]
    seen: set[int] = set()
    while stack:
        current = stack.pop()
        if not isinstance(current, BaseException) or id(current) in seen:
            continue
        seen.add(id(current))
        yield current
        children: list[Any] = []
        unwrap = getattr(current, "unwrap", None)
        if callable(unwrap):
            unwrapped = unwrap()
            if isinstance(unwrapped, BaseException):
                children.append(unwrapped)
            elif isinstance(unwrapped, (list, tuple)):
                children.extend(unwrapped)
        if current.__cause__ is not None:
            children.append(current.__cause__)
        stack.extend(reversed(children))


def error_in_chain(err: BaseException | None, target: BaseException) -> bool:
    """Return ``True`` if ``target`` is ``err`` or one of its causes."""

    return any(candidate is target for candidate in iter_errors(err))


def find_error(err: BaseException | None, kind: type[E]) -> E | None:
    """Return the first error in the chain of ``err`` that is a ``kind``."""

    for candidate in iter_errors(err):
        if isinstance(candidate, kind):
            return candidate
    return None


__all__ = [
    "APIError",
    "ErrorValue",
    "MethodNotAllowedError",
    "error_in_chain",
    "find_error",
    "format_value",
    "format_values",
    "iter_errors",
    "method_not_allowed",
    "new_error",
    "not_found",
    "not_implemented",
    "quote",
    "unauthenticated",
]
