"""Rendering of error values as HTTP responses."""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Mapping, Protocol

import msgspec

from .composite import CompositeError, flatten_composite
from .config import DEFAULT_CONFIG, ErrorConfig
from .exceptions import ErrorValue, MethodNotAllowedError
from .http import Status, as_http_code
from .serialization import json_encode

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_MESSAGE = "Unknown error"
JSON_CONTENT_TYPE = "application/json"

Headers = tuple[tuple[str, str], ...]
Send = Callable[[Mapping[str, Any]], Awaitable[None]]


class Response(msgspec.Struct, frozen=True):
    """Immutable rendered error response."""

    status: int = int(Status.INTERNAL_SERVER_ERROR)
    headers: Headers = ()
    body: bytes = b""

    def header(self, name: str) -> str | None:
        lowered = name.lower()
        for key, value in self.headers:
            if key.lower() == lowered:
                return value
        return None


class ResponseWriter(Protocol):
    """Sink receiving headers, then the status line, then the body."""

    def set_header(self, name: str, value: str) -> None: ...

    def write_header(self, status: int) -> None: ...

    def write(self, body: bytes) -> None: ...


def _has_numeric_code(err: Any) -> bool:
    code = getattr(err, "code", None)
    return isinstance(code, int) and not isinstance(code, bool)


class ErrorRenderer:
    """Select the error worth surfacing and turn it into a :class:`Response`.

    The status written for codes that are not standard HTTP statuses comes
    from ``config.default_http_code``. Bodies always carry the original code.
    """

    __slots__ = ("config",)

    def __init__(self, config: ErrorConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG

    def status_for(self, code: int) -> int:
        return as_http_code(code, self.config.default_http_code)

    def render(self, err: BaseException | None, *, method: str | None = None) -> Response:
        """Render ``err``; a ``HEAD`` ``method`` suppresses the body."""

        if err is None or isinstance(err, type):
            logger.warning("Rendering unknown error for %r", err)
            return self._unknown(method)
        if isinstance(err, MethodNotAllowedError):
            return self._respond(
                self.status_for(err.code),
                err.code,
                str(err),
                method,
                extra_headers=(("allow", ",".join(err.allowed)),),
            )
        if isinstance(err, CompositeError):
            flat = flatten_composite(err)
            if not flat.errors:
                logger.warning("Rendering unknown error for empty composite error")
                return self._unknown(method)
            if len(flat.errors) > 1:
                logger.debug("Dropping %d composite errors from response", len(flat.errors) - 1)
            return self.render(flat.errors[0], method=method)
        if isinstance(err, ErrorValue) and _has_numeric_code(err):
            return self._respond(self.status_for(err.code), err.code, str(err), method)
        return self._respond(
            int(Status.INTERNAL_SERVER_ERROR), int(Status.INTERNAL_SERVER_ERROR), str(err), method
        )

    def _unknown(self, method: str | None) -> Response:
        status = int(Status.INTERNAL_SERVER_ERROR)
        return self._respond(status, status, UNKNOWN_ERROR_MESSAGE, method)

    @staticmethod
    def _respond(
        status: int,
        code: int,
        message: str,
        method: str | None,
        *,
        extra_headers: Headers = (),
    ) -> Response:
        headers = (("content-type", JSON_CONTENT_TYPE),) + extra_headers
        if method is not None and method.upper() == "HEAD":
            return Response(status=status, headers=headers)
        body = json_encode({"code": int(code), "message": message})
        return Response(status=status, headers=headers, body=body)


_DEFAULT_RENDERER = ErrorRenderer()


def render_error(
    err: BaseException | None,
    *,
    method: str | None = None,
    config: ErrorConfig | None = None,
) -> Response:
    renderer = _DEFAULT_RENDERER if config is None else ErrorRenderer(config)
    return renderer.render(err, method=method)


def write_response(writer: ResponseWriter, response: Response) -> None:
    for name, value in response.headers:
        writer.set_header(name, value)
    writer.write_header(response.status)
    if response.body:
        writer.write(response.body)


def serve_error(
    writer: ResponseWriter,
    request: Any,
    err: BaseException | None,
    *,
    config: ErrorConfig | None = None,
) -> None:
    """Write the response for ``err`` to ``writer``.

    ``request`` may be ``None``; otherwise only its ``method`` is consulted.
    """

    method = getattr(request, "method", None) if request is not None else None
    write_response(writer, render_error(err, method=method, config=config))


async def send_error(
    send: Send,
    err: BaseException | None,
    *,
    method: str | None = None,
    config: ErrorConfig | None = None,
) -> None:
    """Send the response for ``err`` through an ASGI ``send`` callable."""

    response = render_error(err, method=method, config=config)
    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": [(k.encode("latin-1"), v.encode("latin-1")) for k, v in response.headers],
        }
    )
    await send({"type": "http.response.body", "body": response.body})


__all__ = [
    "JSON_CONTENT_TYPE",
    "UNKNOWN_ERROR_MESSAGE",
    "ErrorRenderer",
    "Response",
    "ResponseWriter",
    "render_error",
    "send_error",
    "serve_error",
    "write_response",
]
