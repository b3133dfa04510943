"""Testing helpers."""

from __future__ import annotations

from typing import Any

from .serialization import json_decode


class ResponseRecorder:
    """In-memory response writer that records what was written to it."""

    __test__ = False

    def __init__(self) -> None:
        self.status: int | None = None
        self.headers: dict[str, str] = {}
        self.body = bytearray()

    def set_header(self, name: str, value: str) -> None:
        if self.status is not None:
            raise RuntimeError("headers already written")
        self.headers[name.lower()] = value

    def write_header(self, status: int) -> None:
        if self.status is None:
            self.status = status

    def write(self, body: bytes) -> None:
        if self.status is None:
            self.write_header(200)
        self.body.extend(body)

    def header(self, name: str) -> str | None:
        return self.headers.get(name.lower())

    def text(self) -> str:
        return bytes(self.body).decode()

    def json(self) -> Any:
        return json_decode(bytes(self.body))
