"""Mismatches between an API description and the handlers registered for it."""

from __future__ import annotations

from typing import Any, Iterable

from .exceptions import APIError
from .http import Status


class APIVerificationFailed(APIError):
    """Media types a ``section`` declares but does not register, or the reverse."""

    def __init__(
        self,
        section: str,
        missing_specification: Iterable[str] = (),
        missing_registration: Iterable[str] = (),
    ) -> None:
        self.section = section
        self.missing_specification: tuple[str, ...] = tuple(missing_specification)
        self.missing_registration: tuple[str, ...] = tuple(missing_registration)
        super().__init__(Status.INTERNAL_SERVER_ERROR, self._describe())

    def _describe(self) -> str:
        lines = []
        if self.missing_registration:
            lines.append(f"missing [{', '.join(self.missing_registration)}] {self.section} registrations")
        if self.missing_specification:
            lines.append(f"missing from spec file [{', '.join(self.missing_specification)}] {self.section}")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        body = super().to_dict()
        body.update(
            {
                "section": self.section,
                "missingSpecification": list(self.missing_specification),
                "missingRegistration": list(self.missing_registration),
            }
        )
        return body


__all__ = ["APIVerificationFailed"]
