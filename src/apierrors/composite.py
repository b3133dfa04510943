"""Aggregation of several errors into one logical failure."""

from __future__ import annotations

from typing import Any, Iterable

from .exceptions import APIError
from .http import Status
from .validation import ValidationError

COMPOSITE_ERROR_CODE = int(Status.UNPROCESSABLE_ENTITY)
COMPOSITE_ERROR_MESSAGE = "validation failure list"


class CompositeError(APIError):
    """A sequence of errors reported together.

    Building one directly stores ``errors`` as given, nested composites
    included. :func:`composite_validation_error` flattens them instead.
    """

    def __init__(
        self,
        errors: Iterable[BaseException | None] = (),
        *,
        code: int = COMPOSITE_ERROR_CODE,
        message: str = COMPOSITE_ERROR_MESSAGE,
    ) -> None:
        super().__init__(code, message)
        self.errors: tuple[BaseException | None, ...] = tuple(errors)

    def __str__(self) -> str:
        if not self.errors:
            return self.message
        lines = [f"{self.message}:"]
        lines.extend(str(err) for err in self.errors)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"CompositeError(code={self.code!r}, errors={self.errors!r})"

    def unwrap(self) -> tuple[BaseException | None, ...]:
        return self.errors

    def validate_name(self, prefix: str) -> "CompositeError":
        """Return a copy with ``prefix`` applied to every validation error it holds."""

        if not prefix:
            return self
        qualified: list[BaseException | None] = []
        for err in self.errors:
            if isinstance(err, (ValidationError, CompositeError)):
                qualified.append(err.validate_name(prefix))
            else:
                qualified.append(err)
        return CompositeError(qualified, code=self.code, message=self.message)

    def to_dict(self) -> dict[str, Any]:
        body = super().to_dict()
        body["errors"] = [_error_body(err) for err in self.errors]
        return body


def _error_body(err: BaseException | None) -> Any:
    if err is None:
        return None
    if isinstance(err, APIError):
        return err.to_dict()
    return {"message": str(err)}


def _leaves(errors: Iterable[BaseException | None]) -> list[BaseException]:
    flat: list[BaseException] = []
    for err in errors:
        if isinstance(err, CompositeError):
            flat.extend(_leaves(err.errors))
        elif err is not None:
            flat.append(err)
    return flat


def composite_validation_error(*errors: BaseException | None) -> CompositeError:
    """Combine ``errors`` into one composite, inlining nested composites depth first."""

    return CompositeError(_leaves(errors))


def flatten_composite(err: CompositeError) -> CompositeError:
    """Return a composite holding every leaf of ``err``, without empty nested composites."""

    return CompositeError(_leaves(err.errors), code=err.code, message=err.message)


__all__ = [
    "COMPOSITE_ERROR_CODE",
    "COMPOSITE_ERROR_MESSAGE",
    "CompositeError",
    "composite_validation_error",
    "flatten_composite",
]
