"""Validation errors reported by schema validators and request binders.

Every factory comes with two message templates: one naming the location the
value was read from (``"age in query ..."``) and one used when the location is
unknown (``"age ..."``).
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Iterable

from .exceptions import APIError, format_value, format_values, quote
from .http import MAXIMUM_VALID_HTTP_CODE, Status


class ValidationCode(IntEnum):
    """Application defined codes, all at or above ``MAXIMUM_VALID_HTTP_CODE``."""

    INVALID_TYPE = MAXIMUM_VALID_HTTP_CODE + 1
    REQUIRED_FAIL = MAXIMUM_VALID_HTTP_CODE + 2
    TOO_LONG_FAIL = MAXIMUM_VALID_HTTP_CODE + 3
    TOO_SHORT_FAIL = MAXIMUM_VALID_HTTP_CODE + 4
    PATTERN_FAIL = MAXIMUM_VALID_HTTP_CODE + 5
    ENUM_FAIL = MAXIMUM_VALID_HTTP_CODE + 6
    MULTIPLE_OF_FAIL = MAXIMUM_VALID_HTTP_CODE + 7
    MAX_FAIL = MAXIMUM_VALID_HTTP_CODE + 8
    MIN_FAIL = MAXIMUM_VALID_HTTP_CODE + 9
    UNIQUE_FAIL = MAXIMUM_VALID_HTTP_CODE + 10
    MAX_ITEMS_FAIL = MAXIMUM_VALID_HTTP_CODE + 11
    MIN_ITEMS_FAIL = MAXIMUM_VALID_HTTP_CODE + 12
    NO_ADDITIONAL_ITEMS = MAXIMUM_VALID_HTTP_CODE + 13
    TOO_FEW_PROPERTIES = MAXIMUM_VALID_HTTP_CODE + 14
    TOO_MANY_PROPERTIES = MAXIMUM_VALID_HTTP_CODE + 15
    UNALLOWED_PROPERTY = MAXIMUM_VALID_HTTP_CODE + 16
    FAILED_ALL_PATTERN_PROPERTIES = MAXIMUM_VALID_HTTP_CODE + 17
    MULTIPLE_OF_MUST_BE_POSITIVE = MAXIMUM_VALID_HTTP_CODE + 18
    READ_ONLY_FAIL = MAXIMUM_VALID_HTTP_CODE + 19


class ValidationError(APIError):
    """A value failed a validation rule."""

    def __init__(
        self,
        code: int,
        message: str,
        *,
        name: str = "",
        in_: str = "",
        value: Any = None,
        values: Iterable[Any] | None = None,
    ) -> None:
        super().__init__(code, message)
        self.name = name
        self.in_ = in_
        self.value = value
        self.values: list[Any] | None = list(values) if values is not None else None

    def validate_name(self, prefix: str) -> "ValidationError":
        """Return a copy whose name and message are qualified by ``prefix``.

        Nothing guards against applying the same prefix twice.
        """

        if not prefix:
            return self
        if not self.name:
            name = prefix
            message = prefix + self.message
        else:
            name = f"{prefix}.{self.name}"
            message = f"{prefix}.{self.message}"
        qualified = ValidationError(
            self.code, message, name=name, in_=self.in_, value=self.value, values=self.values
        )
        qualified.__cause__ = self.__cause__
        return qualified

    def to_dict(self) -> dict[str, Any]:
        body = super().to_dict()
        body.update(
            {
                "name": self.name,
                "in": self.in_,
                "value": self.value,
                "values": self.values,
            }
        )
        return body


def _located(name: str, in_: str, tail: str) -> str:
    if in_:
        return f"{name} in {in_} {tail}"
    return f"{name} {tail}"


def invalid_type_name(type_name: str) -> ValidationError:
    return ValidationError(ValidationCode.INVALID_TYPE, f"{type_name} is an invalid type name")


def invalid_type(name: str, in_: str, type_name: str, value: Any) -> ValidationError:
    """Report that ``value`` could not be read as ``type_name``."""

    tail = f"must be of type {type_name}"
    if isinstance(value, str):
        tail = f"{tail}: {quote(value)}"
    elif isinstance(value, BaseException):
        tail = f"{tail}, because: {value}"
    return ValidationError(
        ValidationCode.INVALID_TYPE, _located(name, in_, tail), name=name, in_=in_, value=value
    )


def invalid_collection_format(name: str, in_: str, format: str) -> ValidationError:
    message = f"the collection format {quote(format)} is not supported for the {in_} param {quote(name)}"
    return ValidationError(ValidationCode.INVALID_TYPE, message, name=name, in_=in_, value=format)


def required(name: str, in_: str, value: Any = None) -> ValidationError:
    return ValidationError(
        ValidationCode.REQUIRED_FAIL, _located(name, in_, "is required"), name=name, in_=in_, value=value
    )


def read_only(name: str, in_: str, value: Any = None) -> ValidationError:
    return ValidationError(
        ValidationCode.READ_ONLY_FAIL, _located(name, in_, "is readOnly"), name=name, in_=in_, value=value
    )


def too_long(name: str, in_: str, maximum: int, value: Any) -> ValidationError:
    tail = f"should be at most {maximum} chars long"
    return ValidationError(
        ValidationCode.TOO_LONG_FAIL, _located(name, in_, tail), name=name, in_=in_, value=value
    )


def too_short(name: str, in_: str, minimum: int, value: Any) -> ValidationError:
    tail = f"should be at least {minimum} chars long"
    return ValidationError(
        ValidationCode.TOO_SHORT_FAIL, _located(name, in_, tail), name=name, in_=in_, value=value
    )


def failed_pattern(name: str, in_: str, pattern: str, value: Any) -> ValidationError:
    tail = f"should match '{pattern}'"
    return ValidationError(
        ValidationCode.PATTERN_FAIL, _located(name, in_, tail), name=name, in_=in_, value=value
    )


def enum_fail(name: str, in_: str, value: Any, values: Iterable[Any]) -> ValidationError:
    allowed = list(values)
    tail = f"should be one of {format_values(allowed)}"
    return ValidationError(
        ValidationCode.ENUM_FAIL,
        _located(name, in_, tail),
        name=name,
        in_=in_,
        value=value,
        values=allowed,
    )


def not_multiple_of(name: str, in_: str, multiple: Any, value: Any) -> ValidationError:
    tail = f"should be a multiple of {format_value(multiple)}"
    return ValidationError(
        ValidationCode.MULTIPLE_OF_FAIL, _located(name, in_, tail), name=name, in_=in_, value=value
    )


def multiple_of_must_be_positive(name: str, in_: str, factor: Any) -> ValidationError:
    message = f"factor MultipleOf declared for {name} must be positive: {format_value(factor)}"
    return ValidationError(
        ValidationCode.MULTIPLE_OF_MUST_BE_POSITIVE, message, name=name, in_=in_, value=factor
    )


def exceeds_maximum(name: str, in_: str, maximum: Any, exclusive: bool, value: Any) -> ValidationError:
    """Report a value above ``maximum`` (or equal to it when ``exclusive``)."""

    comparison = "less than" if exclusive else "less than or equal to"
    tail = f"should be {comparison} {format_value(maximum)}"
    return ValidationError(
        ValidationCode.MAX_FAIL, _located(name, in_, tail), name=name, in_=in_, value=value
    )


def exceeds_minimum(name: str, in_: str, minimum: Any, exclusive: bool, value: Any) -> ValidationError:
    """Report a value below ``minimum`` (or equal to it when ``exclusive``)."""

    comparison = "greater than" if exclusive else "greater than or equal to"
    tail = f"should be {comparison} {format_value(minimum)}"
    return ValidationError(
        ValidationCode.MIN_FAIL, _located(name, in_, tail), name=name, in_=in_, value=value
    )


def duplicate_items(name: str, in_: str) -> ValidationError:
    return ValidationError(
        ValidationCode.UNIQUE_FAIL, _located(name, in_, "shouldn't contain duplicates"), name=name, in_=in_
    )


def too_many_items(name: str, in_: str, maximum: int, value: Any) -> ValidationError:
    tail = f"should have at most {maximum} items"
    return ValidationError(
        ValidationCode.MAX_ITEMS_FAIL, _located(name, in_, tail), name=name, in_=in_, value=value
    )


def too_few_items(name: str, in_: str, minimum: int, value: Any) -> ValidationError:
    tail = f"should have at least {minimum} items"
    return ValidationError(
        ValidationCode.MIN_ITEMS_FAIL, _located(name, in_, tail), name=name, in_=in_, value=value
    )


def additional_items_not_allowed(name: str, in_: str) -> ValidationError:
    return ValidationError(
        ValidationCode.NO_ADDITIONAL_ITEMS,
        _located(name, in_, "can't have additional items"),
        name=name,
        in_=in_,
    )


def too_few_properties(name: str, in_: str, minimum: int) -> ValidationError:
    tail = f"should have at least {minimum} properties"
    return ValidationError(
        ValidationCode.TOO_FEW_PROPERTIES, _located(name, in_, tail), name=name, in_=in_, value=minimum
    )


def too_many_properties(name: str, in_: str, maximum: int) -> ValidationError:
    tail = f"should have at most {maximum} properties"
    return ValidationError(
        ValidationCode.TOO_MANY_PROPERTIES, _located(name, in_, tail), name=name, in_=in_, value=maximum
    )


def property_not_allowed(name: str, in_: str, key: str) -> ValidationError:
    """Report ``key`` as a property ``name`` does not declare."""

    message = _located(f"{name}.{key}", in_, "is a forbidden property")
    return ValidationError(ValidationCode.UNALLOWED_PROPERTY, message, name=name, in_=in_, value=key)


def failed_all_pattern_properties(name: str, in_: str, key: str) -> ValidationError:
    message = _located(f"{name}.{key}", in_, "failed all pattern properties")
    return ValidationError(
        ValidationCode.FAILED_ALL_PATTERN_PROPERTIES, message, name=name, in_=in_, value=key
    )


def invalid_content_type(value: str, allowed: Iterable[str]) -> ValidationError:
    """The request ``Content-Type`` is not one the operation consumes."""

    values = list(allowed)
    message = f"unsupported media type {quote(value)}, only {format_values(values)} are allowed"
    return ValidationError(
        Status.UNSUPPORTED_MEDIA_TYPE,
        message,
        name="Content-Type",
        in_="header",
        value=value,
        values=values,
    )


def invalid_response_format(value: str, allowed: Iterable[str]) -> ValidationError:
    """None of the ``Accept`` media types can be produced."""

    values = list(allowed)
    message = f"unsupported media type requested, only {format_values(values)} are available"
    return ValidationError(
        Status.NOT_ACCEPTABLE,
        message,
        name="Accept",
        in_="header",
        value=value,
        values=values,
    )


__all__ = [
    "ValidationCode",
    "ValidationError",
    "additional_items_not_allowed",
    "duplicate_items",
    "enum_fail",
    "exceeds_maximum",
    "exceeds_minimum",
    "failed_all_pattern_properties",
    "failed_pattern",
    "invalid_collection_format",
    "invalid_content_type",
    "invalid_response_format",
    "invalid_type",
    "invalid_type_name",
    "multiple_of_must_be_positive",
    "not_multiple_of",
    "property_not_allowed",
    "read_only",
    "required",
    "too_few_items",
    "too_few_properties",
    "too_long",
    "too_many_items",
    "too_many_properties",
    "too_short",
]
