"""Structured API errors and their rendering as HTTP responses."""

from .composite import (
    COMPOSITE_ERROR_CODE,
    CompositeError,
    composite_validation_error,
    flatten_composite,
)
from .config import ErrorConfig
from .exceptions import (
    APIError,
    ErrorValue,
    MethodNotAllowedError,
    error_in_chain,
    find_error,
    iter_errors,
    method_not_allowed,
    new_error,
    not_found,
    not_implemented,
    unauthenticated,
)
from .http import DEFAULT_HTTP_CODE, MAXIMUM_VALID_HTTP_CODE, Status, as_http_code
from .parsing import ParseError, new_parse_error
from .responses import ErrorRenderer, Response, ResponseWriter, render_error, send_error, serve_error
from .validation import (
    ValidationCode,
    ValidationError,
    additional_items_not_allowed,
    duplicate_items,
    enum_fail,
    exceeds_maximum,
    exceeds_minimum,
    failed_all_pattern_properties,
    failed_pattern,
    invalid_collection_format,
    invalid_content_type,
    invalid_response_format,
    invalid_type,
    invalid_type_name,
    multiple_of_must_be_positive,
    not_multiple_of,
    property_not_allowed,
    read_only,
    required,
    too_few_items,
    too_few_properties,
    too_long,
    too_many_items,
    too_many_properties,
    too_short,
)
from .verification import APIVerificationFailed

__all__ = [
    "APIError",
    "APIVerificationFailed",
    "COMPOSITE_ERROR_CODE",
    "CompositeError",
    "DEFAULT_HTTP_CODE",
    "ErrorConfig",
    "ErrorRenderer",
    "ErrorValue",
    "MAXIMUM_VALID_HTTP_CODE",
    "MethodNotAllowedError",
    "ParseError",
    "Response",
    "ResponseWriter",
    "Status",
    "ValidationCode",
    "ValidationError",
    "additional_items_not_allowed",
    "as_http_code",
    "composite_validation_error",
    "duplicate_items",
    "enum_fail",
    "error_in_chain",
    "exceeds_maximum",
    "exceeds_minimum",
    "failed_all_pattern_properties",
    "failed_pattern",
    "find_error",
    "flatten_composite",
    "invalid_collection_format",
    "invalid_content_type",
    "invalid_response_format",
    "invalid_type",
    "invalid_type_name",
    "iter_errors",
    "method_not_allowed",
    "multiple_of_must_be_positive",
    "new_error",
    "new_parse_error",
    "not_found",
    "not_implemented",
    "not_multiple_of",
    "property_not_allowed",
    "read_only",
    "render_error",
    "required",
    "send_error",
    "serve_error",
    "too_few_items",
    "too_few_properties",
    "too_long",
    "too_many_items",
    "too_many_properties",
    "too_short",
    "unauthenticated",
]
