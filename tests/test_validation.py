from __future__ import annotations

import pytest

from apierrors.serialization import json_decode
from apierrors.validation import (
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


@pytest.mark.parametrize(
    ("factory", "code", "located", "unlocated"),
    [
        (lambda in_: required("something", in_), ValidationCode.REQUIRED_FAIL, "something in query is required", "something is required"),
        (lambda in_: read_only("something", in_), ValidationCode.READ_ONLY_FAIL, "something in query is readOnly", "something is readOnly"),
        (lambda in_: too_long("something", in_, 5, "abcdef"), ValidationCode.TOO_LONG_FAIL, "something in query should be at most 5 chars long", "something should be at most 5 chars long"),
        (lambda in_: too_short("something", in_, 5, "a"), ValidationCode.TOO_SHORT_FAIL, "something in query should be at least 5 chars long", "something should be at least 5 chars long"),
        (lambda in_: failed_pattern("something", in_, "\\d+", "a"), ValidationCode.PATTERN_FAIL, "something in query should match '\\d+'", "something should match '\\d+'"),
        (lambda in_: enum_fail("something", in_, "yada", ["hello", "world"]), ValidationCode.ENUM_FAIL, "something in query should be one of [hello world]", "something should be one of [hello world]"),
        (lambda in_: not_multiple_of("something", in_, 5, 1), ValidationCode.MULTIPLE_OF_FAIL, "something in query should be a multiple of 5", "something should be a multiple of 5"),
        (lambda in_: exceeds_maximum("something", in_, 5, False, 6), ValidationCode.MAX_FAIL, "something in query should be less than or equal to 5", "something should be less than or equal to 5"),
        (lambda in_: exceeds_maximum("something", in_, 5, True, 6), ValidationCode.MAX_FAIL, "something in query should be less than 5", "something should be less than 5"),
        (lambda in_: exceeds_minimum("something", in_, 5, False, 4), ValidationCode.MIN_FAIL, "something in query should be greater than or equal to 5", "something should be greater than or equal to 5"),
        (lambda in_: exceeds_minimum("something", in_, 5, True, 4), ValidationCode.MIN_FAIL, "something in query should be greater than 5", "something should be greater than 5"),
        (lambda in_: duplicate_items("uniques", in_), ValidationCode.UNIQUE_FAIL, "uniques in query shouldn't contain duplicates", "uniques shouldn't contain duplicates"),
        (lambda in_: too_many_items("something", in_, 5, 6), ValidationCode.MAX_ITEMS_FAIL, "something in query should have at most 5 items", "something should have at most 5 items"),
        (lambda in_: too_few_items("something", in_, 5, 4), ValidationCode.MIN_ITEMS_FAIL, "something in query should have at least 5 items", "something should have at least 5 items"),
        (lambda in_: additional_items_not_allowed("something", in_), ValidationCode.NO_ADDITIONAL_ITEMS, "something in query can't have additional items", "something can't have additional items"),
        (lambda in_: too_few_properties("path", in_, 10), ValidationCode.TOO_FEW_PROPERTIES, "path in query should have at least 10 properties", "path should have at least 10 properties"),
        (lambda in_: too_many_properties("path", in_, 10), ValidationCode.TOO_MANY_PROPERTIES, "path in query should have at most 10 properties", "path should have at most 10 properties"),
        (lambda in_: property_not_allowed("path", in_, "key"), ValidationCode.UNALLOWED_PROPERTY, "path.key in query is a forbidden property", "path.key is a forbidden property"),
        (lambda in_: failed_all_pattern_properties("path", in_, "key"), ValidationCode.FAILED_ALL_PATTERN_PROPERTIES, "path.key in query failed all pattern properties", "path.key failed all pattern properties"),
        (lambda in_: invalid_type("confirmed", in_, "boolean", None), ValidationCode.INVALID_TYPE, "confirmed in query must be of type boolean", "confirmed must be of type boolean"),
    ],
)
def test_location_clause_follows_in(factory, code, located, unlocated) -> None:
    with_location = factory("query")
    assert with_location.code == code
    assert str(with_location) == located
    assert with_location.in_ == "query"

    without_location = factory("")
    assert without_location.code == code
    assert str(without_location) == unlocated
    assert without_location.in_ == ""


def test_invalid_type_describes_value() -> None:
    err = invalid_type("confirmed", "query", "boolean", "hello")
    assert str(err) == 'confirmed in query must be of type boolean: "hello"'
    err = invalid_type("confirmed", "", "boolean", ValueError("hello"))
    assert str(err) == "confirmed must be of type boolean, because: hello"
    err = invalid_type("confirmed", "query", "boolean", 12)
    assert str(err) == "confirmed in query must be of type boolean"


def test_offending_values_are_kept() -> None:
    assert too_many_items("something", "", 5, 6).value == 6
    assert too_long("something", "", 5, "abcdef").value == "abcdef"
    assert required("something", "query").value is None
    enum = enum_fail("something", "query", "yada", ["hello", "world"])
    assert enum.value == "yada"
    assert enum.values == ["hello", "world"]


def test_float_limits_render_like_integers() -> None:
    assert str(not_multiple_of("something", "query", 5.0, 1.0)) == "something in query should be a multiple of 5"
    assert str(exceeds_maximum("something", "", 2.5, True, 3.0)) == "something should be less than 2.5"
    err = multiple_of_must_be_positive("path", "body", -10.0)
    assert err.code == ValidationCode.MULTIPLE_OF_MUST_BE_POSITIVE
    assert str(err) == "factor MultipleOf declared for path must be positive: -10"
    assert err.value == -10.0


def test_type_name_and_collection_format() -> None:
    err = invalid_type_name("something")
    assert err.code == 601
    assert str(err) == "something is an invalid type name"

    err = invalid_collection_format("something", "query", "yada")
    assert err.code == ValidationCode.INVALID_TYPE
    assert str(err) == 'the collection format "yada" is not supported for the query param "something"'


def test_media_type_errors() -> None:
    err = invalid_content_type("application/saml", ["application/json", "application/x-yaml"])
    assert err.code == 415
    assert str(err) == (
        'unsupported media type "application/saml", only [application/json application/x-yaml] are allowed'
    )
    assert (err.name, err.in_) == ("Content-Type", "header")

    err = invalid_response_format("application/saml", ["application/json", "application/x-yaml"])
    assert err.code == 406
    assert str(err) == "unsupported media type requested, only [application/json application/x-yaml] are available"
    assert (err.name, err.in_) == ("Accept", "header")


def test_structured_body() -> None:
    err = invalid_content_type("myValue", ["a", "b"])
    expected = {
        "code": 415,
        "message": 'unsupported media type "myValue", only [a b] are allowed',
        "name": "Content-Type",
        "in": "header",
        "value": "myValue",
        "values": ["a", "b"],
    }
    assert err.to_dict() == expected
    assert json_decode(err.to_json()) == expected


def test_invalid_type_body_stringifies_exception_value() -> None:
    err = invalid_type("confirmed", "query", "boolean", ValueError("hello"))
    assert json_decode(err.to_json())["value"] == "hello"


def test_validate_name_with_existing_name() -> None:
    err = ValidationError(602, "myMessage", name="myValidation")
    assert err.validate_name("") is err

    qualified = err.validate_name("myNewName")
    assert qualified.name == "myNewName.myValidation"
    assert qualified.message == "myNewName.myMessage"
    assert qualified.code == 602
    assert (err.name, err.message) == ("myValidation", "myMessage")


def test_validate_name_without_name() -> None:
    err = ValidationError(602, "myMessage")
    assert err.validate_name("").message == "myMessage"

    qualified = err.validate_name("myNewName")
    assert qualified.name == "myNewName"
    assert qualified.message == "myNewNamemyMessage"


def test_validate_name_compounds_when_repeated() -> None:
    err = required("id", "body").validate_name("item").validate_name("item")
    assert err.name == "item.item.id"
    assert str(err) == "item.item.id in body is required"


def test_body_stringifies_unsupported_values() -> None:
    class Money:
        def __str__(self) -> str:
            return "12.50 EUR"

    err = exceeds_maximum("price", "body", 10, False, Money())
    body = json_decode(err.to_json())
    assert body["value"] == "12.50 EUR"
    assert body["message"] == "price in body should be less than or equal to 10"
