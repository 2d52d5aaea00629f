import pytest

from user_registry_api.app.schemas.user import UserInput
from user_registry_api.app.services.validation import (
    MALFORMED_JSON,
    NOT_AN_OBJECT,
    InvalidPayload,
    ValidPayload,
    validate_user_payload,
)


def test_valid_payload_builds_user_input(juan):
    result = validate_user_payload(juan)
    assert isinstance(result, ValidPayload)
    assert result.record == UserInput(name="Juan Perez", email="juan@example.com", age=30)


def test_unknown_keys_are_dropped(juan):
    result = validate_user_payload({**juan, "id": "forged", "role": "admin"})
    assert isinstance(result, ValidPayload)
    assert set(result.record.model_dump()) == {"name", "email", "age"}


def test_integral_float_age_becomes_int(juan):
    result = validate_user_payload({**juan, "age": 30.0})
    assert isinstance(result, ValidPayload)
    assert result.record.age == 30
    assert isinstance(result.record.age, int)


def test_email_is_kept_as_sent(juan):
    result = validate_user_payload({**juan, "email": "Juan@EXAMPLE.com"})
    assert result.record.email == "Juan@EXAMPLE.com"


def test_unicode_letters_allowed_in_name(juan):
    result = validate_user_payload({**juan, "name": "José Núñez"})
    assert isinstance(result, ValidPayload)


@pytest.mark.parametrize("age", [0, 120])
def test_age_bounds_are_inclusive(juan, age):
    assert isinstance(validate_user_payload({**juan, "age": age}), ValidPayload)


def test_missing_fields_are_all_reported():
    result = validate_user_payload({})
    assert isinstance(result, InvalidPayload)
    assert result.messages == [
        '"name" is a required field',
        '"email" is a required field',
        '"age" is a required field',
    ]
    assert result.report == (
        '"name" is a required field, "email" is a required field, "age" is a required field'
    )


def test_every_violated_rule_is_collected():
    result = validate_user_payload({"name": "J1", "email": "not-an-email", "age": 130})
    assert result.messages == [
        '"name" must be at least 3 characters long',
        '"name" may only contain letters and spaces',
        '"email" must be a valid email address',
        '"age" must be less than or equal to 120',
    ]


@pytest.mark.parametrize(
    "name, expected",
    [
        (123, ['"name" must be a string']),
        ("", ['"name" cannot be empty']),
        ("Jo", ['"name" must be at least 3 characters long']),
        ("Juan_Perez", ['"name" may only contain letters and spaces']),
        (None, ['"name" must be a string']),
        ("Juan\u00b2", ['"name" may only contain letters and spaces']),
        ("Ana 3", ['"name" may only contain letters and spaces']),
    ],
)
def test_name_rules(juan, name, expected):
    assert validate_user_payload({**juan, "name": name}).messages == expected


@pytest.mark.parametrize(
    "email, expected",
    [
        (42, ['"email" must be a string']),
        (None, ['"email" must be a string']),
        ("", ['"email" cannot be empty']),
        ("juan.example.com", ['"email" must be a valid email address']),
    ],
)
def test_email_rules(juan, email, expected):
    assert validate_user_payload({**juan, "email": email}).messages == expected


@pytest.mark.parametrize(
    "age, expected",
    [
        ("30", ['"age" must be a number']),
        (True, ['"age" must be a number']),
        (None, ['"age" must be a number']),
        (30.5, ['"age" must be an integer']),
        (-1, ['"age" must be greater than or equal to 0']),
        (121, ['"age" must be less than or equal to 120']),
        (-0.5, ['"age" must be an integer', '"age" must be greater than or equal to 0']),
    ],
)
def test_age_rules(juan, age, expected):
    assert validate_user_payload({**juan, "age": age}).messages == expected


@pytest.mark.parametrize("payload", [None, [], "Juan", 3])
def test_non_object_payload(payload):
    assert validate_user_payload(payload).messages == [NOT_AN_OBJECT]


def test_malformed_json_message_is_distinct():
    assert MALFORMED_JSON != NOT_AN_OBJECT
