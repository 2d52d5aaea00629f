"""
Validation of user payloads.

``validate_user_payload`` checks an untyped, JSON‑decoded payload
against the user field rules and returns either a ``ValidPayload``
holding a typed ``UserInput`` or an ``InvalidPayload`` listing
one message per violated rule.  Every rule is evaluated, so a caller
learns about all problems in a single response rather than one at a
time.

Email syntax is checked with the ``email-validator`` package; the
address is stored and compared for uniqueness exactly as sent.  A
name character counts as a letter when ``str.isalpha`` says so.
"""

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Union

from email_validator import EmailNotValidError, validate_email
from pydantic import ValidationError

from ..schemas.user import AGE_MAX, AGE_MIN, NAME_MIN_LENGTH, UserInput

NOT_AN_OBJECT = "request body must be a JSON object"
MALFORMED_JSON = "request body must be valid JSON"


@dataclass(frozen=True)
class ValidPayload:
    record: UserInput


@dataclass(frozen=True)
class InvalidPayload:
    messages: List[str] = field(default_factory=list)

    @property
    def report(self) -> str:
        """All messages joined into one human‑readable string."""
        return ", ".join(self.messages)


ValidationResult = Union[ValidPayload, InvalidPayload]


def _check_name(value: Any) -> List[str]:
    if not isinstance(value, str):
        return ['"name" must be a string']
    if value == "":
        return ['"name" cannot be empty']
    errors = []
    if len(value) < NAME_MIN_LENGTH:
        errors.append(f'"name" must be at least {NAME_MIN_LENGTH} characters long')
    if not all(char.isalpha() or char.isspace() for char in value):
        errors.append('"name" may only contain letters and spaces')
    return errors


def _check_email(value: Any) -> List[str]:
    if not isinstance(value, str):
        return ['"email" must be a string']
    if value == "":
        return ['"email" cannot be empty']
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return ['"email" must be a valid email address']
    return []


def _check_age(value: Any) -> List[str]:
    # bool is a subclass of int; JSON true/false is not an age.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return ['"age" must be a number']
    errors = []
    if isinstance(value, float) and not value.is_integer():
        errors.append('"age" must be an integer')
    if value < AGE_MIN:
        errors.append(f'"age" must be greater than or equal to {AGE_MIN}')
    if value > AGE_MAX:
        errors.append(f'"age" must be less than or equal to {AGE_MAX}')
    return errors


def _messages_from_pydantic(exc: ValidationError) -> List[str]:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "value"
        messages.append(f'"{location}" {error["msg"]}')
    return messages


def validate_user_payload(payload: Any) -> ValidationResult:
    """Validate ``payload`` and build a ``UserInput`` from it.

    Keys other than ``name``, ``email`` and ``age`` are ignored.  A
    float age with an integral value (``30.0``) is accepted as ``30``;
    numeric strings are rejected.  A ``null`` value fails the type
    rule of its field; only an absent key is reported as required.
    """
    if not isinstance(payload, Mapping):
        return InvalidPayload([NOT_AN_OBJECT])

    messages: List[str] = []
    for name in ("name", "email", "age"):
        if name not in payload:
            messages.append(f'"{name}" is a required field')
            continue
        value = payload[name]
        if name == "name":
            messages.extend(_check_name(value))
        elif name == "email":
            messages.extend(_check_email(value))
        else:
            messages.extend(_check_age(value))

    if messages:
        return InvalidPayload(messages)

    try:
        record = UserInput(name=payload["name"], email=payload["email"], age=int(payload["age"]))
    except ValidationError as exc:
        return InvalidPayload(_messages_from_pydantic(exc))
    return ValidPayload(record)
