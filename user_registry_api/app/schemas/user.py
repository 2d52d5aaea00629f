"""
Pydantic models for user data.

``UserInput`` is the validated payload accepted by the create and
replace endpoints and ``UserRead`` is the stored record returned by
every successful response.  The numeric field rules are exported as
module constants so the validator in ``services.validation`` and the
OpenAPI document are built from the same definitions.  Name characters
and email syntax are only checked by the validator; the models merely
describe them.
"""

from pydantic import BaseModel, Field

NAME_MIN_LENGTH = 3
AGE_MIN = 0
AGE_MAX = 120


class UserInput(BaseModel):
    """Schema for creating or replacing a user."""

    name: str = Field(
        ...,
        min_length=NAME_MIN_LENGTH,
        description="Full name; letters and spaces only",
        examples=["Juan Perez"],
    )
    email: str = Field(
        ...,
        description="Email address, stored as sent; must be unique across users",
        examples=["juan@example.com"],
        json_schema_extra={"format": "email"},
    )
    age: int = Field(..., ge=AGE_MIN, le=AGE_MAX, description="Age in years", examples=[30])


class UserRead(UserInput):
    """Schema for reading a user from the API."""

    id: str = Field(..., description="Identifier generated on creation")


class ErrorMessage(BaseModel):
    """Body of every non‑2xx response."""

    message: str
