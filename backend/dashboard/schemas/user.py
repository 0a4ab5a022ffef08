"""User Schemas — form validation for user mutations and the public listing shape.

Invariants:
    - name: non-empty, >= 5 chars
    - email: non-empty, syntactically valid address (no DNS lookup)
    - password: non-empty, >= 6 chars (UserUpdateForm: blank means "keep current")
    - One message per field: the first failing rule wins for that field
    - UserResponse never carries the password hash

Design Decisions:
    - mode="before" validators with PydanticCustomError: exact user-facing messages,
      no "Value error, " prefix, and absent fields reach the validator as None
    - email-validator for address grammar (same engine as pydantic's EmailStr)
"""

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, field_validator
from pydantic_core import PydanticCustomError


def _check_min_length(
    value: object, min_length: int, empty_message: str, short_message: str,
) -> str:
    if value is None or value == "":
        raise PydanticCustomError("empty", empty_message)
    if not isinstance(value, str):
        raise PydanticCustomError("string_type", empty_message)
    if len(value) < min_length:
        raise PydanticCustomError("too_short", short_message)
    return value


class _UserIdentityFields(BaseModel):
    name: str
    email: str

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, v: object) -> str:
        return _check_min_length(
            v, 5, "Name cannot be empty", "Name must be at least 5 characters long",
        )

    @field_validator("email", mode="before")
    @classmethod
    def check_email(cls, v: object) -> str:
        if v is None or v == "":
            raise PydanticCustomError("empty", "Email cannot be empty")
        if not isinstance(v, str):
            raise PydanticCustomError("invalid_email", "Invalid email address")
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError:
            raise PydanticCustomError("invalid_email", "Invalid email address")
        return v


class UserForm(_UserIdentityFields):
    """Create/update input — password always required."""
    password: str

    @field_validator("password", mode="before")
    @classmethod
    def check_password(cls, v: object) -> str:
        return _check_min_length(
            v, 6, "Password cannot be empty",
            "Password must be at least 6 characters long",
        )


class UserUpdateForm(_UserIdentityFields):
    """Update input under the when_provided policy — blank password keeps the hash."""
    password: str | None = None

    @field_validator("password", mode="before")
    @classmethod
    def check_password(cls, v: object) -> str | None:
        if v is None or v == "":
            return None
        return _check_min_length(
            v, 6, "Password cannot be empty",
            "Password must be at least 6 characters long",
        )


class UserResponse(BaseModel):
    """Listing row — public-facing user data."""
    id: str
    name: str
    email: str
