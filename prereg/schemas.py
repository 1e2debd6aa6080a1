"""
Pydantic schemas - Shared reservation validation contract.

The same model validates the registration form on the client and the
request body on the server, so both sides report identical field-level
messages.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, EmailStr, TypeAdapter, ValidationError, field_validator
from pydantic_core import PydanticCustomError

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50

REQUIRED_MESSAGES = {
    "name": "Please enter your name",
    "email": "Please enter your email address",
    "interests": "Please select at least one interest",
}

_email_adapter = TypeAdapter(EmailStr)


class ReservationForm(BaseModel):
    """Validated pre-registration payload."""

    name: str
    email: str
    interests: list[str]

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("name_required", REQUIRED_MESSAGES["name"])
        if len(value) < NAME_MIN_LENGTH:
            raise PydanticCustomError(
                "name_too_short", "Your name must be at least {min} characters", {"min": NAME_MIN_LENGTH}
            )
        if len(value) > NAME_MAX_LENGTH:
            raise PydanticCustomError(
                "name_too_long", "Your name must be at most {max} characters", {"max": NAME_MAX_LENGTH}
            )
        return value

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("email_required", REQUIRED_MESSAGES["email"])
        try:
            return _email_adapter.validate_python(value)
        except ValidationError:
            raise PydanticCustomError("email_invalid", "Please enter a valid email address") from None

    @field_validator("interests")
    @classmethod
    def _check_interests(cls, value: list[str]) -> list[str]:
        if not value:
            raise PydanticCustomError("interests_required", REQUIRED_MESSAGES["interests"])
        return value


def field_errors(errors: Iterable[Mapping[str, Any]]) -> dict[str, list[str]]:
    """
    Flatten pydantic error dicts into a field -> messages map.

    Request body locations (``("body", "name")``) are reduced to the field
    name. Missing fields report the field's "required" message.
    """
    result: dict[str, list[str]] = {}
    for error in errors:
        loc = [part for part in error.get("loc", ()) if part != "body"]
        field = str(loc[0]) if loc else "__root__"
        if error.get("type") == "missing" and field in REQUIRED_MESSAGES:
            message = REQUIRED_MESSAGES[field]
        else:
            message = error.get("msg", "Invalid value")
        result.setdefault(field, []).append(message)
    return result


def validate_reservation(data: Mapping[str, Any]) -> tuple[ReservationForm | None, dict[str, list[str]]]:
    """
    Validate raw form or request data.

    Returns:
        ``(form, {})`` when valid, ``(None, errors)`` otherwise
    """
    try:
        return ReservationForm.model_validate(dict(data)), {}
    except ValidationError as exc:
        return None, field_errors(exc.errors())
