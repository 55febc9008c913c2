# shop_api/application/dtos/user_dto.py

"""
Schemas for user data.

This module defines DTOs (Data Transfer Objects) for validating and
serializing data related to users: registration, login, profile output
and authentication tokens.
"""

from uuid import UUID
from datetime import datetime
from typing import Optional
from pydantic import EmailStr, field_validator, Field

from shop_api.application.dtos.base_dto import CustomBaseModel, invalid
from shop_api.domain.models.user_role import UserRole
from shop_api.shared.utils.input_validation import InputValidator


def _check_email(v: str) -> str:
    is_valid, _ = InputValidator.validate_email(v)
    if not is_valid:
        if len(v) > InputValidator.MAX_EMAIL_LENGTH:
            raise invalid("email_too_long", max=InputValidator.MAX_EMAIL_LENGTH)
        raise invalid("email_invalid")
    return v


def _check_password(v: str) -> str:
    is_valid, _ = InputValidator.validate_password(v)
    if not is_valid:
        if len(v) < InputValidator.MIN_PASSWORD_LENGTH:
            raise invalid("password_too_short", min=InputValidator.MIN_PASSWORD_LENGTH)
        raise invalid("password_too_long", max=InputValidator.MAX_PASSWORD_BYTES)
    return v


class UserLogin(CustomBaseModel):
    """
    Schema for user login.

    Used for user authentication via email and password.
    """

    email: EmailStr = Field(
        ...,
        description="Email of the user. Must be a valid and registered email.",
    )
    password: str = Field(
        ...,
        description="User's password, with a minimum of 6 characters."
    )

    @field_validator("email")
    def validate_email(cls, v):
        """
        Validates the format of the email.

        Raises:
            PydanticCustomError: If the email is invalid
        """
        return _check_email(v)

    @field_validator("password")
    def validate_password(cls, v):
        return _check_password(v)


class UserCreate(CustomBaseModel):
    """
    Schema for registering a new user.
    """
    username: str = Field(..., description="Display name, 1 to 100 characters.")
    email: EmailStr = Field(..., description="Email of the user. Must be a valid and unique email.")
    password: str = Field(..., description="User's password, with a minimum of 6 characters.")
    role: UserRole = Field(..., description="One of: admin, user, manager.")
    avatar: Optional[str] = Field(None, description="Optional avatar URL.")

    @field_validator("username")
    def validate_username(cls, v):
        is_valid, _ = InputValidator.validate_username(v)
        if not is_valid:
            if not v:
                raise invalid("username_required")
            raise invalid("username_too_long", max=InputValidator.MAX_USERNAME_LENGTH)
        return v

    @field_validator("email")
    def validate_email(cls, v):
        return _check_email(v)

    @field_validator("password")
    def validate_password(cls, v):
        return _check_password(v)

    @field_validator("role", mode="before")
    def validate_role(cls, v):
        """Rejects anything outside the closed set of roles with a single message."""
        if v not in UserRole.values():
            raise invalid("role_invalid")
        return v


class UserOutput(CustomBaseModel):
    """
    Schema for returning user data.

    Never carries the password hash.
    """
    id: UUID = Field(..., description="User's unique identifier.")
    username: str = Field(..., description="User's display name.")
    email: str = Field(..., description="Email of the user.")
    role: UserRole = Field(..., description="User's role.")
    avatar: Optional[str] = Field(None, description="Avatar URL, if any.")
    created_at: Optional[datetime] = Field(None, description="User creation date and time.")
    updated_at: Optional[datetime] = Field(None, description="Date and time of the last update.")


########################################################################
# Response envelopes
########################################################################
class UserRegisteredResponse(CustomBaseModel):
    message: str = Field(..., description="Confirmation message.")
    data: UserOutput


class UserDataResponse(CustomBaseModel):
    data: UserOutput


class TokenResponse(CustomBaseModel):
    """
    Schema for the login response.
    """
    token: str = Field(..., description="Signed bearer token.")


class MessageResponse(CustomBaseModel):
    message: str
