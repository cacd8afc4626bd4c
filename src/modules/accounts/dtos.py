"""Account DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs are immutable (``frozen=True``).

- ``RegisterAccountDTO``: input for registration.
- ``AssignRoleDTO``: input for granting a side-table role.
- ``LoginDTO`` / ``ResetPasswordDTO``: credential checks and password reset.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from modules.accounts.constants import Role


class AccountRoleEnum(StrEnum):
    """Registration role (framework-agnostic mirror of ``AccountRole``)."""

    CLIENT = "Client"
    DELIVERY_MAN = "Delivery Man"


class RegisterAccountDTO(BaseModel):
    """Immutable DTO for registration requests.

    Validates:
    - every field is present and non-blank;
    - ``email`` is a well-formed address (Pydantic ``EmailStr``);
    - ``role`` is ``Client`` or ``Delivery Man``.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(min_length=8)
    phone: str = Field(min_length=1, max_length=20)
    location: str = Field(min_length=1, max_length=255)
    role: AccountRoleEnum

    @field_validator("email")
    @classmethod
    def normalise_email(cls, v: str) -> str:
        return v.lower()


class AssignRoleDTO(BaseModel):
    """Immutable DTO for role assignment requests."""

    model_config = ConfigDict(frozen=True)

    user_id: int = Field(gt=0)
    role: Role


class LoginDTO(BaseModel):
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    email: str = Field(min_length=1)
    password: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def normalise_email(cls, v: str) -> str:
        return v.lower()


class ResetPasswordDTO(BaseModel):
    """The new password follows the same rule as at registration."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    email: EmailStr
    new_password: str = Field(min_length=8)

    @field_validator("email")
    @classmethod
    def normalise_email(cls, v: str) -> str:
        return v.lower()
