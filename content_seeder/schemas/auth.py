"""
Authentication schemas.

Field names are snake_case in Python and camelCase on the wire.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class RegisterRequest(CamelModel):
    """User registration request. Password rules are left to the server."""

    email: str
    username: str
    password: str
    first_name: str
    last_name: str


class LoginRequest(CamelModel):
    """User login request."""

    email_or_username: str
    password: str


class UserInfo(BaseModel):
    """User object returned by register and login."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    id: str = Field(..., min_length=1)
    email: Optional[str] = None
    username: Optional[str] = None


class RegisterData(BaseModel):
    """Data block of a successful registration."""

    model_config = ConfigDict(extra="allow")

    user: UserInfo


class LoginData(BaseModel):
    """Data block of a successful login."""

    model_config = ConfigDict(extra="allow")

    token: str = Field(..., min_length=1)
    user: Optional[UserInfo] = None
