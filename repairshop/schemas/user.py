"""User Schemas — request validation and public user representation.

Invariants:
    - UserRequest.username: 3-50 chars, stripped, non-empty
    - UserRequest.email: shaped like an address, stripped
    - UserRequest.password: at least 6 chars on create; empty on update keeps the old one
    - UserResponse carries id, username, email, role and never the password
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from repairshop.core.domain_types import Role

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class UserRequest(BaseModel):
    """User create/update payload."""
    username: str = Field(min_length=3, max_length=50)
    email: str = Field(max_length=255, pattern=EMAIL_PATTERN)
    password: str = Field(max_length=255)
    role: Role

    @field_validator("username", "email", mode="before")
    @classmethod
    def strip_text(cls, v):
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("value cannot be empty or whitespace")
        return v


class UserCreate(UserRequest):
    """Creation requires a real password."""
    password: str = Field(min_length=6, max_length=255)


class UserUpdate(UserRequest):
    """Update accepts an empty password, meaning "keep the current one"."""
    password: str = Field("", max_length=255)

    @field_validator("password")
    @classmethod
    def password_empty_or_long_enough(cls, v: str) -> str:
        if v and len(v) < 6:
            raise ValueError("password must be at least 6 characters")
        return v


class UserResponse(BaseModel):
    """Public-facing user data."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    email: str
    role: Role

