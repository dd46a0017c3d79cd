"""Pydantic v2 schemas for user profiles."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

ROLE_PATTERN = "^(user|owner|admin)$"

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class ProfileCreate(BaseModel):
    """Profile row written right after a successful sign-up."""

    id: str
    email: EmailStr
    full_name: str | None = Field(None, max_length=255)
    role: str = Field("user", pattern=ROLE_PATTERN)
    phone_number: str | None = Field(None, max_length=32)
    university: str | None = Field(None, max_length=255)


class ProfileUpdate(BaseModel):
    """Schema for partially updating a profile. All fields optional."""

    full_name: str | None = Field(None, max_length=255)
    phone_number: str | None = Field(None, max_length=32)
    university: str | None = Field(None, max_length=255)
    avatar_url: str | None = Field(None, max_length=512)
    role: str | None = Field(None, pattern=ROLE_PATTERN)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class Profile(BaseModel):
    """Application-level identity record, keyed by the auth user id."""

    id: str
    email: str
    full_name: str | None = None
    role: str = "user"
    phone_number: str | None = None
    university: str | None = None
    avatar_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True, frozen=True)

    @property
    def is_owner(self) -> bool:
        return self.role == "owner"
