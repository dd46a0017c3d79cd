"""Pydantic v2 schemas for registration and the signed-in identity."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from hostelhub.schemas.profile import ROLE_PATTERN, Profile


class RegistrationData(BaseModel):
    """Fields collected by the sign-up form.

    Validated before anything is sent to the auth service; unknown keys are
    rejected rather than forwarded as user metadata.
    """

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    phone: str | None = Field(None, max_length=32)
    university: str | None = Field(None, max_length=255)
    role: str = Field("user", pattern=ROLE_PATTERN)

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    def user_metadata(self) -> dict[str, Any]:
        """Attributes stored on the auth user alongside the profile row."""
        return {
            "full_name": self.name,
            "role": self.role,
            "phone_number": self.phone,
            "university": self.university,
        }


class AuthenticatedUser(BaseModel):
    """Remote auth identity joined with its profile, if one could be loaded.

    ``profile is None`` on an authenticated user is the degraded state: the
    identity is known but the profile row could not be fetched.
    """

    id: str
    email: str | None = None
    user_metadata: dict[str, Any] = Field(default_factory=dict)
    last_sign_in_at: datetime | None = None
    profile: Profile | None = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_remote(cls, remote_user: Any, profile: Profile | None = None) -> "AuthenticatedUser":
        """Build from the auth client's user object."""
        return cls(
            id=str(remote_user.id),
            email=remote_user.email,
            user_metadata=dict(getattr(remote_user, "user_metadata", None) or {}),
            last_sign_in_at=getattr(remote_user, "last_sign_in_at", None),
            profile=profile,
        )

    def with_profile(self, profile: Profile | None) -> "AuthenticatedUser":
        return self.model_copy(update={"profile": profile})
