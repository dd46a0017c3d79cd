"""Pydantic v2 schemas for booking reviews."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from hostelhub.schemas.booking import BookingDetail
from hostelhub.schemas.profile import Profile


class ReviewCreate(BaseModel):
    """Schema for reviewing a completed booking."""

    booking_id: str
    user_id: str
    rating: int = Field(..., ge=1, le=5)
    comment: str | None = None


class ReviewUpdate(BaseModel):
    """Schema for editing a review. All fields optional."""

    rating: int | None = Field(None, ge=1, le=5)
    comment: str | None = None


class Review(BaseModel):
    id: str
    booking_id: str
    user_id: str
    rating: int
    comment: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class ReviewDetail(Review):
    """Review with the reviewed booking (room, optionally hostel) and its author."""

    booking: BookingDetail | None = None
    user: Profile | None = None
