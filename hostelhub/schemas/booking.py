"""Pydantic v2 schemas for room bookings."""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from hostelhub.schemas.hotel import RoomDetail
from hostelhub.schemas.profile import Profile

BOOKING_STATUS_PATTERN = "^(pending|confirmed|cancelled)$"
VALID_BOOKING_STATUSES = ("pending", "confirmed", "cancelled")

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class BookingCreate(BaseModel):
    """Schema for a student's reservation request."""

    room_id: str
    user_id: str
    check_in_date: date
    check_out_date: date
    total_price: Decimal = Field(..., ge=0)
    status: str = Field("pending", pattern=BOOKING_STATUS_PATTERN)

    @model_validator(mode="after")
    def check_dates(self) -> "BookingCreate":
        """Validate that check_out_date is strictly after check_in_date."""
        if self.check_out_date <= self.check_in_date:
            raise ValueError("check_out_date must be after check_in_date")
        return self


class BookingUpdate(BaseModel):
    """Schema for partially updating a booking. All fields optional."""

    check_in_date: date | None = None
    check_out_date: date | None = None
    total_price: Decimal | None = Field(None, ge=0)
    status: str | None = Field(None, pattern=BOOKING_STATUS_PATTERN)

    @model_validator(mode="after")
    def check_dates(self) -> "BookingUpdate":
        """If both dates are provided, validate check_out_date > check_in_date."""
        if (
            self.check_in_date is not None
            and self.check_out_date is not None
            and self.check_out_date <= self.check_in_date
        ):
            raise ValueError("check_out_date must be after check_in_date")
        return self


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class Booking(BaseModel):
    """Booking row as stored."""

    id: str
    room_id: str
    user_id: str
    check_in_date: date
    check_out_date: date
    total_price: Decimal
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)

    @property
    def is_pending(self) -> bool:
        return self.status == "pending"


class BookingDetail(Booking):
    """Booking with its room and booker embedded.

    ``room.hotel`` is only populated by owner-scoped queries, which join
    through the hostel to filter by owner.
    """

    room: RoomDetail | None = None
    user: Profile | None = None
