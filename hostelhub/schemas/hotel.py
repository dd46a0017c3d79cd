"""Pydantic v2 schemas for hostels (``hotels`` table) and their rooms."""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from hostelhub.schemas.profile import Profile

ROOM_STATUS_PATTERN = "^(available|booked|maintenance)$"
VALID_ROOM_STATUSES = ("available", "booked", "maintenance")


def parse_amenities(value: Any) -> Any:
    """Accept the comma separated form typed into the dashboard forms.

    ``"WiFi, Security,,Laundry"`` becomes ``["WiFi", "Security", "Laundry"]``;
    ``None`` from the store becomes an empty list.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


Amenities = Annotated[list[str], BeforeValidator(parse_amenities)]

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class HotelCreate(BaseModel):
    """Schema for creating a new hostel."""

    owner_id: str
    name: str = Field(..., min_length=1, max_length=255)
    address: str | None = Field(None, max_length=255)
    contact_number: str | None = Field(None, max_length=32)
    description: str | None = None
    amenities: Amenities = Field(default_factory=list)


class HotelUpdate(BaseModel):
    """Schema for partially updating a hostel. All fields optional."""

    name: str | None = Field(None, min_length=1, max_length=255)
    address: str | None = Field(None, max_length=255)
    contact_number: str | None = Field(None, max_length=32)
    description: str | None = None
    amenities: Amenities | None = None


class RoomCreate(BaseModel):
    """Schema for adding a room to a hostel."""

    hotel_id: str
    room_number: str = Field(..., min_length=1, max_length=32)
    type: str = Field(..., min_length=1, max_length=64)  # Single, Double, Triple, ...
    price: Decimal = Field(..., gt=0)
    status: str = Field("available", pattern=ROOM_STATUS_PATTERN)
    floor_number: int | None = None
    room_category: str | None = Field(None, max_length=64)
    description: str | None = None
    amenities: Amenities = Field(default_factory=list)


class RoomUpdate(BaseModel):
    """Schema for partially updating a room. All fields optional."""

    room_number: str | None = Field(None, min_length=1, max_length=32)
    type: str | None = Field(None, min_length=1, max_length=64)
    price: Decimal | None = Field(None, gt=0)
    status: str | None = Field(None, pattern=ROOM_STATUS_PATTERN)
    floor_number: int | None = None
    room_category: str | None = Field(None, max_length=64)
    description: str | None = None
    amenities: Amenities | None = None


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class Hotel(BaseModel):
    """A hostel listed by an owner."""

    id: str
    owner_id: str
    name: str
    address: str | None = None
    contact_number: str | None = None
    description: str | None = None
    amenities: Amenities = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class Room(BaseModel):
    """A bookable room; belongs to exactly one hostel."""

    id: str
    hotel_id: str
    room_number: str
    type: str
    price: Decimal
    status: str = "available"
    floor_number: int | None = None
    room_category: str | None = None
    description: str | None = None
    amenities: Amenities = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class HotelDetail(Hotel):
    """Hostel with its rooms and, on public listings, its owner's profile."""

    rooms: list[Room] = Field(default_factory=list)
    owner: Profile | None = None


class RoomDetail(Room):
    """Room with its parent hostel embedded."""

    hotel: Hotel | None = None
