"""Pydantic schemas for HostelHub records.

Row models mirror the remote tables; ``*Detail`` models add the relations
embedded by join queries; ``*Create`` / ``*Update`` are write payloads.
"""

from hostelhub.schemas.auth import AuthenticatedUser, RegistrationData
from hostelhub.schemas.booking import Booking, BookingCreate, BookingDetail, BookingUpdate
from hostelhub.schemas.hotel import (
    Hotel,
    HotelCreate,
    HotelDetail,
    HotelUpdate,
    Room,
    RoomCreate,
    RoomDetail,
    RoomUpdate,
)
from hostelhub.schemas.message import Message, MessageCreate, MessageDetail
from hostelhub.schemas.notification import BookingNotification, BookingNotificationDetail
from hostelhub.schemas.profile import Profile, ProfileCreate, ProfileUpdate
from hostelhub.schemas.review import Review, ReviewCreate, ReviewDetail, ReviewUpdate

__all__ = [
    "AuthenticatedUser",
    "Booking",
    "BookingCreate",
    "BookingDetail",
    "BookingNotification",
    "BookingNotificationDetail",
    "BookingUpdate",
    "Hotel",
    "HotelCreate",
    "HotelDetail",
    "HotelUpdate",
    "Message",
    "MessageCreate",
    "MessageDetail",
    "Profile",
    "ProfileCreate",
    "ProfileUpdate",
    "RegistrationData",
    "Review",
    "ReviewCreate",
    "ReviewDetail",
    "ReviewUpdate",
    "Room",
    "RoomCreate",
    "RoomDetail",
    "RoomUpdate",
]
