"""Exception hierarchy shared by the data-access services and the session manager.

Remote failures keep the store's machine-readable ``code`` and ``message``
so callers can show the store's own wording (e.g. a not-null violation).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hostelhub.schemas.booking import Booking


class HostelHubError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(HostelHubError):
    """Required startup configuration is missing or malformed."""


class UnauthenticatedError(HostelHubError):
    """The operation needs a signed-in user and none is set."""


class BookingStateError(HostelHubError):
    """A booking status transition was requested from a non-pending booking."""

    def __init__(self, message: str, *, booking_id: str, status: str) -> None:
        super().__init__(message)
        self.booking_id = booking_id
        self.status = status


class RoomStatusSyncError(BookingStateError):
    """The booking was confirmed but marking its room as booked failed.

    The confirmation is *not* rolled back: ``booking`` holds the confirmed
    record and ``__cause__`` the failure of the room write.
    """

    def __init__(self, message: str, *, booking: Booking) -> None:
        super().__init__(message, booking_id=booking.id, status=booking.status)
        self.booking = booking


class RemoteStoreError(HostelHubError):
    """A failure reported by the hosted store, with its code preserved."""

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        details: str | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details
        self.hint = hint

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(code={self.code!r}, message={self.message!r})>"


class NotFoundError(RemoteStoreError):
    """No record matched a single-record lookup, update, or delete."""


class ConstraintError(RemoteStoreError):
    """The store rejected a write (not-null, unique, foreign key, policy)."""


class AuthenticationError(RemoteStoreError):
    """The remote auth service rejected a sign-up, sign-in, or sign-out."""


class RemoteUnavailableError(RemoteStoreError):
    """The store could not be reached (transport-level failure)."""
