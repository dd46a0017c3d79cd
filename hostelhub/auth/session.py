"""Session manager: who is signed in, and their profile.

One :class:`SessionManager` exists per client process. It is created by
:func:`hostelhub.main.create_app_context` and handed to consumers
explicitly; nothing in the package reaches for it as a global.

State machine::

    AUTHENTICATING --start()--> AUTHENTICATED | UNAUTHENTICATED
    login / register / logout pass through AUTHENTICATING

The user is the single source of truth for the profile: ``profile`` reads
``user.profile``, so a profile always belongs to the current user.

Auth events from the store arrive through a synchronous callback; each one
schedules its own hydration task. A task whose event arrived before the
latest ``login`` or ``logout`` started is discarded when it finishes, so a
logged-out user is never restored by a late handler. Tasks started after
that point may still interleave, and whichever finishes last wins.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from supabase import AsyncClient

from hostelhub.auth import client as auth_client
from hostelhub.errors import HostelHubError, UnauthenticatedError
from hostelhub.schemas.auth import AuthenticatedUser, RegistrationData
from hostelhub.schemas.profile import Profile, ProfileUpdate
from hostelhub.services import profile_service

logger = logging.getLogger(__name__)

Listener = Callable[["SessionManager"], None]


class SessionState(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATING = "authenticating"
    AUTHENTICATED = "authenticated"


@dataclass(frozen=True)
class Hydration:
    """Outcome of loading a user's profile."""

    profile: Profile | None
    error: HostelHubError | None = None

    @property
    def degraded(self) -> bool:
        return self.profile is None


class SessionManager:
    """Tracks the signed-in user and notifies listeners on every change."""

    def __init__(self, client: AsyncClient) -> None:
        self._client = client
        self._state = SessionState.AUTHENTICATING
        self._user: AuthenticatedUser | None = None
        self._listeners: list[Listener] = []
        self._subscription: Any = None
        self._pending: set[asyncio.Task[None]] = set()
        # Bumped by login and logout; event handlers started under an older value are discarded
        self._generation = 0

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def user(self) -> AuthenticatedUser | None:
        return self._user

    @property
    def profile(self) -> Profile | None:
        return self._user.profile if self._user is not None else None

    @property
    def is_authenticated(self) -> bool:
        return self._state is SessionState.AUTHENTICATED

    @property
    def is_loading(self) -> bool:
        return self._state is SessionState.AUTHENTICATING

    def __repr__(self) -> str:
        user_id = self._user.id if self._user else None
        return f"<SessionManager(state={self._state.value}, user_id={user_id})>"

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def start(self) -> None:
        """Subscribe to auth events and resume a stored session, if any.

        Resumption never raises: a missing session or a failed profile load
        ends in ``UNAUTHENTICATED``.
        """
        if self._subscription is not None:
            return
        self._subscription = auth_client.on_auth_state_change(self._client, self._on_auth_change)

        try:
            identity = await auth_client.get_current_identity(self._client)
        except HostelHubError:
            logger.warning("Could not resume the previous session", exc_info=True)
            identity = None
        if identity is None:
            self._set(SessionState.UNAUTHENTICATED, None)
            return

        hydration = await self.hydrate_profile(identity.id)
        if hydration.degraded:
            logger.warning("Not resuming session of user %s without a profile", identity.id)
            self._set(SessionState.UNAUTHENTICATED, None)
            return
        self._set(SessionState.AUTHENTICATED, identity.with_profile(hydration.profile))

    async def close(self) -> None:
        """Stop listening for auth events and let in-flight handlers finish."""
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None
        await self.settle()

    async def settle(self) -> None:
        """Wait until every scheduled auth-event handler has finished."""
        while self._pending:
            await asyncio.gather(*self._pending)

    async def __aenter__(self) -> SessionManager:
        await self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener(manager)`` after every state change.

        Returns a function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set(self, state: SessionState, user: AuthenticatedUser | None) -> None:
        self._state = state
        self._user = user
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("Session listener %r failed", listener)

    def _settle_state(self) -> None:
        """Leave AUTHENTICATING for whatever the held user implies."""
        self._set(
            SessionState.AUTHENTICATED if self._user is not None else SessionState.UNAUTHENTICATED,
            self._user,
        )

    # ------------------------------------------------------------------
    # Profile hydration
    # ------------------------------------------------------------------

    async def hydrate_profile(self, user_id: str) -> Hydration:
        """Load the profile of ``user_id``; failures yield a degraded result."""
        try:
            profile = await profile_service.get_by_id(self._client, user_id)
        except HostelHubError as exc:
            logger.warning("Could not load profile for user %s: %s", user_id, exc)
            return Hydration(profile=None, error=exc)
        return Hydration(profile=profile)

    async def _authenticate(self, identity: AuthenticatedUser) -> AuthenticatedUser:
        hydration = await self.hydrate_profile(identity.id)
        user = identity.with_profile(hydration.profile)
        self._set(SessionState.AUTHENTICATED, user)
        return user

    # ------------------------------------------------------------------
    # Auth operations
    # ------------------------------------------------------------------

    async def login(self, email: str, password: str) -> AuthenticatedUser:
        """Sign in and load the profile.

        A profile that cannot be loaded leaves the session authenticated
        without a profile, as for auth events.

        Raises:
            AuthenticationError: If the credentials are rejected. The session
                is then ``UNAUTHENTICATED``.
        """
        self._generation += 1
        self._set(SessionState.AUTHENTICATING, self._user)
        try:
            identity = await auth_client.sign_in(self._client, email, password)
        except HostelHubError:
            self._set(SessionState.UNAUTHENTICATED, None)
            raise
        return await self._authenticate(identity)

    async def register(self, registration: RegistrationData, password: str) -> AuthenticatedUser | None:
        """Create an account and its profile without signing in.

        The session returns to its previous standing afterwards; an auth
        event from the store, or a later :meth:`login`, authenticates it.
        Event handlers scheduled during sign-up have finished on return.
        """
        self._set(SessionState.AUTHENTICATING, self._user)
        try:
            identity = await auth_client.sign_up(self._client, registration, password)
        finally:
            self._settle_state()

        await self.settle()
        # The sign-up event's profile read may have run before the profile row was written
        if identity is not None and self._user is not None and self._user.id == identity.id and self.profile is None:
            await self._authenticate(self._user)
        return identity

    async def logout(self) -> None:
        """Sign out. Local state is cleared even when the remote call fails.

        Raises:
            AuthenticationError | RemoteUnavailableError: From the remote
                sign-out, after the session has been cleared.
        """
        self._generation += 1
        self._set(SessionState.AUTHENTICATING, self._user)
        try:
            await auth_client.sign_out(self._client)
        finally:
            self._set(SessionState.UNAUTHENTICATED, None)

    async def update_profile(self, changes: ProfileUpdate | None = None, **fields: Any) -> Profile:
        """Update the signed-in user's profile.

        Raises:
            UnauthenticatedError: If no user is signed in. Nothing is sent.
        """
        user = self._user
        if user is None:
            raise UnauthenticatedError("No user logged in")

        profile = await profile_service.update(self._client, user.id, changes or ProfileUpdate(**fields))
        if self._user is not None and self._user.id == user.id:
            self._set(self._state, self._user.with_profile(profile))
        return profile

    # ------------------------------------------------------------------
    # Auth events
    # ------------------------------------------------------------------

    def _on_auth_change(self, event: str, session: Any) -> None:
        task = asyncio.get_running_loop().create_task(self._handle_auth_change(event, session, self._generation))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _handle_auth_change(self, event: str, session: Any, generation: int) -> None:
        remote_user = getattr(session, "user", None) if session is not None else None
        logger.info("Auth event %s (user %s)", event, getattr(remote_user, "id", None))
        if remote_user is None:
            if generation == self._generation:
                self._set(SessionState.UNAUTHENTICATED, None)
            return

        identity = AuthenticatedUser.from_remote(remote_user)
        hydration = await self.hydrate_profile(identity.id)
        if generation != self._generation:
            logger.info("Discarding auth event %s for user %s: superseded by login or logout", event, identity.id)
            return
        self._set(SessionState.AUTHENTICATED, identity.with_profile(hydration.profile))
