"""Remote auth helpers wrapping the Supabase auth client.

Sign-up also writes the matching ``profiles`` row, so every registered
identity has a profile from the start.
"""

import logging
from collections.abc import Callable
from typing import Any

from supabase import AsyncClient

from hostelhub.database import translate_errors
from hostelhub.schemas.auth import AuthenticatedUser, RegistrationData
from hostelhub.schemas.profile import ProfileCreate
from hostelhub.services import profile_service

logger = logging.getLogger(__name__)

AuthChangeCallback = Callable[[str, Any], None]


async def sign_up(client: AsyncClient, registration: RegistrationData, password: str) -> AuthenticatedUser | None:
    """Register a new account and create its profile.

    Returns the new identity (without profile), or ``None`` when the auth
    service accepted the request without returning a user.

    Raises:
        AuthenticationError: If the auth service rejects the sign-up.
        ConstraintError: If the profile row cannot be written.
    """
    logger.info("Signing up %s as %s", registration.email, registration.role)
    async with translate_errors():
        response = await client.auth.sign_up(
            {
                "email": registration.email,
                "password": password,
                "options": {"data": registration.user_metadata()},
            }
        )

    if response.user is None:
        return None

    await profile_service.create(
        client,
        ProfileCreate(
            id=str(response.user.id),
            email=response.user.email or registration.email,
            full_name=registration.name,
            role=registration.role,
            phone_number=registration.phone,
            university=registration.university,
        ),
    )
    return AuthenticatedUser.from_remote(response.user)


async def sign_in(client: AsyncClient, email: str, password: str) -> AuthenticatedUser:
    """Sign in with email and password.

    Raises:
        AuthenticationError: On invalid credentials or an unconfirmed account.
    """
    async with translate_errors():
        response = await client.auth.sign_in_with_password({"email": email, "password": password})
    logger.info("Signed in user %s", response.user.id)
    return AuthenticatedUser.from_remote(response.user)


async def sign_out(client: AsyncClient) -> None:
    async with translate_errors():
        await client.auth.sign_out()


async def get_current_identity(client: AsyncClient) -> AuthenticatedUser | None:
    """Return the user of the stored session without its profile, or ``None``."""
    async with translate_errors():
        response = await client.auth.get_user()
    if response is None or response.user is None:
        return None
    return AuthenticatedUser.from_remote(response.user)


async def get_current_user(client: AsyncClient) -> AuthenticatedUser | None:
    """Return the user of the stored session with its profile, or ``None``.

    Raises:
        NotFoundError: If the session's user has no profile row.
    """
    identity = await get_current_identity(client)
    if identity is None:
        return None
    return identity.with_profile(await profile_service.get_by_id(client, identity.id))


def on_auth_state_change(client: AsyncClient, callback: AuthChangeCallback) -> Any:
    """Register ``callback(event, session)`` for auth events.

    Returns the subscription; call its ``unsubscribe()`` to stop listening.
    """
    return client.auth.on_auth_state_change(callback)
