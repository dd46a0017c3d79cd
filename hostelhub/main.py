"""HostelHub client entry point: builds the context handed to the UI layer."""

import logging
from dataclasses import dataclass

from supabase import AsyncClient

from hostelhub.auth.session import SessionManager
from hostelhub.config import Settings, get_settings
from hostelhub.database import create_supabase_client

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings) -> None:
    """Send all hostelhub.* loggers to stderr at the configured level."""
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    if settings.debug:
        logging.getLogger("hostelhub").setLevel(logging.DEBUG)


@dataclass
class AppContext:
    """Settings, the shared Supabase client and the session manager.

    Usage::

        context = await create_app_context()
        async with context:
            await context.session.login(email, password)
            hotels = await hotel_service.get_by_owner(context.client, context.session.profile.id)
    """

    settings: Settings
    client: AsyncClient
    session: SessionManager

    async def __aenter__(self) -> "AppContext":
        await self.session.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.session.close()


async def create_app_context(settings: Settings | None = None) -> AppContext:
    """Configure logging and connect to Supabase.

    Raises:
        ConfigurationError: If no settings are given and the environment
            lacks ``SUPABASE_URL`` or ``SUPABASE_ANON_KEY``.
    """
    settings = settings or get_settings()
    configure_logging(settings)
    client = await create_supabase_client(settings)
    return AppContext(settings=settings, client=client, session=SessionManager(client))
