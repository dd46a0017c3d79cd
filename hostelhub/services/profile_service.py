"""Profile service: reads and writes rows of the ``profiles`` table."""

import logging

from supabase import AsyncClient

from hostelhub.database import execute, insert_row, update_row
from hostelhub.schemas.profile import Profile, ProfileCreate, ProfileUpdate

logger = logging.getLogger(__name__)

TABLE = "profiles"


async def get_by_id(client: AsyncClient, profile_id: str) -> Profile:
    """Fetch the profile of a user.

    Raises:
        NotFoundError: If the user has no profile row.
    """
    data = await execute(client.table(TABLE).select("*").eq("id", profile_id).single())
    return Profile.model_validate(data)


async def create(client: AsyncClient, profile: ProfileCreate) -> Profile:
    """Insert the profile row for a freshly signed-up user."""
    logger.info("Creating %s profile for user %s", profile.role, profile.id)
    data = await insert_row(client, TABLE, profile.model_dump(mode="json"))
    return Profile.model_validate(data)


async def update(client: AsyncClient, profile_id: str, changes: ProfileUpdate) -> Profile:
    """Change only the fields set on ``changes`` and return the full profile."""
    data = await update_row(client, TABLE, profile_id, changes.model_dump(mode="json", exclude_unset=True))
    return Profile.model_validate(data)
