"""Message service: direct messages between two profiles."""

import logging
import uuid

from supabase import AsyncClient

from hostelhub.database import execute, insert_row
from hostelhub.schemas.message import Message, MessageCreate, MessageDetail

logger = logging.getLogger(__name__)

TABLE = "messages"

# messages has two foreign keys to profiles, so each embed names its constraint
DETAIL_COLUMNS = (
    "*, sender:profiles!messages_sender_id_fkey(*), receiver:profiles!messages_receiver_id_fkey(*)"
)


def _checked_id(value: str) -> str:
    """Return ``value`` as canonical uuid text; ids are spliced into ``or_`` filters."""
    try:
        return str(uuid.UUID(value))
    except (TypeError, ValueError, AttributeError) as exc:
        raise ValueError(f"Invalid user id: {value!r}") from exc


async def get_conversation(client: AsyncClient, user_id: str, other_id: str) -> list[MessageDetail]:
    """Messages exchanged between two users, oldest first."""
    user_id, other_id = _checked_id(user_id), _checked_id(other_id)
    rows = await execute(
        client.table(TABLE)
        .select(DETAIL_COLUMNS)
        .or_(
            f"and(sender_id.eq.{user_id},receiver_id.eq.{other_id}),"
            f"and(sender_id.eq.{other_id},receiver_id.eq.{user_id})"
        )
        .order("created_at")
    )
    return [MessageDetail.model_validate(row) for row in rows]


async def get_conversations(client: AsyncClient, user_id: str) -> list[MessageDetail]:
    """Every message sent or received by ``user_id``, newest first."""
    user_id = _checked_id(user_id)
    rows = await execute(
        client.table(TABLE)
        .select(DETAIL_COLUMNS)
        .or_(f"sender_id.eq.{user_id},receiver_id.eq.{user_id}")
        .order("created_at", desc=True)
    )
    return [MessageDetail.model_validate(row) for row in rows]


def latest_per_counterpart(messages: list[MessageDetail], user_id: str) -> list[MessageDetail]:
    """Collapse a newest-first message list to one entry per conversation partner."""
    seen: set[str] = set()
    latest: list[MessageDetail] = []
    for message in messages:
        other = message.counterpart_id(user_id)
        if other not in seen:
            seen.add(other)
            latest.append(message)
    return latest


async def send(client: AsyncClient, message: MessageCreate) -> Message:
    data = await insert_row(client, TABLE, message.model_dump(mode="json"))
    return Message.model_validate(data)


async def mark_as_read(client: AsyncClient, message_ids: list[str]) -> None:
    """Flag messages as read; unknown ids are ignored."""
    if not message_ids:
        return
    await execute(client.table(TABLE).update({"read": True}).in_("id", message_ids))
    logger.info("Marked %d messages as read", len(message_ids))
