"""Pydantic v2 schemas for direct messages between students and owners."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from hostelhub.schemas.profile import Profile


class MessageCreate(BaseModel):
    sender_id: str
    receiver_id: str
    content: str = Field(..., min_length=1, max_length=4000)


class Message(BaseModel):
    id: str
    sender_id: str
    receiver_id: str
    content: str
    read: bool = False
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)

    def counterpart_id(self, user_id: str) -> str:
        """Return the other participant of the conversation seen from ``user_id``."""
        return self.receiver_id if self.sender_id == user_id else self.sender_id


class MessageDetail(Message):
    sender: Profile | None = None
    receiver: Profile | None = None
