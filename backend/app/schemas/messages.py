from datetime import datetime

from pydantic import BaseModel, Field

from app.core.config import settings
from app.schemas.users import UserSummary


class SendMessageRequest(BaseModel):
    """Request to send a message to another user."""

    to_username: str = Field(..., min_length=1, max_length=30)
    body: str = Field(..., min_length=1, max_length=settings.MESSAGE_MAX_LENGTH)


class SentMessage(BaseModel):
    """Message as stored after sending."""

    id: int
    from_username: str
    to_username: str
    body: str
    sent_at: datetime


class SendMessageResponse(BaseModel):
    message: SentMessage


class MessageDetail(BaseModel):
    """Message with both participants' profiles."""

    id: int
    body: str
    sent_at: datetime
    read_at: datetime | None
    from_user: UserSummary
    to_user: UserSummary


class MessageDetailResponse(BaseModel):
    message: MessageDetail


class ReadReceipt(BaseModel):
    id: int
    read_at: datetime


class MarkReadResponse(BaseModel):
    message: ReadReceipt
