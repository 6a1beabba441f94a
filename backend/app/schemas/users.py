from datetime import datetime

from pydantic import BaseModel

from app.models.user import User


class UserSummary(BaseModel):
    """Public profile fields shown alongside messages."""

    username: str
    first_name: str
    last_name: str
    phone: str

    @classmethod
    def from_user(cls, user: User) -> "UserSummary":
        return cls(
            username=user.username,
            first_name=user.first_name,
            last_name=user.last_name,
            phone=user.phone,
        )


class UserDetail(UserSummary):
    """Full profile for the owning user."""

    join_at: datetime
    last_login_at: datetime | None


class UserListResponse(BaseModel):
    users: list[UserSummary]


class UserDetailResponse(BaseModel):
    user: UserDetail


class ReceivedMessage(BaseModel):
    """Message in a user's inbox, with the sender's profile."""

    id: int
    body: str
    sent_at: datetime
    read_at: datetime | None
    from_user: UserSummary


class SentMessagePreview(BaseModel):
    """Message in a user's outbox, with the recipient's profile."""

    id: int
    body: str
    sent_at: datetime
    read_at: datetime | None
    to_user: UserSummary


class ReceivedMessagesResponse(BaseModel):
    messages: list[ReceivedMessage]


class SentMessagesResponse(BaseModel):
    messages: list[SentMessagePreview]
