from datetime import UTC, datetime

from sqlmodel import Field, SQLModel


class MessageBase(SQLModel):
    """Base message fields."""

    body: str


class Message(MessageBase, table=True):
    """
    Direct message between exactly two users.

    Sender and recipient are fixed at creation; read_at is set once, by the
    recipient.
    """

    id: int | None = Field(default=None, primary_key=True)
    from_username: str = Field(
        foreign_key="user.username", ondelete="CASCADE", index=True
    )
    to_username: str = Field(
        foreign_key="user.username", ondelete="CASCADE", index=True
    )

    sent_at: datetime = Field(default_factory=lambda: datetime.now(UTC), index=True)
    read_at: datetime | None = None
