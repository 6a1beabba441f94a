"""Message store.

Every write commits and refreshes before returning, so callers always get the
persisted row back.
"""

from datetime import UTC, datetime

from fastapi import HTTPException, status
from sqlmodel import Session, select

from app.core.config import settings
from app.models.message import Message
from app.models.user import User
from app.store.users import ensure_recipient_exists
from app.utils.validation import sanitize_text


def get(message_id: int, db_session: Session) -> Message:
    """Fetch a message by id or raise 404."""
    message = db_session.get(Message, message_id)
    if not message:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Message not found",
        )
    return message


def create(
    from_username: str,
    to_username: str,
    body: str,
    db_session: Session,
) -> Message:
    """Persist a new message; the store assigns id and sent_at."""
    ensure_recipient_exists(to_username, db_session)

    body = sanitize_text(body)
    if not body:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Message body is required",
        )
    if len(body) > settings.MESSAGE_MAX_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Message body exceeds {settings.MESSAGE_MAX_LENGTH} characters",
        )

    db_message = Message(
        from_username=from_username,
        to_username=to_username,
        body=body,
        sent_at=datetime.now(UTC),
    )

    db_session.add(db_message)
    db_session.commit()
    db_session.refresh(db_message)

    return db_message


def mark_read(message_id: int, db_session: Session) -> Message:
    """Set read_at if it is not already set. Repeat calls keep the first value."""
    message = get(message_id, db_session)

    if message.read_at is None:
        message.read_at = datetime.now(UTC)
        db_session.add(message)
        db_session.commit()
        db_session.refresh(message)

    return message


def messages_to(username: str, db_session: Session) -> list[tuple[Message, User]]:
    """Messages received by a user, each paired with its sender."""
    statement = (
        select(Message, User)
        .join(User, Message.from_username == User.username)
        .where(Message.to_username == username)
        .order_by(Message.sent_at, Message.id)
    )
    return list(db_session.exec(statement).all())


def messages_from(username: str, db_session: Session) -> list[tuple[Message, User]]:
    """Messages sent by a user, each paired with its recipient."""
    statement = (
        select(Message, User)
        .join(User, Message.to_username == User.username)
        .where(Message.from_username == username)
        .order_by(Message.sent_at, Message.id)
    )
    return list(db_session.exec(statement).all())
