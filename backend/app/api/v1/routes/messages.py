"""Message routes - fetch, send and mark-read with participant checks."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from app.api.v1.routes.auth import ensure_logged_in
from app.core.db import get_db_session
from app.core.logger import logger
from app.core.permissions import is_participant, is_recipient
from app.schemas.messages import (
    MarkReadResponse,
    MessageDetail,
    MessageDetailResponse,
    ReadReceipt,
    SendMessageRequest,
    SendMessageResponse,
    SentMessage,
)
from app.schemas.users import UserSummary
from app.store import messages as message_store
from app.store import users as user_store

router = APIRouter(prefix="/messages", tags=["messages"])


@router.get("/{message_id}", response_model=MessageDetailResponse)
def get_message(
    message_id: int,
    current_username: str = Depends(ensure_logged_in),
    db_session: Session = Depends(get_db_session),
) -> MessageDetailResponse:
    """
    Get message detail with sender and recipient profiles.

    Only the sender or the recipient may view a message. A missing message is
    a 404; a message the caller is not part of is a 401.
    """
    message = message_store.get(message_id, db_session)

    if not is_participant(current_username, message):
        logger.warning(
            f"User {current_username} denied access to message {message_id}"
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not associated with requested message",
        )

    from_user = user_store.get(message.from_username, db_session)
    to_user = user_store.get(message.to_username, db_session)

    return MessageDetailResponse(
        message=MessageDetail(
            id=message.id,
            body=message.body,
            sent_at=message.sent_at,
            read_at=message.read_at,
            from_user=UserSummary.from_user(from_user),
            to_user=UserSummary.from_user(to_user),
        )
    )


@router.post(
    "/", response_model=SendMessageResponse, status_code=status.HTTP_201_CREATED
)
def send_message(
    send_request: SendMessageRequest,
    current_username: str = Depends(ensure_logged_in),
    db_session: Session = Depends(get_db_session),
) -> SendMessageResponse:
    """Send a message from the caller to another user."""
    message = message_store.create(
        from_username=current_username,
        to_username=send_request.to_username,
        body=send_request.body,
        db_session=db_session,
    )
    logger.info(
        f"Message {message.id} sent from {message.from_username} "
        f"to {message.to_username}"
    )

    return SendMessageResponse(
        message=SentMessage(
            id=message.id,
            from_username=message.from_username,
            to_username=message.to_username,
            body=message.body,
            sent_at=message.sent_at,
        )
    )


@router.post("/{message_id}/read", response_model=MarkReadResponse)
def mark_as_read(
    message_id: int,
    current_username: str = Depends(ensure_logged_in),
    db_session: Session = Depends(get_db_session),
) -> MarkReadResponse:
    """
    Mark message as read (recipient only).

    Non-recipients get the same 404 as a missing message.
    """
    message = message_store.get(message_id, db_session)

    if not is_recipient(current_username, message):
        logger.warning(
            f"User {current_username} tried to mark message {message_id} read"
        )
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Message not found",
        )

    message = message_store.mark_read(message_id, db_session)
    logger.info(f"Message {message.id} marked read by {current_username}")

    return MarkReadResponse(
        message=ReadReceipt(id=message.id, read_at=message.read_at)
    )
