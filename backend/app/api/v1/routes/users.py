"""User routes - directory listing, profile and per-user mailboxes."""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.api.v1.routes.auth import ensure_correct_user, ensure_logged_in
from app.core.db import get_db_session
from app.schemas.users import (
    ReceivedMessage,
    ReceivedMessagesResponse,
    SentMessagePreview,
    SentMessagesResponse,
    UserDetail,
    UserDetailResponse,
    UserListResponse,
    UserSummary,
)
from app.store import messages as message_store
from app.store import users as user_store

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/", response_model=UserListResponse)
def list_users(
    _: str = Depends(ensure_logged_in),
    db_session: Session = Depends(get_db_session),
) -> UserListResponse:
    """List active users."""
    return UserListResponse(
        users=[
            UserSummary.from_user(user) for user in user_store.get_all(db_session)
        ]
    )


@router.get("/{username}", response_model=UserDetailResponse)
def get_user(
    username: str = Depends(ensure_correct_user),
    db_session: Session = Depends(get_db_session),
) -> UserDetailResponse:
    """Get the caller's own profile."""
    user = user_store.get(username, db_session)
    return UserDetailResponse(
        user=UserDetail(
            username=user.username,
            first_name=user.first_name,
            last_name=user.last_name,
            phone=user.phone,
            join_at=user.join_at,
            last_login_at=user.last_login_at,
        )
    )


@router.get("/{username}/to", response_model=ReceivedMessagesResponse)
def get_messages_to(
    username: str = Depends(ensure_correct_user),
    db_session: Session = Depends(get_db_session),
) -> ReceivedMessagesResponse:
    """Messages received by the caller."""
    return ReceivedMessagesResponse(
        messages=[
            ReceivedMessage(
                id=message.id,
                body=message.body,
                sent_at=message.sent_at,
                read_at=message.read_at,
                from_user=UserSummary.from_user(sender),
            )
            for message, sender in message_store.messages_to(username, db_session)
        ]
    )


@router.get("/{username}/from", response_model=SentMessagesResponse)
def get_messages_from(
    username: str = Depends(ensure_correct_user),
    db_session: Session = Depends(get_db_session),
) -> SentMessagesResponse:
    """Messages sent by the caller."""
    return SentMessagesResponse(
        messages=[
            SentMessagePreview(
                id=message.id,
                body=message.body,
                sent_at=message.sent_at,
                read_at=message.read_at,
                to_user=UserSummary.from_user(recipient),
            )
            for message, recipient in message_store.messages_from(
                username, db_session
            )
        ]
    )
