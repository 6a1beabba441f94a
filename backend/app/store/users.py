"""User directory: registration, credential checks and profile lookups."""

from datetime import UTC, datetime

from fastapi import HTTPException, status
from sqlmodel import Session, select

from app.core.security import get_password_hash, verify_password
from app.models.user import User, UserCreate


def register(user_create: UserCreate, db_session: Session) -> User:
    """Create a user with a hashed password. Usernames are unique."""
    if db_session.get(User, user_create.username):
        # Generic error to prevent username enumeration
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Unable to create account",
        )

    now = datetime.now(UTC)
    db_user = User(
        username=user_create.username,
        hashed_password=get_password_hash(user_create.password),
        first_name=user_create.first_name,
        last_name=user_create.last_name,
        phone=user_create.phone,
        join_at=now,
        last_login_at=now,
    )

    db_session.add(db_user)
    db_session.commit()
    db_session.refresh(db_user)

    return db_user


def authenticate(username: str, password: str, db_session: Session) -> User | None:
    """Return the user when the password matches, otherwise None."""
    user = db_session.get(User, username)
    if not user:
        return None
    if not verify_password(password, user.hashed_password):
        return None
    return user


def update_login_timestamp(user: User, db_session: Session) -> User:
    user.last_login_at = datetime.now(UTC)
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


def get_all(db_session: Session) -> list[User]:
    statement = select(User).where(User.is_active).order_by(User.username)
    return list(db_session.exec(statement).all())


def get(username: str, db_session: Session) -> User:
    """Fetch a user by username or raise 404."""
    user = db_session.get(User, username)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return user


def ensure_recipient_exists(username: str, db_session: Session) -> User:
    """Verify recipient exists and is active."""
    recipient = db_session.get(User, username)
    if not recipient or not recipient.is_active:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Recipient not found",
        )
    return recipient
