"""Authentication routes and the request identity pipeline."""

# ENDPOINTS:
# POST   /auth/register  - Create account and open a session
# POST   /auth/login     - Verify credentials and open a session
# POST   /auth/logout    - Delete the caller's session
#
# PIPELINE (FastAPI dependencies, in order):
# authenticate_token -> ensure_logged_in -> ensure_correct_user

import asyncio

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel import Session

from app.core.config import settings
from app.core.db import get_db_session
from app.core.logger import logger
from app.core.rate_limiter import RateLimiter, get_client_ip
from app.core.sessions import (
    SessionData,
    create_session,
    delete_session,
    get_session,
    request_token,
)
from app.models.user import User, UserCreate
from app.schemas.auth import (
    LoginRequest,
    LogoutResponse,
    RegisterRequest,
    TokenResponse,
)
from app.store import users as user_store
from app.utils.validation import (
    validate_name,
    validate_password_strength,
    validate_phone,
    validate_username,
)

router = APIRouter(prefix="/auth", tags=["auth"])

bearer_scheme = HTTPBearer(auto_error=False)


def authenticate_token(
    request: Request,
    # declares the bearer scheme in OpenAPI; parsing is done by request_token
    _: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> SessionData | None:
    """
    Resolve the presented token to a session.

    Never fails: a missing, unknown or expired token resolves to None and the
    next stage decides whether that is acceptable.
    """
    token, _from_cookie = request_token(request)
    if not token:
        return None

    session_data = get_session(token)
    request.state.session = session_data
    return session_data


def ensure_logged_in(
    session_data: SessionData | None = Depends(authenticate_token),
    db_session: Session = Depends(get_db_session),
) -> str:
    """
    Require an authenticated caller and return their username.

    Raises:
        HTTPException: If no valid session or the user is gone/inactive
    """
    if session_data is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )

    user = db_session.get(User, session_data.username)
    if not user or not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found or inactive",
        )

    return user.username


def ensure_correct_user(
    username: str,
    current_username: str = Depends(ensure_logged_in),
) -> str:
    """Require the caller to be the user named in the path."""
    if current_username != username:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
    return current_username


def _open_session(user: User, response: Response) -> TokenResponse:
    token, csrf_token = create_session(user.username)

    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
        max_age=settings.SESSION_TIMEOUT_MINUTES * 60,
    )

    return TokenResponse(token=token, csrf_token=csrf_token)


@router.post(
    "/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED
)
def register(
    register_request: RegisterRequest,
    request: Request,
    response: Response,
    db_session: Session = Depends(get_db_session),
) -> TokenResponse:
    """Register a new user and log them in."""
    username = validate_username(register_request.username)

    limited, _, _ = RateLimiter.check("register", get_client_ip(request))
    if limited:
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail="Too many registration attempts",
        )
    RateLimiter.record("register", get_client_ip(request))

    user_create = UserCreate(
        username=username,
        password=register_request.password,
        first_name=validate_name(register_request.first_name, "First name"),
        last_name=validate_name(register_request.last_name, "Last name"),
        phone=validate_phone(register_request.phone),
    )
    validate_password_strength(user_create.password)

    user = user_store.register(user_create, db_session)
    logger.info(f"Registered user {user.username}")

    return _open_session(user, response)


@router.post("/login", response_model=TokenResponse)
async def login(
    login_request: LoginRequest,
    request: Request,
    response: Response,
    db_session: Session = Depends(get_db_session),
) -> TokenResponse:
    """
    Authenticate user and create session.

    Security measures:
    - Rate limiting per username
    - Generic error messages
    - Artificial delay to slow brute-force
    - HttpOnly session cookie alongside the returned token
    """
    username = login_request.username.strip()

    limited, _, _ = RateLimiter.check("login", username)
    if limited:
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail="Too many login attempts",
        )

    RateLimiter.record("login", username)

    if settings.LOGIN_DELAY_SECONDS > 0:
        await asyncio.sleep(settings.LOGIN_DELAY_SECONDS)

    user = user_store.authenticate(username, login_request.password, db_session)

    # Generic error to prevent user enumeration
    if not user:
        logger.warning(f"Failed login for {username}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Account inactive",
        )

    RateLimiter.reset("login", username)
    user_store.update_login_timestamp(user, db_session)
    logger.info(f"User {user.username} logged in")

    return _open_session(user, response)


@router.post("/logout", response_model=LogoutResponse)
def logout(
    request: Request,
    response: Response,
    _: str = Depends(ensure_logged_in),
) -> LogoutResponse:
    """Log out user and delete session."""
    token, _from_cookie = request_token(request)

    if token:
        delete_session(token)

    response.delete_cookie(settings.SESSION_COOKIE_NAME)

    return LogoutResponse(message="Logged out successfully")
