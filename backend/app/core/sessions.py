"""Session tokens - opaque Redis keys that resolve to a caller username."""

from __future__ import annotations

import json
import secrets
import time
from dataclasses import asdict, dataclass
from datetime import datetime, timedelta, timezone

import redis
from fastapi import Request
from fastapi.security.utils import get_authorization_scheme_param

from app.core.config import settings
from app.core.logger import logger

redis_client: redis.Redis | None = None

REDIS_CONNECT_ATTEMPTS = 5


@dataclass
class SessionData:
    """Caller identity plus the CSRF token bound to it."""

    username: str
    csrf_token: str
    created_at: datetime

    def is_expired(self) -> bool:
        """Absolute lifetime, independent of the sliding Redis TTL."""
        expiry_time = self.created_at + timedelta(
            minutes=settings.SESSION_TIMEOUT_MINUTES
        )
        return datetime.now(timezone.utc) > expiry_time


def _get_redis_client() -> redis.Redis:
    """Connect on first use, retrying while Redis comes up."""
    global redis_client

    if redis_client is not None:
        return redis_client

    last_error = None
    for attempt in range(1, REDIS_CONNECT_ATTEMPTS + 1):
        try:
            client = redis.from_url(settings.REDIS_URL, decode_responses=True)
            client.ping()
        except redis.RedisError as exc:
            last_error = exc
            logger.warning(
                f"Redis connection attempt {attempt}/{REDIS_CONNECT_ATTEMPTS} failed: "
                f"{exc}"
            )
            if attempt < REDIS_CONNECT_ATTEMPTS:
                time.sleep(2.0)
            continue

        redis_client = client
        logger.info(f"Connected to Redis (attempt {attempt})")
        return redis_client

    raise RuntimeError(f"Redis connection failed: {last_error}")


def init_redis() -> None:
    _get_redis_client()


def _key(token: str) -> str:
    return settings.REDIS_SESSION_PREFIX + token


def request_token(request: Request) -> tuple[str | None, bool]:
    """
    Find the session token on a request.

    A well-formed ``Authorization: Bearer <token>`` header wins; any other
    Authorization scheme is ignored and the session cookie is used instead.

    Returns:
        Tuple of (token or None, True if the token came from the cookie)
    """
    scheme, credentials = get_authorization_scheme_param(
        request.headers.get("Authorization")
    )
    if scheme.lower() == "bearer" and credentials:
        return credentials, False

    cookie = request.cookies.get(settings.SESSION_COOKIE_NAME)
    return cookie or None, bool(cookie)


def create_session(username: str) -> tuple[str, str]:
    """
    Open a session for a username.

    Returns:
        Tuple of (token, csrf_token)
    """
    token = secrets.token_urlsafe(settings.SESSION_ID_LENGTH)
    session_data = SessionData(
        username=username,
        csrf_token=secrets.token_urlsafe(32),
        created_at=datetime.now(timezone.utc),
    )

    payload = asdict(session_data)
    payload["created_at"] = session_data.created_at.isoformat()
    _get_redis_client().setex(
        _key(token),
        settings.SESSION_TIMEOUT_MINUTES * 60,
        json.dumps(payload),
    )

    return token, session_data.csrf_token


def get_session(token: str) -> SessionData | None:
    """Resolve a token, sliding its TTL forward. Unknown or expired -> None."""
    client = _get_redis_client()
    data = client.get(_key(token))

    if data is None:
        return None

    payload = json.loads(data)
    session_data = SessionData(
        username=payload["username"],
        csrf_token=payload["csrf_token"],
        created_at=datetime.fromisoformat(payload["created_at"]),
    )

    if session_data.is_expired():
        delete_session(token)
        return None

    client.expire(_key(token), settings.SESSION_TIMEOUT_MINUTES * 60)
    return session_data


def delete_session(token: str) -> bool:
    """Returns True if a session was removed."""
    return _get_redis_client().delete(_key(token)) > 0
