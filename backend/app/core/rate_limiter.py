"""Redis-backed rate limiting for the auth endpoints."""

from datetime import datetime, timedelta, timezone

from fastapi import Request

from app.core.config import settings
from app.core.sessions import _get_redis_client


def get_rate_limits(scope: str) -> dict:
    return {
        "login": {
            "max": settings.LOGIN_RATE_LIMIT_MAX,
            "window": settings.LOGIN_RATE_LIMIT_WINDOW,
        },
        "register": {"max": 10, "window": 3600},
    }.get(scope, {"max": 100, "window": 60})


def _key(scope: str, identifier: str) -> str:
    return f"ratelimit:{scope}:{identifier}"


class RateLimiter:
    @staticmethod
    def check(scope: str, identifier: str) -> tuple[bool, int, datetime | None]:
        """Return (limited, remaining attempts, reset time)."""
        limits = get_rate_limits(scope)
        client = _get_redis_client()
        key = _key(scope, identifier)

        pipe = client.pipeline()
        pipe.get(key)
        pipe.ttl(key)
        current_str, ttl = pipe.execute()

        current = int(current_str or 0)
        remaining = max(0, limits["max"] - current)
        reset = datetime.now(timezone.utc) + timedelta(seconds=ttl) if ttl > 0 else None

        return current >= limits["max"], remaining, reset

    @staticmethod
    def record(scope: str, identifier: str) -> None:
        limits = get_rate_limits(scope)
        client = _get_redis_client()
        key = _key(scope, identifier)
        client.pipeline().incr(key).expire(key, limits["window"]).execute()

    @staticmethod
    def reset(scope: str, identifier: str) -> None:
        """Clear the counter, e.g. after a successful login."""
        _get_redis_client().delete(_key(scope, identifier))


def get_client_ip(request: Request) -> str:
    xff = request.headers.get("X-Forwarded-For", "")
    if xff:
        return xff.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip.strip()

    return request.client.host if request.client else "127.0.0.1"
