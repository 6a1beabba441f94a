"""Tests for the Redis-backed rate limiter."""

from app.core.config import settings
from app.core.rate_limiter import RateLimiter
from tests.helpers import PASSWORD, register


class TestRateLimiter:
    def test_counts_down_to_limit(self):
        for _ in range(settings.LOGIN_RATE_LIMIT_MAX - 1):
            RateLimiter.record("login", "alice")

        limited, remaining, reset = RateLimiter.check("login", "alice")
        assert limited is False
        assert remaining == 1
        assert reset is not None

        RateLimiter.record("login", "alice")
        limited, remaining, _ = RateLimiter.check("login", "alice")
        assert limited is True
        assert remaining == 0

    def test_scopes_are_independent(self):
        for _ in range(settings.LOGIN_RATE_LIMIT_MAX):
            RateLimiter.record("login", "alice")

        assert RateLimiter.check("login", "bob")[0] is False
        assert RateLimiter.check("register", "alice")[0] is False

    def test_reset(self):
        RateLimiter.record("login", "alice")
        RateLimiter.reset("login", "alice")

        assert RateLimiter.check("login", "alice") == (
            False,
            settings.LOGIN_RATE_LIMIT_MAX,
            None,
        )

    def test_successful_login_clears_failures(self, client):
        register(client, "alice")
        for _ in range(settings.LOGIN_RATE_LIMIT_MAX - 1):
            client.post(
                "/api/v1/auth/login", json={"username": "alice", "password": "nope"}
            )

        response = client.post(
            "/api/v1/auth/login", json={"username": "alice", "password": PASSWORD}
        )

        assert response.status_code == 200
        assert RateLimiter.check("login", "alice")[1] == settings.LOGIN_RATE_LIMIT_MAX
