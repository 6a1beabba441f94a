from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file="../.env",
        env_ignore_empty=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "Messagely"
    PROJECT_VERSION: str = "1.0.0"
    DESCRIPTION: str = "Backend API for Messagely direct messaging"

    DATABASE_URI: str = "sqlite:///./messagely.db"

    # Endpoints
    API_V1_STR: str = "/api/v1"

    # Redis
    REDIS_URL: str = "redis://localhost:6379/0"

    SESSION_COOKIE_NAME: str = "sessionId"
    SESSION_COOKIE_SECURE: bool = True
    SESSION_TIMEOUT_MINUTES: int = 60 * 24
    SESSION_ID_LENGTH: int = 32
    REDIS_SESSION_PREFIX: str = "session:"

    # CORS Settings
    ALLOWED_ORIGINS: str = "https://localhost,https://127.0.0.1"
    ALLOW_CREDENTIALS: bool = True
    ALLOW_METHODS: list[str] = ["*"]
    ALLOW_HEADERS: list[str] = ["*"]

    # Logging
    LOG_FILE: str = "messagely.log"
    LOG_LEVEL: str = "INFO"

    # Login hardening
    LOGIN_DELAY_SECONDS: float = 0.1
    LOGIN_RATE_LIMIT_MAX: int = 5
    LOGIN_RATE_LIMIT_WINDOW: int = 300

    # Validation
    MIN_PASSWORD_LENGTH: int = 8
    MAX_PASSWORD_LENGTH: int = 128
    MESSAGE_MAX_LENGTH: int = 5000


settings = Settings()
