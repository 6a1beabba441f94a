import re

import regex
from fastapi import HTTPException, status
from zxcvbn import zxcvbn

from app.core.config import settings

USERNAME_REGEX = re.compile(r"^[A-Za-z0-9_.-]{3,30}$")
NAME_REGEX = regex.compile(
    r"^[\p{L}\s\'\-\u2013]{2,50}$", regex.UNICODE | regex.IGNORECASE
)
PHONE_REGEX = re.compile(r"^[0-9+\-() ]{7,20}$")


def validate_password_strength(
    password: str,
) -> None:
    """Validate password strength using zxcvbn."""
    if not password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Password is required",
        )

    if (
        len(password) < settings.MIN_PASSWORD_LENGTH
        or len(password) > settings.MAX_PASSWORD_LENGTH
    ):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=(
                f"Password must be {settings.MIN_PASSWORD_LENGTH}-"
                f"{settings.MAX_PASSWORD_LENGTH} characters"
            ),
        )

    requirements = {
        "uppercase letter": any(c.isupper() for c in password),
        "lowercase letter": any(c.islower() for c in password),
        "digit": any(c.isdigit() for c in password),
        "special character": any(
            c in r"!@#$%^&*()_+-=[]{};:'\",.<>?/\\|`~" for c in password
        ),
    }

    missing = [label for label, ok in requirements.items() if not ok]
    if missing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Password must contain: {', '.join(missing)}",
        )

    analysis = zxcvbn(password)
    score = analysis.get("score", 0)
    if score <= 3:  # zxcvbn score 0-4
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Password is too weak. Use a longer passphrase with mixed characters.",
        )


def validate_username(username: str) -> str:
    """Validate username format and return it stripped."""
    username = (username or "").strip()
    if not USERNAME_REGEX.match(username):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username must be 3-30 letters, digits, '.', '_' or '-'",
        )
    return username


def validate_name(name: str, field_name: str = "Name") -> str:
    """Validate name format and return normalized name."""
    if not name or not name.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{field_name} is required",
        )

    name = name.strip()

    if len(name) < 2 or len(name) > 50:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{field_name} must be 2-50 characters",
        )

    if not NAME_REGEX.match(name):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{field_name} contains invalid characters",
        )

    return name


def validate_phone(phone: str) -> str:
    phone = (phone or "").strip()
    if not PHONE_REGEX.match(phone):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid phone number",
        )
    return phone


def sanitize_text(value: str) -> str:
    """
    Sanitize free text:
    - Remove null bytes and control characters (newlines and tabs are kept)
    - Strip surrounding whitespace
    """
    value = re.sub(r"[\x00-\x08\x0B-\x0C\x0E-\x1F\x7F]", "", value)
    return value.strip()
