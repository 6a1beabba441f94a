"""Password hashing with Argon2id."""

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerifyMismatchError

argon2_ph = PasswordHasher()


def get_password_hash(password: str) -> str:
    return argon2_ph.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        argon2_ph.verify(hashed_password, plain_password)
        return True
    except (VerifyMismatchError, InvalidHashError):
        return False
