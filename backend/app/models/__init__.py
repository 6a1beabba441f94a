from app.models.message import Message
from app.models.user import User, UserCreate

__all__ = [
    "User",
    "UserCreate",
    "Message",
]
