"""Message access policy.

Pure predicates over a caller username and a message record. Routes gate on
these before touching the store, so the policy can be tested without I/O.
"""

from app.models.message import Message


def is_participant(username: str, message: Message) -> bool:
    """True when the caller sent or received the message."""
    return username == message.from_username or username == message.to_username


def is_recipient(username: str, message: Message) -> bool:
    """True when the caller is the message recipient."""
    return username == message.to_username
