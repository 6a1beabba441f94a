"""Tests for the message access predicates."""

import pytest

from app.core.permissions import is_participant, is_recipient
from app.models.message import Message


@pytest.fixture
def message() -> Message:
    return Message(id=1, from_username="alice", to_username="bob", body="hi")


class TestIsParticipant:
    def test_sender_is_participant(self, message):
        assert is_participant("alice", message) is True

    def test_recipient_is_participant(self, message):
        assert is_participant("bob", message) is True

    def test_third_party_is_not_participant(self, message):
        assert is_participant("carol", message) is False

    def test_comparison_is_case_sensitive(self, message):
        assert is_participant("Alice", message) is False

    def test_message_to_self(self):
        note = Message(id=2, from_username="alice", to_username="alice", body="memo")
        assert is_participant("alice", note) is True
        assert is_participant("bob", note) is False


class TestIsRecipient:
    def test_recipient(self, message):
        assert is_recipient("bob", message) is True

    def test_sender_is_not_recipient(self, message):
        assert is_recipient("alice", message) is False

    def test_third_party_is_not_recipient(self, message):
        assert is_recipient("carol", message) is False
