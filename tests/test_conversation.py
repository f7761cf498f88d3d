"""Unit tests for the conversation module."""
from datetime import datetime

import pytest
from pydantic import ValidationError

from insureai.conversation import ConversationState, ConversationStore, Message, Sender


class TestMessage:
    """Tests for the Message model."""

    def test_create_message(self):
        """Test creating a message with a default timestamp."""
        before = datetime.now()
        message = Message(text="Hi", sender=Sender.USER)

        assert message.text == "Hi"
        assert message.sender == Sender.USER
        assert message.is_user
        assert before <= message.timestamp <= datetime.now()

    def test_sender_accepts_string_values(self):
        """Test that sender can be given as its string value."""
        message = Message(text="Hello", sender="assistant")
        assert message.sender == Sender.ASSISTANT
        assert not message.is_user

    def test_unknown_sender_fails(self):
        """Test that only user and assistant senders are allowed."""
        with pytest.raises(ValidationError):
            Message(text="Hello", sender="system")

    def test_message_is_frozen(self):
        """Test that messages cannot be mutated after creation."""
        message = Message(text="Hi", sender=Sender.USER)
        with pytest.raises(ValidationError):
            message.text = "changed"


class TestConversationStore:
    """Tests for ConversationStore."""

    def test_starts_empty(self, store):
        """Test that a new store has no messages and is not busy."""
        assert store.messages == ()
        assert store.busy is False
        assert len(store) == 0
        assert store.snapshot().is_empty

    def test_append_preserves_order(self, store):
        """Test that messages are kept in insertion order."""
        first = Message(text="one", sender=Sender.USER)
        second = Message(text="two", sender=Sender.ASSISTANT)

        store.append(first)
        store.append(second)

        assert store.messages == (first, second)
        assert len(store) == 2

    def test_messages_view_is_read_only(self, store):
        """Test that the exposed sequence cannot be used to mutate the store."""
        store.append(Message(text="one", sender=Sender.USER))
        view = store.messages

        assert isinstance(view, tuple)
        store.append(Message(text="two", sender=Sender.ASSISTANT))
        assert len(view) == 1

    def test_set_busy(self, store):
        """Test toggling the busy flag."""
        store.set_busy(True)
        assert store.busy is True
        store.set_busy(False)
        assert store.busy is False

    def test_every_mutation_notifies(self, store):
        """Test that listeners see a snapshot after append and set_busy."""
        seen: list[ConversationState] = []
        store.subscribe(seen.append)

        store.append(Message(text="Hi", sender=Sender.USER))
        store.set_busy(True)
        store.set_busy(False)

        assert [(len(s.messages), s.busy) for s in seen] == [(1, False), (1, True), (1, False)]

    def test_unsubscribe(self, store):
        """Test that unsubscribed listeners are no longer called."""
        seen = []
        store.subscribe(seen.append)
        store.unsubscribe(seen.append)

        store.set_busy(True)

        assert seen == []

    def test_failing_listener_does_not_block_mutation(self, store):
        """Test that a raising listener is reported and others still run."""
        logged = []
        seen = []

        def broken(state):
            raise RuntimeError("render failed")

        store.set_debug_callback(lambda level, component, message: logged.append((level, component)))
        store.subscribe(broken)
        store.subscribe(seen.append)

        store.append(Message(text="Hi", sender=Sender.USER))

        assert len(store) == 1
        assert len(seen) == 1
        assert logged == [("error", "Store")]


class TestConversationState:
    """Tests for the ConversationState snapshot."""

    def test_last_reply(self):
        """Test finding the latest assistant message."""
        reply = Message(text="answer", sender=Sender.ASSISTANT)
        state = ConversationState(
            messages=(Message(text="q", sender=Sender.USER), reply, Message(text="q2", sender=Sender.USER))
        )
        assert state.last_reply() == reply

    def test_last_reply_none_without_assistant(self):
        """Test that last_reply is None when the assistant has not spoken."""
        assert ConversationState().last_reply() is None
