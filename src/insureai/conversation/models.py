"""Data models for the conversation thread.

These models define the shape of a message and of the read-only state
handed to presentations, independent of how the store keeps them.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Sender(str, Enum):
    """Who authored a message."""

    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A single entry in the conversation thread.

    Messages are frozen: once appended they are never modified.
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Message text as shown in the thread")
    sender: Sender = Field(description="Author of the message: 'user' or 'assistant'")
    timestamp: datetime = Field(default_factory=datetime.now)

    @property
    def is_user(self) -> bool:
        return self.sender == Sender.USER


class ConversationState(BaseModel):
    """Read-only snapshot of a conversation.

    This is what presentations render from: the ordered messages and
    whether a remote call is outstanding.
    """

    model_config = ConfigDict(frozen=True)

    messages: tuple[Message, ...] = Field(default_factory=tuple)
    busy: bool = Field(default=False, description="True while a remote call is outstanding")

    @property
    def is_empty(self) -> bool:
        return not self.messages

    def last_reply(self) -> Message | None:
        """Get the most recent assistant message, if any."""
        for message in reversed(self.messages):
            if message.sender == Sender.ASSISTANT:
                return message
        return None
