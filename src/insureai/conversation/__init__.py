"""Conversation module for insureai.

Provides the session-only message log and busy flag.
"""

from .models import ConversationState, Message, Sender
from .store import ConversationStore, Listener

__all__ = [
    "ConversationState",
    "ConversationStore",
    "Listener",
    "Message",
    "Sender",
]
