"""
InsureAI: a single-session conversational client for insurance questions.

The orchestration core owns the message thread and the in-flight request;
inference backends and presentations plug in at its edges.
"""

__version__ = "0.1.0"

from .conversation import ConversationState, ConversationStore, Message, Sender
from .inference import (
    InferenceClient,
    InferenceError,
    InferenceRequest,
    InferenceResponse,
    create_inference_client,
)
from .orchestrator import FailureKind, OrchestratorState, ResponseOrchestrator, classify_failure

__all__ = [
    "ConversationState",
    "ConversationStore",
    "FailureKind",
    "InferenceClient",
    "InferenceError",
    "InferenceRequest",
    "InferenceResponse",
    "Message",
    "OrchestratorState",
    "ResponseOrchestrator",
    "Sender",
    "classify_failure",
    "create_inference_client",
]
