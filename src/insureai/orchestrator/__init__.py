"""Response orchestration module for insureai.

Drives one submission at a time from user input to assistant reply.
"""

from .classification import (
    GENERIC_FALLBACK,
    RETRYABLE_FALLBACK,
    FailureKind,
    classify_failure,
    extract_error_payload,
    fallback_message,
)
from .responder import OrchestratorState, ResponseOrchestrator

__all__ = [
    "GENERIC_FALLBACK",
    "RETRYABLE_FALLBACK",
    "FailureKind",
    "OrchestratorState",
    "ResponseOrchestrator",
    "classify_failure",
    "extract_error_payload",
    "fallback_message",
]
