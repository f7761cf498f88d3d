"""Failure classification for remote inference calls.

Hides how a failure signal is turned into one of two user-facing fallback
replies. The typed ``retryable`` attribute on an error wins; otherwise a
JSON object embedded in the error text is consulted. Anything that cannot
be read is treated as an unknown failure.
"""

import json
from enum import Enum
from typing import Any

RETRYABLE_FALLBACK = (
    "I apologize, but the AI service is temporarily unavailable. "
    "Please try again in a moment."
)

GENERIC_FALLBACK = (
    "I apologize, but I'm experiencing technical difficulties. "
    "Please try again later or contact support if the issue persists."
)


class FailureKind(str, Enum):
    """Category of a failed remote call."""

    RETRYABLE = "retryable"
    UNKNOWN = "unknown"


FALLBACK_MESSAGES = {
    FailureKind.RETRYABLE: RETRYABLE_FALLBACK,
    FailureKind.UNKNOWN: GENERIC_FALLBACK,
}


_DECODER = json.JSONDecoder()


def extract_error_payload(text: str | None) -> dict[str, Any] | None:
    """Parse a structured payload out of an error message.

    The whole text is tried first, then a JSON value starting at each
    ``{`` in turn. The first decoded object wins.

    Args:
        text: Error message text

    Returns:
        The decoded JSON object, or None if there is no object to decode
    """
    if not text or "{" not in text:
        return None

    try:
        payload = json.loads(text)
    except (json.JSONDecodeError, RecursionError):
        payload = None
    if isinstance(payload, dict):
        return payload

    idx = text.find("{")
    while idx != -1:
        try:
            payload, _ = _DECODER.raw_decode(text, idx)
        except (json.JSONDecodeError, RecursionError):
            payload = None
        if isinstance(payload, dict):
            return payload
        idx = text.find("{", idx + 1)
    return None


def _error_text(error: BaseException) -> str | None:
    message = getattr(error, "message", None)
    if isinstance(message, str):
        return message
    return str(error)


def classify_failure(error: BaseException | None) -> FailureKind:
    """Classify a failed remote call.

    Never raises: if the failure signal cannot be interpreted the result
    is FailureKind.UNKNOWN.

    Args:
        error: The exception raised by the remote call, or None when the
            call succeeded but returned no usable reply

    Returns:
        FailureKind.RETRYABLE only when the error marks itself retryable
    """
    if error is None:
        return FailureKind.UNKNOWN

    try:
        retryable = getattr(error, "retryable", None)
        if isinstance(retryable, bool):
            return FailureKind.RETRYABLE if retryable else FailureKind.UNKNOWN

        payload = extract_error_payload(_error_text(error))
        if payload is not None and payload.get("retryable") is True:
            return FailureKind.RETRYABLE
    except Exception:
        return FailureKind.UNKNOWN

    return FailureKind.UNKNOWN


def fallback_message(kind: FailureKind) -> str:
    """Get the canned assistant reply for a failure category."""
    return FALLBACK_MESSAGES.get(kind, GENERIC_FALLBACK)
