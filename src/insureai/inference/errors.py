"""Failure signal raised by inference clients.

An InferenceError always carries its detail as message text. Clients in
this package also embed a JSON payload such as ``{"retryable": true}`` in
that text and set the typed ``retryable`` attribute, so callers can
classify a failure either way.
"""

import json
from typing import Any


class InferenceError(Exception):
    """Raised when the remote inference call fails."""

    def __init__(
        self,
        message: str,
        retryable: bool | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.retryable = retryable
        self.status_code = status_code

    @classmethod
    def from_payload(
        cls,
        payload: dict[str, Any],
        message: str | None = None,
        status_code: int | None = None,
    ) -> "InferenceError":
        """Build an error whose message text is the JSON-encoded payload.

        Args:
            payload: Structured error details; ``retryable`` is copied to
                the typed attribute when it is a bool
            message: Optional human-readable summary stored under "error"
            status_code: HTTP status code, if the failure came from one

        Returns:
            InferenceError with the payload embedded in its message
        """
        body = dict(payload)
        if message is not None:
            body.setdefault("error", message)
        retryable = body.get("retryable")
        return cls(
            json.dumps(body),
            retryable=retryable if isinstance(retryable, bool) else None,
            status_code=status_code,
        )

    def __repr__(self) -> str:
        return (
            f"InferenceError({self.message!r}, retryable={self.retryable!r}, "
            f"status_code={self.status_code!r})"
        )


class InvalidResponseError(InferenceError):
    """The endpoint answered but the reply is missing, empty or malformed."""

    def __init__(self, message: str = "Invalid response from AI service") -> None:
        super().__init__(message, retryable=False)
