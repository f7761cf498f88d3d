"""Response orchestration for one conversation session.

Owns the submission cycle: guard the input, record the user's message,
call the inference client, and append either its reply or a fallback.
At most one remote call is outstanding; submissions that arrive while
one is in flight are dropped, not queued.
"""

import contextlib
from enum import Enum
from typing import Any

from ..conversation import ConversationStore, Message, Sender
from ..inference import InferenceClient, InferenceRequest, InvalidResponseError
from ..prompts import get_assistant_context
from .classification import FailureKind, classify_failure, fallback_message


class OrchestratorState(str, Enum):
    """Lifecycle of a submission cycle."""

    IDLE = "idle"
    SUBMITTING = "submitting"


def _truncate(text: str, max_len: int = 50) -> str:
    return text if len(text) <= max_len else text[:max_len] + "..."


class ResponseOrchestrator:
    """State machine governing submission cycles.

    Presentations read ``messages`` and ``busy`` (or subscribe to
    ``store``) and call ``submit`` when the user sends text.

    Example:
        orchestrator = ResponseOrchestrator(client)
        await orchestrator.submit("What does comprehensive coverage include?")
        for message in orchestrator.messages:
            print(message.sender.value, message.text)
    """

    def __init__(
        self,
        client: InferenceClient,
        store: ConversationStore | None = None,
        context: str | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            client: Inference client used for every remote call
            store: Conversation store to write to (a new one if omitted)
            context: Context string sent with each message (defaults to
                the packaged assistant context)
        """
        self._client = client
        self._store = store if store is not None else ConversationStore()
        self._context = context if context is not None else get_assistant_context()
        self._state = OrchestratorState.IDLE
        self._pending_input = ""
        self._last_failure: FailureKind | None = None
        self._debug_callback: Any = None

    @property
    def store(self) -> ConversationStore:
        return self._store

    @property
    def client(self) -> InferenceClient:
        return self._client

    @property
    def context(self) -> str:
        return self._context

    @property
    def messages(self) -> tuple[Message, ...]:
        """Read-only thread, in display order."""
        return self._store.messages

    @property
    def busy(self) -> bool:
        return self._store.busy

    @property
    def state(self) -> OrchestratorState:
        return self._state

    @property
    def pending_input(self) -> str:
        """Text typed but not yet submitted."""
        return self._pending_input

    @property
    def last_failure(self) -> FailureKind | None:
        """Failure category of the most recent cycle (None after a success)."""
        return self._last_failure

    def set_pending_input(self, text: str) -> None:
        """Update the pending-input buffer."""
        self._pending_input = text

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback for detailed execution logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
                      level: 'debug', 'info', 'warning', 'error'
                      component: Source component name
                      message: Log message
        """
        self._debug_callback = callback
        self._store.set_debug_callback(callback)

    def _debug(self, level: str, component: str, message: str) -> None:
        if self._debug_callback:
            with contextlib.suppress(Exception):
                self._debug_callback(level, component, message)

    async def submit(self, raw_input: str) -> bool:
        """Run one submission cycle.

        Empty or whitespace-only input, and input that arrives while a
        previous cycle is still in flight, are ignored.

        Args:
            raw_input: Text exactly as the user typed it

        Returns:
            True if the submission was accepted, False if it was dropped
        """
        if not isinstance(raw_input, str) or not raw_input.strip():
            self._debug("debug", "Orchestrator", "Ignoring empty submission")
            return False
        if self._state == OrchestratorState.SUBMITTING:
            self._debug("warning", "Orchestrator", "Request in flight, dropping submission")
            return False

        self._state = OrchestratorState.SUBMITTING
        try:
            self._store.append(Message(text=raw_input, sender=Sender.USER))
            self._pending_input = ""
            self._store.set_busy(True)
            self._debug("info", "Orchestrator", f"Submitting: '{_truncate(raw_input)}'")

            try:
                reply = await self._request_reply(raw_input)
                self._last_failure = None
            except Exception as e:
                reply = self._fallback_for(e)

            self._store.append(Message(text=reply, sender=Sender.ASSISTANT))
        finally:
            self._state = OrchestratorState.IDLE
            self._store.set_busy(False)

        return True

    async def _request_reply(self, raw_input: str) -> str:
        """Call the inference client and return a non-empty reply.

        Raises:
            InferenceError: If the call fails
            InvalidResponseError: If the reply is missing or empty
        """
        request = InferenceRequest(message=raw_input, context=self._context)
        self._debug("debug", "Inference", f"Calling {self._client.name}")
        response = await self._client.invoke(request)

        if not response.has_reply:
            raise InvalidResponseError()

        self._debug("info", "Inference", f"Reply received ({len(response.response)} chars)")
        return response.response

    def _fallback_for(self, error: Exception) -> str:
        """Classify a failure, report it, and return the canned reply."""
        kind = classify_failure(error)
        self._last_failure = kind
        self._debug("error", "Inference", f"Remote call failed ({kind.value}): {error!r}")
        return fallback_message(kind)
