"""In-memory conversation store.

Holds the message log and busy flag for one session. Data is lost when
the application exits.
"""

import contextlib
from collections.abc import Callable
from typing import Any

from .models import ConversationState, Message

Listener = Callable[[ConversationState], Any]


class ConversationStore:
    """Single source of truth for the message sequence and busy flag.

    Every mutation notifies subscribed listeners with a fresh snapshot so
    presentations can re-render.

    A submission cycle produces four notifications: user message appended,
    busy set, reply appended (still busy), busy cleared. The snapshot with
    the reply and ``busy=True`` is transient; listeners should render from
    each snapshot as it arrives rather than infer completion from it.
    """

    def __init__(self) -> None:
        self._messages: list[Message] = []
        self._busy = False
        self._listeners: list[Listener] = []
        self._debug_callback: Any = None

    @property
    def messages(self) -> tuple[Message, ...]:
        """Messages in display order."""
        return tuple(self._messages)

    @property
    def busy(self) -> bool:
        return self._busy

    def __len__(self) -> int:
        return len(self._messages)

    def snapshot(self) -> ConversationState:
        """Get the current state as an immutable snapshot."""
        return ConversationState(messages=tuple(self._messages), busy=self._busy)

    def append(self, message: Message) -> None:
        """Add a message to the end of the thread."""
        self._messages.append(message)
        self._notify()

    def set_busy(self, flag: bool) -> None:
        """Set the busy flag."""
        self._busy = bool(flag)
        self._notify()

    def subscribe(self, listener: Listener) -> None:
        """Register a listener called with a snapshot after each mutation."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        """Remove a previously registered listener."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback for listener failures.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback

    def _notify(self) -> None:
        state = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception as e:
                # Listener failures never abort a mutation
                if self._debug_callback:
                    with contextlib.suppress(Exception):
                        self._debug_callback("error", "Store", f"Listener {listener!r} failed: {e}")
