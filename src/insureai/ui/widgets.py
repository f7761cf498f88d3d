"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Message bubble rendering
- Incremental thread rendering from conversation snapshots
- Busy indicator placement
- Input enable/disable while a request is in flight
- Log rendering and level filtering
"""

from datetime import datetime

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message as TextualMessage
from textual.widgets import Button, Input, LoadingIndicator, RichLog, Static

from ..conversation import ConversationState, Message, Sender
from .config import (
    BUSY_LABEL,
    GREETING,
    INPUT_PLACEHOLDER,
    LOG_MAX_MESSAGE_LENGTH,
    LOG_TIMESTAMP_FORMAT,
    MESSAGE_TIMESTAMP_FORMAT,
    LogLevel,
)


class MessageBubble(Vertical):
    """A single message in the thread.

    Clicking the bubble copies its text to the clipboard.
    """

    def __init__(self, message: Message, *args, **kwargs) -> None:
        side = "user-message" if message.is_user else "assistant-message"
        super().__init__(*args, classes=f"chat-message {side}", **kwargs)
        self.message = message

    def compose(self) -> ComposeResult:
        prefix = "You" if self.message.is_user else "Assistant"
        timestamp = self.message.timestamp.strftime(MESSAGE_TIMESTAMP_FORMAT)
        yield Static(f"{prefix} [{timestamp}]", classes="message-header", markup=False)
        yield Static(Text(self.message.text), classes="message-content")

    def on_click(self, event: Click) -> None:
        """Copy message text when clicked."""
        event.stop()
        self.app.copy_to_clipboard(self.message.text)
        self.app.notify("Copied to clipboard", timeout=2)


class PendingReply(Horizontal):
    """Assistant-side placeholder shown while a reply is outstanding."""

    def compose(self) -> ComposeResult:
        yield LoadingIndicator(id="pending-spinner")
        yield Static(BUSY_LABEL, id="pending-label")


class ChatHistoryWidget(VerticalScroll):
    """Scrollable thread rendered from conversation snapshots.

    Messages are append-only, so only bubbles for messages not yet shown
    are mounted on each update.
    """

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "Conversation"
    ALLOW_MAXIMIZE = True

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._rendered = 0
        self._state = ConversationState()

    def compose(self) -> ComposeResult:
        yield Static(GREETING, id="empty-state")
        yield PendingReply(id="pending-reply")

    def on_mount(self) -> None:
        self.query_one("#pending-reply", PendingReply).display = False

    @property
    def rendered_count(self) -> int:
        """Number of message bubbles mounted so far."""
        return self._rendered

    def render_state(self, state: ConversationState) -> None:
        """Bring the display in line with a conversation snapshot."""
        self._state = state
        pending = self.query_one("#pending-reply", PendingReply)

        new_messages = state.messages[self._rendered:]
        if new_messages:
            self.query_one("#empty-state", Static).display = False
            self.mount_all([MessageBubble(msg) for msg in new_messages], before=pending)
            self._rendered = len(state.messages)
            self.border_subtitle = f"{self._rendered} messages"

        pending.display = state.busy
        self.scroll_end(animate=False)

    def get_last_response(self) -> str | None:
        """Get the last assistant reply shown."""
        reply = self._state.last_reply()
        return reply.text if reply else None


class ChatInputBar(Horizontal):
    """Single-line input with a Send button.

    Posts Submitted with the text exactly as typed; deciding whether it is
    acceptable is left to the orchestrator.
    """

    class Submitted(TextualMessage):
        """Message sent when user submits input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    class Changed(TextualMessage):
        """Message sent when the pending text changes."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def compose(self) -> ComposeResult:
        yield Input(placeholder=INPUT_PLACEHOLDER, id="chat-input")
        yield Button("Send", id="send-btn", variant="primary").with_tooltip(
            "Send question (Enter)"
        )

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._submit()

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self.post_message(self.Changed(event.value))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self._submit()

    def _submit(self) -> None:
        text_input = self.query_one("#chat-input", Input)
        if text_input.disabled:
            return
        self.post_message(self.Submitted(text_input.value))

    def set_busy(self, busy: bool) -> None:
        """Disable input and button while a request is in flight."""
        self.query_one("#chat-input", Input).disabled = busy
        button = self.query_one("#send-btn", Button)
        button.disabled = busy
        button.label = "..." if busy else "Send"
        if not busy:
            self.focus_input()

    def set_value(self, value: str) -> None:
        """Replace the text in the input."""
        self.query_one("#chat-input", Input).value = value

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", Input).focus()


class DebugPanel(RichLog):
    """Log panel for real-time tracing with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    _level_colors = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    _component_colors = {
        "TUI": "cyan",
        "Orchestrator": "green",
        "Inference": "magenta",
        "Store": "bright_blue",
    }

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=True,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        """Hide by default."""
        self.display = False

    def log_entry(self, component: str, message: str, level: int = LogLevel.DEBUG) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, Orchestrator, Inference, Store)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        if len(message) > LOG_MAX_MESSAGE_LENGTH:
            message = message[:LOG_MAX_MESSAGE_LENGTH] + "..."

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        level_color = self._level_colors.get(level, "white")
        comp_color = self._component_colors.get(component, "white")

        line = Text.assemble(
            (f"{timestamp} ", "dim"),
            (f"{LogLevel.name(level):<7} ", level_color),
            (f"[{component}] ", comp_color),
            message,
        )
        self.write(line)

    def route(self, level: str, component: str, message: str) -> None:
        """Debug callback entry point: Callable(level, component, message)."""
        self.log_entry(component, message, LogLevel.from_string(level))

    def show(self) -> None:
        """Show the log panel."""
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        """Hide the log panel."""
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
