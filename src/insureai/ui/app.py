"""Main Textual TUI application.

Wires the chat widgets to a ResponseOrchestrator. The widgets never touch
the thread directly: they forward submitted text to the orchestrator and
re-render whenever the conversation store notifies them.
"""

import asyncio
import contextlib

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header

from ..conversation import ConversationState
from ..orchestrator import ResponseOrchestrator
from .config import APP_TITLE, LogLevel
from .styles import APP_CSS
from .themes import THEMES
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel


class InsureAIApp(App):
    """Textual TUI for the insurance assistant."""

    CSS = APP_CSS
    TITLE = APP_TITLE

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+l", "clear_log", "Clear Log"),
        Binding("ctrl+r", "copy_last_response", "Copy Reply"),
        Binding("ctrl+d", "toggle_debug", "Debug"),
        Binding("ctrl+t", "toggle_theme", "Theme"),
    ]

    def __init__(
        self,
        orchestrator: ResponseOrchestrator,
        log_level: str | None = None,
        theme_name: str = "insure-light",
    ) -> None:
        super().__init__()
        self._orchestrator = orchestrator
        self._log_level = log_level
        self._theme_name = theme_name if theme_name in THEMES else "insure-light"

    @property
    def orchestrator(self) -> ResponseOrchestrator:
        return self._orchestrator

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="main"):
            yield ChatHistoryWidget(id="chat-history")
            yield DebugPanel(id="debug-panel")
            yield ChatInputBar(id="chat-input-bar")
        yield Footer()

    def on_mount(self) -> None:
        """Register themes, hook up logging and subscribe to the store."""
        for theme in THEMES.values():
            self.register_theme(theme)
        self.theme = self._theme_name

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.log_entry("TUI", f"Log panel enabled with level: {self._log_level.upper()}", LogLevel.INFO)
        self._orchestrator.set_debug_callback(log_panel.route)

        self.sub_title = self._orchestrator.client.name

        self._orchestrator.store.subscribe(self._on_state_changed)
        self._on_state_changed(self._orchestrator.store.snapshot())
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def on_unmount(self) -> None:
        """Stop listening to the store when the app exits."""
        self._orchestrator.store.unsubscribe(self._on_state_changed)

    def _on_state_changed(self, state: ConversationState) -> None:
        """Re-render the thread and busy indicator from a snapshot."""
        self.query_one("#chat-history", ChatHistoryWidget).render_state(state)
        input_bar = self.query_one("#chat-input-bar", ChatInputBar)
        input_bar.set_busy(state.busy)
        input_bar.set_value(self._orchestrator.pending_input)

    def on_chat_input_bar_changed(self, event: ChatInputBar.Changed) -> None:
        """Mirror typed text into the orchestrator's pending-input buffer."""
        self._orchestrator.set_pending_input(event.value)

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Forward submitted text to the orchestrator."""
        self._submit(event.value)

    @work(group="submit")
    async def _submit(self, text: str) -> None:
        """Run one submission cycle as a background async worker.

        Not exclusive: an in-flight request is never cancelled. Extra
        submissions are dropped by the orchestrator itself.
        """
        await self._orchestrator.submit(text)

    def action_clear_log(self) -> None:
        """Clear the log panel."""
        self.query_one("#debug-panel", DebugPanel).clear()
        self.notify("Log cleared", timeout=2)

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        is_visible = self.query_one("#debug-panel", DebugPanel).toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)

    def action_toggle_theme(self) -> None:
        """Switch between the light and dark palettes."""
        self.theme = "insure-dark" if self.theme == "insure-light" else "insure-light"

    def action_copy_last_response(self) -> None:
        """Copy last assistant reply to clipboard."""
        chat = self.query_one("#chat-history", ChatHistoryWidget)
        response = chat.get_last_response()
        if response:
            self.copy_to_clipboard(response)
            self.notify("Reply copied")
        else:
            self.notify("No reply to copy", severity="warning")


async def run_textual_tui(
    orchestrator: ResponseOrchestrator,
    log_level: str | None = None,
    theme_name: str = "insure-light",
) -> None:
    """Run the Textual TUI.

    Args:
        orchestrator: Orchestrator owning the session's conversation
        log_level: Log level for panel (debug/info/warning/error), None to hide
        theme_name: 'insure-light' or 'insure-dark'
    """
    app = InsureAIApp(orchestrator, log_level=log_level, theme_name=theme_name)
    with contextlib.suppress(KeyboardInterrupt, asyncio.CancelledError):
        await app.run_async()
