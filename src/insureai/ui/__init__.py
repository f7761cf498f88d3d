"""Terminal UI module for insureai.

Provides a Textual-based TUI for the insurance assistant.

Module structure (each module hides a design decision):
- config.py: Constants and user-facing strings
- widgets.py: Custom widgets (message bubbles, thread, input bar, log panel)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palettes and theme configuration
- app.py: Application wiring (store notifications, submission worker)
"""

from .app import InsureAIApp, run_textual_tui
from .config import LogLevel
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, MessageBubble

__all__ = [
    "ChatHistoryWidget",
    "ChatInputBar",
    "DebugPanel",
    "InsureAIApp",
    "LogLevel",
    "MessageBubble",
    "run_textual_tui",
]
