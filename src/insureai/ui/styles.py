"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.
"""

APP_CSS = """
/* ============================================
   Main Screen Layout - chat card + log column
   ============================================ */
Screen {
    layout: vertical;
    background: $background;
}

#main {
    height: 1fr;
    padding: 0 2;
}

/* ============================================
   Chat History Panel
   ============================================ */
#chat-history {
    height: 1fr;
    background: $surface;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus-within {
        border: round $primary;
    }
}

#empty-state {
    width: 100%;
    height: 1fr;
    min-height: 5;
    content-align: center middle;
    text-align: center;
    color: $text-muted;
    padding: 2 0;
}

/* ============================================
   Message Bubbles
   ============================================ */
.chat-message {
    height: auto;
    max-width: 80%;
    margin: 1 0 0 0;
    padding: 0 1;
}

.user-message {
    margin-left: 20%;
    background: $primary;
    color: $text;

    .message-header {
        text-align: right;
    }
}

.assistant-message {
    background: $panel;
    color: $foreground;
}

.message-header {
    color: $text-muted;
    text-style: italic;
    height: 1;
}

.message-content {
    height: auto;
}

/* ============================================
   Pending Reply Indicator
   ============================================ */
#pending-reply {
    height: 3;
    width: 30;
    margin: 1 0 0 0;
    background: $panel;
}

#pending-spinner {
    width: 8;
    height: 3;
    color: $secondary;
}

#pending-label {
    width: 1fr;
    height: 3;
    content-align: left middle;
    color: $text-muted;
}

/* ============================================
   Debug/Log Panel
   ============================================ */
#debug-panel {
    height: auto;
    min-height: 6;
    max-height: 12;
    background: $surface;
    border: round $warning 60%;
    border-title-color: $warning;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    margin-top: 1;
}

/* ============================================
   Chat Input Bar
   ============================================ */
ChatInputBar {
    height: 3;
    margin: 1 0;
}

#chat-input {
    width: 1fr;
    border: tall $primary 40%;

    &:focus {
        border: tall $primary;
    }

    &:disabled {
        opacity: 60%;
    }
}

#send-btn {
    width: 10;
    margin-left: 1;

    &:disabled {
        opacity: 60%;
    }
}

Header {
    background: $primary;
    color: $text;
    text-style: bold;
}
"""
