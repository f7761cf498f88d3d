"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Light blue-on-white palette: blue user bubbles, gray assistant bubbles
INSURE_LIGHT = Theme(
    name="insure-light",
    primary="#2563eb",      # Blue 600 - user bubbles, send button
    secondary="#4b5563",    # Gray 600 - assistant accents
    accent="#1d4ed8",       # Blue 700 - hover and focus
    foreground="#1f2937",   # Gray 800 - body text
    background="#eff6ff",   # Blue 50 - screen background
    success="#16a34a",
    warning="#d97706",
    error="#dc2626",
    surface="#ffffff",      # Chat card
    panel="#f3f4f6",        # Gray 100 - assistant bubbles
    dark=False,
    variables={
        "border": "#d1d5db",
        "border-blurred": "#e5e7eb",
        "input-cursor-background": "#2563eb",
        "input-cursor-foreground": "#ffffff",
        "input-selection-background": "#2563eb 25%",
        "scrollbar": "#d1d5db",
        "scrollbar-hover": "#9ca3af",
        "scrollbar-active": "#2563eb",
        "scrollbar-background": "#f9fafb",
        "footer-foreground": "#374151",
        "footer-background": "#e5e7eb",
        "footer-key-foreground": "#1d4ed8",
        "text-muted": "#6b7280",
        "text-disabled": "#9ca3af",
        "button-foreground": "#ffffff",
        "button-color-foreground": "#ffffff",
    },
)

# Dark variant for terminals with a dark background
INSURE_DARK = Theme(
    name="insure-dark",
    primary="#3b82f6",
    secondary="#9ca3af",
    accent="#60a5fa",
    foreground="#e5e7eb",
    background="#0b1220",
    success="#22c55e",
    warning="#f59e0b",
    error="#f87171",
    surface="#111827",
    panel="#1f2937",
    dark=True,
    variables={
        "border": "#374151",
        "border-blurred": "#1f2937",
        "scrollbar": "#374151",
        "scrollbar-active": "#3b82f6",
        "text-muted": "#9ca3af",
    },
)

THEMES = {theme.name: theme for theme in (INSURE_LIGHT, INSURE_DARK)}
