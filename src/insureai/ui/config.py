"""UI configuration constants.

Centralizes magic numbers and user-facing strings for the UI module.
"""


class LogLevel:
    """Numeric thresholds for the log panel.

    Levels compare numerically: DEBUG < INFO < WARNING < ERROR.
    The DebugPanel shows entries at or above its threshold.
    """

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    _names = {
        DEBUG: "DEBUG",
        INFO: "INFO",
        WARNING: "WARNING",
        ERROR: "ERROR",
    }

    _from_string = {
        "debug": DEBUG,
        "info": INFO,
        "warning": WARNING,
        "error": ERROR,
    }

    @classmethod
    def name(cls, level: int) -> str:
        """Get the name for a log level."""
        return cls._names.get(level, "UNKNOWN")

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Convert string to log level. Returns DEBUG if invalid."""
        return cls._from_string.get(level_str.lower(), cls.DEBUG)


APP_TITLE = "InsureAI Assistant"

# Shown in place of the thread until the first message
GREETING = "Hello! I'm your AI insurance assistant.\nHow can I help you today?"

INPUT_PLACEHOLDER = "Type your insurance question..."

# Chat display configuration
MESSAGE_TIMESTAMP_FORMAT = "%H:%M"
BUSY_LABEL = "Thinking..."

# Log panel configuration
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
LOG_MAX_MESSAGE_LENGTH = 500  # Characters before truncating log messages
