"""UI configuration constants.

Centralizes labels, notices and log settings for the UI module.
"""


class LogLevel:
    """Log level constants with numeric values for comparison.

    Standard logging hierarchy: DEBUG < INFO < WARNING < ERROR
    Lower numeric value = more verbose (shows more messages).
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
        return cls._names[level]

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Convert string to log level. Returns DEBUG if invalid."""
        return cls._from_string.get(level_str.lower(), cls.DEBUG)


APP_TITLE = "Notepad Pro"

# Lock notices
LANDING_LOCKED_NOTICE = "Gemini key timeout. Re-authenticate to unlock note previews."
EDITOR_LOCKED_NOTICE = "Re-authenticate to continue editing encrypted content."
SEARCH_LOCKED_NOTICE = "Gemini key timeout. Search and filters are disabled."
HIDDEN_SNIPPET = "Encrypted snippet hidden"

# Lock toggle button labels
LOCK_LABEL = "Lock"
UNLOCK_LABEL = "Unlock"

# Logout confirmation
LOGOUT_PROMPT = "Log out and lock all notes?"

# Log panel configuration
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
LOG_MAX_MESSAGE_LENGTH = 500  # Characters before truncating log messages

# Notification timeouts (seconds)
NOTIFY_TIMEOUT = 2
NOTIFY_ERROR_TIMEOUT = 5
