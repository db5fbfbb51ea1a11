"""UI configuration constants.

Centralizes magic numbers and labels for the UI module.
"""

from enum import IntEnum


class LogLevel(IntEnum):
    """Thresholds for the log panel. A lower value shows more entries."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    @classmethod
    def parse(cls, value: str) -> "LogLevel":
        """Level from a name such as 'info'. Unknown names mean DEBUG."""
        return cls.__members__.get(value.strip().upper(), cls.DEBUG)


# Branding
APP_NAME = "AYURAKSHAK"
APP_NAME_DEVANAGARI = "आयुरक्षक"
APP_TAGLINE = "Your Multilingual AI Health Assistant"

# Chat display configuration
MESSAGE_TIMESTAMP_FORMAT = "%H:%M"
TYPING_TEXT = f"{APP_NAME} is typing..."
INPUT_PLACEHOLDER = "Type your health question..."

# Log panel configuration
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"

# Notification timeouts (seconds)
NOTICE_TIMEOUT = 4
TOAST_TIMEOUT = 2
