"""Runtime settings.

Centralizes the simulated latency windows and device defaults. Values can be
overridden through AYURAKSHAK_* environment variables (a .env file is loaded
by the CLI before settings are read).
"""

import os

from pydantic import BaseModel, Field, model_validator

from .languages import DEFAULT_LANGUAGE
from .location import Position


class ChatSettings(BaseModel):
    """Settings for a chat session."""

    reply_delay_min: float = Field(
        default=1.0, ge=0, description="Lower bound of simulated thinking time (seconds)"
    )
    reply_delay_max: float = Field(
        default=2.0, ge=0, description="Upper bound of simulated thinking time (seconds)"
    )
    file_reply_delay: float = Field(
        default=1.5, ge=0, description="Delay before acknowledging an attached file"
    )
    location_reply_delay: float = Field(
        default=1.0, ge=0, description="Delay before sending nearby-facility links"
    )
    location: Position | None = Field(
        default=None, description="Fixed device position; None means no geolocation"
    )
    default_language: str = Field(default=DEFAULT_LANGUAGE)

    @model_validator(mode="after")
    def _check_delay_window(self) -> "ChatSettings":
        if self.reply_delay_min > self.reply_delay_max:
            raise ValueError(
                f"reply_delay_min ({self.reply_delay_min}) must not exceed "
                f"reply_delay_max ({self.reply_delay_max})"
            )
        return self

    @classmethod
    def from_env(cls) -> "ChatSettings":
        """Build settings from environment variables.

        Environment variables:
            AYURAKSHAK_REPLY_DELAY_MIN: Seconds (default: 1.0)
            AYURAKSHAK_REPLY_DELAY_MAX: Seconds (default: 2.0)
            AYURAKSHAK_FILE_REPLY_DELAY: Seconds (default: 1.5)
            AYURAKSHAK_LOCATION_REPLY_DELAY: Seconds (default: 1.0)
            AYURAKSHAK_LOCATION: "lat,lon" (default: unset, no geolocation)
            AYURAKSHAK_LANGUAGE: Language code (default: en)
        """
        location = os.getenv("AYURAKSHAK_LOCATION")
        return cls(
            reply_delay_min=float(os.getenv("AYURAKSHAK_REPLY_DELAY_MIN", "1.0")),
            reply_delay_max=float(os.getenv("AYURAKSHAK_REPLY_DELAY_MAX", "2.0")),
            file_reply_delay=float(os.getenv("AYURAKSHAK_FILE_REPLY_DELAY", "1.5")),
            location_reply_delay=float(os.getenv("AYURAKSHAK_LOCATION_REPLY_DELAY", "1.0")),
            location=Position.parse(location) if location else None,
            default_language=os.getenv("AYURAKSHAK_LANGUAGE", DEFAULT_LANGUAGE),
        )
