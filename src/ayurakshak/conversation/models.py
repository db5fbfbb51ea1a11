"""Data models for the conversation engine.

Hides the representation of transcript entries and replies.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator
from uuid_extensions import uuid7str


class Sender(str, Enum):
    """Who authored a message."""

    USER = "user"
    ASSISTANT = "assistant"


class Severity(str, Enum):
    """Urgency of an assistant reply. Display metadata only."""

    NORMAL = "normal"
    WARNING = "warning"
    EMERGENCY = "emergency"


class ConversationPhase(str, Enum):
    """State of the text-reply cycle."""

    IDLE = "idle"
    AWAITING_REPLY = "awaiting_reply"


class Message(BaseModel):
    """One entry in the conversation transcript.

    Messages are immutable once created. Ids are UUIDv7 strings, so they
    sort by creation time and never collide within a session.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=uuid7str)
    sender: Sender
    content: str
    timestamp: datetime = Field(default_factory=datetime.now)
    severity: Severity = Severity.NORMAL

    @model_validator(mode="after")
    def _user_messages_are_normal(self) -> "Message":
        if self.sender == Sender.USER and self.severity != Severity.NORMAL:
            raise ValueError("severity applies to assistant messages only")
        return self

    @property
    def lines(self) -> list[str]:
        """Display text split into lines."""
        return self.content.split("\n")


class Reply(BaseModel):
    """A canned assistant reply and its severity tag."""

    model_config = ConfigDict(frozen=True)

    text: str
    severity: Severity = Severity.NORMAL
    rule: str = Field(default="fallback", description="Name of the rule that produced it")


class Notice(BaseModel):
    """A transient, non-blocking notification for the user."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    severity: str = "error"
