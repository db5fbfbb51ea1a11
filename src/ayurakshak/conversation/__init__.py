"""Conversation module for ayurakshak.

Keyword classification, canned replies and the session state machine.
"""

from .engine import ConversationEngine
from .listener import ConversationListener
from .models import ConversationPhase, Message, Notice, Reply, Sender, Severity
from .responses import (
    DISCLAIMER,
    RULES,
    ResponseRule,
    classify,
    file_received_reply,
    greeting,
    location_reply,
)

__all__ = [
    "DISCLAIMER",
    "RULES",
    "ConversationEngine",
    "ConversationListener",
    "ConversationPhase",
    "Message",
    "Notice",
    "Reply",
    "ResponseRule",
    "Sender",
    "Severity",
    "classify",
    "file_received_reply",
    "greeting",
    "location_reply",
]
