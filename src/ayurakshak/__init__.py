"""
Ayurakshak: a multilingual health-information assistant for the terminal.

A language picker and a single chat screen. User text is matched against an
ordered set of keyword rules and answered with canned guidance
(emergency triage, symptom advice, myth-busting, file and location
acknowledgments).
"""

__version__ = "0.1.0"

from .conversation import (
    ConversationEngine,
    Message,
    Reply,
    Sender,
    Severity,
    classify,
)
from .languages import SUPPORTED_LANGUAGES, Language, display_name, get_language

__all__ = [
    "SUPPORTED_LANGUAGES",
    "ConversationEngine",
    "Language",
    "Message",
    "Reply",
    "Sender",
    "Severity",
    "classify",
    "display_name",
    "get_language",
]
