"""Listener interface for conversation updates.

Hides how a front end (TUI, console) learns about transcript changes.
All methods default to no-ops so listeners override only what they render.
"""

from .models import Message, Notice


class ConversationListener:
    """Receives engine events. Subclass and override as needed."""

    def on_message(self, message: Message) -> None:
        """Called after a message is appended to the transcript."""

    def on_typing_changed(self, is_typing: bool) -> None:
        """Called when the assistant starts or stops 'typing' a text reply."""

    def on_notice(self, notice: Notice) -> None:
        """Called for transient, non-blocking user notifications."""
