"""Listener that connects the conversation engine to the TUI.

Hides the details of how engine events become widget updates.
"""

from typing import TYPE_CHECKING

from ..conversation import ConversationListener, Message, Notice
from .config import NOTICE_TIMEOUT

if TYPE_CHECKING:
    from textual.app import App

    from .widgets import ChatHistoryWidget, ChatInputBar, TypingIndicator


class TUIListener(ConversationListener):
    """Renders engine events into the chat screen widgets.

    The engine runs on Textual's own event loop, so widgets are updated
    directly without call_from_thread.
    """

    def __init__(
        self,
        history: "ChatHistoryWidget",
        typing: "TypingIndicator",
        input_bar: "ChatInputBar",
        app: "App",
    ) -> None:
        self.history = history
        self.typing = typing
        self.input_bar = input_bar
        self.app = app

    def on_message(self, message: Message) -> None:
        self.history.add_message(message)

    def on_typing_changed(self, is_typing: bool) -> None:
        self.typing.set_typing(is_typing)
        self.input_bar.set_busy(is_typing)

    def on_notice(self, notice: Notice) -> None:
        self.app.notify(
            notice.description,
            title=notice.title,
            severity=notice.severity,
            timeout=NOTICE_TIMEOUT,
        )
