"""Terminal UI module for ayurakshak.

Provides a Textual-based TUI around the conversation engine.

Module structure (each module hides a design decision):
- config.py: Constants and log levels
- themes.py: Color palette
- styles.py: CSS styling (layout, severity colors)
- formatting.py: Message text to Rich renderables
- widgets.py: Chat history, input bar, typing indicator, log panel
- callbacks.py: Engine listener (how the TUI receives updates)
- input_handler.py: Permission-prompting geolocation
- screens.py: Language picker, chat screen, modal dialogs
- app.py: Application orchestration (navigation between sessions)
"""

from .app import AyurakshakApp, run_textual_tui
from .callbacks import TUIListener
from .config import LogLevel
from .screens import ChatScreen, LanguageSelectScreen
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, TypingIndicator

__all__ = [
    "AyurakshakApp",
    "ChatHistoryWidget",
    "ChatInputBar",
    "ChatScreen",
    "DebugPanel",
    "LanguageSelectScreen",
    "LogLevel",
    "TUIListener",
    "TypingIndicator",
    "run_textual_tui",
]
