"""Main Textual TUI application.

Orchestrates navigation between the language picker and chat sessions.
"""

import asyncio

from textual.app import App
from textual.binding import Binding

from ..config import ChatSettings
from .config import APP_NAME, APP_TAGLINE
from .screens import ChatScreen, LanguageSelectScreen
from .styles import APP_CSS
from .themes import AYURAKSHAK_DARK


class AyurakshakApp(App):
    """Textual TUI: language picker, then one chat screen per session."""

    CSS = APP_CSS
    TITLE = APP_NAME
    SUB_TITLE = APP_TAGLINE

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
    ]

    def __init__(
        self,
        settings: ChatSettings | None = None,
        language: str | None = None,
        log_level: str | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings or ChatSettings()
        self._initial_language = language
        self._log_level = log_level

    @property
    def settings(self) -> ChatSettings:
        return self._settings

    def on_mount(self) -> None:
        self.register_theme(AYURAKSHAK_DARK)
        self.theme = "ayurakshak-dark"

        self.push_screen(LanguageSelectScreen())
        if self._initial_language:
            self.select_language(self._initial_language)

    def select_language(self, code: str) -> None:
        """Start a fresh chat session in the given language.

        Unknown codes are accepted; the header then shows the raw code.
        """
        self.push_screen(ChatScreen(code, settings=self._settings, log_level=self._log_level))

    def return_to_selector(self) -> None:
        """End the current session, if any, and show the picker."""
        if isinstance(self.screen, ChatScreen):
            self.screen.action_back()


async def run_textual_tui(
    settings: ChatSettings | None = None,
    language: str | None = None,
    log_level: str | None = None,
) -> None:
    """Run the Textual TUI.

    Args:
        settings: Chat settings (delays, device location)
        language: Skip the picker and open a chat in this language
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    app = AyurakshakApp(settings=settings, language=language, log_level=log_level)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
