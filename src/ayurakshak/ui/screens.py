"""Screens and modal dialogs for the TUI.

This module hides the design decisions about:
- Language picker layout
- Chat screen composition and key bindings
- How confirmations and file prompts are presented

Each ChatScreen owns exactly one ConversationEngine. Leaving the screen
closes the engine, so returning to the picker always starts a new session.
"""

from textual import work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen, Screen
from textual.widgets import Button, Footer, Header, Input, Static

from ..config import ChatSettings
from ..conversation import ConversationEngine
from ..conversation.responses import EMERGENCY_NUMBER
from ..languages import SUPPORTED_LANGUAGES
from .callbacks import TUIListener
from .config import APP_NAME, APP_NAME_DEVANAGARI, APP_TAGLINE, TOAST_TIMEOUT, LogLevel
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, TypingIndicator


class ConfirmationScreen(ModalScreen[str]):
    """Modal yes/no dialog."""

    BINDINGS = [
        Binding("y", "confirm_yes", "Yes", show=False),
        Binding("n", "confirm_no", "No", show=False),
        Binding("escape", "confirm_no", "Cancel", show=False),
    ]

    def __init__(self, prompt: str, options: list[str], title: str = "Confirmation Required") -> None:
        super().__init__()
        self._prompt = prompt
        self._options = options
        self._title = title

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog"):
            yield Static(self._title, classes="dialog-title")
            yield Static(self._prompt, classes="dialog-prompt")
            with Horizontal(classes="dialog-buttons"):
                for option in self._options:
                    if option.lower() == "yes":
                        variant = "success"
                    elif option.lower() == "no":
                        variant = "error"
                    else:
                        variant = "primary"
                    yield Button(option.capitalize(), id=f"btn-{option}", variant=variant)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id.startswith("btn-"):
            self.dismiss(button_id[4:])

    def action_confirm_yes(self) -> None:
        if "yes" in self._options:
            self.dismiss("yes")

    def action_confirm_no(self) -> None:
        if "no" in self._options:
            self.dismiss("no")


class FilePromptScreen(ModalScreen[str | None]):
    """Asks for the path of a file to attach. Dismisses with None on cancel."""

    BINDINGS = [Binding("escape", "cancel", "Cancel", show=False)]

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog"):
            yield Static("Attach a File", classes="dialog-title")
            yield Static(
                "Prescription, lab report or photo (image, PDF, DOC)",
                classes="dialog-prompt",
            )
            yield Input(placeholder="Path to file", id="file-path")
            with Horizontal(classes="dialog-buttons"):
                yield Button("Attach", id="btn-attach", variant="success")
                yield Button("Cancel", id="btn-cancel", variant="error")

    def on_mount(self) -> None:
        self.query_one("#file-path", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._attach(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-attach":
            self._attach(self.query_one("#file-path", Input).value)
        else:
            self.dismiss(None)

    def _attach(self, value: str) -> None:
        self.dismiss(value.strip() or None)

    def action_cancel(self) -> None:
        self.dismiss(None)


class LanguageSelectScreen(Screen):
    """Entry screen: pick one of the supported languages."""

    BINDINGS = [
        Binding(str(i), f"select('{lang.code}')", lang.name, show=False)
        for i, lang in enumerate(SUPPORTED_LANGUAGES, 1)
    ]

    def compose(self) -> ComposeResult:
        with Vertical(id="selector-card"):
            yield Static(APP_NAME_DEVANAGARI, id="selector-title")
            yield Static(APP_NAME, id="selector-subtitle")
            yield Static(APP_TAGLINE, id="selector-tagline")
            yield Static("Choose your preferred language", id="selector-prompt")
            for lang in SUPPORTED_LANGUAGES:
                yield Button(
                    f"{lang.native_name}  ·  {lang.name}",
                    id=f"lang-{lang.code}",
                    classes="language-button",
                )
            yield Static(
                f"⚠️ For emergency, call {EMERGENCY_NUMBER} or visit nearest hospital",
                id="selector-emergency",
            )

    def on_screen_resume(self) -> None:
        self.app.sub_title = APP_TAGLINE

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id.startswith("lang-"):
            self.action_select(button_id[5:])

    def action_select(self, code: str) -> None:
        self.app.select_language(code)


class ChatScreen(Screen):
    """The chat screen for one session."""

    BINDINGS = [
        Binding("escape", "back", "Languages"),
        Binding("ctrl+o", "attach_file", "Attach"),
        Binding("ctrl+g", "share_location", "Location"),
        Binding("ctrl+r", "copy_last_response", "Copy Reply"),
        Binding("ctrl+l", "toggle_debug", "Log"),
    ]

    def __init__(
        self,
        language: str,
        settings: ChatSettings | None = None,
        log_level: str | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings or ChatSettings()
        self._log_level = log_level
        self.engine = ConversationEngine(language=language, settings=self._settings)

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield ChatHistoryWidget(id="chat-history")
        yield TypingIndicator(id="typing-indicator")
        yield DebugPanel(id="debug-panel")
        yield ChatInputBar(id="chat-input-bar")
        yield Footer()

    def on_mount(self) -> None:
        history = self.query_one("#chat-history", ChatHistoryWidget)
        typing = self.query_one("#typing-indicator", TypingIndicator)
        input_bar = self.query_one("#chat-input-bar", ChatInputBar)
        debug_panel = self.query_one("#debug-panel", DebugPanel)

        if self._log_level is not None:
            debug_panel.log_level = LogLevel.parse(self._log_level)
            debug_panel.set_shown(True)

        self.engine.set_listener(TUIListener(history, typing, input_bar, self.app))
        self.engine.set_debug_callback(debug_panel.route)
        history.load(self.engine.transcript)
        debug_panel.write_entry("TUI", f"Session started ({self.engine.language})", LogLevel.INFO)

        self.app.sub_title = f"{self.engine.language_name} • Online • AI Health Assistant"
        input_bar.focus_input()

    def on_screen_resume(self) -> None:
        self.app.sub_title = f"{self.engine.language_name} • Online • AI Health Assistant"

    def on_unmount(self) -> None:
        self.engine.close()

    def on_chat_input_bar_changed(self, event: ChatInputBar.Changed) -> None:
        self.engine.pending_input = event.value

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        if self.engine.submit(event.value):
            self.query_one("#chat-input-bar", ChatInputBar).accept(event.value)

    def on_chat_input_bar_action_requested(self, event: ChatInputBar.ActionRequested) -> None:
        if event.action == "back":
            self.action_back()
        elif event.action == "attach":
            self.action_attach_file()
        elif event.action == "location":
            self.action_share_location()

    def action_back(self) -> None:
        """Close this session and return to the language picker."""
        self.engine.close()
        self.app.pop_screen()

    def action_attach_file(self) -> None:
        self.app.push_screen(FilePromptScreen(), self._on_file_chosen)

    def _on_file_chosen(self, path: str | None) -> None:
        if path:
            self.engine.attach_file(path)

    def action_share_location(self) -> None:
        self._share_location()

    @work(exclusive=True, group="location")
    async def _share_location(self) -> None:
        """Share location through a permission prompt."""
        # Import here to avoid circular imports
        from .input_handler import PromptLocator

        locator = PromptLocator(self.app, self._settings.location)
        await self.engine.share_location(locator)

    def action_copy_last_response(self) -> None:
        history = self.query_one("#chat-history", ChatHistoryWidget)
        response = history.get_last_response()
        if response:
            self.app.copy_to_clipboard(response)
            self.notify("Reply copied", timeout=TOAST_TIMEOUT)
        else:
            self.notify("No reply to copy", severity="warning", timeout=TOAST_TIMEOUT)

    def action_toggle_debug(self) -> None:
        debug_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = debug_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=TOAST_TIMEOUT)
