"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Chat message rendering and severity styling
- Input bar layout, history and busy state
- Typing indicator
- Log rendering and level filtering
"""

from datetime import datetime

from rich.markup import escape
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Key
from textual.message import Message as TextualMessage
from textual.widgets import Button, Input, RichLog, Static

from ..conversation import Message, Sender
from .config import (
    APP_NAME,
    INPUT_PLACEHOLDER,
    LOG_TIMESTAMP_FORMAT,
    TYPING_TEXT,
    LogLevel,
)
from .formatting import format_timestamp, linkify


class HistoryInput(Input):
    """Text input that recalls earlier questions with Up/Down."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._sent: list[str] = []
        self._cursor: int | None = None
        self._draft = ""

    def _on_key(self, event: Key) -> None:
        if event.key not in ("up", "down"):
            return
        event.prevent_default()
        event.stop()
        if not self._sent:
            return

        if event.key == "up":
            if self._cursor is None:
                # Keep what was being typed so Down can restore it
                self._draft = self.value
                self._cursor = len(self._sent)
            self._cursor = max(self._cursor - 1, 0)
            self._show(self._sent[self._cursor])
        elif self._cursor is not None:
            self._cursor += 1
            if self._cursor < len(self._sent):
                self._show(self._sent[self._cursor])
            else:
                self._cursor = None
                self._show(self._draft)

    def _show(self, text: str) -> None:
        self.value = text
        self.cursor_position = len(text)

    def remember(self, text: str) -> None:
        """Record a sent question; consecutive duplicates are kept once."""
        if text and self._sent[-1:] != [text]:
            self._sent.append(text)
        self._cursor = None
        self._draft = ""


class ChatInputBar(Horizontal):
    """Back / attach / location buttons, the text input and Send."""

    class Submitted(TextualMessage):
        """Posted when the user presses Enter or Send."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    class Changed(TextualMessage):
        """Posted whenever the composed text changes."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    class ActionRequested(TextualMessage):
        """Posted for the back, attach and location buttons."""

        def __init__(self, action: str) -> None:
            super().__init__()
            self.action = action

    def compose(self):
        yield Button("←", id="back-btn").with_tooltip("Change language (Esc)")
        yield Button("📎", id="attach-btn").with_tooltip("Attach a file (Ctrl+O)")
        yield Button("📍", id="location-btn").with_tooltip("Share location (Ctrl+G)")
        yield HistoryInput(placeholder=INPUT_PLACEHOLDER, id="chat-input")
        yield Button("Send", id="send-btn", variant="success", disabled=True)

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self._refresh_send_button()
        self.post_message(self.Changed(event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.post_message(self.Submitted(event.value))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        button_id = event.button.id or ""
        if button_id == "send-btn":
            value = self.query_one("#chat-input", HistoryInput).value
            self.post_message(self.Submitted(value))
        elif button_id.endswith("-btn"):
            self.post_message(self.ActionRequested(button_id[:-4]))

    def _refresh_send_button(self) -> None:
        text_input = self.query_one("#chat-input", HistoryInput)
        send = self.query_one("#send-btn", Button)
        send.disabled = text_input.disabled or not text_input.value.strip()

    def set_busy(self, busy: bool) -> None:
        """Disable typing and sending while a reply is pending."""
        text_input = self.query_one("#chat-input", HistoryInput)
        text_input.disabled = busy
        self._refresh_send_button()
        if not busy:
            text_input.focus()

    def accept(self, value: str) -> None:
        """Clear the input after a successful submission."""
        text_input = self.query_one("#chat-input", HistoryInput)
        text_input.remember(value)
        text_input.value = ""

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", HistoryInput).focus()


class TypingIndicator(Static):
    """One-line 'is typing' hint shown while a reply is pending."""

    def on_mount(self) -> None:
        self.update(f"● ● ●  {TYPING_TEXT}")
        self.display = False

    def set_typing(self, is_typing: bool) -> None:
        self.display = is_typing


class ChatHistoryWidget(VerticalScroll):
    """Scrollable transcript. Renders messages, never mutates them."""

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "Conversation"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._messages: list[Message] = []

    def add_message(self, message: Message) -> None:
        """Append a message to the display."""
        self._messages.append(message)
        self._render_message(message)
        self.border_subtitle = f"{len(self._messages)} messages"
        self.scroll_end(animate=False)

    def load(self, messages: tuple[Message, ...]) -> None:
        """Render an existing transcript (e.g. the greeting)."""
        for message in messages:
            self.add_message(message)

    def get_last_response(self) -> str | None:
        """Get the last assistant response."""
        for message in reversed(self._messages):
            if message.sender == Sender.ASSISTANT:
                return message.content
        return None

    def _render_message(self, message: Message) -> None:
        if message.sender == Sender.USER:
            author = "You"
            classes = "chat-message user-message"
        else:
            author = APP_NAME
            classes = f"chat-message assistant-message severity-{message.severity.value}"

        header = f"{author} · {format_timestamp(message.timestamp)}"
        container = Vertical(classes=classes)
        container.compose_add_child(Static(header, classes="message-header"))
        container.compose_add_child(Static(linkify(message.content), classes="message-content"))
        self.mount(container)


class DebugPanel(RichLog):
    """Trace log fed by the engine's debug callback.

    Hidden until --log-level is given or Ctrl+L is pressed.
    """

    BORDER_TITLE = "Log"

    LEVEL_STYLES = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    def __init__(self, *args, log_level: LogLevel = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(*args, markup=True, highlight=False, wrap=True, **kwargs)
        self.log_level = log_level

    def on_mount(self) -> None:
        self.set_shown(False)

    def write_entry(self, component: str, message: str, level: LogLevel = LogLevel.DEBUG) -> None:
        """Write one entry unless it is below the panel's level."""
        if level < self.log_level:
            return
        stamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        style = self.LEVEL_STYLES[level]
        self.write(
            f"[dim]{stamp}[/] [{style}]{level.name:<7}[/] "
            f"[bold]\\[{escape(component)}][/] {escape(message)}"
        )

    def route(self, level: str, component: str, message: str) -> None:
        """Debug-callback signature: (level name, component, message)."""
        self.write_entry(component, message, LogLevel.parse(level))

    def set_shown(self, visible: bool) -> None:
        self.display = visible
        self.border_subtitle = f"≥ {self.log_level.name}" if visible else ""

    def toggle(self) -> bool:
        """Flip visibility and return the new state."""
        self.set_shown(not self.display)
        return bool(self.display)
