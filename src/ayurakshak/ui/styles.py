"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.

Severity is expressed purely through CSS classes on assistant messages
(.severity-warning, .severity-emergency); nothing else reads it.
"""

APP_CSS = """
/* ============================================
   Language Selector
   ============================================ */
LanguageSelectScreen {
    align: center middle;
    background: $background;
}

#selector-card {
    width: 56;
    height: auto;
    padding: 1 3;
    background: $surface;
    border: round $primary;
}

#selector-title {
    width: 100%;
    text-align: center;
    text-style: bold;
    color: $primary;
}

#selector-subtitle {
    width: 100%;
    text-align: center;
    text-style: bold;
    color: $foreground;
}

#selector-tagline,
#selector-prompt {
    width: 100%;
    text-align: center;
    color: $text-muted;
    margin-bottom: 1;
}

#selector-prompt {
    color: $foreground;
    margin-top: 1;
}

.language-button {
    width: 100%;
    margin: 0 0 1 0;
    border: tall $border;
    background: $panel;

    &:hover {
        border: tall $primary;
        background: $primary 15%;
    }

    &:focus {
        border: tall $accent;
        text-style: bold;
    }
}

#selector-emergency {
    width: 100%;
    text-align: center;
    color: $warning;
    margin-top: 1;
}

/* ============================================
   Chat Screen Layout
   ============================================ */
ChatScreen {
    layout: vertical;
    background: $background;
}

#chat-history {
    height: 1fr;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus-within {
        border: round $primary;
    }
}

#typing-indicator {
    height: 1;
    padding: 0 2;
    color: $text-muted;
    text-style: italic;
}

#debug-panel {
    height: auto;
    min-height: 6;
    max-height: 12;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    overflow-y: scroll;
}

/* ============================================
   Chat Input Bar
   ============================================ */
ChatInputBar {
    height: 5;
    padding: 1 0 0 0;
    background: $panel;
    border-top: solid $border;
}

#chat-input {
    width: 1fr;
    border: round $primary 60%;

    &:focus {
        border: round $primary;
    }
}

#attach-btn,
#location-btn,
#back-btn {
    min-width: 6;
    width: 6;
    margin: 0 1 0 0;
    background: $surface;
    border: tall $border;
}

#send-btn {
    min-width: 8;
    width: 10;
    margin: 0 0 0 1;
    border: tall $success;
    background: $success;
    color: $background;
    text-style: bold;

    &:disabled {
        background: $surface;
        border: tall $border;
        color: $text-muted;
    }
}

/* ============================================
   Chat Messages
   ============================================ */
.chat-message {
    width: 100%;
    height: auto;
    margin: 0 0 1 0;
    padding: 0 2;
}

.user-message {
    margin-left: 12;
    border-right: tall $success;
    background: $success 10%;

    & .message-header {
        color: $success;
        text-align: right;
    }
}

.assistant-message {
    margin-right: 12;
    border-left: tall $secondary;
    background: $secondary 8%;

    & .message-header {
        color: $secondary;
    }

    &.severity-warning {
        border-left: tall $warning;
        background: $warning 18%;

        & .message-header {
            color: $warning;
        }
    }

    &.severity-emergency {
        border-left: tall $error;
        background: $error 25%;

        & .message-header {
            color: $error;
            text-style: bold;
        }
    }
}

.message-header {
    height: auto;
    text-style: bold;
}

.message-content {
    height: auto;
    color: $foreground;
}

/* ============================================
   Modal Dialogs
   ============================================ */
ConfirmationScreen,
FilePromptScreen {
    align: center middle;
    background: $background 70%;
}

.dialog {
    width: 60;
    height: auto;
    border: tall $accent;
    background: $surface;
    padding: 1 2;
}

.dialog-title {
    width: 100%;
    text-align: center;
    text-style: bold;
    color: $accent;
    padding: 0 0 1 0;
    border-bottom: solid $border;
    margin-bottom: 1;
}

.dialog-prompt {
    width: 100%;
    text-align: center;
    padding: 0 1;
    margin-bottom: 1;
}

.dialog-buttons {
    width: 100%;
    height: 3;
    align: center middle;

    & Button {
        margin: 0 1;
        min-width: 10;
    }
}

/* ============================================
   Notification Toasts
   ============================================ */
Toast {
    background: $surface;
    border: tall $border;
    padding: 0 1;

    &.-error {
        border: tall $error;
        background: $error 15%;
    }

    &.-information {
        border: tall $primary;
        background: $primary 12%;
    }
}

Header {
    background: $panel;
    color: $foreground;
}

HeaderTitle {
    color: $primary;
    text-style: bold;
}
"""
