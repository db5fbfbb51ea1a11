"""Text formatting utilities for the TUI.

Hides the details of turning message content into Rich renderables.
"""

import re
from datetime import datetime

from rich.style import Style
from rich.text import Text

from .config import MESSAGE_TIMESTAMP_FORMAT

URL_PATTERN = re.compile(r"https?://[^\s\"')]+")


def linkify(content: str) -> Text:
    """Render message text with URLs as terminal hyperlinks.

    Content is treated as plain text, so square brackets typed by the user
    are never parsed as Rich markup.
    """
    text = Text(content, overflow="fold")
    for match in URL_PATTERN.finditer(content):
        url = match.group(0)
        text.stylize(Style(link=url, underline=True), match.start(), match.end())
    return text


def format_timestamp(timestamp: datetime) -> str:
    """Short clock time shown under each message."""
    return timestamp.strftime(MESSAGE_TIMESTAMP_FORMAT)
