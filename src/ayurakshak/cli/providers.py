"""Provider factory functions for CLI.

Centralizes creation of settings and device collaborators from environment
variables. Hides configuration details from command implementations.
"""

import typer
from pydantic import ValidationError
from rich.console import Console

from ..config import ChatSettings
from ..location import LocationDenied, Locator, Position

# Default console for output
_console = Console()


def get_settings(console: Console | None = None) -> ChatSettings:
    """Create chat settings from environment variables.

    Raises:
        typer.Exit: If a variable holds an invalid value
    """
    con = console or _console
    try:
        return ChatSettings.from_env()
    except (ValidationError, ValueError) as e:
        con.print(f"[red]Error: invalid configuration: {e}[/red]")
        raise typer.Exit(code=1) from e


class ConsolePromptLocator(Locator):
    """Asks on the terminal before releasing the configured position."""

    def __init__(self, position: Position | None) -> None:
        self._position = position

    @property
    def supported(self) -> bool:
        return self._position is not None

    async def locate(self) -> Position:
        if self._position is None or not typer.confirm(
            "Allow AYURAKSHAK to access your location?", default=True
        ):
            raise LocationDenied("User declined location access")
        return self._position


def get_locator(settings: ChatSettings) -> Locator:
    """Geolocation for the console chat, backed by AYURAKSHAK_LOCATION."""
    return ConsolePromptLocator(settings.location)
