"""Permission-prompting geolocation for the TUI.

Terminals have no geolocation API. The position comes from configuration,
and "permission" is a confirmation dialog: answering no behaves like a
browser permission refusal.

Design:
- The engine awaits Locator.locate() on Textual's event loop
- locate() pushes a ConfirmationScreen and awaits a Future
- The screen's dismiss callback resolves that Future
"""

import asyncio
from typing import TYPE_CHECKING

from ..location import LocationDenied, Locator, Position
from .config import APP_NAME
from .screens import ConfirmationScreen

if TYPE_CHECKING:
    from textual.app import App


class PromptLocator(Locator):
    """Asks the user before releasing the configured position.

    Example:
        locator = PromptLocator(app, settings.location)
        await engine.share_location(locator)
    """

    def __init__(self, app: "App", position: Position | None) -> None:
        self._app = app
        self._position = position

    @property
    def supported(self) -> bool:
        return self._position is not None

    async def locate(self) -> Position:
        """Prompt for permission and return the position.

        Raises:
            LocationDenied: If the user answers no
        """
        future: asyncio.Future[str] = asyncio.get_running_loop().create_future()

        def _resolve(answer: str | None) -> None:
            if not future.done():
                future.set_result(answer or "no")

        self._app.push_screen(
            ConfirmationScreen(
                f"Allow {APP_NAME} to access your location?",
                ["yes", "no"],
                title="Location Permission",
            ),
            _resolve,
        )
        answer = await future
        if answer != "yes" or self._position is None:
            raise LocationDenied("User declined location access")
        return self._position
