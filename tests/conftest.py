"""Pytest configuration and shared fixtures."""
import asyncio
import random

import pytest

from ayurakshak.config import ChatSettings
from ayurakshak.conversation import ConversationListener, Message, Notice
from ayurakshak.location import Position


class RecordingSleep:
    """Sleep replacement that records requested delays and returns at once."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)
        await asyncio.sleep(0)


class GatedSleep:
    """Sleep replacement that blocks every timer until release() is called."""

    def __init__(self) -> None:
        self.delays: list[float] = []
        self._gate = asyncio.Event()

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)
        await self._gate.wait()

    def release(self) -> None:
        self._gate.set()


class RecordingListener(ConversationListener):
    """Collects every engine event."""

    def __init__(self) -> None:
        self.messages: list[Message] = []
        self.typing: list[bool] = []
        self.notices: list[Notice] = []

    def on_message(self, message: Message) -> None:
        self.messages.append(message)

    def on_typing_changed(self, is_typing: bool) -> None:
        self.typing.append(is_typing)

    def on_notice(self, notice: Notice) -> None:
        self.notices.append(notice)


@pytest.fixture
def recording_sleep():
    """Instant sleep that remembers the delays it was asked for."""
    return RecordingSleep()


@pytest.fixture
def gated_sleep():
    """Sleep that holds replies back until released."""
    return GatedSleep()


@pytest.fixture
def listener():
    """Listener that records engine events."""
    return RecordingListener()


@pytest.fixture
def rng():
    """Seeded random source for reproducible delays."""
    return random.Random(1234)


@pytest.fixture
def instant_settings():
    """Settings with every simulated delay set to zero."""
    return ChatSettings(
        reply_delay_min=0,
        reply_delay_max=0,
        file_reply_delay=0,
        location_reply_delay=0,
        location=Position(latitude=20.2961, longitude=85.8245),
    )
