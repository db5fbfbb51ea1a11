"""Integration tests driving the Textual application with a pilot."""
import pytest

from ayurakshak.conversation import Sender
from ayurakshak.ui import AyurakshakApp
from ayurakshak.ui.screens import ChatScreen, ConfirmationScreen, LanguageSelectScreen

pytestmark = [pytest.mark.asyncio, pytest.mark.integration]

SIZE = (100, 40)


async def test_language_round_trip_starts_fresh_session(instant_settings):
    """Test that going back and choosing again discards the old session."""
    app = AyurakshakApp(settings=instant_settings)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        assert isinstance(app.screen, LanguageSelectScreen)

        await pilot.press("2")
        await pilot.pause()
        first = app.screen
        assert isinstance(first, ChatScreen)
        assert first.engine.language == "hi"
        assert app.sub_title.startswith("हिंदी")

        first.engine.submit("fever")
        await first.engine.wait_for_pending()
        assert len(first.engine.transcript) == 3

        first.action_back()
        await pilot.pause()
        assert isinstance(app.screen, LanguageSelectScreen)
        assert not first.engine.is_live

        await pilot.press("1")
        await pilot.pause()
        second = app.screen
        assert isinstance(second, ChatScreen)
        assert second is not first
        assert second.engine.language == "en"
        assert [m.sender for m in second.engine.transcript] == [Sender.ASSISTANT]


async def test_typed_sos_renders_emergency_reply(instant_settings):
    """Test the full input path from keystrokes to a styled reply."""
    app = AyurakshakApp(settings=instant_settings, language="en")
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        chat = app.screen
        assert isinstance(chat, ChatScreen)

        await pilot.press("s", "o", "s", "enter")
        await chat.engine.wait_for_pending()
        await pilot.pause()

        assert len(chat.engine.transcript) == 3
        assert len(chat.query(".severity-emergency")) == 1
        assert len(chat.query(".user-message")) == 1


async def test_unknown_language_shows_raw_code(instant_settings):
    """Test that an unknown code is displayed as-is."""
    app = AyurakshakApp(settings=instant_settings, language="xx")
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        assert isinstance(app.screen, ChatScreen)
        assert app.sub_title.startswith("xx • Online")


async def test_location_denied_through_dialog(instant_settings):
    """Test that answering no keeps the optimistic message and adds no reply."""
    app = AyurakshakApp(settings=instant_settings, language="en")
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        chat = app.screen
        assert isinstance(chat, ChatScreen)

        await pilot.press("ctrl+g")
        await pilot.pause(0.1)
        assert isinstance(app.screen, ConfirmationScreen)

        await pilot.press("n")
        await app.workers.wait_for_complete()
        await chat.engine.wait_for_pending()
        await pilot.pause()

        assert app.screen is chat
        assert chat.engine.transcript[-1].content == "📍 Sharing location..."
        assert len(chat.engine.transcript) == 2


async def test_location_allowed_through_dialog(instant_settings):
    """Test that answering yes produces the facility links."""
    app = AyurakshakApp(settings=instant_settings, language="en")
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        chat = app.screen

        await pilot.press("ctrl+g")
        await pilot.pause(0.1)
        await pilot.press("y")
        await app.workers.wait_for_complete()
        await chat.engine.wait_for_pending()
        await pilot.pause()

        assert "Location received" in chat.engine.transcript[-1].content
