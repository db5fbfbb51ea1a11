"""Tests for the conversation engine state machine."""
import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from ayurakshak.config import ChatSettings
from ayurakshak.conversation import (
    ConversationEngine,
    ConversationPhase,
    Message,
    Sender,
    Severity,
    greeting,
)
from ayurakshak.conversation.engine import LOCATION_DENIED, LOCATION_UNSUPPORTED
from ayurakshak.location import DenyingLocator, FixedLocator, Position, UnsupportedLocator

HOME = Position(latitude=17.385, longitude=78.4867)


class TestMessage:
    """Tests for the Message model."""

    def test_defaults(self):
        """Test that a message gets an id, timestamp and normal severity."""
        message = Message(sender=Sender.USER, content="hi")
        assert message.id
        assert message.timestamp is not None
        assert message.severity == Severity.NORMAL

    def test_ids_are_unique(self):
        """Test that ids do not collide within a session."""
        ids = {Message(sender=Sender.USER, content="x").id for _ in range(1000)}
        assert len(ids) == 1000

    def test_messages_are_immutable(self):
        """Test that a message cannot be edited after creation."""
        message = Message(sender=Sender.ASSISTANT, content="hello")
        with pytest.raises(ValidationError):
            message.content = "changed"  # type: ignore[misc]

    def test_user_messages_cannot_carry_severity(self):
        """Test that severity is reserved for assistant messages."""
        with pytest.raises(ValidationError):
            Message(sender=Sender.USER, content="sos", severity=Severity.EMERGENCY)

    def test_lines(self):
        """Test that content is exposed as ordered lines."""
        message = Message(sender=Sender.ASSISTANT, content="a\nb\n\nc")
        assert message.lines == ["a", "b", "", "c"]


class TestInitialState:
    """Tests for a freshly created engine."""

    def test_starts_idle_with_greeting(self):
        """Test that a new session holds only the greeting."""
        engine = ConversationEngine(language="hi")
        assert engine.phase == ConversationPhase.IDLE
        assert not engine.is_awaiting_reply
        assert engine.pending_input == ""
        assert len(engine.transcript) == 1
        assert engine.transcript[0].sender == Sender.ASSISTANT
        assert engine.transcript[0].content == greeting().text

    def test_language_is_display_only(self):
        """Test that the language only affects the displayed name."""
        assert ConversationEngine(language="te").language_name == "తెలుగు"
        assert ConversationEngine(language="xx").language_name == "xx"

    def test_transcript_is_read_only_view(self):
        """Test that callers cannot append through the transcript property."""
        engine = ConversationEngine()
        assert isinstance(engine.transcript, tuple)


class TestSubmit:
    """Tests for text submission and reply delivery."""

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_blank_submit_is_noop(self, text: str, listener):
        """Test that blank input is silently ignored."""
        engine = ConversationEngine(listener=listener)
        assert engine.submit(text) is False
        assert len(engine.transcript) == 1
        assert engine.phase == ConversationPhase.IDLE
        assert listener.messages == []

    @given(st.text(alphabet=" \t\r\n  ", max_size=12))
    def test_whitespace_never_submits(self, text: str):
        """Property test: whitespace-only input is never accepted."""
        engine = ConversationEngine()
        assert engine.submit(text) is False
        assert len(engine.transcript) == 1

    @pytest.mark.asyncio
    async def test_fever_round(self, recording_sleep, listener):
        """Test that a fever question yields user + assistant messages."""
        engine = ConversationEngine(sleep=recording_sleep, listener=listener)

        assert engine.submit("I have a fever") is True
        assert engine.phase == ConversationPhase.AWAITING_REPLY
        assert len(engine.transcript) == 2

        await engine.wait_for_pending()

        assert len(engine.transcript) == 3
        user, reply = engine.transcript[1:]
        assert user.sender == Sender.USER
        assert user.content == "I have a fever"
        assert reply.sender == Sender.ASSISTANT
        assert reply.severity == Severity.NORMAL
        assert "101°F" in reply.content
        assert engine.phase == ConversationPhase.IDLE
        assert listener.typing == [True, False]

    @pytest.mark.asyncio
    async def test_sos_is_emergency(self, recording_sleep):
        """Test that distress text gets an emergency reply."""
        engine = ConversationEngine(sleep=recording_sleep)
        engine.submit("sos help me")
        await engine.wait_for_pending()
        assert engine.transcript[-1].severity == Severity.EMERGENCY

    @pytest.mark.asyncio
    async def test_garlic_myth_is_warning(self, recording_sleep):
        """Test that the myth check answers with a denial."""
        engine = ConversationEngine(sleep=recording_sleep)
        engine.submit("garlic cures cancer")
        await engine.wait_for_pending()
        reply = engine.transcript[-1]
        assert reply.severity == Severity.WARNING
        assert "does NOT cure" in reply.content

    @pytest.mark.asyncio
    async def test_submit_uses_pending_input(self, recording_sleep):
        """Test that submit() without text sends the composed input."""
        engine = ConversationEngine(sleep=recording_sleep)
        engine.pending_input = "bad cough"
        assert engine.submit() is True
        assert engine.pending_input == ""
        await engine.wait_for_pending()
        assert engine.transcript[1].content == "bad cough"
        assert "2 weeks" in engine.transcript[2].content

    @pytest.mark.asyncio
    async def test_second_submit_rejected_while_awaiting(self, gated_sleep):
        """Test the re-entrancy guard on the text path."""
        engine = ConversationEngine(sleep=gated_sleep)

        assert engine.submit("fever") is True
        assert engine.submit("cough") is False
        assert [m.content for m in engine.transcript[1:]] == ["fever"]

        gated_sleep.release()
        await engine.wait_for_pending()

        assert len(engine.transcript) == 3
        assert engine.phase == ConversationPhase.IDLE
        assert engine.submit("cough") is True

    @pytest.mark.asyncio
    async def test_delay_drawn_from_window(self, recording_sleep, rng):
        """Test that thinking time stays inside the configured window."""
        engine = ConversationEngine(sleep=recording_sleep, rng=rng)
        for text in ("one", "two", "three"):
            engine.submit(text)
            await engine.wait_for_pending()
        assert len(recording_sleep.delays) == 3
        assert all(1.0 <= delay <= 2.0 for delay in recording_sleep.delays)

    @pytest.mark.asyncio
    async def test_custom_delay_window(self, recording_sleep):
        """Test that settings change the latency window."""
        settings = ChatSettings(reply_delay_min=0.2, reply_delay_max=0.2)
        engine = ConversationEngine(settings=settings, sleep=recording_sleep)
        engine.submit("hello")
        await engine.wait_for_pending()
        assert recording_sleep.delays == [0.2]


class TestAttachFile:
    """Tests for file acknowledgments."""

    @pytest.mark.asyncio
    async def test_upload_then_acknowledgment(self, recording_sleep):
        """Test the immediate upload message and delayed reply."""
        engine = ConversationEngine(sleep=recording_sleep)

        assert engine.attach_file("/home/asha/reports/cbc.pdf") is True
        assert engine.transcript[-1].content == "📎 Uploaded: cbc.pdf"

        await engine.wait_for_pending()

        assert '"cbc.pdf"' in engine.transcript[-1].content
        assert engine.transcript[-1].sender == Sender.ASSISTANT
        assert recording_sleep.delays == [1.5]

    def test_blank_name_ignored(self):
        """Test that an empty selection adds nothing."""
        engine = ConversationEngine()
        assert engine.attach_file("  ") is False
        assert len(engine.transcript) == 1

    @pytest.mark.asyncio
    async def test_not_gated_by_pending_reply(self, gated_sleep):
        """Test that files are accepted while a text reply is pending."""
        engine = ConversationEngine(sleep=gated_sleep)
        engine.submit("fever")

        assert engine.attach_file("rx.jpg") is True
        assert engine.is_awaiting_reply

        gated_sleep.release()
        await engine.wait_for_pending()
        assert len(engine.transcript) == 5
        assert not engine.is_awaiting_reply


class TestShareLocation:
    """Tests for the location flow."""

    @pytest.mark.asyncio
    async def test_success(self, recording_sleep):
        """Test optimistic message followed by facility links."""
        engine = ConversationEngine(sleep=recording_sleep)

        assert await engine.share_location(FixedLocator(HOME)) is True
        assert engine.transcript[-1].content == "📍 Sharing location..."

        await engine.wait_for_pending()

        assert "Location received" in engine.transcript[-1].content
        assert "108" in engine.transcript[-1].content
        assert recording_sleep.delays == [1.0]

    @pytest.mark.asyncio
    async def test_denied_keeps_optimistic_message(self, recording_sleep, listener):
        """Test that denial notifies and the assistant never replies."""
        engine = ConversationEngine(sleep=recording_sleep, listener=listener)

        assert await engine.share_location(DenyingLocator()) is False
        await engine.wait_for_pending()

        assert [m.content for m in engine.transcript[1:]] == ["📍 Sharing location..."]
        assert listener.notices == [LOCATION_DENIED]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("locator", [None, UnsupportedLocator()])
    async def test_unsupported_leaves_transcript(self, locator, listener):
        """Test that a missing capability only raises a notice."""
        engine = ConversationEngine(listener=listener)

        assert await engine.share_location(locator) is False

        assert len(engine.transcript) == 1
        assert listener.notices == [LOCATION_UNSUPPORTED]

    @pytest.mark.asyncio
    async def test_not_gated_by_pending_reply(self, gated_sleep):
        """Test that location can be shared while a text reply is pending."""
        engine = ConversationEngine(sleep=gated_sleep)
        engine.submit("hello")

        assert await engine.share_location(FixedLocator(HOME)) is True

        gated_sleep.release()
        await engine.wait_for_pending()
        assert len(engine.transcript) == 5


class TestClose:
    """Tests for session teardown."""

    @pytest.mark.asyncio
    async def test_replies_after_close_are_dropped(self, gated_sleep):
        """Test that timers firing after close do not touch the transcript."""
        engine = ConversationEngine(sleep=gated_sleep)
        engine.submit("fever")
        engine.attach_file("scan.png")

        engine.close()
        gated_sleep.release()
        await engine.wait_for_pending()

        assert not engine.is_live
        assert [m.sender for m in engine.transcript] == [Sender.ASSISTANT, Sender.USER, Sender.USER]

    @pytest.mark.asyncio
    async def test_operations_after_close_are_noops(self):
        """Test that a closed session rejects everything."""
        engine = ConversationEngine()
        engine.close()

        assert engine.submit("fever") is False
        assert engine.attach_file("a.pdf") is False
        assert await engine.share_location(FixedLocator(HOME)) is False
        assert len(engine.transcript) == 1

    def test_close_is_idempotent(self):
        """Test that closing twice is harmless."""
        engine = ConversationEngine()
        engine.close()
        engine.close()
        assert not engine.is_live

    @pytest.mark.asyncio
    async def test_debug_callback_traces_events(self, recording_sleep):
        """Test that engine tracing goes through the debug callback."""
        events: list[tuple[str, str, str]] = []
        engine = ConversationEngine(sleep=recording_sleep)
        engine.set_debug_callback(lambda *event: events.append(event))

        engine.submit("fever")
        await engine.wait_for_pending()
        engine.close()

        assert all(component == "Engine" for _, component, _ in events)
        assert any("Matched rule 'fever'" in message for _, _, message in events)
