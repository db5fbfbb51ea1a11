"""Conversation engine: transcript ownership and the reply cycle.

This module hides the design decisions about:
- When a submission is accepted or rejected
- How simulated latency is scheduled and cancelled
- Which flows share the pending-reply lock (text only)

The engine schedules work on the running asyncio loop, so its mutating
methods must be called from inside that loop.
"""

import asyncio
import random
from collections.abc import Awaitable, Callable
from pathlib import Path

from ..config import ChatSettings
from ..languages import DEFAULT_LANGUAGE, display_name
from ..location import LocationDenied, LocationError, Locator
from .listener import ConversationListener
from .models import ConversationPhase, Message, Notice, Reply, Sender
from .responses import classify, file_received_reply, greeting, location_reply

SleepFunc = Callable[[float], Awaitable[None]]
DebugCallback = Callable[[str, str, str], None]

LOCATION_UNSUPPORTED = Notice(
    title="Location not supported",
    description="Your device doesn't support location services.",
)
LOCATION_DENIED = Notice(
    title="Location access denied",
    description="Please enable location to find nearby healthcare facilities.",
)


class ConversationEngine:
    """Owns one chat session.

    The transcript starts with the greeting and only ever grows. Text
    submissions are serialized by ``is_awaiting_reply``; file and location
    replies are scheduled independently of that lock.

    Example:
        engine = ConversationEngine(language="hi")
        engine.submit("I have a fever")
        await engine.wait_for_pending()
        engine.transcript[-1].severity  # Severity.NORMAL
    """

    def __init__(
        self,
        language: str = DEFAULT_LANGUAGE,
        settings: ChatSettings | None = None,
        listener: ConversationListener | None = None,
        sleep: SleepFunc = asyncio.sleep,
        rng: random.Random | None = None,
    ) -> None:
        self._language = language
        self._settings = settings or ChatSettings()
        self._listener = listener or ConversationListener()
        self._sleep = sleep
        self._rng = rng or random.Random()
        self._transcript: list[Message] = [self._reply_message(greeting())]
        self._pending_input = ""
        self._awaiting_reply = False
        self._live = True
        self._tasks: set[asyncio.Task] = set()
        self._debug_callback: DebugCallback | None = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def language(self) -> str:
        """Language code chosen in the selector (display only)."""
        return self._language

    @property
    def language_name(self) -> str:
        return display_name(self._language)

    @property
    def settings(self) -> ChatSettings:
        return self._settings

    @property
    def transcript(self) -> tuple[Message, ...]:
        """Read-only view of the messages so far."""
        return tuple(self._transcript)

    @property
    def pending_input(self) -> str:
        """Text being composed but not yet submitted."""
        return self._pending_input

    @pending_input.setter
    def pending_input(self, value: str) -> None:
        self._pending_input = value

    @property
    def is_awaiting_reply(self) -> bool:
        return self._awaiting_reply

    @property
    def phase(self) -> ConversationPhase:
        if self._awaiting_reply:
            return ConversationPhase.AWAITING_REPLY
        return ConversationPhase.IDLE

    @property
    def is_live(self) -> bool:
        """False once the session has been closed."""
        return self._live

    def set_listener(self, listener: ConversationListener) -> None:
        self._listener = listener

    def set_debug_callback(self, callback: DebugCallback | None) -> None:
        """Set the debug callback for execution tracing.

        Args:
            callback: Called as callback(level, component, message) where
                level is one of debug/info/warning/error
        """
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback is not None:
            self._debug_callback(level, "Engine", message)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def submit(self, text: str | None = None) -> bool:
        """Submit user text and schedule the assistant's reply.

        Args:
            text: Text to send. Defaults to ``pending_input``.

        Returns:
            True if accepted. Blank text, a reply already pending, or a
            closed session make this a silent no-op returning False.
        """
        if text is None:
            text = self._pending_input
        if not self._live:
            self._debug("warning", "Submit after session close ignored")
            return False
        if not text.strip():
            return False
        if self._awaiting_reply:
            self._debug("warning", "Submit rejected: reply still pending")
            return False

        self._append(Message(sender=Sender.USER, content=text))
        self._pending_input = ""
        self._set_awaiting(True)

        delay = self._rng.uniform(
            self._settings.reply_delay_min, self._settings.reply_delay_max
        )
        self._debug("debug", f"Reply scheduled in {delay:.2f}s")
        self._schedule(delay, lambda: self._deliver_text_reply(text))
        return True

    def attach_file(self, file_name: str) -> bool:
        """Acknowledge an attached file by name.

        Only the base name is kept; the file is never opened. Not gated by
        the pending-reply lock.
        """
        if not self._live:
            return False
        name = Path(file_name.strip()).name
        if not name:
            return False

        self._append(Message(sender=Sender.USER, content=f"📎 Uploaded: {name}"))
        reply = file_received_reply(name)
        self._debug("debug", f"File reply scheduled in {self._settings.file_reply_delay:.2f}s")
        self._schedule(
            self._settings.file_reply_delay,
            lambda: self._append(self._reply_message(reply)),
        )
        return True

    async def share_location(self, locator: Locator | None) -> bool:
        """Share the device location and reply with nearby-facility links.

        The "Sharing location..." message is appended before the outcome is
        known and stays in the transcript if permission is then denied; in
        that case the assistant does not reply.

        Returns:
            True if a reply was scheduled.
        """
        if not self._live:
            return False
        if locator is None or not locator.supported:
            self._debug("info", "Geolocation unsupported")
            self._listener.on_notice(LOCATION_UNSUPPORTED)
            return False

        self._append(Message(sender=Sender.USER, content="📍 Sharing location..."))
        try:
            await locator.locate()
        except LocationDenied:
            self._debug("info", "Geolocation denied by user")
            self._listener.on_notice(LOCATION_DENIED)
            return False
        except LocationError as e:
            self._debug("warning", f"Geolocation failed: {e}")
            self._listener.on_notice(LOCATION_UNSUPPORTED)
            return False

        if not self._live:
            return False
        reply = location_reply()
        self._schedule(
            self._settings.location_reply_delay,
            lambda: self._append(self._reply_message(reply)),
        )
        return True

    async def wait_for_pending(self) -> None:
        """Wait until every scheduled reply has been delivered or cancelled."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def close(self) -> None:
        """End the session. Replies still in flight are discarded."""
        if not self._live:
            return
        self._live = False
        for task in list(self._tasks):
            task.cancel()
        self._debug("info", f"Session closed with {len(self._transcript)} messages")

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _reply_message(reply: Reply) -> Message:
        return Message(sender=Sender.ASSISTANT, content=reply.text, severity=reply.severity)

    def _append(self, message: Message) -> None:
        self._transcript.append(message)
        self._listener.on_message(message)

    def _set_awaiting(self, awaiting: bool) -> None:
        self._awaiting_reply = awaiting
        self._listener.on_typing_changed(awaiting)

    def _deliver_text_reply(self, text: str) -> None:
        reply = classify(text)
        self._debug("info", f"Matched rule '{reply.rule}' ({reply.severity.value})")
        self._append(self._reply_message(reply))
        self._set_awaiting(False)

    def _schedule(self, delay: float, deliver: Callable[[], None]) -> None:
        task = asyncio.get_running_loop().create_task(self._deliver_later(delay, deliver))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _deliver_later(self, delay: float, deliver: Callable[[], None]) -> None:
        await self._sleep(delay)
        # The session may have ended while we slept
        if not self._live:
            self._debug("debug", "Dropping reply for closed session")
            return
        deliver()
