"""
Conversational assistant module for the Air Quality Assistant.

This module contains the ConversationalAssistant class, the owner of the
conversation log. Each turn moves through two states:
- idle: waiting for a user message
- composing: a response has been scheduled but is not visible yet

submit() appends the user's text right away and schedules a one-shot task.
When the simulated typing delay has elapsed the task classifies the text,
renders the response from the current session data and appends it. Both
appends go through the same lock so the log order can never be corrupted.

A submission while a response is still composing is rejected with
ConcurrentSubmission; nothing is appended in that case.
"""

import logging
import threading
from datetime import datetime
from typing import Callable, Optional, Protocol

from .best_window import BestWindowRecommender
from .chat_message import Author, ChatMessage
from .data_generator import SyntheticAirQualityFeed
from .errors import ConcurrentSubmission, EmptyInput
from .intent_router import IntentRouter
from .response_composer import GREETING_MESSAGE, NO_DATA_MESSAGE, ResponseComposer
from .session import SessionContext
from .settings import DEFAULT_RESPONSE_DELAY, Settings, configure_logging

logger = logging.getLogger(__name__)


class Scheduler(Protocol):
    """
    Anything that can run a callback once after a delay.

    asyncio event loops satisfy this interface as they are.
    """

    def call_later(self, delay: float, callback: Callable[[], None]) -> object:
        ...


class TimerScheduler:
    """Default scheduler: runs each callback once on a daemon threading.Timer."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> threading.Timer:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer


class ConversationalAssistant:
    """
    Rule-based assistant answering air quality questions.

    The assistant reads the shared session context when a response is
    rendered and never modifies it. It exclusively owns the message log and
    the composing flag.
    """

    def __init__(
        self,
        session: SessionContext,
        response_delay: float = DEFAULT_RESPONSE_DELAY,
        scheduler: Optional[Scheduler] = None,
        router: Optional[IntentRouter] = None,
        composer: Optional[ResponseComposer] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """
        Initializes the assistant with a seeded greeting message.

        Args:
            session: Shared session context holding the air quality data
            response_delay: Seconds between a submission and its response
            scheduler: Scheduler for the deferred response, a TimerScheduler if omitted
            router: Intent classifier, a default IntentRouter if omitted
            composer: Response renderer, one bound to session if omitted
            clock: Callable returning the current time, used for message timestamps
        """
        self.session = session
        self.response_delay = response_delay
        self.scheduler = scheduler if scheduler is not None else TimerScheduler()
        self.router = router if router is not None else IntentRouter()
        self.composer = composer if composer is not None else ResponseComposer(session, BestWindowRecommender())
        self._clock = clock

        self._lock = threading.RLock()
        self._idle = threading.Event()
        self._idle.set()
        self._composing = False
        self._messages: list[ChatMessage] = [
            ChatMessage(text=GREETING_MESSAGE, author=Author.ASSISTANT, timestamp=self._clock())
        ]

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **kwargs) -> "ConversationalAssistant":
        """
        Builds an assistant backed by a synthetic session.

        Also applies the configured log level.

        Args:
            settings: Configuration to use, read from the environment if omitted
            **kwargs: Extra constructor arguments (scheduler, router, ...)

        Returns:
            A ready to use ConversationalAssistant
        """
        if settings is None:
            settings = Settings.from_env()

        configure_logging(settings.log_level)

        session = SessionContext(
            feed=SyntheticAirQualityFeed(seed=settings.seed),
            location=settings.location,
        )
        return cls(session, response_delay=settings.response_delay, **kwargs)

    def get_messages(self) -> list[ChatMessage]:
        """Returns a copy of the conversation log in insertion order."""
        with self._lock:
            return list(self._messages)

    def is_composing(self) -> bool:
        """Returns True while a response is scheduled but not yet appended."""
        with self._lock:
            return self._composing

    def submit(self, text: str) -> None:
        """
        Submits a user message.

        The literal text is appended immediately and a response is scheduled.
        The call never waits for the response.

        Args:
            text: Message as typed by the user

        Raises:
            EmptyInput: If the text is empty after trimming whitespace
            ConcurrentSubmission: If a previous response is still composing
        """
        if not text or not text.strip():
            raise EmptyInput("message text must not be empty")

        with self._lock:
            if self._composing:
                logger.warning("Rejected submission while composing a response")
                raise ConcurrentSubmission("a response is still being composed")

            self._messages.append(ChatMessage(text=text, author=Author.USER, timestamp=self._clock()))
            self._composing = True
            self._idle.clear()

        logger.debug("Scheduled response in %.2fs", self.response_delay)
        self.scheduler.call_later(self.response_delay, lambda: self._complete_response(text))

    def wait_until_idle(self, timeout: Optional[float] = None) -> bool:
        """
        Blocks until the pending response has been appended.

        Only useful with a scheduler that runs callbacks on another thread.

        Args:
            timeout: Maximum seconds to wait, None to wait indefinitely

        Returns:
            True if the assistant is idle, False if the timeout expired first
        """
        return self._idle.wait(timeout)

    def transcript(self) -> list[dict[str, object]]:
        """Returns the conversation log as a list of serializable dictionaries."""
        return [message.to_dict() for message in self.get_messages()]

    def _complete_response(self, text: str) -> None:
        # Rendered now, so the freshest session data is used
        intent = None
        try:
            intent = self.router.classify(text)
            response = self.composer.compose(intent)
        except Exception:
            # Scheduled responses always append
            logger.exception("Failed to render response, answering with the no-data message")
            response = NO_DATA_MESSAGE

        with self._lock:
            self._messages.append(ChatMessage(text=response, author=Author.ASSISTANT, timestamp=self._clock()))
            self._composing = False
            self._idle.set()
            message_count = len(self._messages)

        logger.info(
            "Appended %s response (%d messages)",
            intent.value if intent is not None else "fallback",
            message_count,
        )
