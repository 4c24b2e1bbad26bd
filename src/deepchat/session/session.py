"""Conversation session: transcript ownership and exchange sequencing.

Hides the details of how user turns are dispatched to the inference client
and how backend outcomes become transcript mutations or failure advisories.
"""

import asyncio
import logging

from ..config import FAILURE_MESSAGE_TEMPLATE
from ..llm.base import InferenceClient
from ..llm.catalog import DeepSeekModel, resolve_model
from ..llm.errors import BackendError, BackendUnreachable
from ..llm.models import ChatMessage, Role
from .models import ExchangeFailure, ExchangeOutcome, FailureKind, SessionListener, Transcript

logger = logging.getLogger(__name__)


class ConversationSession:
    """Owns one conversation transcript and drives exchanges with the backend.

    The transcript is append-only. A successful exchange appends a user
    message followed by an assistant message; a failed one appends only the
    user message and emits an ExchangeFailure to the listener.

    Exchanges are serialized: a message sent while another exchange awaits
    the backend waits for it to resolve before its own user turn is appended.

    Usage:
        session = ConversationSession(client, listener)
        outcome = await session.send_user_message("hello")
        transcript = session.get_transcript()
    """

    def __init__(self, client: InferenceClient, listener: SessionListener | None = None):
        """Initialize a session.

        Args:
            client: Inference client used for every exchange
            listener: Optional rendering collaborator
        """
        self._client = client
        self._listener = listener
        self._messages: list[ChatMessage] = []
        self._exchange_lock = asyncio.Lock()

    @property
    def model(self) -> str:
        """Get the model used for the next exchange."""
        return self._client.model

    @property
    def busy(self) -> bool:
        """Whether an exchange is currently in flight."""
        return self._exchange_lock.locked()

    def set_model(self, model: str | DeepSeekModel) -> None:
        """Switch the model for future exchanges; past entries are untouched."""
        self._client.set_model(resolve_model(model))

    def get_transcript(self) -> Transcript:
        """Return a read-only snapshot of the transcript."""
        return tuple(self._messages)

    async def send_user_message(self, text: str) -> ExchangeOutcome:
        """Run one exchange for the given user text.

        Blank or whitespace-only text is ignored without touching the
        transcript or the backend.

        Args:
            text: Raw user input

        Returns:
            COMPLETED, FAILED or IGNORED
        """
        if not text or not text.strip():
            return ExchangeOutcome.IGNORED

        async with self._exchange_lock:
            self._append(ChatMessage(role=Role.USER, content=text))

            try:
                reply = await self._client.chat(self.get_transcript())
            except BackendUnreachable as e:
                self._fail(FailureKind.BACKEND_UNREACHABLE, e.detail)
                return ExchangeOutcome.FAILED
            except BackendError as e:
                self._fail(FailureKind.BACKEND_ERROR, e.detail)
                return ExchangeOutcome.FAILED

            self._append(ChatMessage(role=Role.ASSISTANT, content=reply))
            return ExchangeOutcome.COMPLETED

    async def check_model_availability(self) -> bool:
        return await self._client.check_model_availability()

    async def pull_model(self) -> bool:
        return await self._client.pull_model()

    def _append(self, message: ChatMessage) -> None:
        self._messages.append(message)
        if self._listener is not None:
            self._listener.on_transcript_updated(self.get_transcript())

    def _fail(self, kind: FailureKind, detail: str) -> None:
        model = self._client.model
        logger.warning("Exchange with %s failed (%s): %s", model, kind.value, detail)
        failure = ExchangeFailure(
            kind=kind,
            message=FAILURE_MESSAGE_TEMPLATE.format(model=model),
            detail=detail,
            model=model,
        )
        if self._listener is not None:
            self._listener.on_exchange_failed(failure)
