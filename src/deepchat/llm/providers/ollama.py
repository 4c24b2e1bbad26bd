import logging
from typing import Any

import httpx
from pydantic import ValidationError

from ...config import (
    CHAT_ENDPOINT,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    PULL_ENDPOINT,
    TAGS_ENDPOINT,
)
from ..base import InferenceClient
from ..catalog import DEFAULT_MODEL
from ..errors import BackendError, BackendUnreachable
from ..models import ChatMessage, ChatRequest, ChatResponseEnvelope, PullRequest, TagsResponseEnvelope

logger = logging.getLogger(__name__)


class OllamaClient(InferenceClient):
    """Client for an Ollama-compatible local inference server.

    Hidden design decisions:
    - HTTP transport (httpx.AsyncClient bound to the base URL)
    - Non-streaming request bodies for chat and pull
    - Envelope validation with pydantic
    - Which failures raise (chat) and which report False (tags, pull)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        model: str = DEFAULT_MODEL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        **client_kwargs: Any
    ):
        """Initialize the Ollama client.

        Args:
            base_url: Server base URL (default: http://127.0.0.1:3000)
            model: Active model identifier
            timeout: Per-request timeout in seconds
            **client_kwargs: Additional kwargs for httpx.AsyncClient (e.g. transport)
        """
        self._base_url = base_url.rstrip("/")
        self._model = model
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=timeout,
            **client_kwargs
        )

    @property
    def model(self) -> str:
        """Get the active model identifier."""
        return self._model

    @property
    def base_url(self) -> str:
        """Get the backend base URL."""
        return self._base_url

    def set_model(self, model: str) -> None:
        self._model = model

    async def chat(self, history: list[ChatMessage]) -> str:
        """Send the conversation to ``/api/chat`` and return the reply text.

        Args:
            history: Full ordered conversation history

        Returns:
            Content of the assistant message in the response envelope

        Raises:
            BackendUnreachable: On connection failure or timeout
            BackendError: On a non-2xx status or a malformed envelope
        """
        request = ChatRequest.from_history(self._model, list(history))
        logger.debug(
            "Chat request to %s using model %s with %d message(s)",
            self._base_url, self._model, len(request.messages)
        )

        try:
            response = await self._client.post(CHAT_ENDPOINT, json=request.model_dump())
        except httpx.DecodingError as e:
            raise BackendError("Ollama API Error: malformed chat response", detail=str(e)) from e
        except httpx.TransportError as e:
            raise BackendUnreachable(f"Ollama API Error: {e}", detail=str(e)) from e

        if not response.is_success:
            raise BackendError(
                f"Ollama API Error: HTTP {response.status_code}",
                detail=response.text,
                status_code=response.status_code
            )

        try:
            envelope = ChatResponseEnvelope.model_validate_json(response.content)
        except ValidationError as e:
            raise BackendError(
                "Ollama API Error: malformed chat response",
                detail=str(e),
                status_code=response.status_code
            ) from e

        return envelope.message.content

    async def check_model_availability(self) -> bool:
        """Check ``/api/tags`` for the active model."""
        try:
            response = await self._client.get(TAGS_ENDPOINT)
            response.raise_for_status()
            envelope = TagsResponseEnvelope.model_validate_json(response.content)
        except (httpx.HTTPError, ValidationError) as e:
            logger.warning("Model availability check failed: %s", e)
            return False

        return envelope.has_model(self._model)

    async def pull_model(self) -> bool:
        """Ask ``/api/pull`` to fetch the active model.

        The backend may keep downloading after this returns.
        """
        request = PullRequest(name=self._model)
        try:
            response = await self._client.post(PULL_ENDPOINT, json=request.model_dump())
        except httpx.HTTPError as e:
            logger.warning("Pull request for %s failed: %s", self._model, e)
            return False

        if response.status_code != 200:
            logger.warning("Pull request for %s rejected with HTTP %d", self._model, response.status_code)
            return False
        return True

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
