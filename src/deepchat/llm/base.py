from abc import ABC, abstractmethod
from typing import Any

from .models import ChatMessage


class InferenceClient(ABC):
    """Abstract base class for inference backend clients.

    This module hides the design decision of which backend serves the model.
    Implementations must handle backend-specific details like:
    - HTTP client setup
    - Request/response format conversion and validation
    - Mapping transport failures to BackendUnreachable / BackendError

    Clients hold no conversation state; the caller passes the full history
    on every chat call.

    Supports async context manager protocol for proper resource cleanup:
        async with client:
            reply = await client.chat(messages)
        # Automatically cleaned up
    """

    @property
    @abstractmethod
    def model(self) -> str:
        """Get the active model identifier."""

    @property
    @abstractmethod
    def base_url(self) -> str:
        """Get the backend base URL."""

    @abstractmethod
    def set_model(self, model: str) -> None:
        """Set the model used by subsequent requests.

        No validation is done here; callers pick from the catalog.
        """

    @abstractmethod
    async def chat(self, history: list[ChatMessage]) -> str:
        """Send the full history and return the assistant reply text.

        Args:
            history: Ordered conversation history

        Returns:
            The reply content, unrendered

        Raises:
            BackendUnreachable: If no response was received
            BackendError: If the backend signalled an error or the envelope is malformed
        """

    @abstractmethod
    async def check_model_availability(self) -> bool:
        """Report whether the active model is installed on the backend.

        Never raises; any failure reports False.
        """

    @abstractmethod
    async def pull_model(self) -> bool:
        """Ask the backend to fetch the active model.

        Never raises; returns whether the request was accepted.
        """

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""

    async def __aenter__(self) -> "InferenceClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
