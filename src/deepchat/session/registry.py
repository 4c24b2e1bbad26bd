"""Registry of open conversation sessions.

The caller owns the registry; the package keeps no process-wide session
state. Handles are opaque strings.
"""

import logging
from uuid import uuid4

from ..llm.base import InferenceClient
from .models import SessionListener
from .session import ConversationSession

logger = logging.getLogger(__name__)


class SessionRegistry:
    """Maps opaque handles to live ConversationSession instances."""

    def __init__(self):
        self._sessions: dict[str, ConversationSession] = {}

    def open(self, client: InferenceClient, listener: SessionListener | None = None) -> str:
        """Create a new session and return its handle."""
        handle = uuid4().hex
        self._sessions[handle] = ConversationSession(client, listener)
        logger.debug("Opened session %s with model %s", handle, client.model)
        return handle

    def get(self, handle: str) -> ConversationSession:
        """Look up a session.

        Raises:
            KeyError: If the handle is unknown or already closed
        """
        try:
            return self._sessions[handle]
        except KeyError:
            raise KeyError(f"Unknown session handle: {handle}") from None

    def close(self, handle: str) -> None:
        """Discard a session and its transcript. Unknown handles are ignored."""
        if self._sessions.pop(handle, None) is not None:
            logger.debug("Closed session %s", handle)

    def handles(self) -> list[str]:
        return list(self._sessions)

    def __contains__(self, handle: object) -> bool:
        return handle in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
