"""Conversation session module for deepchat.

Owns the message transcript and sequences exchanges with the inference
backend.
"""

from .models import ExchangeFailure, ExchangeOutcome, FailureKind, SessionListener, Transcript
from .registry import SessionRegistry
from .session import ConversationSession

__all__ = [
    "ConversationSession",
    "ExchangeFailure",
    "ExchangeOutcome",
    "FailureKind",
    "SessionListener",
    "SessionRegistry",
    "Transcript",
]
