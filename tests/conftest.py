"""Pytest configuration and shared fixtures."""
import json
import os

import httpx
import pytest

from deepchat.llm import InferenceClient, OllamaClient
from deepchat.session import ExchangeFailure, SessionListener


class FakeBackend:
    """Scriptable stand-in for the inference server behind httpx.MockTransport."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.chat_reply: str = "hi"
        self.chat_status: int = 200
        self.chat_body: bytes | None = None
        self.installed: list[str] = ["deepseek-r1:1.5b"]
        self.tags_status: int = 200
        self.pull_status: int = 200
        self.refuse_connections: bool = False

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.refuse_connections:
            raise httpx.ConnectError("Connection refused", request=request)

        if request.url.path == "/api/chat":
            if self.chat_body is not None:
                return httpx.Response(self.chat_status, content=self.chat_body)
            return httpx.Response(
                self.chat_status,
                json={"model": "deepseek-r1:1.5b", "message": {"role": "assistant", "content": self.chat_reply}, "done": True},
            )
        if request.url.path == "/api/tags":
            return httpx.Response(self.tags_status, json={"models": [{"name": name} for name in self.installed]})
        if request.url.path == "/api/pull":
            return httpx.Response(self.pull_status, json={"status": "success"})
        return httpx.Response(404, json={"error": "not found"})

    def bodies(self, path: str) -> list[dict]:
        """Decoded JSON bodies of requests sent to a path."""
        return [json.loads(req.content) for req in self.requests if req.url.path == path]

    def client(self, **kwargs) -> OllamaClient:
        return OllamaClient(transport=httpx.MockTransport(self), **kwargs)


class FakeInferenceClient(InferenceClient):
    """In-memory client with scripted replies and failures.

    Each entry of ``script`` is either reply text or an exception to raise.
    """

    def __init__(self, script: list | None = None, model: str = "deepseek-r1:1.5b"):
        self.script = list(script or [])
        self.calls: list[tuple[str, tuple]] = []
        self.available = True
        self.pull_accepted = True
        self._model = model

    @property
    def model(self) -> str:
        return self._model

    @property
    def base_url(self) -> str:
        return "http://fake"

    def set_model(self, model: str) -> None:
        self._model = model

    async def chat(self, history) -> str:
        self.calls.append((self._model, tuple(history)))
        outcome = self.script.pop(0) if self.script else "ok"
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    async def check_model_availability(self) -> bool:
        return self.available

    async def pull_model(self) -> bool:
        return self.pull_accepted

    async def close(self) -> None:
        pass


class RecordingListener(SessionListener):
    """Listener that keeps every notification it receives."""

    def __init__(self):
        self.updates: list[tuple] = []
        self.failures: list[ExchangeFailure] = []

    def on_transcript_updated(self, transcript) -> None:
        self.updates.append(transcript)

    def on_exchange_failed(self, failure: ExchangeFailure) -> None:
        self.failures.append(failure)


@pytest.fixture
def fake_backend():
    """Return a fresh scripted backend."""
    return FakeBackend()


@pytest.fixture
def fake_client():
    """Return a fake inference client with an empty script."""
    return FakeInferenceClient()


@pytest.fixture
def listener():
    """Return a recording session listener."""
    return RecordingListener()


@pytest.fixture(scope="session")
def backend_url():
    """Return the URL of a real backend for integration tests, if configured."""
    return os.getenv("DEEPCHAT_BASE_URL")

