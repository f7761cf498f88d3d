"""Pytest configuration and shared fixtures."""
import asyncio
import os

import pytest

from insureai.conversation import ConversationStore
from insureai.inference import InferenceClient, InferenceRequest, InferenceResponse
from insureai.orchestrator import ResponseOrchestrator


class FakeInferenceClient(InferenceClient):
    """Inference client that replays scripted outcomes.

    Each outcome is either a reply string, an InferenceResponse, or an
    exception instance to raise. The last outcome repeats.
    """

    def __init__(self, *outcomes):
        self._outcomes = list(outcomes) or ["ok"]
        self.requests: list[InferenceRequest] = []
        self.closed = False

    async def invoke(self, request: InferenceRequest) -> InferenceResponse:
        self.requests.append(request)
        outcome = self._outcomes.pop(0) if len(self._outcomes) > 1 else self._outcomes[0]
        if isinstance(outcome, BaseException):
            raise outcome
        if isinstance(outcome, InferenceResponse):
            return outcome
        return InferenceResponse(response=outcome)

    async def close(self) -> None:
        self.closed = True


class GatedInferenceClient(InferenceClient):
    """Inference client that holds each call until released."""

    def __init__(self, reply: str = "done"):
        self._reply = reply
        self.started = asyncio.Event()
        self.release = asyncio.Event()
        self.calls = 0

    async def invoke(self, request: InferenceRequest) -> InferenceResponse:
        self.calls += 1
        self.started.set()
        await self.release.wait()
        return InferenceResponse(response=self._reply)

    async def close(self) -> None:
        pass


@pytest.fixture
def store():
    """Return an empty conversation store."""
    return ConversationStore()


@pytest.fixture
def fake_client():
    """Return a client that always replies 'ok'."""
    return FakeInferenceClient("ok")


@pytest.fixture
def orchestrator(fake_client, store):
    """Return an orchestrator wired to the fake client and store."""
    return ResponseOrchestrator(fake_client, store=store, context="test context")


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {
        "openai": os.getenv("OPENAI_API_KEY"),
        "anthropic": os.getenv("ANTHROPIC_API_KEY"),
    }
