import os

# must be set before the application settings are first imported
os.environ["STORE_BACKEND"] = "memory"

from datetime import datetime, timedelta, timezone

import httpx
import pytest
from dependency_injector import providers
from httpx import ASGITransport, AsyncClient

from api.main import app
from infra.document_store import InMemoryDocumentStore
from infra.groq_client import GroqCompletionClient


class SteppingClock:
    """Clock that advances by ``step`` on every call; ``step=0`` freezes it."""

    def __init__(self, start=None, step=timedelta(seconds=1)):
        self.current = start or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self):
        value = self.current
        self.current = self.current + self.step
        return value


@pytest.fixture
def clock():
    return SteppingClock()


@pytest.fixture
def frozen_clock():
    return SteppingClock(step=timedelta(0))


@pytest.fixture
def memory_store():
    return InMemoryDocumentStore()


@pytest.fixture
def app_store():
    store = app.container.infrastructure.document_store()
    store.reset()
    return store


@pytest.fixture
async def client(app_store):
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


def make_groq_client(handler, api_key="test-key"):
    return GroqCompletionClient(
        api_key=api_key,
        base_url="https://groq.test/openai/v1",
        transport=httpx.MockTransport(handler),
    )


def completion_body(content):
    return {"choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]}


@pytest.fixture
def install_groq():
    """Swap the application's Groq client for one built by the test."""
    provider = app.container.infrastructure.groq_client

    def _install(groq_client):
        provider.override(providers.Object(groq_client))
        return groq_client

    yield _install
    provider.reset_override()


@pytest.fixture
def groq_factory():
    return make_groq_client


@pytest.fixture
def completion():
    return completion_body
