"""Shared fixtures: stand-ins for the completion and search providers."""

from typing import List, Optional

import pytest

from db.performance_repository import PerformanceRepository
from db.storage import InMemoryStore
from models.quiz_models import QuizRequest
from utils.errors import GenerationError


class FakeGenerationClient:
    """Records prompts and replays a canned completion or error."""

    def __init__(self, text: str = "", error: Optional[Exception] = None, configured: bool = True):
        self.text = text
        self.error = error
        self.configured = configured
        self.calls: List[tuple] = []

    def is_configured(self) -> bool:
        return self.configured

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        self.calls.append((system_prompt, user_prompt))
        if self.error is not None:
            raise self.error
        return self.text


class FakeContentAgent:
    def __init__(self, context: str = ""):
        self.context = context
        self.topics: List[str] = []

    async def fetch_context(self, topic: str) -> str:
        self.topics.append(topic)
        return self.context


VALID_COMPLETION = (
    'Here you go: [{"question":"Q1","options":{"A":"x","B":"y"},"answer":"A",'
    '"explanation":"e","difficulty":"beginner","category":"concept"}] Thanks!'
)


@pytest.fixture
def content_agent() -> FakeContentAgent:
    return FakeContentAgent()


@pytest.fixture
def failing_client() -> FakeGenerationClient:
    return FakeGenerationClient(error=GenerationError("DeepSeek API error: 500", status_code=500))


@pytest.fixture
def valid_client() -> FakeGenerationClient:
    return FakeGenerationClient(text=VALID_COMPLETION)


@pytest.fixture
def performance_repo() -> PerformanceRepository:
    return PerformanceRepository(InMemoryStore())


def make_request(**overrides) -> QuizRequest:
    fields = {"language": "JavaScript", "topic": "Closures"}
    fields.update(overrides)
    return QuizRequest(**fields)


@pytest.fixture
def quiz_request():
    """Factory for QuizRequest with JavaScript/Closures defaults."""
    return make_request
