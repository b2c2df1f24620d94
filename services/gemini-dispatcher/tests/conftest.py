"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Service modules are imported by their top-level names, as at runtime.
SERVICE_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(SERVICE_ROOT))

from domain import ActionDispatcher  # noqa: E402
from domain.models import BinaryAttachment  # noqa: E402
from infrastructure import PlaceholderMediaService  # noqa: E402
from infrastructure.interfaces import LLMService  # noqa: E402


class FakeLLMService(LLMService):
    """Returns a canned completion and records every call."""

    def __init__(self, completion: str = "{}"):
        self.completion = completion
        self.text_calls: list[tuple[str, str | None]] = []
        self.document_calls: list[tuple[str, BinaryAttachment]] = []

    @property
    def call_count(self) -> int:
        return len(self.text_calls) + len(self.document_calls)

    def generate_text(self, prompt: str, system_instruction: str | None = None) -> str:
        self.text_calls.append((prompt, system_instruction))
        return self.completion

    def generate_from_document(self, prompt: str, attachment: BinaryAttachment) -> str:
        self.document_calls.append((prompt, attachment))
        return self.completion


@pytest.fixture
def fake_llm() -> FakeLLMService:
    return FakeLLMService()


@pytest.fixture
def media_service() -> PlaceholderMediaService:
    return PlaceholderMediaService(
        image_base_url="https://via.placeholder.com/600x300",
        video_uri="https://example.com/mock-video.mp4",
    )


@pytest.fixture
def dispatcher(fake_llm, media_service) -> ActionDispatcher:
    return ActionDispatcher(fake_llm, media_service)


@pytest.fixture
def pdf_attachment() -> BinaryAttachment:
    return BinaryAttachment(
        content=b"%PDF-1.4 quote",
        content_type="application/pdf",
        filename="quote.pdf",
    )
