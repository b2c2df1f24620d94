from types import SimpleNamespace

import pytest

from domain.models import BinaryAttachment
from exceptions import LLMServiceError
from infrastructure import GeminiLLMService


class _FakeModels:
    def __init__(self, text="completion", error=None):
        self.text = text
        self.error = error
        self.calls = []

    def generate_content(self, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error:
            raise self.error
        return SimpleNamespace(text=self.text)


def _service(models: _FakeModels) -> GeminiLLMService:
    return GeminiLLMService(SimpleNamespace(models=models), "gemini-2.0-flash-exp")


def test_text_call_passes_system_instruction():
    models = _FakeModels(text='["a"]')

    assert _service(models).generate_text("Write lines", "You are a copywriter.") == '["a"]'
    assert models.calls[0] == {
        "model": "gemini-2.0-flash-exp",
        "contents": "Write lines",
        "config": {"system_instruction": "You are a copywriter."},
    }


def test_text_call_without_instruction_sends_no_config():
    models = _FakeModels()
    _service(models).generate_text("Write lines")
    assert models.calls[0]["config"] is None


def test_document_call_sends_prompt_and_inline_file():
    models = _FakeModels(text="{}")
    attachment = BinaryAttachment(content=b"%PDF-1.4", content_type="application/pdf")

    _service(models).generate_from_document("Extract", attachment)

    prompt, part = models.calls[0]["contents"]
    assert prompt == "Extract"
    assert part.inline_data.data == b"%PDF-1.4"
    assert part.inline_data.mime_type == "application/pdf"


def test_provider_error_is_wrapped():
    models = _FakeModels(error=RuntimeError("quota exceeded"))

    with pytest.raises(LLMServiceError, match="quota exceeded") as exc_info:
        _service(models).generate_text("Write lines")
    assert isinstance(exc_info.value.cause, RuntimeError)


def test_empty_completion_is_an_error():
    with pytest.raises(LLMServiceError, match="empty response"):
        _service(_FakeModels(text="")).generate_text("Write lines")
