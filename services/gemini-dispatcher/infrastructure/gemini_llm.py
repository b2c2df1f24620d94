"""Gemini LLM service implementation."""

from google import genai
from google.genai import types
from policy_mail_common.logging import setup_logging

from domain.models import BinaryAttachment
from exceptions import LLMServiceError
from infrastructure.interfaces import LLMService

logger = setup_logging()


class GeminiLLMService(LLMService):
    """LLM service implementation using Google Gemini."""

    def __init__(self, client: genai.Client, model_name: str):
        self._client = client
        self._model_name = model_name

    def generate_text(self, prompt: str, system_instruction: str | None = None) -> str:
        config = {"system_instruction": system_instruction} if system_instruction else None
        return self._generate(prompt, config, kind="text")

    def generate_from_document(self, prompt: str, attachment: BinaryAttachment) -> str:
        """
        Sends the prompt and the document as two parts of one request.

        The SDK base64-encodes the inline bytes when it serializes the request.
        """
        document_part = types.Part.from_bytes(
            data=attachment.content,
            mime_type=attachment.content_type,
        )
        logger.info(
            "Sending document to Gemini",
            extra={
                "document_name": attachment.filename,
                "content_type": attachment.content_type,
                "size": len(attachment.content),
            },
        )
        return self._generate([prompt, document_part], None, kind="document")

    def _generate(self, contents, config: dict | None, kind: str) -> str:
        try:
            response = self._client.models.generate_content(
                model=self._model_name,
                contents=contents,
                config=config,
            )
            if not response.text:
                raise LLMServiceError("Gemini returned empty response")
            logger.info(
                "Gemini completion received",
                extra={"kind": kind, "model": self._model_name, "length": len(response.text)},
            )
            return response.text
        except LLMServiceError:
            raise
        except Exception as e:
            logger.exception("Gemini API call failed", extra={"kind": kind})
            raise LLMServiceError(f"Gemini generation failed: {e}", cause=e) from e
