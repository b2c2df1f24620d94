"""Abstract interface for LLM service operations."""

from abc import ABC, abstractmethod

from domain.models import BinaryAttachment


class LLMService(ABC):
    """Abstract base class for LLM backends."""

    @abstractmethod
    def generate_text(self, prompt: str, system_instruction: str | None = None) -> str:
        """
        Sends a text-only prompt and returns the raw completion.

        Args:
            prompt: The prompt text.
            system_instruction: Optional system instruction for the model.

        Returns:
            The completion text, unprocessed.

        Raises:
            LLMServiceError: If the LLM call fails.
        """
        pass

    @abstractmethod
    def generate_from_document(self, prompt: str, attachment: BinaryAttachment) -> str:
        """
        Sends a prompt together with a document and returns the raw completion.

        Args:
            prompt: The prompt text.
            attachment: The document, sent inline with its MIME type.

        Returns:
            The completion text, unprocessed.

        Raises:
            LLMServiceError: If the LLM call fails.
        """
        pass
