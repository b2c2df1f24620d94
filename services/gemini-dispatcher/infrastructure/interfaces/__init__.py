"""Infrastructure interface exports."""

from infrastructure.interfaces.llm_service import LLMService
from infrastructure.interfaces.media_service import MediaService

__all__ = [
    "LLMService",
    "MediaService",
]
