"""Concrete implementations of infrastructure interfaces."""

from infrastructure.gemini_llm import GeminiLLMService
from infrastructure.placeholder_media import PlaceholderMediaService

__all__ = ["GeminiLLMService", "PlaceholderMediaService"]
