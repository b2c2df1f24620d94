"""FastAPI dependency injection configuration."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from google import genai
from policy_mail_common.logging import setup_logging

from config import AppConfig, load_config
from domain import ActionDispatcher
from infrastructure import GeminiLLMService, PlaceholderMediaService
from infrastructure.interfaces import LLMService, MediaService

logger = setup_logging()


@lru_cache
def get_config() -> AppConfig:
    """Returns the process-wide configuration."""
    return load_config()


@lru_cache
def get_llm_service() -> LLMService:
    """Returns the configured Gemini LLM service."""
    config = get_config()
    client = genai.Client(api_key=config.gemini.api_key)
    logger.info("Gemini client initialized", extra={"model": config.gemini.model_name})
    return GeminiLLMService(client, config.gemini.model_name)


@lru_cache
def get_media_service() -> MediaService:
    """Returns the placeholder media service."""
    config = get_config()
    return PlaceholderMediaService(config.media.image_base_url, config.media.video_uri)


def get_dispatcher(
    llm_service: Annotated[LLMService, Depends(get_llm_service)],
    media_service: Annotated[MediaService, Depends(get_media_service)],
) -> ActionDispatcher:
    """Returns a dispatcher wired to the configured services."""
    return ActionDispatcher(llm_service, media_service)
