"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel


class GeminiConfig(BaseModel, frozen=True):
    """Gemini LLM configuration."""

    api_key: str
    model_name: str = "gemini-2.0-flash-exp"


class PlaceholderMediaConfig(BaseModel, frozen=True):
    """Fixed locations returned by the image and video placeholders."""

    image_base_url: str = "https://via.placeholder.com/600x300"
    video_uri: str = "https://example.com/mock-video.mp4"


class CorsConfig(BaseModel, frozen=True):
    """Headers attached to every dispatcher response."""

    allow_origin: str = "*"
    allow_headers: str = "Content-Type"
    allow_methods: str = "POST, OPTIONS"

    def as_headers(self) -> dict[str, str]:
        return {
            "Access-Control-Allow-Origin": self.allow_origin,
            "Access-Control-Allow-Headers": self.allow_headers,
            "Access-Control-Allow-Methods": self.allow_methods,
        }


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    gemini: GeminiConfig
    media: PlaceholderMediaConfig
    cors: CorsConfig


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        gemini=GeminiConfig(
            api_key=os.getenv("GEMINI_API_KEY", ""),
            model_name=os.getenv("GEMINI_MODEL_NAME", "gemini-2.0-flash-exp"),
        ),
        media=PlaceholderMediaConfig(
            image_base_url=os.getenv(
                "PLACEHOLDER_IMAGE_BASE_URL", "https://via.placeholder.com/600x300"
            ),
            video_uri=os.getenv(
                "PLACEHOLDER_VIDEO_URI", "https://example.com/mock-video.mp4"
            ),
        ),
        cors=CorsConfig(
            allow_origin=os.getenv("CORS_ALLOW_ORIGIN", "*"),
        ),
    )
