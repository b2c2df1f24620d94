"""Client configuration loaded from environment variables."""

import os

from pydantic import BaseModel, computed_field


class ClientConfig(BaseModel, frozen=True):
    """Where the dispatcher lives and how long to wait for it."""

    base_url: str = "http://localhost:8888"
    api_path: str = "/api/gemini"
    timeout_seconds: float = 120.0
    poll_interval_seconds: float = 10.0

    @computed_field
    @property
    def endpoint_url(self) -> str:
        """Returns the full dispatcher URL."""
        return f"{self.base_url.rstrip('/')}/{self.api_path.lstrip('/')}"


def load_config() -> ClientConfig:
    """Loads configuration from environment variables."""
    return ClientConfig(
        base_url=os.getenv("POLICY_MAIL_API_BASE_URL", "http://localhost:8888"),
        api_path=os.getenv("POLICY_MAIL_API_PATH", "/api/gemini"),
        timeout_seconds=float(os.getenv("POLICY_MAIL_API_TIMEOUT_SECONDS", "120")),
        poll_interval_seconds=float(
            os.getenv("POLICY_MAIL_VIDEO_POLL_INTERVAL_SECONDS", "10")
        ),
    )
