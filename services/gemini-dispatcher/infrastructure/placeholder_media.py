"""Placeholder media backend.

Gemini has no image or video generation in this deployment, so these return
fixed locations instead of calling a provider.
"""

import time
from urllib.parse import quote

from policy_mail_common import (
    GeneratedVideo,
    GeneratedVideoFile,
    VideoOperation,
    VideoOperationResponse,
)
from policy_mail_common.logging import setup_logging

from infrastructure.interfaces import MediaService

logger = setup_logging()

# Characters encodeURIComponent leaves untouched besides alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"


class PlaceholderMediaService(MediaService):
    """Returns deterministic placeholder media."""

    def __init__(self, image_base_url: str, video_uri: str):
        self._image_base_url = image_base_url
        self._video_uri = video_uri

    def generate_image_url(self, prompt: str) -> str:
        url = f"{self._image_base_url}?text={quote(prompt, safe=_URI_COMPONENT_SAFE)}"
        logger.info("Placeholder image generated", extra={"url": url})
        return url

    def start_video(self, prompt: str) -> VideoOperation:
        operation = VideoOperation(
            name=f"operations/video-{int(time.time() * 1000)}",
            done=False,
        )
        logger.info("Placeholder video started", extra={"operation": operation.name})
        return operation

    def poll_video(self, operation: VideoOperation) -> VideoOperation:
        completed = operation.model_copy(
            update={
                "done": True,
                "response": VideoOperationResponse(
                    generated_videos=[
                        GeneratedVideo(video=GeneratedVideoFile(uri=self._video_uri))
                    ]
                ),
            }
        )
        logger.info("Placeholder video completed", extra={"operation": operation.name})
        return completed
