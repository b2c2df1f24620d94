"""Abstract interface for image and video generation."""

from abc import ABC, abstractmethod

from policy_mail_common import VideoOperation


class MediaService(ABC):
    """Abstract base class for media generation backends."""

    @abstractmethod
    def generate_image_url(self, prompt: str) -> str:
        """
        Generates a hero image for the prompt.

        Returns:
            A URL the email can reference.
        """
        pass

    @abstractmethod
    def start_video(self, prompt: str) -> VideoOperation:
        """
        Starts a video generation job.

        Returns:
            An operation handle the caller polls with poll_video.
        """
        pass

    @abstractmethod
    def poll_video(self, operation: VideoOperation) -> VideoOperation:
        """
        Refreshes a video generation job.

        Args:
            operation: The handle returned by start_video or a previous poll.

        Returns:
            The updated operation; response holds the video once done is True.
        """
        pass
