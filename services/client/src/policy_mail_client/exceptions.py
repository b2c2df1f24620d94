"""Custom exceptions for the dispatcher client."""


class ApiCallError(Exception):
    """Raised when the dispatcher answers with a non-2xx status."""

    def __init__(self, action: str, status_code: int, body: str):
        self.action = action
        self.status_code = status_code
        self.body = body
        super().__init__(f"API call failed: {status_code} {body}")


class VideoGenerationError(Exception):
    """Raised when a video job cannot be started or followed."""

    def __init__(self, message: str):
        super().__init__(message)
