"""Custom exceptions for the gemini-dispatcher service."""


class DispatchError(Exception):
    """Base class for every failure that aborts an action."""


class UnknownActionError(DispatchError):
    """Raised when the requested action has no handler."""

    def __init__(self, action: str | None):
        self.action = action
        super().__init__(f"Unknown action: {action}")


class MissingAttachmentError(DispatchError):
    """Raised when a document action is called without a file."""

    def __init__(self, action: str):
        self.action = action
        super().__init__("No file provided")


class EmptyAttachmentError(DispatchError):
    """Raised when the uploaded file has no content."""

    def __init__(self, filename: str):
        self.filename = filename
        super().__init__("File content is missing")


class InvalidPayloadError(DispatchError):
    """Raised when the payload does not fit the action's payload model."""

    def __init__(self, action: str, cause: Exception | None = None):
        self.action = action
        self.cause = cause
        super().__init__(f"Invalid payload for action '{action}': {cause}")


class InvalidRequestBodyError(DispatchError):
    """Raised when the request body cannot be decoded."""

    def __init__(self, reason: str, cause: Exception | None = None):
        self.reason = reason
        self.cause = cause
        super().__init__(f"Invalid request body: {reason}")


class LLMServiceError(DispatchError):
    """Raised when LLM service call fails."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class ExtractionError(DispatchError):
    """Raised when no usable shape can be recovered from a completion."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)
