from policy_mail_common.contracts import (
    ActionName,
    ErrorEnvelope,
    GeneratedVideo,
    GeneratedVideoFile,
    ResultEnvelope,
    VideoOperation,
    VideoOperationResponse,
)
from policy_mail_common.logging import setup_logging

__all__ = [
    "setup_logging",
    "ActionName",
    "ErrorEnvelope",
    "GeneratedVideo",
    "GeneratedVideoFile",
    "ResultEnvelope",
    "VideoOperation",
    "VideoOperationResponse",
]
