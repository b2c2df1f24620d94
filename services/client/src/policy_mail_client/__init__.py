from policy_mail_client.config import ClientConfig, load_config
from policy_mail_client.exceptions import ApiCallError, VideoGenerationError
from policy_mail_client.facade import (
    EMAIL_BODY_FALLBACK,
    RATE_CHANGE_FALLBACK,
    PolicyMailClient,
)
from policy_mail_client.models import (
    Agent,
    DocumentUpload,
    EmailFormData,
    Opportunity,
    PdfPromptSuggestion,
    QuoteProse,
)
from policy_mail_client.transport import DispatcherTransport

__all__ = [
    "PolicyMailClient",
    "DispatcherTransport",
    "ClientConfig",
    "load_config",
    "ApiCallError",
    "VideoGenerationError",
    "EMAIL_BODY_FALLBACK",
    "RATE_CHANGE_FALLBACK",
    "Agent",
    "DocumentUpload",
    "EmailFormData",
    "Opportunity",
    "PdfPromptSuggestion",
    "QuoteProse",
]
