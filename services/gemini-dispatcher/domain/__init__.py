"""Domain layer exports."""

from domain.action_dispatcher import ActionDispatcher
from domain.extraction import (
    extract_html_from_response,
    parse_json_from_text,
    strip_meta_commentary,
)
from domain.models import (
    ActionRequest,
    Agent,
    BinaryAttachment,
    EmailFormData,
)

__all__ = [
    "ActionDispatcher",
    "ActionRequest",
    "Agent",
    "BinaryAttachment",
    "EmailFormData",
    "extract_html_from_response",
    "parse_json_from_text",
    "strip_meta_commentary",
]
