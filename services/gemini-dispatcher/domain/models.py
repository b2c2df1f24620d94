"""Domain models for action dispatch."""

from typing import Any

from policy_mail_common import VideoOperation
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class BinaryAttachment(BaseModel, frozen=True):
    """A document uploaded alongside a multipart request."""

    content: bytes
    content_type: str = "application/pdf"
    filename: str = "document.pdf"


class ActionRequest(BaseModel):
    """Normalized form of both the JSON and the multipart request bodies."""

    action: str | None = None
    payload: dict[str, Any] = Field(default_factory=dict)
    file: BinaryAttachment | None = None

    @field_validator("payload", mode="before")
    @classmethod
    def _default_payload(cls, value: Any) -> Any:
        return {} if value is None else value


def _as_text(value: Any) -> Any:
    """Renders scalars the way they read in a prompt; None becomes ""."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return value


class _PayloadModel(BaseModel):
    """Base for payload fields; camelCase on the wire, permissive extras."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )


class EmailFormData(_PayloadModel):
    """Campaign details entered by the agent. Missing fields render as ""."""

    email_campaign: str = ""
    recipient_name: str = ""
    custom_prompt: str = ""

    @field_validator("email_campaign", "recipient_name", "custom_prompt", mode="before")
    @classmethod
    def _scalar_as_text(cls, value: Any) -> Any:
        return _as_text(value)


class Agent(_PayloadModel):
    """The agent signing the email."""

    name: str = ""
    email: str = ""
    phone: str = ""

    @field_validator("name", "email", "phone", mode="before")
    @classmethod
    def _scalar_as_text(cls, value: Any) -> Any:
        return _as_text(value)


class FormDataPayload(_PayloadModel):
    form_data: EmailFormData = Field(default_factory=EmailFormData)

    @field_validator("form_data", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value


class EmailBodyPayload(FormDataPayload):
    agent: Agent = Field(default_factory=Agent)

    @field_validator("agent", mode="before")
    @classmethod
    def _none_agent_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value


class MediaPromptPayload(_PayloadModel):
    prompt: str = ""

    @field_validator("prompt", mode="before")
    @classmethod
    def _scalar_as_text(cls, value: Any) -> Any:
        return _as_text(value)


class VideoOperationPayload(_PayloadModel):
    operation: VideoOperation = Field(default_factory=VideoOperation)

    @field_validator("operation", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value


class TextPayload(_PayloadModel):
    text: str = ""

    @field_validator("text", mode="before")
    @classmethod
    def _scalar_as_text(cls, value: Any) -> Any:
        return _as_text(value)


class RateChangePayload(_PayloadModel):
    previous_premium: str | int | float = ""
    new_premium: str | int | float = ""
