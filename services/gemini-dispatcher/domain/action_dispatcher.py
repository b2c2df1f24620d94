"""Routes named actions to their prompt, model call and extraction."""

from collections.abc import Callable
from functools import partial
from typing import Any, TypeVar

from policy_mail_common import ActionName
from policy_mail_common.logging import setup_logging
from pydantic import BaseModel, ValidationError

from domain import prompts
from domain.extraction import (
    extract_html_from_response,
    parse_json_from_text,
    strip_meta_commentary,
)
from domain.models import (
    ActionRequest,
    BinaryAttachment,
    EmailBodyPayload,
    FormDataPayload,
    MediaPromptPayload,
    RateChangePayload,
    TextPayload,
    VideoOperationPayload,
)
from exceptions import (
    EmptyAttachmentError,
    InvalidPayloadError,
    MissingAttachmentError,
    UnknownActionError,
)
from infrastructure.interfaces import LLMService, MediaService

logger = setup_logging()

PayloadT = TypeVar("PayloadT", bound=BaseModel)

_DOCUMENT_PROMPTS = {
    ActionName.GENERATE_PROMPT_FROM_PDF: prompts.PROMPT_FROM_PDF,
    ActionName.EXTRACT_QUOTE_FROM_PDF: prompts.QUOTE_FROM_PDF,
    ActionName.EXTRACT_AUTO_QUOTE_FROM_PDF: prompts.AUTO_QUOTE_FROM_PDF,
    ActionName.EXTRACT_RENEWAL_INFO_FROM_PDF: prompts.RENEWAL_FROM_PDF,
    ActionName.EXTRACT_NEW_POLICY_INFO_FROM_PDF: prompts.NEW_POLICY_FROM_PDF,
    ActionName.EXTRACT_CANCELLATIONS_FROM_PDF: prompts.CANCELLATIONS_FROM_PDF,
    ActionName.EXTRACT_RECEIPT_INFO_FROM_PDF: prompts.RECEIPT_FROM_PDF,
}


class ActionDispatcher:
    """Selects and runs exactly one handler per request."""

    def __init__(self, llm_service: LLMService, media_service: MediaService):
        self._llm = llm_service
        self._media = media_service
        handlers: dict[ActionName, Callable[[ActionRequest], Any]] = {
            ActionName.GENERATE_SUBJECT_LINES: self._generate_subject_lines,
            ActionName.GENERATE_PREHEADERS: self._generate_preheaders,
            ActionName.GENERATE_EMAIL_BODY: self._generate_email_body,
            ActionName.GENERATE_HOME_QUOTE_PROSE: partial(
                self._generate_quote_prose, line_of_business="a home"
            ),
            ActionName.GENERATE_AUTO_QUOTE_PROSE: partial(
                self._generate_quote_prose, line_of_business="an auto"
            ),
            ActionName.GENERATE_HERO_IMAGE: self._generate_hero_image,
            ActionName.GENERATE_VIDEO: self._generate_video,
            ActionName.GET_VIDEOS_OPERATION: self._get_videos_operation,
            ActionName.EXTRACT_RECEIPT_INFO_FROM_TEXT: partial(
                self._extract_from_text, build_prompt=prompts.receipt_from_text_prompt
            ),
            ActionName.EXTRACT_CHANGE_INFO_FROM_TEXT: partial(
                self._extract_from_text, build_prompt=prompts.change_from_text_prompt
            ),
            ActionName.GENERATE_OPPORTUNITIES: self._generate_opportunities,
            ActionName.GENERATE_RATE_CHANGE_EXPLANATION: self._explain_rate_change,
        }
        for action, prompt in _DOCUMENT_PROMPTS.items():
            handlers[action] = partial(self._extract_from_document, prompt=prompt)
        self._handlers = {action.value: handler for action, handler in handlers.items()}

    @property
    def actions(self) -> list[str]:
        """Names of all routable actions."""
        return sorted(self._handlers)

    def dispatch(self, request: ActionRequest) -> Any:
        """
        Runs the handler registered for request.action.

        Args:
            request: The normalized action request.

        Returns:
            The extracted result: a JSON value, an HTML string or a prose string.

        Raises:
            UnknownActionError: If no handler is registered for the action.
            DispatchError: If any later stage of the action fails.
        """
        handler = self._handlers.get(request.action) if request.action else None
        if handler is None:
            raise UnknownActionError(request.action)

        logger.info(
            "Dispatching action",
            extra={"action": request.action, "has_file": request.file is not None},
        )
        result = handler(request)
        logger.info("Action completed", extra={"action": request.action})
        return result

    def _payload(self, request: ActionRequest, model: type[PayloadT]) -> PayloadT:
        try:
            return model.model_validate(request.payload)
        except ValidationError as e:
            raise InvalidPayloadError(request.action or "", cause=e) from e

    def _attachment(self, request: ActionRequest) -> BinaryAttachment:
        if request.file is None:
            raise MissingAttachmentError(request.action or "")
        if not request.file.content:
            raise EmptyAttachmentError(request.file.filename)
        return request.file

    def _generate_subject_lines(self, request: ActionRequest) -> Any:
        payload = self._payload(request, FormDataPayload)
        text = self._llm.generate_text(
            prompts.subject_lines_prompt(payload.form_data),
            prompts.COPYWRITER_INSTRUCTION,
        )
        return parse_json_from_text(text)

    def _generate_preheaders(self, request: ActionRequest) -> Any:
        payload = self._payload(request, FormDataPayload)
        text = self._llm.generate_text(
            prompts.preheaders_prompt(payload.form_data),
            prompts.COPYWRITER_INSTRUCTION,
        )
        return parse_json_from_text(text)

    def _generate_email_body(self, request: ActionRequest) -> str:
        payload = self._payload(request, EmailBodyPayload)
        raw = self._llm.generate_text(
            prompts.email_body_prompt(payload.form_data, payload.agent),
            prompts.EMAIL_BODY_INSTRUCTION,
        )
        return extract_html_from_response(raw)

    def _generate_quote_prose(self, request: ActionRequest, line_of_business: str) -> Any:
        payload = self._payload(request, FormDataPayload)
        text = self._llm.generate_text(
            prompts.quote_prose_prompt(payload.form_data, line_of_business),
            prompts.PROSE_INSTRUCTION,
        )
        return parse_json_from_text(text)

    def _generate_hero_image(self, request: ActionRequest) -> str:
        payload = self._payload(request, MediaPromptPayload)
        return self._media.generate_image_url(payload.prompt)

    def _generate_video(self, request: ActionRequest) -> dict[str, Any]:
        payload = self._payload(request, MediaPromptPayload)
        return self._media.start_video(payload.prompt).to_payload()

    def _get_videos_operation(self, request: ActionRequest) -> dict[str, Any]:
        payload = self._payload(request, VideoOperationPayload)
        return self._media.poll_video(payload.operation).to_payload()

    def _extract_from_document(self, request: ActionRequest, prompt: str) -> Any:
        attachment = self._attachment(request)
        text = self._llm.generate_from_document(prompt, attachment)
        return parse_json_from_text(text)

    def _extract_from_text(
        self, request: ActionRequest, build_prompt: Callable[[str], str]
    ) -> Any:
        payload = self._payload(request, TextPayload)
        text = self._llm.generate_text(
            build_prompt(payload.text), prompts.DATA_EXTRACTION_INSTRUCTION
        )
        return parse_json_from_text(text)

    def _generate_opportunities(self, request: ActionRequest) -> Any:
        self._payload(request, FormDataPayload)
        text = self._llm.generate_text(
            prompts.opportunities_prompt(request.payload.get("formData") or {}),
            prompts.SALES_INSTRUCTION,
        )
        return parse_json_from_text(text)

    def _explain_rate_change(self, request: ActionRequest) -> str:
        payload = self._payload(request, RateChangePayload)
        raw = self._llm.generate_text(
            prompts.rate_change_prompt(payload.previous_premium, payload.new_premium),
            prompts.RATE_CHANGE_INSTRUCTION,
        )
        return strip_meta_commentary(raw)
