"""One method per dispatcher action.

Every method maps any failure to a fixed fallback value for its action, so
callers see degraded output (an empty list, None, default copy) and never an
exception. The underlying error is always logged.
"""

import logging
import time
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from policy_mail_common import ActionName, VideoOperation

from policy_mail_client.config import ClientConfig, load_config
from policy_mail_client.exceptions import VideoGenerationError
from policy_mail_client.models import (
    Agent,
    DocumentUpload,
    EmailFormData,
    Opportunity,
    PdfPromptSuggestion,
    QuoteProse,
)
from policy_mail_client.transport import DispatcherTransport

logger = logging.getLogger(__name__)

T = TypeVar("T")

EMAIL_BODY_FALLBACK = "<p>Error generating content. Please try again.</p>"
RATE_CHANGE_FALLBACK = (
    "We understand that seeing a premium increase can be frustrating. Rates across "
    "the industry are being adjusted to account for factors like the rising costs "
    "of labor and materials for repairs. We've ensured your policy continues to "
    "provide the best protection for your investment. Please feel free to call us "
    "if you'd like to review your coverage options."
)

PROGRESS_STARTING = "Initiating video generation..."
PROGRESS_QUEUED = "Video is in the queue. This may take a few minutes..."
PROGRESS_RENDERING = "AI is rendering your video..."
PROGRESS_COMPLETE = "Processing complete!"
PROGRESS_FAILED = "Error during video generation."


def _is_blank(value: Any) -> bool:
    """None, "", False and 0 count as no result; empty lists and dicts do not."""
    if value is None:
        return True
    if isinstance(value, (str, bool, int, float)):
        return not value
    return False


def _result_of(data: Any) -> Any:
    return data.get("result") if isinstance(data, Mapping) else None


class PolicyMailClient:
    """Typed facade over the dispatcher endpoint."""

    def __init__(
        self,
        transport: DispatcherTransport | None = None,
        config: ClientConfig | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._config = config or load_config()
        self._transport = transport or DispatcherTransport(self._config)
        self._sleep = sleep

    def _with_fallback(
        self, action: ActionName, fallback: T, call: Callable[[], Any]
    ) -> T | Any:
        try:
            result = _result_of(call())
        except Exception:
            logger.exception(
                "Action failed, returning fallback", extra={"action": action.value}
            )
            return fallback
        if _is_blank(result):
            return fallback
        return result

    def _post(self, action: ActionName, fallback: T, payload: dict[str, Any]) -> T | Any:
        return self._with_fallback(
            action, fallback, lambda: self._transport.post_json(action.value, payload)
        )

    def _post_file(
        self, action: ActionName, fallback: T, document: DocumentUpload
    ) -> T | Any:
        return self._with_fallback(
            action,
            fallback,
            lambda: self._transport.post_with_file(action.value, {}, document),
        )

    def generate_subject_lines(self, form_data: EmailFormData) -> list[str]:
        return self._post(
            ActionName.GENERATE_SUBJECT_LINES, [], {"formData": form_data}
        )

    def generate_preheaders(self, form_data: EmailFormData) -> list[str]:
        return self._post(ActionName.GENERATE_PREHEADERS, [], {"formData": form_data})

    def generate_email_body(self, form_data: EmailFormData, agent: Agent) -> str:
        return self._post(
            ActionName.GENERATE_EMAIL_BODY,
            EMAIL_BODY_FALLBACK,
            {"formData": form_data, "agent": agent},
        )

    def generate_home_quote_prose(self, form_data: EmailFormData) -> QuoteProse | None:
        return self._post(
            ActionName.GENERATE_HOME_QUOTE_PROSE, None, {"formData": form_data}
        )

    def generate_auto_quote_prose(self, form_data: EmailFormData) -> QuoteProse | None:
        return self._post(
            ActionName.GENERATE_AUTO_QUOTE_PROSE, None, {"formData": form_data}
        )

    def generate_hero_image(self, prompt: str) -> str | None:
        if not prompt:
            return None
        return self._post(ActionName.GENERATE_HERO_IMAGE, None, {"prompt": prompt})

    def generate_video(
        self, prompt: str, on_progress: Callable[[str], None] | None = None
    ) -> str | None:
        """
        Starts a video job and polls until it reports done.

        Sleeps poll_interval_seconds before every poll and reports each phase
        through on_progress. There is no attempt limit: the loop ends only
        when the operation comes back done (or a call fails).

        Args:
            prompt: What the video should show.
            on_progress: Receives a short status message at each phase.

        Returns:
            The video URI, or None if the job failed or produced no video.
        """
        if not prompt:
            return None
        report = on_progress or (lambda _status: None)

        try:
            report(PROGRESS_STARTING)
            operation = self._video_operation(
                self._transport.post_json(
                    ActionName.GENERATE_VIDEO.value, {"prompt": prompt}
                )
            )
            if not operation.name:
                raise VideoGenerationError("Failed to start video generation.")

            report(PROGRESS_QUEUED)
            while not operation.done:
                self._sleep(self._config.poll_interval_seconds)
                report(PROGRESS_RENDERING)
                operation = self._video_operation(
                    self._transport.post_json(
                        ActionName.GET_VIDEOS_OPERATION.value,
                        {"operation": operation.to_payload()},
                    )
                )

            report(PROGRESS_COMPLETE)
            uri = operation.video_uri
            if not uri:
                logger.error(
                    "Video generation finished but no download link found",
                    extra={"operation": operation.name},
                )
                return None
            return uri
        except Exception:
            logger.exception("Error generating video")
            report(PROGRESS_FAILED)
            return None

    def _video_operation(self, data: Any) -> VideoOperation:
        result = _result_of(data)
        if not isinstance(result, Mapping):
            raise VideoGenerationError("Dispatcher returned no video operation.")
        return VideoOperation.model_validate(result)

    def generate_prompt_from_pdf(
        self, document: DocumentUpload
    ) -> PdfPromptSuggestion | None:
        return self._post_file(ActionName.GENERATE_PROMPT_FROM_PDF, None, document)

    def extract_quote_from_pdf(self, document: DocumentUpload) -> dict[str, Any] | None:
        return self._post_file(ActionName.EXTRACT_QUOTE_FROM_PDF, None, document)

    def extract_auto_quote_from_pdf(
        self, document: DocumentUpload
    ) -> dict[str, Any] | None:
        return self._post_file(ActionName.EXTRACT_AUTO_QUOTE_FROM_PDF, None, document)

    def extract_renewal_info_from_pdf(
        self, document: DocumentUpload
    ) -> dict[str, Any] | None:
        return self._post_file(ActionName.EXTRACT_RENEWAL_INFO_FROM_PDF, None, document)

    def extract_new_policy_info_from_pdf(
        self, document: DocumentUpload
    ) -> dict[str, Any] | None:
        return self._post_file(
            ActionName.EXTRACT_NEW_POLICY_INFO_FROM_PDF, None, document
        )

    def extract_cancellations_from_pdf(
        self, document: DocumentUpload
    ) -> list[dict[str, Any]] | None:
        return self._post_file(
            ActionName.EXTRACT_CANCELLATIONS_FROM_PDF, None, document
        )

    def extract_receipt_info_from_pdf(
        self, document: DocumentUpload
    ) -> dict[str, Any] | None:
        return self._post_file(ActionName.EXTRACT_RECEIPT_INFO_FROM_PDF, None, document)

    def extract_receipt_info_from_text(self, text: str) -> dict[str, Any] | None:
        return self._post(ActionName.EXTRACT_RECEIPT_INFO_FROM_TEXT, None, {"text": text})

    def extract_change_info_from_text(self, text: str) -> dict[str, Any] | None:
        return self._post(ActionName.EXTRACT_CHANGE_INFO_FROM_TEXT, None, {"text": text})

    def generate_opportunities(self, form_data: EmailFormData) -> list[Opportunity]:
        return self._post(ActionName.GENERATE_OPPORTUNITIES, [], {"formData": form_data})

    def generate_rate_change_explanation(
        self, previous_premium: str, new_premium: str
    ) -> str:
        return self._post(
            ActionName.GENERATE_RATE_CHANGE_EXPLANATION,
            RATE_CHANGE_FALLBACK,
            {"previousPremium": previous_premium, "newPremium": new_premium},
        )

    def close(self) -> None:
        self._transport.close()
