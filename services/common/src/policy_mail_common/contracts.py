"""Request/response contract shared by the dispatcher and its clients."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ActionName(str, Enum):
    """Every action the dispatcher knows how to route."""

    GENERATE_SUBJECT_LINES = "generateSubjectLines"
    GENERATE_PREHEADERS = "generatePreheaders"
    GENERATE_EMAIL_BODY = "generateEmailBody"
    GENERATE_HOME_QUOTE_PROSE = "generateHomeQuoteProse"
    GENERATE_AUTO_QUOTE_PROSE = "generateAutoQuoteProse"
    GENERATE_HERO_IMAGE = "generateHeroImage"
    GENERATE_VIDEO = "generateVideo"
    GET_VIDEOS_OPERATION = "getVideosOperation"
    GENERATE_PROMPT_FROM_PDF = "generatePromptFromPdf"
    EXTRACT_QUOTE_FROM_PDF = "extractQuoteFromPdf"
    EXTRACT_AUTO_QUOTE_FROM_PDF = "extractAutoQuoteFromPdf"
    EXTRACT_RENEWAL_INFO_FROM_PDF = "extractRenewalInfoFromPdf"
    EXTRACT_NEW_POLICY_INFO_FROM_PDF = "extractNewPolicyInfoFromPdf"
    EXTRACT_CANCELLATIONS_FROM_PDF = "extractCancellationsFromPdf"
    EXTRACT_RECEIPT_INFO_FROM_PDF = "extractReceiptInfoFromPdf"
    EXTRACT_RECEIPT_INFO_FROM_TEXT = "extractReceiptInfoFromText"
    EXTRACT_CHANGE_INFO_FROM_TEXT = "extractChangeInfoFromText"
    GENERATE_OPPORTUNITIES = "generateOpportunities"
    GENERATE_RATE_CHANGE_EXPLANATION = "generateRateChangeExplanation"


class GeneratedVideoFile(BaseModel):
    """Location of a rendered video."""

    uri: str


class GeneratedVideo(BaseModel):
    video: GeneratedVideoFile


class VideoOperationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    generated_videos: list[GeneratedVideo] = Field(
        default_factory=list, alias="generatedVideos"
    )


class VideoOperation(BaseModel):
    """
    Handle for a video generation job.

    The dispatcher keeps no state between requests, so callers pass the
    whole operation back on every poll. Unknown keys are preserved.
    """

    model_config = ConfigDict(extra="allow")

    name: str = ""
    done: bool = False
    response: VideoOperationResponse | None = None

    @property
    def video_uri(self) -> str | None:
        """Returns the first generated video URI, if the job produced one."""
        if not self.response or not self.response.generated_videos:
            return None
        return self.response.generated_videos[0].video.uri

    def to_payload(self) -> dict[str, Any]:
        """Serializes to the camelCase wire shape."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ResultEnvelope(BaseModel):
    """Successful dispatcher response."""

    result: Any = None


class ErrorEnvelope(BaseModel):
    """Failed dispatcher response."""

    error: str
