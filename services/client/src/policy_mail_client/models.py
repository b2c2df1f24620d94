"""Shapes the client sends and receives."""

from pathlib import Path
from typing import Literal, TypedDict

from pydantic import BaseModel


class EmailFormData(TypedDict, total=False):
    emailCampaign: str
    recipientName: str
    customPrompt: str


class Agent(TypedDict, total=False):
    name: str
    email: str
    phone: str


class QuoteProse(TypedDict):
    greeting: str
    intro: str
    ctaText: str


class PdfPromptSuggestion(TypedDict):
    policyHolder: str
    recipientName: str
    customPrompt: str


class Opportunity(TypedDict):
    title: str
    description: str
    priority: Literal["high", "medium", "low"]


class DocumentUpload(BaseModel, frozen=True):
    """A document to send along with a file-bearing action."""

    filename: str
    content: bytes
    content_type: str = "application/pdf"

    @classmethod
    def from_path(cls, path: str | Path, content_type: str = "application/pdf") -> "DocumentUpload":
        """Reads a document from disk."""
        path = Path(path)
        return cls(filename=path.name, content=path.read_bytes(), content_type=content_type)
