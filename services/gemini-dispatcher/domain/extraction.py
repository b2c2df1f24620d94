"""Recovery of structured results from free-form model completions.

These are heuristics over regular expressions, not parsers. The order of the
strategies is part of the observable behavior: for an ambiguous completion
the first strategy that matches decides the result, so the order must not
change.

Known weakness: the JSON fallback takes everything from the first "{" to the
last "}", so a completion holding two separate objects fails to parse rather
than yielding the first one.
"""

import json
import re
from typing import Any

from exceptions import ExtractionError

_FENCED_JSON = re.compile(r"```json\s*([\s\S]*?)\s*```")
_GREEDY_OBJECT = re.compile(r"\{[\s\S]*\}")

_FENCED_HTML = re.compile(r"```html\s*([\s\S]*?)\s*```")
_HTML_DOCUMENT = re.compile(r"(?:<!DOCTYPE[\s\S]*?)?<html[\s\S]*?</html>", re.IGNORECASE)
_HTML_TABLE = re.compile(r"(<table[\s\S]*?</table>)", re.IGNORECASE)
_HTML_FENCE_MARKER = re.compile(r"```html\s*", re.IGNORECASE)
_FENCE_MARKER = re.compile(r"```\s*")
_DUPLICATE_TITLE = re.compile(
    r"^\s*<h[1-3][^>]*>[^<]*"
    r"(?:verification|documentation|quote|notice|receipt|welcome|renewal)"
    r"[^<]*</h[1-3]>\s*",
    re.IGNORECASE,
)

_HTML_COMMENTARY_PREFIXES = ("key improvements", "before sending", "important:")
_HTML_COMMENTARY_FRAGMENTS = ("remember to set",)

PROSE_COMMENTARY_PREFIXES = (
    "here's",
    "note:",
    "tip:",
    "suggestion:",
    "you could also",
    "alternatively",
)

NO_JSON_MESSAGE = "No valid JSON found in response"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def parse_json_from_text(text: str) -> Any:
    """
    Recovers a JSON value from a model completion.

    Tries a ```json fenced block first, then the greedy span from the first
    "{" to the last "}".

    Args:
        text: The raw completion.

    Returns:
        The parsed JSON value (object, array or scalar).

    Raises:
        ExtractionError: If nothing matches or the match does not parse.
    """
    fenced = _FENCED_JSON.search(text)
    if fenced:
        candidate = fenced.group(1) or fenced.group(0)
    else:
        greedy = _GREEDY_OBJECT.search(text)
        if not greedy:
            raise ExtractionError(NO_JSON_MESSAGE)
        candidate = greedy.group(0)

    try:
        return json.loads(candidate, parse_constant=_reject_constant)
    except ValueError as e:
        raise ExtractionError(NO_JSON_MESSAGE, cause=e) from e


def _is_html_commentary(line: str) -> bool:
    trimmed = line.strip()
    lowered = trimmed.lower()
    if trimmed.startswith("*") or trimmed.startswith("#"):
        return True
    if lowered.startswith(_HTML_COMMENTARY_PREFIXES):
        return True
    return any(fragment in lowered for fragment in _HTML_COMMENTARY_FRAGMENTS)


def clean_html_lines(text: str) -> str:
    """
    Line-based cleanup used when no structured HTML can be located.

    Removes fence markers, drops bullet, heading and commentary lines, then
    strips one leading document title so the caller's own heading is not
    shown twice.
    """
    cleaned = _HTML_FENCE_MARKER.sub("", text)
    cleaned = _FENCE_MARKER.sub("", cleaned)
    cleaned = "\n".join(
        line for line in cleaned.split("\n") if not _is_html_commentary(line)
    )
    cleaned = _DUPLICATE_TITLE.sub("", cleaned, count=1)
    return cleaned.strip()


def extract_html_from_response(text: str) -> str:
    """
    Recovers an HTML email-body fragment from a model completion.

    Strategies, first match wins: ```html fenced block, full HTML document,
    first <table> element, line-based cleanup.

    Args:
        text: The raw completion.

    Returns:
        The trimmed HTML fragment.
    """
    fenced = _FENCED_HTML.search(text)
    if fenced:
        return fenced.group(1).strip()

    document = _HTML_DOCUMENT.search(text)
    if document:
        return document.group(0).strip()

    table = _HTML_TABLE.search(text)
    if table:
        return table.group(1).strip()

    return clean_html_lines(text)


def strip_meta_commentary(text: str) -> str:
    """Drops lines where the model talks to us instead of the customer."""
    lines = text.strip().split("\n")
    kept = [
        line
        for line in lines
        if not line.strip().lower().startswith(PROSE_COMMENTARY_PREFIXES)
    ]
    return "\n".join(kept).strip()
