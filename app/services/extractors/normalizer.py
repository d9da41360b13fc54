"""Boilerplate removal and whitespace normalization for extracted text."""

from __future__ import annotations

import re
import unicodedata

_SHARE_LABELS = re.compile(
    r"\bShare\b[ \t]*(?:(?:Share|Facebook|Twitter|Mail|Pinterest|Whatsapp|Or)\b)?[ \t]*",
    re.IGNORECASE,
)
_PLATFORM_NAMES = re.compile(
    r"\b(?:Facebook|Twitter|Mail|Pinterest|Whatsapp|LinkedIn|Reddit|Share)\b",
    re.IGNORECASE,
)
_IMAGE_CREDITS = (
    re.compile(r"Save this picture!", re.IGNORECASE),
    re.compile(r"Created by\s*@\w+", re.IGNORECASE),
    re.compile(r"source imagery:\s*@\w+", re.IGNORECASE),
)
_CLIPBOARD = (
    re.compile(r"Clipboard\s*[\"']COPY[\"']?\s*Copy", re.IGNORECASE),
    re.compile(r"Copy\s*link|Copy URL", re.IGNORECASE),
)
# Single-line only: "Home > News > World"
_BREADCRUMB = re.compile(r"\bHome[ \t]*>[ \t]*[\w \t>]+", re.IGNORECASE)

_HORIZONTAL_WHITESPACE = re.compile(r"[^\S\n]+")
_EXCESS_NEWLINES = re.compile(r"\n{3,}")

# Characters stripped from both ends of every line
_LINE_EDGE_CHARS = " •-*"


def strip_control_characters(text: str) -> str:
    """NFC-normalize and drop control characters other than newline and tab."""
    text = unicodedata.normalize("NFC", text.replace("\r\n", "\n").replace("\r", "\n"))
    return "".join(char for char in text if unicodedata.category(char) != "Cc" or char in "\n\t")


def remove_boilerplate(text: str) -> str:
    """Remove share widgets, image credits, copy-link artifacts and breadcrumbs."""
    text = _SHARE_LABELS.sub("", text)
    text = _PLATFORM_NAMES.sub("", text)
    for pattern in _IMAGE_CREDITS:
        text = pattern.sub("", text)
    for pattern in _CLIPBOARD:
        text = pattern.sub("", text)
    return _BREADCRUMB.sub("", text)


def normalize_text(text: str | None) -> str:
    """Clean extracted article text.

    Steps, in order:
    - Removes social-sharing labels and platform names
    - Removes image-credit and copy-link boilerplate
    - Removes "Home > X > Y" breadcrumbs
    - Collapses horizontal whitespace runs to a single space
    - Collapses 3+ newlines to exactly two
    - Strips bullets, dashes and asterisks from line edges
    - Drops blank lines and trims the result

    Args:
        text: Raw extracted text

    Returns:
        Cleaned text (empty string for empty input)
    """
    if not text:
        return ""

    text = strip_control_characters(text)
    text = remove_boilerplate(text)
    text = _HORIZONTAL_WHITESPACE.sub(" ", text)
    text = _EXCESS_NEWLINES.sub("\n\n", text)

    lines = (line.strip(_LINE_EDGE_CHARS) for line in text.split("\n"))
    return "\n".join(line for line in lines if line).strip()
