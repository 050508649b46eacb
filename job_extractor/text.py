"""Text normalization, relevance classification and heading matching."""

from __future__ import annotations

import html
import re
from typing import Iterable

from .vocabulary import (
    JOB_INDICATORS,
    SECTION_VOCABULARIES,
    STOP_KEYWORDS,
    UI_FILTER_PATTERNS,
    UI_KEYWORDS,
    SectionBucket,
)

TAG_PATTERN = re.compile(r"<[^>]*>")
LEFTOVER_ENTITY_PATTERN = re.compile(r"&[a-zA-Z0-9#]+;")
WHITESPACE_PATTERN = re.compile(r"\s+")
PUNCTUATION_PATTERN = re.compile(r"[^\w\s]")

MIN_RELEVANT_LENGTH = 15
MAX_RELEVANT_LENGTH = 1000
MIN_RELEVANT_WORDS = 5

_TRANSLITERATION = str.maketrans({"ä": "a", "ö": "o", "ü": "u", "ß": "ss"})


def clean_text(text: str | None) -> str:
    """Collapse whitespace runs and trim."""
    if not text:
        return ""
    return WHITESPACE_PATTERN.sub(" ", text).strip()


def strip_html_tags(text: str | None) -> str:
    """Turn a markup fragment into clean single-line prose.

    Tags become spaces, entities are decoded, whitespace is collapsed and
    interface phrases (login prompts, cookie notices, pagination and the
    like) are blanked out. The passes are repeated until the text stops
    changing, so the function is idempotent.
    """
    if not text:
        return ""

    current = text
    while True:
        cleaned = _strip_once(current)
        if cleaned == current:
            return cleaned
        current = cleaned


def _strip_once(text: str) -> str:
    cleaned = TAG_PATTERN.sub(" ", text)
    cleaned = html.unescape(cleaned).replace("\xa0", " ")
    cleaned = LEFTOVER_ENTITY_PATTERN.sub(" ", cleaned)
    cleaned = clean_text(cleaned)
    for pattern in UI_FILTER_PATTERNS:
        cleaned = pattern.sub(" ", cleaned)
    return clean_text(cleaned)


def is_job_relevant_content(text: str | None) -> bool:
    """Decide whether *text* reads like job-ad content rather than page chrome."""
    if not text or len(text) < 10:
        return False

    if is_page_chrome(text):
        return False

    lowered = text.lower()
    has_indicator = any(indicator in lowered for indicator in JOB_INDICATORS)
    has_enough_words = len(text.split()) >= MIN_RELEVANT_WORDS
    return (
        MIN_RELEVANT_LENGTH <= len(text) <= MAX_RELEVANT_LENGTH
        and (has_indicator or has_enough_words)
    )


def is_page_chrome(text: str) -> bool:
    """Return ``True`` when *text* carries consent notices or other interface wording."""
    if any(pattern.search(text) for pattern in UI_FILTER_PATTERNS):
        return True
    lowered = text.lower()
    return any(keyword in lowered for keyword in STOP_KEYWORDS)


def is_ui_element(text: str | None) -> bool:
    """Return ``True`` for short interface strings such as buttons and links."""
    if not text or len(text) < 3:
        return True
    if any(pattern.search(text) for pattern in UI_FILTER_PATTERNS):
        return True
    lowered = text.lower()
    return any(keyword in lowered for keyword in UI_KEYWORDS)


def normalize_heading(text: str | None) -> str:
    """Lowercase, fold German diacritics and drop punctuation."""
    if not text:
        return ""
    folded = text.lower().translate(_TRANSLITERATION)
    return clean_text(PUNCTUATION_PATTERN.sub(" ", folded))


def matches_synonyms(text: str | None, synonyms: Iterable[str]) -> bool:
    if not text:
        return False
    if any(pattern.search(text) for pattern in UI_FILTER_PATTERNS):
        return False
    normalized = normalize_heading(text)
    if not normalized:
        return False
    return any(normalize_heading(synonym) in normalized for synonym in synonyms)


def classify_heading(text: str | None) -> SectionBucket | None:
    """Map a heading to the first section bucket whose vocabulary it matches."""
    for bucket, synonyms in SECTION_VOCABULARIES:
        if matches_synonyms(text, synonyms):
            return bucket
    return None


def dedupe_requirements(items: Iterable[str], limit: int) -> list[str]:
    """Keep relevant entries, drop exact duplicates, preserve first-seen order."""
    unique = dict.fromkeys(item for item in items if is_job_relevant_content(item))
    return list(unique)[:limit]
