"""Postal code, city and German street address heuristics."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .vocabulary import (
    CITY_NAMES,
    LOCATION_LABEL_PATTERN,
    STREET_PREFIX_WORDS,
    STREET_SUFFIXES,
)

POSTAL_CODE_PATTERN = re.compile(r"\b(\d{5})\b")
# "80331 München, Bayern" -> ("80331", "München")
POSTAL_CITY_PATTERN = re.compile(r"\b(\d{5})\s+([^,\n]+)")
# Stricter variant for free-text lines
POSTAL_CITY_LINE_PATTERN = re.compile(r"\b(\d{5})\s+([A-ZÄÖÜ][a-zäöüß\s-]+)")
CITY_FALLBACK_PATTERN = re.compile(r"(?:in\s+)?([A-ZÄÖÜ][a-zäöüß\s-]+)")
CITY_NAME_PATTERN = re.compile(
    r"\b(" + "|".join(re.escape(name) for name in CITY_NAMES) + r")\b", re.IGNORECASE
)

_SUFFIX = "|".join(STREET_SUFFIXES)
_PREFIX = "|".join(re.escape(word).replace(r"\ ", r"\s+") for word in STREET_PREFIX_WORDS)
_STREET_NAME = r"[A-ZÄÖÜ][a-zäöüß]*(?:-[A-ZÄÖÜa-zäöüß][a-zäöüß]*)*"
_HOUSE_NUMBER = r"\d{1,4}(?!\d)\s?[a-zA-Z]?\b(?:\s*[-–]\s*\d{1,4}[a-zA-Z]?\b)?"

STREET_ADDRESS_PATTERN = re.compile(
    rf"(?<![\w-])((?:(?:{_PREFIX})\s+)?(?:{_STREET_NAME}[- ]?)?(?i:{_SUFFIX})\s*{_HOUSE_NUMBER})"
)
STREET_SUFFIX_TOKEN_PATTERN = re.compile(rf"(?:{_SUFFIX})", re.IGNORECASE)

MIN_ADDRESS_LENGTH = 6
MAX_ADDRESS_LENGTH = 100


@dataclass(slots=True)
class ParsedLocation:
    ort: str = ""
    plz: str = ""


def find_postal_code(text: str | None) -> str | None:
    if not text:
        return None
    match = POSTAL_CODE_PATTERN.search(text)
    return match.group(1) if match else None


def find_city_name(text: str | None) -> str | None:
    """Return the first well-known city mentioned in *text*."""
    if not text:
        return None
    match = CITY_NAME_PATTERN.search(text)
    return match.group(1) if match else None


def parse_location_text(text: str | None) -> ParsedLocation:
    """Split a location label such as ``"80331 München"`` into city and postal code."""
    parsed = ParsedLocation()
    if not text:
        return parsed

    text = LOCATION_LABEL_PATTERN.sub("", text).strip()
    combined = POSTAL_CITY_PATTERN.search(text)
    if combined:
        parsed.plz = combined.group(1)
        parsed.ort = combined.group(2).strip()
        return parsed

    city = CITY_FALLBACK_PATTERN.search(text)
    parsed.ort = city.group(1).strip() if city else text
    parsed.plz = find_postal_code(text) or ""
    return parsed


def parse_postal_city(text: str | None) -> ParsedLocation | None:
    """Return postal code and city when *text* holds a ``PLZ City`` pair."""
    if not text:
        return None
    match = POSTAL_CITY_PATTERN.search(text)
    if not match:
        return None
    return ParsedLocation(ort=match.group(2).strip(), plz=match.group(1))


def is_plausible_street_address(candidate: str | None) -> bool:
    if not candidate:
        return False
    if not MIN_ADDRESS_LENGTH <= len(candidate) <= MAX_ADDRESS_LENGTH:
        return False
    return any(char.isdigit() for char in candidate) and bool(
        STREET_SUFFIX_TOKEN_PATTERN.search(candidate)
    )


def find_street_address(text: str | None) -> str | None:
    """Return the first German street address in *text*, e.g. ``"Musterstraße 12"``."""
    if not text:
        return None
    for match in STREET_ADDRESS_PATTERN.finditer(text):
        candidate = match.group(1).strip()
        if is_plausible_street_address(candidate):
            return candidate
    return None
