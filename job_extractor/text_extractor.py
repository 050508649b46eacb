"""Line-based job-field extraction from pasted plain text."""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable

from .location import (
    POSTAL_CITY_LINE_PATTERN,
    find_city_name,
    find_postal_code,
    find_street_address,
)
from .models import (
    MAX_TEXT_REQUIREMENTS,
    TEXT_MIN_DESCRIPTION_LENGTH,
    JobData,
    ensure_complete,
    format_german_date,
)
from .text import (
    classify_heading,
    clean_text,
    dedupe_requirements,
    is_job_relevant_content,
    is_page_chrome,
)
from .vocabulary import (
    APPLICATION_LINE_KEYWORDS,
    COMPANY_NAME_PATTERN,
    CONTRACT_LINE_PATTERN,
    GENDER_TAG_PATTERN,
    LEADING_BULLET_PATTERN,
    LEGAL_ENTITY_PATTERN,
    TEXT_REQUIREMENT_SIGNALS,
    TEXT_SECTION_RESET_SIGNALS,
    TITLE_DOMAIN_PATTERN,
    TITLE_ROLE_KEYWORDS,
)

logger = logging.getLogger(__name__)

TITLE_SCAN_LINES = 5
EMPLOYER_SCAN_LINES = 10
MIN_TITLE_LENGTH = 10
MAX_TITLE_LENGTH = 100
MAX_EMPLOYER_LENGTH = 80
MAX_EMPLOYER_WORDS = 6
MAX_SIGNAL_LINE_LENGTH = 80
MIN_DESCRIPTION_LINE_LENGTH = 20
DESCRIPTION_LINES = 5
MIN_REQUIREMENT_LENGTH = 5
MAX_REQUIREMENT_LENGTH = 200


def extract_job_data_from_text(raw_text: str, *, today: date | None = None) -> JobData:
    """Build a :class:`JobData` from free-form text, one fact per line where possible."""
    lines = _split_lines(raw_text)
    # Title, employer and description never come from consent or navigation lines
    content = [line for line in lines if not is_page_chrome(line)]
    logger.debug(
        "Extracting job data from %d text lines (%d after chrome filter)", len(lines), len(content)
    )

    jobtitel = _extract_title(content)
    arbeitgeber = _extract_employer(content, jobtitel)
    ort, plz, adresse = _extract_location(lines)

    job = JobData(
        jobtitel=jobtitel,
        arbeitgeber=arbeitgeber,
        adresse=adresse,
        ort=ort,
        plz=plz or None,
        datum=format_german_date(today or date.today()),
        vertrag=_first_matching_line(lines, CONTRACT_LINE_PATTERN.search),
        beschreibung=_extract_description(content, jobtitel, arbeitgeber),
        anforderungen=dedupe_requirements(_extract_requirements(lines), MAX_TEXT_REQUIREMENTS),
        bewerbungsprozess=_first_matching_line(
            lines, lambda line: any(keyword in line.lower() for keyword in APPLICATION_LINE_KEYWORDS)
        ),
    )
    return ensure_complete(job, min_description_length=TEXT_MIN_DESCRIPTION_LENGTH)


def _split_lines(raw_text: str) -> list[str]:
    lines = []
    for line in (raw_text or "").splitlines():
        cleaned = clean_text(LEADING_BULLET_PATTERN.sub("", line.strip()))
        if cleaned:
            lines.append(cleaned)
    return lines


def _first_matching_line(lines: list[str], predicate: Callable[[str], object]) -> str | None:
    for line in lines:
        if predicate(line):
            return line
    return None


def _has_title_signal(line: str) -> bool:
    lowered = line.lower()
    return (
        any(keyword in lowered for keyword in TITLE_ROLE_KEYWORDS)
        or bool(GENDER_TAG_PATTERN.search(line))
        or bool(TITLE_DOMAIN_PATTERN.search(line))
    )


def _extract_title(lines: list[str]) -> str:
    for line in lines[:TITLE_SCAN_LINES]:
        if MIN_TITLE_LENGTH <= len(line) <= MAX_TITLE_LENGTH and _has_title_signal(line):
            return line
    if lines and is_job_relevant_content(lines[0]):
        return lines[0]
    return ""


def _looks_like_company_name(line: str) -> bool:
    return (
        bool(COMPANY_NAME_PATTERN.match(line))
        and not any(char.isdigit() for char in line)
        and classify_heading(line) is None
        and find_city_name(line) is None
    )


def _has_legal_form(line: str) -> bool:
    return bool(LEGAL_ENTITY_PATTERN.search(line)) and len(line.split()) <= MAX_EMPLOYER_WORDS


def _extract_employer(lines: list[str], jobtitel: str) -> str:
    for line in lines[:EMPLOYER_SCAN_LINES]:
        if line == jobtitel or not 2 < len(line) < MAX_EMPLOYER_LENGTH:
            continue
        if _has_legal_form(line) or _looks_like_company_name(line):
            return line
    return ""


def _extract_location(lines: list[str]) -> tuple[str, str, str]:
    ort = plz = adresse = ""
    located = False
    for line in lines:
        if not located:
            pair = POSTAL_CITY_LINE_PATTERN.search(line)
            if pair:
                plz, ort = pair.group(1), pair.group(2).strip()
                located = True
            else:
                plz = plz or find_postal_code(line) or ""
                ort = ort or find_city_name(line) or ""
        if not adresse:
            adresse = find_street_address(line) or ""
    return ort, plz, adresse


def _is_requirement_signal(line: str) -> bool:
    lowered = line.lower()
    return len(line) <= MAX_SIGNAL_LINE_LENGTH and any(
        signal in lowered for signal in TEXT_REQUIREMENT_SIGNALS
    )


def _is_section_reset(line: str) -> bool:
    lowered = line.lower()
    return len(line) <= MAX_SIGNAL_LINE_LENGTH and any(
        signal in lowered for signal in TEXT_SECTION_RESET_SIGNALS
    )


def _extract_description(lines: list[str], jobtitel: str, arbeitgeber: str) -> str:
    picked: list[str] = []
    in_requirements = False
    for line in lines:
        if _is_requirement_signal(line):
            in_requirements = True
            continue
        if _is_section_reset(line):
            in_requirements = False
        if (
            not in_requirements
            and len(line) > MIN_DESCRIPTION_LINE_LENGTH
            and line not in (jobtitel, arbeitgeber)
        ):
            picked.append(line)
    return " ".join(picked[:DESCRIPTION_LINES])


def _extract_requirements(lines: list[str]) -> list[str]:
    found: list[str] = []
    in_section = False
    for line in lines:
        if _is_requirement_signal(line):
            in_section = True
            continue
        if not in_section:
            continue
        if _is_section_reset(line):
            break
        if MIN_REQUIREMENT_LENGTH < len(line) < MAX_REQUIREMENT_LENGTH:
            found.append(line)
    return found
