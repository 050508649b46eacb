"""Heuristic job-field extraction from a fetched HTML page."""

from __future__ import annotations

import logging
import re
from datetime import date
from urllib.parse import urlparse

from bs4.element import Tag

from .document import DocumentView
from .jsonld import parse_json_ld
from .location import (
    find_postal_code,
    find_street_address,
    parse_location_text,
    parse_postal_city,
)
from .models import (
    HTML_MIN_DESCRIPTION_LENGTH,
    MAX_HTML_REQUIREMENTS,
    JobData,
    ensure_complete,
    format_german_date,
)
from .text import (
    classify_heading,
    clean_text,
    dedupe_requirements,
    is_job_relevant_content,
    is_ui_element,
    strip_html_tags,
)
from .vocabulary import (
    ADDRESS_CONTEXT_KEYWORDS,
    ADDRESS_NOISE_SELECTORS,
    ADDRESS_SCAN_SELECTOR,
    COMPANY_ADDRESS_SELECTORS,
    COMPANY_SELECTORS,
    DESCRIPTION_SELECTORS,
    HEADING_SELECTOR,
    LOCATION_EXCLUDED_TERMS,
    LOCATION_SELECTORS,
    REQUIREMENT_SIGNAL_KEYWORDS,
    STOP_KEYWORDS,
    TITLE_SELECTORS,
    SectionBucket,
)

logger = logging.getLogger(__name__)

HEADING_TAG_PATTERN = re.compile(r"^h[1-6]$")
BULLET_SPLIT_PATTERN = re.compile(r"[•·●▪–—]|(?:^|\s)-\s")

MIN_TITLE_CANDIDATE_LENGTH = 5
MAX_EMPLOYER_LENGTH = 100
MAX_SECTION_ATTEMPTS = 8
MAX_SECTION_ITEMS = 15
MIN_REQUIREMENTS_BEFORE_SCAN = 3
MAX_SCANNED_LIST_ITEMS = 15
MIN_ADDRESS_BLOCK_LENGTH = 15
MAX_ADDRESS_BLOCK_LENGTH = 300
MIN_DESCRIPTION_BLOCK_LENGTH = 100
MAX_DESCRIPTION_CHARS = 1500
# Only the head of a long block is classified
RELEVANCE_WINDOW = 1000


def extract_job_data(html: str, url: str, *, today: date | None = None) -> JobData:
    """Build a :class:`JobData` from *html*, seeded by JSON-LD when present.

    Raises :class:`IncompleteSourceError` when title, employer or description
    cannot be recovered.
    """
    view = DocumentView.parse(html)
    seed = parse_json_ld(html)
    if seed:
        logger.debug("JSON-LD seeded fields for %s: %s", url, ", ".join(sorted(seed)))

    jobtitel = seed.get("jobtitel") or _extract_title(view)
    arbeitgeber = seed.get("arbeitgeber") or _extract_employer(view, url)

    ort, plz, adresse = _extract_location(view, seed)
    if not adresse:
        adresse = _extract_company_address(view.with_ignored(ADDRESS_NOISE_SELECTORS))

    sections = _collect_sections(view)
    logger.debug(
        "Section items for %s: %s",
        url,
        {bucket.value: len(items) for bucket, items in sections.items()},
    )

    anforderungen = list(seed.get("anforderungen", [])) + sections[SectionBucket.REQUIREMENTS]
    if len(anforderungen) < MIN_REQUIREMENTS_BEFORE_SCAN:
        anforderungen.extend(_scan_requirement_lists(view))

    vertrag = seed.get("vertrag") or ", ".join(sections[SectionBucket.CONTRACT])
    bewerbungsprozess = " ".join(sections[SectionBucket.APPLICATION])
    beschreibung = seed.get("beschreibung") or _extract_description(view)

    job = JobData(
        jobtitel=jobtitel,
        arbeitgeber=arbeitgeber,
        adresse=adresse,
        ort=ort,
        plz=plz or None,
        datum=format_german_date(today or date.today()),
        vertrag=vertrag or None,
        beschreibung=beschreibung,
        anforderungen=dedupe_requirements(anforderungen, MAX_HTML_REQUIREMENTS),
        bewerbungsprozess=bewerbungsprozess or None,
    )
    return ensure_complete(job, min_description_length=HTML_MIN_DESCRIPTION_LENGTH)


def _extract_title(view: DocumentView) -> str:
    fallback = ""
    for selector in TITLE_SELECTORS:
        element = view.select_one(selector)
        if element is None:
            continue
        text = strip_html_tags(view.text(element))
        if not text or is_ui_element(text):
            continue
        if len(text) > MIN_TITLE_CANDIDATE_LENGTH:
            return text
        fallback = fallback or text
    return fallback


def _extract_employer(view: DocumentView, url: str) -> str:
    for selector in COMPANY_SELECTORS:
        element = view.select_one(selector)
        if element is None:
            continue
        text = strip_html_tags(view.text(element))
        if (
            1 < len(text) < MAX_EMPLOYER_LENGTH
            and not is_ui_element(text)
            and "linkedin" not in text.lower()
        ):
            return text
    return _employer_from_domain(url)


def _employer_from_domain(url: str) -> str:
    host = urlparse(url).hostname or ""
    labels = host.split(".")
    if len(labels) < 2:
        return ""
    name = labels[-2]
    return name[:1].upper() + name[1:]


def _extract_location(view: DocumentView, seed: dict[str, object]) -> tuple[str, str, str]:
    ort = str(seed.get("ort") or "")
    plz = str(seed.get("plz") or "")
    adresse = str(seed.get("adresse") or "")

    if ort:
        pair = parse_postal_city(ort)
        if pair is not None:
            ort = pair.ort
            plz = plz or pair.plz
        return ort, plz, adresse

    location_text = ""
    for selector in LOCATION_SELECTORS:
        element = view.select_one(selector)
        if element is None:
            continue
        text = strip_html_tags(view.text(element))
        lowered = text.lower()
        if len(text) > 2 and not any(term in lowered for term in LOCATION_EXCLUDED_TERMS):
            location_text = text
            break

    if location_text:
        parsed = parse_location_text(location_text)
        ort = parsed.ort
        plz = plz or parsed.plz or find_postal_code(location_text) or ""
        adresse = adresse or find_street_address(location_text) or ""
    return ort, plz, adresse


def _extract_company_address(view: DocumentView) -> str:
    for selector in COMPANY_ADDRESS_SELECTORS:
        for element in view.select(selector):
            text = strip_html_tags(view.text(element))
            if len(text) < 10 or is_ui_element(text):
                continue
            address = find_street_address(text)
            if address:
                return address

    for element in view.select(ADDRESS_SCAN_SELECTOR):
        raw = clean_text(view.text(element))
        if not MIN_ADDRESS_BLOCK_LENGTH <= len(raw) <= MAX_ADDRESS_BLOCK_LENGTH:
            continue
        lowered = raw.lower()
        if not any(keyword in lowered for keyword in ADDRESS_CONTEXT_KEYWORDS):
            continue
        address = find_street_address(strip_html_tags(raw))
        if address:
            return address
    return ""


def _collect_sections(view: DocumentView) -> dict[SectionBucket, list[str]]:
    sections: dict[SectionBucket, list[str]] = {bucket: [] for bucket in SectionBucket}
    for heading in view.select(HEADING_SELECTOR):
        bucket = classify_heading(strip_html_tags(view.text(heading)))
        if bucket is None:
            continue
        sections[bucket].extend(extract_section_content(view, heading))
    return sections


def _is_section_boundary(view: DocumentView, heading: Tag) -> bool:
    text = strip_html_tags(view.text(heading))
    lowered = text.lower()
    if any(keyword in lowered for keyword in STOP_KEYWORDS):
        return True
    return classify_heading(text) is not None


def extract_section_content(view: DocumentView, heading: Tag) -> list[str]:
    """Collect list items or paragraphs that follow *heading*.

    Walks at most eight following siblings and stops at the next heading
    that opens another known section or a page-chrome block.
    """
    content: list[str] = []
    for attempt, sibling in enumerate(view.next_siblings(heading), start=1):
        if attempt > MAX_SECTION_ATTEMPTS or len(content) >= MAX_SECTION_ITEMS:
            break

        name = sibling.name or ""
        if HEADING_TAG_PATTERN.match(name):
            if _is_section_boundary(view, sibling):
                break
            continue

        if name in ("ul", "ol"):
            for item in view.select_within(sibling, "li"):
                text = strip_html_tags(view.text(item))
                if is_job_relevant_content(text):
                    content.append(text)
            break

        if name in ("p", "div"):
            raw = clean_text(view.text(sibling))
            if BULLET_SPLIT_PATTERN.search(raw):
                points = [strip_html_tags(point) for point in BULLET_SPLIT_PATTERN.split(raw)]
                points = [point for point in points if is_job_relevant_content(point)]
                content.extend(points)
                if points:
                    break
            else:
                text = strip_html_tags(raw)
                if is_job_relevant_content(text):
                    content.append(text)
                    break

    return content[:MAX_SECTION_ITEMS]


def _scan_requirement_lists(view: DocumentView) -> list[str]:
    found: list[str] = []
    for list_element in view.select("ul, ol"):
        items = view.select_within(list_element, "li")
        if not 0 < len(items) < MAX_SCANNED_LIST_ITEMS:
            continue
        for item in items:
            text = strip_html_tags(view.text(item))
            lowered = text.lower()
            if is_job_relevant_content(text) and any(
                keyword in lowered for keyword in REQUIREMENT_SIGNAL_KEYWORDS
            ):
                found.append(text)
    return found


def _extract_description(view: DocumentView) -> str:
    for selector in DESCRIPTION_SELECTORS:
        element = view.select_one(selector)
        if element is None:
            continue
        text = strip_html_tags(view.text(element))
        if len(text) > MIN_DESCRIPTION_BLOCK_LENGTH and is_job_relevant_content(
            text[:RELEVANCE_WINDOW]
        ):
            return text[:MAX_DESCRIPTION_CHARS]

    root = view.select_one("main") or view.soup.body
    if root is None:
        return ""
    text = strip_html_tags(view.text(root))
    if is_job_relevant_content(text[:RELEVANCE_WINDOW]):
        return text[:MAX_DESCRIPTION_CHARS]
    return ""
