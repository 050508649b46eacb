"""Seed job fields from schema.org ``JobPosting`` JSON-LD blocks."""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from .text import strip_html_tags

logger = logging.getLogger(__name__)

JSON_LD_SCRIPT_PATTERN = re.compile(
    r"<script[^>]*type=[\"']application/ld\+json[\"'][^>]*>(.*?)</script>",
    re.IGNORECASE | re.DOTALL,
)

MAX_DESCRIPTION_CHARS = 1000
REQUIREMENT_KEYS = ("qualifications", "experienceRequirements", "skills")


def parse_json_ld(html: str) -> dict[str, Any]:
    """Return partial job fields from the first ``JobPosting`` found in *html*.

    Blocks that fail to parse are skipped. Returns an empty dict when no
    posting is present.
    """
    for index, block in enumerate(JSON_LD_SCRIPT_PATTERN.findall(html or "")):
        try:
            data = json.loads(block.strip(), strict=False)
        except json.JSONDecodeError as exc:
            logger.debug("Skipping malformed JSON-LD block #%d: %s", index, exc)
            continue

        posting = _find_job_posting(data)
        if posting is not None:
            logger.debug("Found JobPosting in JSON-LD block #%d", index)
            return _map_job_posting(posting)
    return {}


def _is_job_posting(item: dict[str, Any]) -> bool:
    kind = item.get("@type")
    if isinstance(kind, list):
        return "JobPosting" in kind
    return kind == "JobPosting"


def _find_job_posting(data: Any) -> dict[str, Any] | None:
    if isinstance(data, list):
        for item in data:
            posting = _find_job_posting(item)
            if posting is not None:
                return posting
        return None
    if not isinstance(data, dict):
        return None
    if _is_job_posting(data):
        return data
    if "@graph" in data:
        return _find_job_posting(data["@graph"])
    return None


def _as_text(value: Any) -> str:
    """Flatten strings and ``{"name": ...}`` objects to cleaned text."""
    if isinstance(value, str):
        return strip_html_tags(value)
    if isinstance(value, dict):
        name = value.get("name")
        if isinstance(name, str):
            return strip_html_tags(name)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def _map_job_posting(posting: dict[str, Any]) -> dict[str, Any]:
    fields: dict[str, Any] = {}

    title = _as_text(posting.get("title"))
    if title:
        fields["jobtitel"] = title

    employer = _as_text(posting.get("hiringOrganization"))
    if employer:
        fields["arbeitgeber"] = employer

    locations = _as_list(posting.get("jobLocation"))
    if locations and isinstance(locations[0], dict):
        _map_address(locations[0].get("address"), fields)

    description = _as_text(posting.get("description"))
    if description:
        fields["beschreibung"] = description[:MAX_DESCRIPTION_CHARS]

    employment_types = [_as_text(item) for item in _as_list(posting.get("employmentType"))]
    employment_type = ", ".join(item for item in employment_types if item)
    if employment_type:
        fields["vertrag"] = employment_type

    requirements = [
        text
        for key in REQUIREMENT_KEYS
        for text in (_as_text(item) for item in _as_list(posting.get(key)))
        if text
    ]
    if requirements:
        fields["anforderungen"] = requirements

    return fields


def _map_address(address: Any, fields: dict[str, Any]) -> None:
    if isinstance(address, str):
        ort = strip_html_tags(address)
        if ort:
            fields["ort"] = ort
        return
    if not isinstance(address, dict):
        return

    locality = _as_text(address.get("addressLocality"))
    country = _as_text(address.get("addressCountry"))
    ort = " ".join(part for part in (locality, country) if part)
    if ort:
        fields["ort"] = ort

    postal_code = _as_text(address.get("postalCode"))
    if postal_code:
        fields["plz"] = postal_code

    street = _as_text(address.get("streetAddress"))
    if street:
        fields["adresse"] = street
