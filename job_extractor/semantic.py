"""Optional language-model fallback for pages the heuristics cannot read."""

from __future__ import annotations

import json
import logging
import re
from datetime import date
from typing import Any, Optional

from openai import AsyncOpenAI, OpenAIError

from .errors import IncompleteSourceError
from .models import (
    MAX_TEXT_REQUIREMENTS,
    TEXT_MIN_DESCRIPTION_LENGTH,
    JobData,
    ensure_complete,
    format_german_date,
)
from .text import clean_text, dedupe_requirements

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"
MAX_PROMPT_CHARS = 15000

SYSTEM_PROMPT = (
    "Du extrahierst strukturierte Daten aus Stellenanzeigen. "
    "Antworte ausschließlich mit gültigem JSON."
)

EXTRACTION_PROMPT = """Extrahiere aus dem folgenden Seitentext die Stellenanzeige.
Gib ein JSON-Objekt mit genau diesen Feldern zurück:
- "jobtitel": Titel der Stelle
- "arbeitgeber": Name des Unternehmens
- "ort": Stadt des Arbeitsplatzes
- "adresse": Straße und Hausnummer, falls vorhanden
- "plz": Postleitzahl, falls vorhanden
- "vertrag": Vertragsart (z. B. Vollzeit, befristet)
- "beschreibung": kurze Zusammenfassung der Stelle
- "anforderungen": Liste der Anforderungen an Bewerber
- "bewerbungsprozess": Hinweise zur Bewerbung
Nicht vorhandene Felder bleiben leere Strings bzw. eine leere Liste.

Seitentext:
"""


def _parse_llm_json(text: str | None) -> Optional[dict]:
    """Parse JSON from a model response, stripping markdown code fences if present."""
    if not text:
        return None
    raw = text.strip()
    if raw.startswith("```"):
        raw = re.sub(r"^```(?:json)?\s*", "", raw)
        raw = re.sub(r"\s*```$", "", raw)
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        return None
    return parsed if isinstance(parsed, dict) else None


def _field(payload: dict[str, Any], key: str) -> str:
    value = payload.get(key)
    return clean_text(value) if isinstance(value, str) else ""


class SemanticExtractor:
    """Ask a chat-completion model to fill the job fields from visible page text."""

    def __init__(self, client: AsyncOpenAI, *, model: str = DEFAULT_MODEL, max_chars: int = MAX_PROMPT_CHARS) -> None:
        self._client = client
        self._model = model
        self._max_chars = max_chars

    async def extract(self, page_text: str, *, today: date | None = None) -> JobData:
        content = (page_text or "")[: self._max_chars]
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": EXTRACTION_PROMPT + content},
                ],
                response_format={"type": "json_object"},
                temperature=0.2,
                max_tokens=1000,
            )
        except OpenAIError as exc:
            logger.warning("Semantic extraction request failed: %s", exc)
            raise IncompleteSourceError(details=f"Semantic extraction failed: {exc}") from exc

        choice = response.choices[0] if response.choices else None
        payload = _parse_llm_json(choice.message.content if choice else None)
        if payload is None:
            raise IncompleteSourceError(details="Semantic extraction returned no usable JSON")

        raw_requirements = payload.get("anforderungen")
        requirements = [
            clean_text(item)
            for item in (raw_requirements if isinstance(raw_requirements, list) else [])
            if isinstance(item, str)
        ]
        job = JobData(
            jobtitel=_field(payload, "jobtitel"),
            arbeitgeber=_field(payload, "arbeitgeber"),
            adresse=_field(payload, "adresse"),
            ort=_field(payload, "ort"),
            plz=_field(payload, "plz") or None,
            datum=format_german_date(today or date.today()),
            vertrag=_field(payload, "vertrag") or None,
            beschreibung=_field(payload, "beschreibung"),
            anforderungen=dedupe_requirements(requirements, MAX_TEXT_REQUIREMENTS),
            bewerbungsprozess=_field(payload, "bewerbungsprozess") or None,
        )
        return ensure_complete(job, min_description_length=TEXT_MIN_DESCRIPTION_LENGTH)


def build_semantic_extractor(api_key: str | None, model: str = DEFAULT_MODEL) -> SemanticExtractor | None:
    """Return an extractor when an API key is configured, otherwise ``None``."""
    if not api_key:
        return None
    return SemanticExtractor(AsyncOpenAI(api_key=api_key), model=model)
