"""Data models shared by the extractors, the pipeline and the web layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from .errors import IncompleteSourceError

# Field-level completeness thresholds
MIN_TITLE_LENGTH = 3
MIN_EMPLOYER_LENGTH = 2
HTML_MIN_DESCRIPTION_LENGTH = 50
TEXT_MIN_DESCRIPTION_LENGTH = 20

MAX_HTML_REQUIREMENTS = 12
MAX_TEXT_REQUIREMENTS = 10


@dataclass(slots=True)
class JobData:
    """Structured job posting as returned to the client."""

    jobtitel: str
    arbeitgeber: str
    adresse: str
    ort: str
    datum: str
    beschreibung: str
    anforderungen: list[str] = field(default_factory=list)
    plz: Optional[str] = None
    vertrag: Optional[str] = None
    bewerbungsprozess: Optional[str] = None

    def to_dict(self) -> dict[str, object]:
        """Serialize with the public field names, dropping unset optionals."""
        payload: dict[str, object] = {
            "jobtitel": self.jobtitel,
            "arbeitgeber": self.arbeitgeber,
            "ort": self.ort,
            "adresse": self.adresse,
            "datum": self.datum,
            "plz": self.plz,
            "vertrag": self.vertrag,
            "beschreibung": self.beschreibung,
            "anforderungen": list(self.anforderungen),
            "bewerbungsprozess": self.bewerbungsprozess,
        }
        return {key: value for key, value in payload.items() if value is not None}

    def structured_data(self) -> dict[str, str]:
        return {
            "jobtitel": self.jobtitel,
            "arbeitgeber": self.arbeitgeber,
            "adresse": self.adresse,
            "ort": self.ort,
            "datum": self.datum,
        }


@dataclass(slots=True)
class ExtractionResult:
    """Outcome of one pipeline run."""

    job_data: JobData
    message: str
    source: str

    def to_payload(self) -> dict[str, object]:
        return {
            "success": True,
            "jobData": self.job_data.to_dict(),
            "structuredData": self.job_data.structured_data(),
            "message": self.message,
        }


def format_german_date(day: date) -> str:
    return day.strftime("%d.%m.%Y")


def ensure_complete(job: JobData, *, min_description_length: int) -> JobData:
    """Raise :class:`IncompleteSourceError` unless title, employer and description are usable."""
    if len(job.jobtitel) < MIN_TITLE_LENGTH:
        raise IncompleteSourceError(details="Job title not found or too short")
    if len(job.arbeitgeber) < MIN_EMPLOYER_LENGTH:
        raise IncompleteSourceError(details="Company name not found")
    if len(job.beschreibung) < min_description_length:
        raise IncompleteSourceError(details="Job description too short or missing")
    return job
