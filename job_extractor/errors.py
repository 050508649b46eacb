"""Failure taxonomy surfaced to callers of the extraction pipeline."""

from __future__ import annotations

DEFAULT_SUGGESTION = (
    "Versuchen Sie einen direkten Link zur Stellenausschreibung oder kopieren Sie den Text manuell."
)

FETCH_FAILURE_MESSAGES: dict[str, str] = {
    "blocked": (
        "Die Job-Seite konnte nicht geladen werden. Diese Website blockiert automatisierte "
        "Zugriffe. Bitte kopieren Sie den Stelleninhalt manuell oder versuchen Sie einen "
        "direkteren Link."
    ),
    "timeout": (
        "Die Job-Seite konnte nicht geladen werden. Die Seite antwortet nicht. "
        "Bitte versuchen Sie es später erneut."
    ),
    "not_found": (
        "Die Job-Seite konnte nicht geladen werden. Die Stellenausschreibung wurde nicht "
        "gefunden. Bitte überprüfen Sie den Link."
    ),
    "forbidden": (
        "Die Job-Seite konnte nicht geladen werden. Der Zugriff auf diese Seite wurde verweigert."
    ),
    "bot_detection": (
        "Die Job-Seite konnte nicht geladen werden. Möglicherweise verwendet diese Website "
        "erweiterte Bot-Erkennung."
    ),
}


class ScrapeError(RuntimeError):
    """Base class for failures that map onto a client-facing payload."""

    code: str | None = None
    status_code = 400
    default_message = "Die Stellenanzeige konnte nicht verarbeitet werden."

    def __init__(
        self,
        message: str | None = None,
        *,
        details: str | None = None,
        suggestion: str | None = None,
    ) -> None:
        self.message = message or self.default_message
        self.details = details
        self.suggestion = suggestion
        super().__init__(details or self.message)

    def to_payload(self) -> dict[str, object]:
        payload: dict[str, object] = {"success": False}
        if self.code:
            payload["code"] = self.code
        payload["message"] = self.message
        if self.details:
            payload["details"] = self.details
        if self.suggestion:
            payload["suggestion"] = self.suggestion
        return payload


class InvalidRequestError(ScrapeError):
    """Neither a URL nor raw text was supplied."""

    default_message = "URL oder Text ist erforderlich"


class LinkedInBlockedError(ScrapeError):
    code = "LINKEDIN_BLOCKED"
    status_code = 422
    default_message = (
        "LinkedIn blockiert automatisierte Zugriffe. Bitte kopieren Sie die Stellenbeschreibung "
        "manuell oder verwenden Sie eine andere Jobbörse."
    )

    def __init__(self, details: str | None = None) -> None:
        super().__init__(
            details=details or "LinkedIn URLs are not supported",
            suggestion=(
                "Kopieren Sie den Text der Stellenanzeige und fügen Sie ihn in das Textfeld ein."
            ),
        )


class FetchError(ScrapeError):
    """The page could not be retrieved after all fetch strategies."""

    code = "FETCH_ERROR"
    status_code = 400

    def __init__(self, reason: str, *, details: str | None = None) -> None:
        self.reason = reason
        super().__init__(
            FETCH_FAILURE_MESSAGES.get(reason, FETCH_FAILURE_MESSAGES["bot_detection"]),
            details=f"{reason}: {details}" if details else reason,
            suggestion=DEFAULT_SUGGESTION,
        )


class IncompleteSourceError(ScrapeError):
    """A page was fetched but yielded too little to build a job record."""

    code = "INCOMPLETE_SOURCE"
    status_code = 422
    default_message = (
        "Die Seite lieferte unvollständige Daten (z. B. kein Titel, Arbeitgeber oder Text). "
        "Bitte versuchen Sie es mit einem anderen Link oder kopieren Sie den Text manuell."
    )


class TextProcessingError(ScrapeError):
    code = "TEXT_PROCESSING_ERROR"
    status_code = 422
    default_message = (
        "Der Text konnte nicht verarbeitet werden. Bitte überprüfen Sie, ob es sich um eine "
        "vollständige Stellenausschreibung handelt."
    )
