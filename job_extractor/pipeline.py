"""Request orchestration: pick an input path, run extractors, apply overrides."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Awaitable, Callable, Optional

from .document import visible_text_lines
from .dom_extractor import extract_job_data
from .errors import IncompleteSourceError, InvalidRequestError, TextProcessingError
from .fetcher import (
    DEFAULT_BACKOFF_SECONDS,
    DEFAULT_MAX_HTML_CHARS,
    DEFAULT_TIMEOUT,
    JobPageFetcher,
    ensure_fetchable,
)
from .jsonld import parse_json_ld
from .models import ExtractionResult, JobData, format_german_date
from .semantic import SemanticExtractor
from .text_extractor import extract_job_data_from_text

logger = logging.getLogger(__name__)

# Pages below this size are usually script shells or plain-text responses
SHORT_HTML_THRESHOLD = 8000

FetchPage = Callable[[str], Awaitable[str]]


def apply_user_city(job: JobData, user_city: str | None, *, today: date | None = None) -> JobData:
    """Return *job* with city and date line replaced by the caller's city."""
    city = (user_city or "").strip()
    if not city:
        return job
    stamp = format_german_date(today or date.today())
    return replace(job, ort=city, datum=f"{city}, {stamp}")


class ExtractionPipeline:
    """Turn a URL or pasted text into a validated :class:`JobData`.

    *fetch_page* is an async callable returning HTML for a URL; it is only
    invoked for URL requests and never for LinkedIn links.
    """

    def __init__(
        self,
        fetch_page: FetchPage,
        *,
        semantic_extractor: Optional[SemanticExtractor] = None,
        short_html_threshold: int = SHORT_HTML_THRESHOLD,
        today: date | None = None,
    ) -> None:
        self._fetch_page = fetch_page
        self._semantic_extractor = semantic_extractor
        self._short_html_threshold = short_html_threshold
        self._today = today

    async def run(
        self,
        *,
        url: str | None = None,
        raw_text: str | None = None,
        user_city: str | None = None,
    ) -> ExtractionResult:
        url = (url or "").strip()
        if raw_text and raw_text.strip():
            result = self._from_text(raw_text)
        elif url:
            result = await self._from_url(url)
        else:
            raise InvalidRequestError()

        job = apply_user_city(result.job_data, user_city, today=self._today)
        return replace(result, job_data=job)

    def _from_text(self, raw_text: str) -> ExtractionResult:
        logger.info("Extracting job data from %d chars of raw text", len(raw_text))
        try:
            job = extract_job_data_from_text(raw_text, today=self._today)
        except IncompleteSourceError as exc:
            raise TextProcessingError(details=exc.details) from exc
        return ExtractionResult(job, "Job data extracted successfully from text", "text")

    async def _from_url(self, url: str) -> ExtractionResult:
        ensure_fetchable(url)
        html = await self._fetch_page(url)

        if len(html) < self._short_html_threshold and not parse_json_ld(html):
            job = self._try_visible_text(html, url)
            if job is not None:
                return ExtractionResult(job, "Job data extracted via text fallback", "text_fallback")

        try:
            job = extract_job_data(html, url, today=self._today)
        except IncompleteSourceError as exc:
            logger.info("HTML extraction incomplete for %s: %s", url, exc.details)
            failure = exc
        else:
            return ExtractionResult(job, "Job data extracted successfully", "html")

        job = self._try_visible_text(html, url)
        if job is not None:
            return ExtractionResult(job, "Job data extracted via text fallback", "text_fallback")

        if self._semantic_extractor is None:
            raise failure

        logger.info("Falling back to semantic extraction for %s", url)
        page_text = "\n".join(visible_text_lines(html))
        job = await self._semantic_extractor.extract(page_text, today=self._today)
        return ExtractionResult(job, "Job data extracted via semantic parser", "semantic")

    def _try_visible_text(self, html: str, url: str) -> JobData | None:
        lines = visible_text_lines(html)
        if not lines:
            return None
        try:
            return extract_job_data_from_text("\n".join(lines), today=self._today)
        except IncompleteSourceError as exc:
            logger.debug("Text fallback incomplete for %s: %s", url, exc.details)
            return None


async def scrape_job(
    *,
    url: str | None = None,
    raw_text: str | None = None,
    user_city: str | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    backoff_seconds: float = DEFAULT_BACKOFF_SECONDS,
    max_html_chars: int = DEFAULT_MAX_HTML_CHARS,
    semantic_extractor: Optional[SemanticExtractor] = None,
) -> ExtractionResult:
    """One-shot helper that owns its own fetcher."""
    async with JobPageFetcher(
        timeout=timeout, backoff_seconds=backoff_seconds, max_html_chars=max_html_chars
    ) as fetcher:
        pipeline = ExtractionPipeline(fetcher.fetch, semantic_extractor=semantic_extractor)
        return await pipeline.run(url=url, raw_text=raw_text, user_city=user_city)
