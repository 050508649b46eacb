"""Resilient HTML fetching for job-posting pages."""

from __future__ import annotations

import asyncio
import logging
import re
from typing import Callable
from urllib.parse import urlparse

import httpx
from tenacity import AsyncRetrying, RetryCallState, retry_if_exception_type, stop_after_attempt

from .errors import FetchError, LinkedInBlockedError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15.0
DEFAULT_BACKOFF_SECONDS = 2.0
DEFAULT_MAX_HTML_CHARS = 2 * 1024 * 1024
MIN_BODY_CHARS = 500

DEFAULT_ACCEPT_HEADER = (
    "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,*/*;q=0.8"
)
BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/126.0.0.0 Safari/537.36"
)
BOT_USER_AGENT = "Mozilla/5.0 (compatible; JobExtractor/1.0; +https://example.com/bot)"

# Interstitials served instead of the real page
BLOCK_PAGE_MARKERS: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (name, re.compile(pattern, re.IGNORECASE))
    for name, pattern in (
        ("cloudflare-verification", r"cf-browser-verification|cf-challenge"),
        ("browser-check", r"checking\s+your\s+browser"),
        ("human-verification", r"please\s+verify\s+you\s+are\s+human"),
        ("cloudflare-block", r"attention\s+required!?\s*\|\s*cloudflare"),
        ("interstitial", r"<title>\s*just\s+a\s+moment"),
        ("captcha", r"captcha-delivery"),
        ("ray-id", r"ray\s+id:"),
    )
)


def _browser_headers(url: str) -> dict[str, str]:
    return {
        "User-Agent": BROWSER_USER_AGENT,
        "Accept": DEFAULT_ACCEPT_HEADER,
        "Accept-Language": "de-DE,de;q=0.9,en;q=0.8",
        "Cache-Control": "no-cache",
        "Pragma": "no-cache",
        "Sec-Ch-Ua": '"Not/A)Brand";v="8", "Chromium";v="126", "Google Chrome";v="126"',
        "Sec-Ch-Ua-Mobile": "?0",
        "Sec-Ch-Ua-Platform": '"Windows"',
        "Sec-Fetch-Dest": "document",
        "Sec-Fetch-Mode": "navigate",
        "Sec-Fetch-Site": "none",
        "Sec-Fetch-User": "?1",
        "Upgrade-Insecure-Requests": "1",
    }


def _referer_headers(url: str) -> dict[str, str]:
    parsed = urlparse(url)
    headers = _browser_headers(url)
    headers["Referer"] = f"{parsed.scheme}://{parsed.netloc}"
    headers["Sec-Fetch-Site"] = "same-origin"
    return headers


def _minimal_headers(url: str) -> dict[str, str]:
    return {"User-Agent": BOT_USER_AGENT, "Accept": "text/html"}


# One strategy per attempt, in order
FETCH_STRATEGIES: tuple[tuple[str, Callable[[str], dict[str, str]]], ...] = (
    ("browser", _browser_headers),
    ("browser-referer", _referer_headers),
    ("minimal", _minimal_headers),
)


class _AttemptFailure(Exception):
    """A single fetch attempt failed in a way that ends the retry loop."""

    def __init__(self, reason: str, detail: str) -> None:
        super().__init__(detail)
        self.reason = reason


class _RetryableAttemptFailure(_AttemptFailure):
    """A single fetch attempt failed; the next strategy may succeed."""


def is_linkedin_url(url: str | None) -> bool:
    return bool(url) and "linkedin.com" in url.lower()


def ensure_fetchable(url: str) -> None:
    """Reject hosts known to refuse automated access before any request is made."""
    if is_linkedin_url(url):
        raise LinkedInBlockedError()


def detect_block_page(html: str) -> str | None:
    """Return the name of the first block-page marker found in *html*."""
    for name, pattern in BLOCK_PAGE_MARKERS:
        if pattern.search(html):
            return name
    return None


class JobPageFetcher:
    """Fetch a job page with rotating header strategies and bounded retries."""

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        backoff_seconds: float = DEFAULT_BACKOFF_SECONDS,
        max_html_chars: int = DEFAULT_MAX_HTML_CHARS,
        min_body_chars: int = MIN_BODY_CHARS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if timeout <= 0:
            raise ValueError("timeout must be > 0")

        self._timeout = timeout
        self._backoff_seconds = max(backoff_seconds, 0.0)
        self._max_html_chars = max_html_chars
        self._min_body_chars = min_body_chars

        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout, connect=min(timeout, 10.0)),
            http2=True,
            follow_redirects=True,
            transport=transport,
        )

    async def __aenter__(self) -> "JobPageFetcher":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def fetch(self, url: str) -> str:
        """Return the HTML body of *url* or raise :class:`FetchError`.

        Each attempt uses the next header strategy. 404 and 403 end the loop
        immediately; other failures are retried with linear backoff.
        """
        ensure_fetchable(url)

        original_url = url
        url = _sanitize_url(url)
        if url != original_url:
            logger.debug("Sanitized URL from %r to %r", original_url, url)

        retrying = AsyncRetrying(
            stop=stop_after_attempt(len(FETCH_STRATEGIES)),
            wait=self._backoff,
            retry=retry_if_exception_type(_RetryableAttemptFailure),
            reraise=True,
        )
        try:
            async for attempt in retrying:
                with attempt:
                    number = attempt.retry_state.attempt_number
                    strategy, build_headers = FETCH_STRATEGIES[number - 1]
                    return await self._attempt(url, number, strategy, build_headers(url))
        except _AttemptFailure as exc:
            logger.warning("Fetching %s failed (%s): %s", url, exc.reason, exc)
            raise FetchError(exc.reason, details=str(exc)) from exc
        raise FetchError("bot_detection", details="no fetch attempt was made")

    def _backoff(self, retry_state: RetryCallState) -> float:
        return self._backoff_seconds * retry_state.attempt_number

    async def _attempt(self, url: str, number: int, strategy: str, headers: dict[str, str]) -> str:
        logger.info("Fetch attempt %d/%d (%s) for %s", number, len(FETCH_STRATEGIES), strategy, url)
        try:
            response = await asyncio.wait_for(
                self._client.get(url, headers=headers), timeout=self._timeout
            )
        except (httpx.TimeoutException, asyncio.TimeoutError) as exc:
            raise _RetryableAttemptFailure("timeout", f"timed out after {self._timeout:g}s") from exc
        except (httpx.ProtocolError, httpx.ReadError) as exc:
            raise _RetryableAttemptFailure("blocked", f"connection dropped: {exc}") from exc
        except httpx.RequestError as exc:
            raise _RetryableAttemptFailure("bot_detection", f"request error: {exc}") from exc

        status = response.status_code
        if status == 404:
            raise _AttemptFailure("not_found", "HTTP 404")
        if status == 403:
            raise _AttemptFailure("forbidden", "HTTP 403")
        if not response.is_success:
            raise _RetryableAttemptFailure("bot_detection", f"HTTP {status}")

        body = response.text
        if len(body) < self._min_body_chars:
            raise _RetryableAttemptFailure(
                "bot_detection", f"response too short ({len(body)} chars)"
            )

        marker = detect_block_page(body)
        if marker:
            raise _RetryableAttemptFailure("blocked", f"block page detected ({marker})")

        if len(body) > self._max_html_chars:
            logger.info(
                "Truncating %s from %d to %d chars", url, len(body), self._max_html_chars
            )
            body = body[: self._max_html_chars]

        logger.info("Fetched %d chars from %s with strategy %s", len(body), url, strategy)
        return body


def _sanitize_url(url: str) -> str:
    """Remove control characters and encode literal spaces."""
    if not url:
        return url
    cleaned = re.sub(r"[\x00-\x1f\x7f]", "", url).strip()
    if " " in cleaned:
        cleaned = cleaned.replace(" ", "%20")
    return cleaned
