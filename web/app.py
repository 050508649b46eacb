"""FastAPI wrapper exposing the job extraction pipeline over HTTP."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Body, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from job_extractor.config import Settings
from job_extractor.errors import ScrapeError
from job_extractor.fetcher import JobPageFetcher
from job_extractor.pipeline import ExtractionPipeline

# Restore request-level logging (including httpx request lines) in the app process.
logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
logging.getLogger("httpx").setLevel(logging.INFO)
logging.getLogger("httpcore").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)

SETTINGS = Settings.from_env()
SEMANTIC_EXTRACTOR = SETTINGS.semantic_extractor()

app = FastAPI(title="Job Extractor")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["POST", "OPTIONS", "GET"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
)


def _open_fetcher() -> JobPageFetcher:
    """One fetcher per request; nothing is shared between requests."""
    return JobPageFetcher(
        timeout=SETTINGS.fetch_timeout,
        backoff_seconds=SETTINGS.backoff_seconds,
        max_html_chars=SETTINGS.max_html_chars,
    )


def _optional_str(payload: dict, key: str) -> str | None:
    value = payload.get(key)
    return value if isinstance(value, str) else None


@app.post("/scrape-job")
async def scrape_job_endpoint(payload: Any = Body(default=None)):
    if not isinstance(payload, dict):
        payload = {}
    url = _optional_str(payload, "url")
    raw_text = _optional_str(payload, "rawText")
    user_city = _optional_str(payload, "userCity")
    logger.info(
        "scrape-job request: url=%s raw_text=%s city=%s",
        url or "-",
        f"{len(raw_text)} chars" if raw_text else "-",
        user_city or "-",
    )

    try:
        async with _open_fetcher() as fetcher:
            pipeline = ExtractionPipeline(fetcher.fetch, semantic_extractor=SEMANTIC_EXTRACTOR)
            result = await pipeline.run(url=url, raw_text=raw_text, user_city=user_city)
    except ScrapeError as exc:
        logger.warning("scrape-job failed (%s): %s", exc.code or "INVALID_REQUEST", exc)
        return JSONResponse(exc.to_payload(), status_code=exc.status_code)
    except Exception:
        logger.exception("Unhandled error while extracting job data")
        return JSONResponse(
            {"success": False, "message": "Internal server error"}, status_code=500
        )

    logger.info("scrape-job succeeded via %s", result.source)
    return result.to_payload()


@app.get("/health")
def health():
    return {"ok": True}
