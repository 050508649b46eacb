"""Environment-driven settings shared by the CLI and the web app."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .fetcher import DEFAULT_BACKOFF_SECONDS, DEFAULT_MAX_HTML_CHARS, DEFAULT_TIMEOUT
from .semantic import DEFAULT_MODEL, SemanticExtractor, build_semantic_extractor


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


@dataclass(slots=True)
class Settings:
    fetch_timeout: float = DEFAULT_TIMEOUT
    backoff_seconds: float = DEFAULT_BACKOFF_SECONDS
    max_html_chars: int = DEFAULT_MAX_HTML_CHARS
    openai_api_key: str | None = None
    semantic_model: str = DEFAULT_MODEL
    semantic_fallback: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            fetch_timeout=_env_float("SCRAPER_FETCH_TIMEOUT", DEFAULT_TIMEOUT),
            backoff_seconds=_env_float("SCRAPER_BACKOFF_SECONDS", DEFAULT_BACKOFF_SECONDS),
            max_html_chars=_env_int("SCRAPER_MAX_HTML_CHARS", DEFAULT_MAX_HTML_CHARS),
            openai_api_key=os.getenv("OPENAI_API_KEY") or None,
            semantic_model=os.getenv("SEMANTIC_MODEL", DEFAULT_MODEL),
            semantic_fallback=os.getenv("SEMANTIC_FALLBACK", "1") != "0",
        )

    def semantic_extractor(self) -> SemanticExtractor | None:
        if not self.semantic_fallback:
            return None
        return build_semantic_extractor(self.openai_api_key, self.semantic_model)
