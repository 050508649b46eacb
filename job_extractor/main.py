"""CLI entry point: extract a job posting from a URL or a text file."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import Settings
from .errors import ScrapeError
from .pipeline import scrape_job


def main(argv: Sequence[str] | None = None) -> None:
    """Execute the CLI."""

    settings = Settings.from_env()
    args = _parse_args(argv, settings)
    _configure_logging(args.log_level)

    raw_text = _read_text(args.text_file) if args.text_file else None
    if args.url:
        logging.info("Extracting job posting from %s", args.url)

    try:
        result = asyncio.run(
            scrape_job(
                url=args.url,
                raw_text=raw_text,
                user_city=args.city,
                timeout=args.timeout,
                backoff_seconds=args.backoff,
                max_html_chars=settings.max_html_chars,
                semantic_extractor=settings.semantic_extractor(),
            )
        )
    except ScrapeError as exc:
        logging.error("Extraction failed: %s", exc)
        print(json.dumps(exc.to_payload(), ensure_ascii=False, indent=2))
        raise SystemExit(1) from exc

    logging.info("%s", result.message)
    print(json.dumps(result.to_payload(), ensure_ascii=False, indent=2))


def _read_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _parse_args(argv: Sequence[str] | None, settings: Settings) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--url", help="Job posting URL to fetch")
    source.add_argument(
        "--text-file",
        help="Path to a file with the pasted job ad text ('-' reads stdin)",
    )
    parser.add_argument(
        "--city",
        default=None,
        help="Override the city and prefix the date line with it",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.fetch_timeout,
        help="Per-attempt fetch timeout in seconds",
    )
    parser.add_argument(
        "--backoff",
        type=float,
        default=settings.backoff_seconds,
        help="Base delay between fetch attempts in seconds",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. INFO, DEBUG)",
    )

    return parser.parse_args(argv)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(levelname)s %(message)s",
    )


if __name__ == "__main__":
    main()
