"""
Pipeline orchestration for the article reader.

For each URL, in order:
1. Fetch the page over HTTP
2. Extract the article from the response body
3. Log the outcome (and hand the article to the sink, if one is configured)

A failure on one URL is logged and never stops the run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from rich.console import Console

from .config import AppConfig
from .exceptions import ExtractError, FetchError
from .fetch.extractor import Extractor, create_extractor
from .fetch.fetcher import Fetcher
from .logging_utils import log_event, setup_logging
from .output.writer import ArticleSink
from .types import UrlOutcome


@dataclass
class RunStats:
    """Counters collected over a run.

    Attributes:
        total: Number of URLs processed
        success: URLs that produced an article
        fetch_failed: URLs whose fetch failed
        extract_failed: URLs fetched but not extractable
    """
    total: int = 0
    success: int = 0
    fetch_failed: int = 0
    extract_failed: int = 0

    def record(self, outcome: UrlOutcome) -> None:
        self.total += 1
        if outcome.status == "ok":
            self.success += 1
        elif outcome.status == "fetch_error":
            self.fetch_failed += 1
        elif outcome.status == "extract_error":
            self.extract_failed += 1


def process_url(
    url: str,
    fetcher: Fetcher,
    extractor: Extractor,
    logger: logging.Logger | None,
    context: Mapping[str, Any] | None = None,
) -> UrlOutcome:
    """Fetch and extract a single URL.

    Domain errors are logged and turned into a failed UrlOutcome; they are
    never raised to the caller.

    Args:
        url: URL to process
        fetcher: Open Fetcher used for the GET
        extractor: Extractor applied to the response body
        logger: Logger receiving the events, or None to stay silent
        context: Fields attached to every event logged for this URL

    Returns:
        UrlOutcome describing the result
    """
    ctx = dict(context or {})
    ctx["url"] = url
    log_event(logger, "Processing url", ctx)

    status_code: int | None = None
    try:
        with fetcher.fetch(url) as page:
            status_code = page.status_code
            try:
                article = extractor.extract(page.stream, page.url)
            except ExtractError as exc:
                log_event(
                    logger,
                    "Failed to extract article",
                    ctx,
                    level=logging.ERROR,
                    stage=exc.stage,
                    status_code=status_code,
                    error=str(exc),
                )
                return UrlOutcome(
                    url=url, status="extract_error", error=str(exc), status_code=status_code
                )
    except FetchError as exc:
        log_event(
            logger,
            "Failed to fetch url",
            ctx,
            level=logging.ERROR,
            stage=exc.stage,
            error=str(exc),
        )
        return UrlOutcome(url=url, status="fetch_error", error=str(exc), status_code=status_code)

    log_event(
        logger,
        "Extracted article",
        ctx,
        title=article.title,
        length=article.length,
        status_code=status_code,
    )
    return UrlOutcome(url=url, status="ok", article=article, status_code=status_code)


def run_urls(
    urls: Iterable[str],
    fetcher: Fetcher,
    extractor: Extractor,
    logger: logging.Logger | None,
    context: Mapping[str, Any] | None = None,
    sink: ArticleSink | None = None,
) -> list[UrlOutcome]:
    """Process URLs strictly in order, continuing past failures."""
    outcomes: list[UrlOutcome] = []
    for url in urls:
        outcome = process_url(url, fetcher, extractor, logger, context)
        if outcome.article is not None and sink is not None:
            sink.write(url, outcome.article)
        outcomes.append(outcome)
    return outcomes


def run_pipeline(
    urls: list[str],
    cfg: AppConfig,
    console: Console | None = None,
    logger: logging.Logger | None = None,
) -> list[UrlOutcome]:
    """Run fetch-then-extract over urls using the given configuration.

    Builds the logger, fetcher, extractor and optional article sink from
    cfg, processes every URL, and prints a one-line summary.

    Args:
        urls: Ordered URLs to process
        cfg: Application configuration
        console: Rich console for the summary line (creates default if None)
        logger: Preconfigured logger; built from cfg.logging if None

    Returns:
        One UrlOutcome per URL, in input order
    """
    logger = logger or setup_logging(cfg.logging)
    extractor = create_extractor(cfg.extract)
    stats = RunStats()

    log_event(
        logger,
        "Run start",
        event="run_start",
        count=len(urls),
        extractor=cfg.extract.primary,
    )

    sink = ArticleSink(cfg.output.path) if cfg.output.path else None
    try:
        with Fetcher(cfg.fetch) as fetcher:
            outcomes = run_urls(urls, fetcher, extractor, logger, sink=sink)
    finally:
        if sink is not None:
            sink.close()

    for outcome in outcomes:
        stats.record(outcome)

    log_event(
        logger,
        "Run complete",
        event="run_complete",
        total=stats.total,
        success=stats.success,
        fetch_failed=stats.fetch_failed,
        extract_failed=stats.extract_failed,
    )
    _render_run_stats(stats, console or Console())
    return outcomes


def _render_run_stats(stats: RunStats, console: Console) -> None:
    console.print(
        "[bold]Run summary[/bold]: "
        f"total={stats.total}, success={stats.success}, "
        f"fetch_failed={stats.fetch_failed}, extract_failed={stats.extract_failed}"
    )
