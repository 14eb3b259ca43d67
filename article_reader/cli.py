"""
Command-line interface for the article reader.

Uses Typer to expose the URL list and the main configuration settings.
URLs come from, in order of precedence: positional arguments, a URL file,
the config file's "urls" list, then the built-in default list.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from .config import load_config, load_url_file
from .runner import run_pipeline

app = typer.Typer(add_completion=False)
console = Console()


@app.command()
def run(
    urls: list[str] | None = typer.Argument(None, help="URLs to fetch, processed in order."),
    urls_file: Path | None = typer.Option(
        None,
        "--urls-file",
        "-f",
        exists=True,
        readable=True,
        help="File with one URL per line; blank lines and # comments are skipped.",
    ),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    timeout: float | None = typer.Option(None, "--timeout", help="HTTP timeout in seconds."),
    extractor: str | None = typer.Option(
        None, "--extractor", help="Extraction backend: readability or trafilatura."
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_format: str | None = typer.Option(
        None, "--log-format", help="Log line format: console, plain, or jsonl."
    ),
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write extracted articles as JSON lines to this file ('-' for stdout).",
    ),
):
    """Fetch each URL and extract its readable article content.

    Failures are logged per URL and never stop the run; the command
    exits with status 0 once every URL has been attempted.

    Args:
        urls: URLs given on the command line
        urls_file: Optional path to a file of URLs
        config: Optional path to YAML config file
        timeout: HTTP timeout override
        extractor: Extraction backend override
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: Log line format (console, plain, jsonl)
        output: Optional JSONL destination for extracted articles
    """
    # Load base configuration
    cfg = load_config(str(config) if config else None)

    # Override with CLI options
    if timeout is not None:
        cfg.fetch.timeout_seconds = timeout
    if extractor:
        cfg.extract.primary = extractor
    if log_level:
        cfg.logging.level = log_level
    if log_format:
        cfg.logging.format = log_format
    if output:
        cfg.output.path = output

    if urls:
        targets = list(urls)
    elif urls_file is not None:
        targets = load_url_file(urls_file)
    else:
        targets = list(cfg.urls)

    run_pipeline(targets, cfg, console=console)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
