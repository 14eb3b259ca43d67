"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- FetchConfig: HTTP fetching settings
- ExtractConfig: Content extraction settings
- LoggingConfig: Logging behavior
- OutputConfig: Optional article sink
- AppConfig: Root configuration container, including the URL list
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml


DEFAULT_URLS = [
    "https://cbea.ms/git-commit/",
    "https://tbaggery.com/2008/04/19/a-note-about-git-commit-messages.html",
]


@dataclass
class FetchConfig:
    """Configuration for HTTP content fetching.

    Attributes:
        timeout_seconds: HTTP request timeout
        follow_redirects: Whether the client follows redirects
        trust_env: Whether to respect system proxy settings
        user_agent: Optional User-Agent header; None sends the client default
    """

    timeout_seconds: float = 10.0
    follow_redirects: bool = True
    trust_env: bool = True
    user_agent: str | None = None


@dataclass
class ExtractConfig:
    """Configuration for article extraction.

    Attributes:
        primary: Primary extraction backend ("readability" or "trafilatura")
        fallback: Backends to try, in order, if the primary fails
    """

    primary: str = "readability"
    fallback: list[str] = field(default_factory=list)


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        format: Log line format ("console", "plain", or "jsonl")
    """

    level: str = "INFO"
    format: str = "console"


@dataclass
class OutputConfig:
    """Configuration for the article sink.

    Attributes:
        path: JSONL file receiving extracted articles, "-" for stdout,
              or None to only log outcomes
    """

    path: str | None = None


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    fetch: FetchConfig = field(default_factory=FetchConfig)
    extract: ExtractConfig = field(default_factory=ExtractConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    urls: list[str] = field(default_factory=lambda: list(DEFAULT_URLS))


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a mapping at the top level")
    return _merge_config(AppConfig(), raw)


def load_url_file(path: str | Path) -> list[str]:
    """Read URLs from a text file, one per line.

    Blank lines and lines starting with "#" are skipped.
    """
    urls: list[str] = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            urls.append(line)
    return urls


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update(value)
        else:
            data[key] = value
    return _fromdict(data)


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    return {
        "fetch": {
            "timeout_seconds": cfg.fetch.timeout_seconds,
            "follow_redirects": cfg.fetch.follow_redirects,
            "trust_env": cfg.fetch.trust_env,
            "user_agent": cfg.fetch.user_agent,
        },
        "extract": {
            "primary": cfg.extract.primary,
            "fallback": list(cfg.extract.fallback),
        },
        "logging": {
            "level": cfg.logging.level,
            "format": cfg.logging.format,
        },
        "output": {
            "path": cfg.output.path,
        },
        "urls": list(cfg.urls),
    }


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    urls = data["urls"] or []
    if not isinstance(urls, list):
        raise ValueError(f"Config key 'urls' must be a list, got {type(urls).__name__}")
    return AppConfig(
        fetch=FetchConfig(**data["fetch"]),
        extract=ExtractConfig(**data["extract"]),
        logging=LoggingConfig(**data["logging"]),
        output=OutputConfig(**data["output"]),
        urls=[str(url) for url in urls],
    )
