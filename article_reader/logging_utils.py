from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
import sys
from typing import Any, Mapping

from rich.console import Console
from rich.logging import RichHandler

from .config import LoggingConfig


_RESERVED = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "taskName",
    "message",
    "asctime",
}


def setup_logging(cfg: LoggingConfig, stream=None) -> logging.Logger:
    logger = logging.getLogger("article_reader")
    logger.setLevel(_level_from_string(cfg.level))
    logger.handlers = []
    logger.propagate = False

    stream = stream or sys.stdout
    # Rich wraps at a fixed width off a terminal, which splits fields
    if cfg.format == "console" and _is_terminal(stream):
        handler: logging.Handler = RichHandler(
            console=Console(file=stream),
            rich_tracebacks=True,
            show_time=False,
            show_level=True,
            show_path=False,
        )
        handler.setFormatter(KeyValueFormatter("%(message)s"))
    else:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(_build_stream_formatter(cfg.format))
    handler.setLevel(_level_from_string(cfg.level))
    logger.addHandler(handler)
    return logger


def log_event(
    logger: logging.Logger | None,
    message: str,
    context: Mapping[str, Any] | None = None,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """Log a message with structured fields.

    The context mapping is merged first so explicit fields win.
    """
    if logger is None:
        return
    extra = dict(context or {})
    extra.update(fields)
    logger.log(level, message, extra=extra)


class JsonlFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(_extract_extras(record))
        return json.dumps(payload, ensure_ascii=True, default=str)


class KeyValueFormatter(logging.Formatter):
    """Appends structured fields to the formatted line as key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        pairs = [f"{key}={_format_value(value)}" for key, value in _extract_extras(record).items()]
        if pairs:
            line = f"{line} {' '.join(pairs)}"
        return line


def _extract_extras(record: logging.LogRecord) -> dict[str, Any]:
    extras = {}
    for key, value in record.__dict__.items():
        if key in _RESERVED:
            continue
        extras[key] = value
    return extras


def _format_value(value: Any) -> str:
    text = str(value)
    if not text or any(ch.isspace() for ch in text) or '"' in text:
        return json.dumps(text, ensure_ascii=False)
    return text


def _build_stream_formatter(fmt: str) -> logging.Formatter:
    if fmt == "jsonl":
        return JsonlFormatter()
    return KeyValueFormatter("%(asctime)s %(levelname)s %(message)s")


def _is_terminal(stream) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _level_from_string(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)
