"""
JSONL sink for extracted articles.

Each successful extraction is written as one JSON line holding the source
URL and the Article fields. Writing to "-" sends lines to standard output.
"""

from __future__ import annotations

import json
from pathlib import Path
import sys
from typing import TextIO

from ..types import Article


class ArticleSink:
    """Writes extracted articles as JSON lines.

    Attributes:
        path: Destination file, or None when writing to a stream
        count: Number of articles written so far
    """

    def __init__(self, target: str | Path, stream: TextIO | None = None):
        self.path: Path | None = None
        self.count = 0
        if str(target) == "-":
            self._handle = stream or sys.stdout
            self._owns_handle = False
        else:
            self.path = Path(target)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._handle = self.path.open("w", encoding="utf-8")
            self._owns_handle = True

    def __enter__(self) -> ArticleSink:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def write(self, url: str, article: Article) -> None:
        payload = {"url": url}
        payload.update(article.to_dict())
        self._handle.write(json.dumps(payload, ensure_ascii=False))
        self._handle.write("\n")
        self._handle.flush()
        self.count += 1

    def close(self) -> None:
        if self._owns_handle:
            self._handle.close()
