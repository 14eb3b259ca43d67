"""
Core data types for the article reader.

This module defines the data structures passed between pipeline stages:
- Article: Readable content extracted from one HTML document
- UrlOutcome: Result of processing a single URL (success or failure)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Article:
    """Readable content extracted from an HTML document.

    Attributes:
        title: The document title, empty if none was found
        raw_content: Extracted content with its HTML markup preserved
        text_content: Extracted content with all formatting stripped
        length: Character count of text_content
    """
    title: str
    raw_content: str
    text_content: str
    length: int

    def __post_init__(self) -> None:
        if self.length != len(self.text_content):
            raise ValueError(
                f"length {self.length} does not match text_content length {len(self.text_content)}"
            )

    @classmethod
    def build(cls, title: str, raw_content: str, text_content: str) -> Article:
        return cls(
            title=title,
            raw_content=raw_content,
            text_content=text_content,
            length=len(text_content),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "raw_content": self.raw_content,
            "text_content": self.text_content,
            "length": self.length,
        }


@dataclass
class UrlOutcome:
    """Result of fetching and extracting a single URL.

    Either article will be populated (status "ok") or error will be
    populated (status "fetch_error" or "extract_error"), never both.
    status_code is None when the request failed before a response arrived.

    Attributes:
        url: The URL as it was supplied
        status: "ok", "fetch_error", or "extract_error"
        article: The extracted Article on success
        error: Error message on failure
        status_code: HTTP status code of the response, if any
    """
    url: str
    status: str
    article: Article | None = None
    error: str | None = None
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"
