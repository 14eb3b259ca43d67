"""Exceptions raised by the fetch and extract stages."""

from __future__ import annotations


class ArticleReaderError(Exception):
    """Base error carrying the URL and the pipeline stage that failed."""

    stage = "process"

    def __init__(self, url: str, detail: str):
        super().__init__(detail)
        self.url = url
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.stage} failed for {self.url}: {self.detail}"


class FetchError(ArticleReaderError):
    """Network or transport failure, or a URL that cannot be requested."""

    stage = "fetch"


class ExtractError(ArticleReaderError):
    """Fetched content could not be turned into an article."""

    stage = "extract"
