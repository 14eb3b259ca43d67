"""
Article extraction backed by off-the-shelf readability libraries.

Available backends:
1. readability: Mozilla's readability algorithm via readability-lxml (default)
2. trafilatura: Purpose-built main-content extractor

Backends can be chained: the first one that produces an article wins.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from bs4 import BeautifulSoup
import httpx
import trafilatura
from readability import Document

from ..config import ExtractConfig
from ..exceptions import ExtractError
from ..types import Article


_READABILITY_NO_TITLE = "[no-title]"


class Extractor(ABC):
    """Turns a fetched HTML body into an Article."""

    name = "base"

    def extract(self, stream: Iterable[bytes], base_url: httpx.URL) -> Article:
        """Read the whole stream and extract an article from it.

        Args:
            stream: Raw HTML body chunks
            base_url: URL of the document, used to resolve relative links

        Returns:
            Article whose length equals len(text_content)

        Raises:
            ExtractError: If the body is empty, cannot be parsed, or yields
                no readable text
        """
        url = str(base_url)
        body = b"".join(stream)
        if not body.strip():
            raise ExtractError(url, "empty document")
        return self.extract_html(body, url)

    @abstractmethod
    def extract_html(self, html: bytes, url: str) -> Article:
        raise NotImplementedError


class ReadabilityExtractor(Extractor):
    name = "readability"

    def extract_html(self, html: bytes, url: str) -> Article:
        try:
            doc = Document(html, url=url)
            raw_content = doc.summary()
            title = doc.title()
        except Exception as exc:  # noqa: BLE001
            raise ExtractError(url, f"{type(exc).__name__}: {exc}") from exc

        text = html_to_text(raw_content)
        if not text:
            raise ExtractError(url, "no readable content")
        if title == _READABILITY_NO_TITLE:
            title = ""
        return Article.build(title=title.strip(), raw_content=raw_content, text_content=text)


class TrafilaturaExtractor(Extractor):
    name = "trafilatura"

    def extract_html(self, html: bytes, url: str) -> Article:
        try:
            raw_content = trafilatura.extract(html, url=url, output_format="html")
            text = trafilatura.extract(html, url=url, output_format="txt")
            metadata = trafilatura.extract_metadata(html, default_url=url)
        except Exception as exc:  # noqa: BLE001
            raise ExtractError(url, f"{type(exc).__name__}: {exc}") from exc

        text = (text or "").strip()
        if not raw_content or not text:
            raise ExtractError(url, "no readable content")
        title = metadata.title if metadata and metadata.title else ""
        return Article.build(title=title.strip(), raw_content=raw_content, text_content=text)


class ChainExtractor(Extractor):
    """Tries each extractor in order until one succeeds."""

    name = "chain"

    def __init__(self, extractors: list[Extractor]):
        if not extractors:
            raise ValueError("ChainExtractor needs at least one extractor")
        self.extractors = extractors

    def extract_html(self, html: bytes, url: str) -> Article:
        errors: list[ExtractError] = []
        for extractor in self.extractors:
            try:
                return extractor.extract_html(html, url)
            except ExtractError as exc:
                errors.append(exc)
        raise errors[-1]


_EXTRACTOR_REGISTRY: dict[str, type[Extractor]] = {
    "readability": ReadabilityExtractor,
    "trafilatura": TrafilaturaExtractor,
}


def available_extractors() -> list[str]:
    """Return the registered extractor backend names."""
    return sorted(_EXTRACTOR_REGISTRY.keys())


def create_extractor(cfg: ExtractConfig) -> Extractor:
    """Build the extractor for a config: primary first, then fallbacks."""
    order = [cfg.primary] + [name for name in cfg.fallback if name != cfg.primary]
    extractors = []
    for name in order:
        builder = _EXTRACTOR_REGISTRY.get(name.lower().strip())
        if builder is None:
            supported = ", ".join(available_extractors())
            raise ValueError(f"Unsupported extractor: {name}. Supported: {supported}")
        extractors.append(builder())
    if len(extractors) == 1:
        return extractors[0]
    return ChainExtractor(extractors)


def html_to_text(html: str) -> str:
    """Strip markup from HTML, keeping non-empty lines.

    Script, style and noscript elements are dropped entirely.
    """
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()
    text = soup.get_text(separator="\n")
    return "\n".join([line.strip() for line in text.splitlines() if line.strip()])
