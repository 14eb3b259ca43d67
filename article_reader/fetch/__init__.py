"""
Article fetching and extraction.

This package handles HTTP fetching and the readability-based
extraction of articles from fetched HTML.
"""

from .fetcher import FetchedPage, Fetcher
from .extractor import (
    ChainExtractor,
    Extractor,
    ReadabilityExtractor,
    TrafilaturaExtractor,
    available_extractors,
    create_extractor,
)

__all__ = [
    "FetchedPage",
    "Fetcher",
    "Extractor",
    "ChainExtractor",
    "ReadabilityExtractor",
    "TrafilaturaExtractor",
    "available_extractors",
    "create_extractor",
]
