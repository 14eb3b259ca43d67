"""Output sinks for extracted articles."""

from .writer import ArticleSink

__all__ = ["ArticleSink"]
