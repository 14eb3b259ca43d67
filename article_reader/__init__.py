"""
Article Reader - fetch URLs and extract readable article content.

Each URL is fetched over HTTP and its HTML handed to a readability
library, producing an Article (title, raw content, plain text, length).

Main entry point is the CLI via the `article-reader` command.

Example:
    $ article-reader https://example.com/post -o articles.jsonl
"""

__all__ = ["__version__", "Article", "UrlOutcome", "FetchError", "ExtractError", "run_urls"]
__version__ = "0.1.0"

from .exceptions import ExtractError, FetchError
from .runner import run_urls
from .types import Article, UrlOutcome
