"""
HTTP content fetching.

A single blocking GET per URL through a shared httpx client. The response
body is streamed to the caller and closed when the fetch context exits.
The timeout bounds the whole request, body included. There are no
retries and no status-code checks: error pages are handed to
extraction like any other body.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
import time
from typing import Iterator

import httpx

from ..config import FetchConfig
from ..exceptions import FetchError


@dataclass
class FetchedPage:
    """An open HTTP response, valid only inside Fetcher.fetch().

    Attributes:
        requested_url: The URL string as supplied by the caller
        url: Parsed final URL after redirects, used as the extraction base
        status_code: HTTP status code of the response
        stream: Iterator over the raw response body bytes
    """
    requested_url: str
    url: httpx.URL
    status_code: int
    stream: Iterator[bytes]


class Fetcher:
    """Fetches URLs with one httpx client shared across a run.

    Use as a context manager so the underlying connection pool is closed.
    """

    def __init__(self, cfg: FetchConfig, transport: httpx.BaseTransport | None = None):
        headers = {"User-Agent": cfg.user_agent} if cfg.user_agent else None
        self.cfg = cfg
        self.client = httpx.Client(
            timeout=cfg.timeout_seconds,
            headers=headers,
            follow_redirects=cfg.follow_redirects,
            trust_env=cfg.trust_env,
            transport=transport,
        )

    def __enter__(self) -> Fetcher:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.client.close()

    @contextmanager
    def fetch(self, url: str) -> Iterator[FetchedPage]:
        """Issue a GET for url and yield the open response.

        Args:
            url: Absolute http(s) URL to fetch

        Yields:
            FetchedPage whose stream must be consumed before the context exits

        Raises:
            FetchError: On a blank or malformed URL, or any transport failure
                (connection refused, DNS failure, timeout)
        """
        if not url or not url.strip():
            raise FetchError(url or "", "empty URL")

        deadline = time.monotonic() + self.cfg.timeout_seconds
        try:
            target = httpx.URL(url.strip())
            if target.scheme not in ("http", "https") or not target.host:
                raise FetchError(url, f"not an absolute http(s) URL: {url!r}")
            with self.client.stream("GET", target) as resp:
                _check_deadline(url, deadline)
                yield FetchedPage(
                    requested_url=url,
                    url=resp.url,
                    status_code=resp.status_code,
                    stream=_wrap_stream(url, resp.iter_bytes(), deadline),
                )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise FetchError(url, f"{type(exc).__name__}: {exc}") from exc


def _wrap_stream(url: str, chunks: Iterator[bytes], deadline: float) -> Iterator[bytes]:
    """Re-raise transport failures during body reads as FetchError.

    The whole request, body included, must finish before deadline.
    """
    try:
        for chunk in chunks:
            _check_deadline(url, deadline)
            yield chunk
    except httpx.HTTPError as exc:
        raise FetchError(url, f"{type(exc).__name__}: {exc}") from exc


def _check_deadline(url: str, deadline: float) -> None:
    if time.monotonic() > deadline:
        raise FetchError(url, "total timeout exceeded")
