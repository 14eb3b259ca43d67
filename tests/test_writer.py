"""Tests for the JSONL article sink."""

from __future__ import annotations

import io
import json

from article_reader.output.writer import ArticleSink
from article_reader.types import Article


def _article() -> Article:
    return Article.build(title="T", raw_content="<p>Hello world</p>", text_content="Hello world")


def test_sink_writes_one_line_per_article(tmp_path):
    path = tmp_path / "out" / "articles.jsonl"

    with ArticleSink(path) as sink:
        sink.write("https://example.com/a", _article())
        sink.write("https://example.com/b", _article())

    lines = path.read_text(encoding="utf-8").splitlines()
    assert sink.count == 2
    assert [json.loads(line)["url"] for line in lines] == [
        "https://example.com/a",
        "https://example.com/b",
    ]
    assert json.loads(lines[0])["length"] == 11


def test_dash_writes_to_stream_and_leaves_it_open():
    stream = io.StringIO()

    with ArticleSink("-", stream=stream) as sink:
        sink.write("https://example.com/a", _article())

    assert sink.path is None
    assert not stream.closed
    assert json.loads(stream.getvalue())["title"] == "T"
