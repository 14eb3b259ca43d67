"""Tests for the Typer command line."""

from __future__ import annotations

import httpx
from typer.testing import CliRunner

from article_reader import cli, runner
from article_reader.config import DEFAULT_URLS
from article_reader.fetch.fetcher import Fetcher

cli_runner = CliRunner()


def _capture(monkeypatch):
    calls = []

    def fake_run_pipeline(urls, cfg, console=None):  # noqa: ANN001
        calls.append((urls, cfg))
        return []

    monkeypatch.setattr(cli, "run_pipeline", fake_run_pipeline)
    return calls


def test_defaults_to_builtin_urls(monkeypatch):
    calls = _capture(monkeypatch)

    result = cli_runner.invoke(cli.app, [])

    assert result.exit_code == 0
    assert calls[0][0] == DEFAULT_URLS


def test_arguments_take_precedence(monkeypatch, tmp_path):
    calls = _capture(monkeypatch)
    urls_file = tmp_path / "urls.txt"
    urls_file.write_text("https://example.com/from-file\n", encoding="utf-8")

    result = cli_runner.invoke(
        cli.app, ["https://example.com/a", "https://example.com/b", "--urls-file", str(urls_file)]
    )

    assert result.exit_code == 0
    assert calls[0][0] == ["https://example.com/a", "https://example.com/b"]


def test_urls_file_used_when_no_arguments(monkeypatch, tmp_path):
    calls = _capture(monkeypatch)
    urls_file = tmp_path / "urls.txt"
    urls_file.write_text("# list\nhttps://example.com/from-file\n", encoding="utf-8")

    result = cli_runner.invoke(cli.app, ["-f", str(urls_file)])

    assert result.exit_code == 0
    assert calls[0][0] == ["https://example.com/from-file"]


def test_options_override_config(monkeypatch, tmp_path):
    calls = _capture(monkeypatch)
    config = tmp_path / "config.yaml"
    config.write_text(
        "fetch:\n  timeout_seconds: 30\nurls:\n  - https://example.com/configured\n",
        encoding="utf-8",
    )

    result = cli_runner.invoke(
        cli.app,
        [
            "--config",
            str(config),
            "--timeout",
            "2.5",
            "--extractor",
            "trafilatura",
            "--log-format",
            "jsonl",
            "--output",
            "-",
        ],
    )

    assert result.exit_code == 0
    urls, cfg = calls[0]
    assert urls == ["https://example.com/configured"]
    assert cfg.fetch.timeout_seconds == 2.5
    assert cfg.extract.primary == "trafilatura"
    assert cfg.logging.format == "jsonl"
    assert cfg.output.path == "-"


def test_exit_code_zero_when_every_url_fails(monkeypatch):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    monkeypatch.setattr(
        runner, "Fetcher", lambda cfg: Fetcher(cfg, transport=httpx.MockTransport(handler))
    )

    result = cli_runner.invoke(
        cli.app, ["https://a.example/", "https://b.example/", "--log-format", "plain"]
    )

    assert result.exit_code == 0
    assert "Failed to fetch url url=https://a.example/" in result.output
    assert "Failed to fetch url url=https://b.example/" in result.output
    assert "fetch_failed=2" in result.output
