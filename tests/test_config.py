"""Tests for YAML config loading and URL files."""

from __future__ import annotations

import pytest

from article_reader.config import DEFAULT_URLS, AppConfig, load_config, load_url_file


def test_load_config_without_path_returns_defaults():
    cfg = load_config(None)

    assert cfg.fetch.timeout_seconds == 10.0
    assert cfg.fetch.follow_redirects is True
    assert cfg.fetch.user_agent is None
    assert cfg.extract.primary == "readability"
    assert cfg.extract.fallback == []
    assert cfg.logging.format == "console"
    assert cfg.output.path is None
    assert cfg.urls == DEFAULT_URLS


def test_defaults_are_not_shared_between_loads():
    first = load_config(None)
    first.urls.append("https://example.com/")
    first.fetch.timeout_seconds = 1.0

    second = load_config(None)

    assert second.urls == DEFAULT_URLS
    assert second.fetch.timeout_seconds == 10.0


def test_partial_yaml_keeps_other_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "fetch:\n"
        "  timeout_seconds: 3\n"
        "extract:\n"
        "  fallback: [trafilatura]\n"
        "urls:\n"
        "  - https://example.com/a\n"
        "unknown_section:\n"
        "  ignored: true\n",
        encoding="utf-8",
    )

    cfg = load_config(str(path))

    assert cfg.fetch.timeout_seconds == 3
    assert cfg.fetch.trust_env is True
    assert cfg.extract.primary == "readability"
    assert cfg.extract.fallback == ["trafilatura"]
    assert cfg.urls == ["https://example.com/a"]
    assert cfg.logging.level == "INFO"


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")

    assert load_config(str(path)) == AppConfig()


def test_non_mapping_yaml_is_rejected(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(str(path))


def test_load_url_file_skips_blanks_and_comments(tmp_path):
    path = tmp_path / "urls.txt"
    path.write_text(
        "# reading list\n"
        "https://example.com/one\n"
        "\n"
        "   https://example.com/two   \n"
        "  # indented comment\n",
        encoding="utf-8",
    )

    assert load_url_file(path) == ["https://example.com/one", "https://example.com/two"]


def test_scalar_urls_value_is_rejected(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text('urls: "https://example.com/only"\n', encoding="utf-8")

    with pytest.raises(ValueError, match="must be a list"):
        load_config(str(path))


def test_null_urls_value_gives_empty_list(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("urls:\n", encoding="utf-8")

    assert load_config(str(path)).urls == []
