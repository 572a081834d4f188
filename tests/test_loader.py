"""Tests for reading affix sources (loader.py)."""

import json
import logging
from unittest.mock import MagicMock, patch

import pytest
import requests

from affix_splitter.services.loader import (
    LexiconFormatError,
    LexiconLoadError,
    LexiconSourceError,
    load_affix_entries,
    load_lexicon,
)

from conftest import PREFIX_ENTRIES


def _write(tmp_path, payload) -> str:
    p = tmp_path / "affixes.json"
    p.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
    return str(p)


# ── Files ─────────────────────────────────────────────────────────────────────

def test_load_entries_keeps_file_order(affix_files):
    prefix_path, _ = affix_files
    entries = load_affix_entries(str(prefix_path), "prefixes")
    assert [(e.affix, e.meaning) for e in entries] == PREFIX_ENTRIES


def test_load_lexicon_is_sorted(affix_files):
    _, suffix_path = affix_files
    lex = load_lexicon(str(suffix_path), "suffixes")
    assert [e.affix for e in lex] == ["ness", "able", "ing", "ed", "s"]


def test_meaning_defaults_to_empty(tmp_path):
    path = _write(tmp_path, {"prefixes": [{"affix": "un"}]})
    assert load_affix_entries(path, "prefixes")[0].meaning == ""


def test_affix_whitespace_is_stripped(tmp_path):
    path = _write(tmp_path, {"prefixes": [{"affix": " un ", "meaning": "not"}]})
    assert load_affix_entries(path, "prefixes")[0].affix == "un"


def test_utf8_bom_is_accepted(tmp_path):
    p = tmp_path / "bom.json"
    p.write_bytes("\ufeff".encode("utf-8") + json.dumps({"suffixes": []}).encode("utf-8"))
    assert load_affix_entries(str(p), "suffixes") == []


def test_missing_file_is_source_error(tmp_path):
    with pytest.raises(LexiconSourceError):
        load_affix_entries(str(tmp_path / "nope.json"), "prefixes")


def test_non_utf8_file_is_format_error(tmp_path):
    p = tmp_path / "latin1.json"
    p.write_bytes(json.dumps({"prefixes": [{"affix": "né", "meaning": "born"}]}, ensure_ascii=False).encode("latin-1"))
    with pytest.raises(LexiconFormatError, match="UTF-8"):
        load_affix_entries(str(p), "prefixes")


def test_invalid_json_is_format_error(tmp_path):
    path = _write(tmp_path, "{not json")
    with pytest.raises(LexiconFormatError):
        load_affix_entries(path, "prefixes")


def test_missing_key_is_format_error(tmp_path):
    path = _write(tmp_path, {"suffixes": []})
    with pytest.raises(LexiconFormatError, match="prefixes"):
        load_affix_entries(path, "prefixes")


def test_top_level_list_is_format_error(tmp_path):
    path = _write(tmp_path, [{"affix": "un", "meaning": "not"}])
    with pytest.raises(LexiconFormatError):
        load_affix_entries(path, "prefixes")


@pytest.mark.parametrize("records", [
    [{"affix": "", "meaning": "empty"}],
    [{"affix": "   ", "meaning": "blank"}],
    [{"meaning": "no affix"}],
    ["un"],
    {"affix": "un"},
])
def test_malformed_records_are_format_errors(tmp_path, records):
    path = _write(tmp_path, {"prefixes": records})
    with pytest.raises(LexiconFormatError):
        load_affix_entries(path, "prefixes")


def test_errors_share_a_base_class():
    assert issubclass(LexiconSourceError, LexiconLoadError)
    assert issubclass(LexiconFormatError, LexiconLoadError)


def test_uppercase_affix_logs_warning(tmp_path, caplog):
    path = _write(tmp_path, {"prefixes": [{"affix": "Un", "meaning": "not"}]})
    with caplog.at_level(logging.WARNING, logger="affix_splitter"):
        entries = load_affix_entries(path, "prefixes")
    assert entries[0].affix == "Un"
    assert "never match" in caplog.text


# ── URLs ──────────────────────────────────────────────────────────────────────

def test_url_source_is_fetched_with_requests():
    resp = MagicMock()
    resp.text = json.dumps({"suffixes": [{"affix": "ed", "meaning": "past"}]})
    with patch("affix_splitter.services.loader.requests.get", return_value=resp) as get:
        entries = load_affix_entries("https://example.org/suffixes.json", "suffixes", timeout=3)
    get.assert_called_once_with("https://example.org/suffixes.json", timeout=3)
    resp.raise_for_status.assert_called_once()
    assert entries[0].affix == "ed"


def test_url_failure_is_source_error():
    with patch(
        "affix_splitter.services.loader.requests.get",
        side_effect=requests.ConnectionError("unreachable"),
    ):
        with pytest.raises(LexiconSourceError, match="unreachable"):
            load_affix_entries("http://example.org/prefixes.json", "prefixes")


def test_url_http_error_is_source_error():
    resp = MagicMock()
    resp.raise_for_status.side_effect = requests.HTTPError("404 Client Error")
    with patch("affix_splitter.services.loader.requests.get", return_value=resp):
        with pytest.raises(LexiconSourceError):
            load_affix_entries("http://example.org/prefixes.json", "prefixes")
