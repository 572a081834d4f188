"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from affix_splitter.services.lexicon import AffixEntry, Lexicon
from affix_splitter.services.registry import LexiconSet, registry

PREFIX_ENTRIES = [
    ("un", "not"),
    ("under", "below"),
    ("re", "again"),
    ("dis", "apart"),
    ("pre", "before"),
]

SUFFIX_ENTRIES = [
    ("ed", "past tense"),
    ("ing", "action, process"),
    ("ness", "state, quality"),
    ("s", "plural"),
    ("able", "capable of"),
]


def make_lexicon(pairs: list[tuple[str, str]]) -> Lexicon:
    return Lexicon.build(AffixEntry(affix=a, meaning=m) for a, m in pairs)


def write_affix_file(path: Path, key: str, pairs: list[tuple[str, str]]) -> Path:
    path.write_text(
        json.dumps({key: [{"affix": a, "meaning": m} for a, m in pairs]}),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def prefixes() -> Lexicon:
    return make_lexicon(PREFIX_ENTRIES)


@pytest.fixture
def suffixes() -> Lexicon:
    return make_lexicon(SUFFIX_ENTRIES)


@pytest.fixture
def affix_files(tmp_path: Path) -> tuple[Path, Path]:
    """Write prefix and suffix JSON sources; returns (prefix_path, suffix_path)."""
    return (
        write_affix_file(tmp_path / "prefixes.json", "prefixes", PREFIX_ENTRIES),
        write_affix_file(tmp_path / "suffixes.json", "suffixes", SUFFIX_ENTRIES),
    )


@pytest.fixture
def empty_registry(monkeypatch):
    """Clear the global registry for the duration of a test."""
    monkeypatch.setattr(registry, "_current", None)
    monkeypatch.setattr(registry, "_last_error", None)
    return registry


@pytest.fixture
def client(empty_registry, prefixes, suffixes) -> TestClient:
    """TestClient against the app with in-memory lexicons installed.

    The lifespan is not run, so nothing is read from disk.
    """
    from affix_splitter.main import app

    empty_registry.set(
        LexiconSet(
            prefixes=prefixes,
            suffixes=suffixes,
            prefix_source="memory",
            suffix_source="memory",
        )
    )
    return TestClient(app)
