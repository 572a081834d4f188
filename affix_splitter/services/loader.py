import json
import logging
from pathlib import Path

import requests
from pydantic import BaseModel, TypeAdapter, ValidationError, field_validator

from affix_splitter.services.lexicon import AffixEntry, Lexicon

logger = logging.getLogger(__name__)


class LexiconLoadError(Exception):
    """An affix source could not be turned into a lexicon."""


class LexiconSourceError(LexiconLoadError):
    """The source could not be read (missing file, HTTP failure, timeout)."""


class LexiconFormatError(LexiconLoadError):
    """The source was read but does not hold a valid affix list."""


class _AffixRecord(BaseModel):
    affix: str
    meaning: str = ""

    @field_validator("affix")
    @classmethod
    def _non_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("affix must not be empty")
        return v


_records = TypeAdapter(list[_AffixRecord])


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _read_source(source: str, timeout: float) -> str:
    if _is_url(source):
        try:
            resp = requests.get(source, timeout=timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise LexiconSourceError(f"Could not fetch '{source}': {e}") from e
        return resp.text

    try:
        return Path(source).read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise LexiconFormatError(f"'{source}' is not valid UTF-8: {e}") from e
    except OSError as e:
        raise LexiconSourceError(f"Could not read '{source}': {e}") from e


def load_affix_entries(source: str, key: str, timeout: float = 10.0) -> list[AffixEntry]:
    """Read the `key` list of {affix, meaning} objects from a JSON source."""
    text = _read_source(str(source), timeout)

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise LexiconFormatError(f"'{source}' is not valid JSON: {e}") from e

    if not isinstance(data, dict) or key not in data:
        raise LexiconFormatError(f"'{source}' has no top-level '{key}' field")

    try:
        records = _records.validate_python(data[key])
    except ValidationError as e:
        raise LexiconFormatError(f"'{source}' has malformed '{key}' entries: {e}") from e

    entries = []
    for rec in records:
        if rec.affix != rec.affix.lower():
            logger.warning(
                "Affix %r in %s is not lowercase and will never match", rec.affix, source
            )
        entries.append(AffixEntry(affix=rec.affix, meaning=rec.meaning))
    return entries


def load_lexicon(source: str, key: str, timeout: float = 10.0) -> Lexicon:
    entries = load_affix_entries(source, key, timeout)
    logger.info("Loaded %d %s from %s", len(entries), key, source)
    return Lexicon.build(entries)
