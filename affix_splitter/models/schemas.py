from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def _clean_word(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("word must not be blank")
    return v


class SplitRequest(BaseModel):
    word: str

    @field_validator("word")
    @classmethod
    def strip_word(cls, v: str) -> str:
        return _clean_word(v)


class BatchSplitRequest(BaseModel):
    words: list[str] = Field(..., min_length=1)

    @field_validator("words")
    @classmethod
    def strip_words(cls, v: list[str]) -> list[str]:
        return [_clean_word(w) for w in v]


class SegmentInfo(BaseModel):
    kind: str  # "prefix", "root", "suffix", "unmatched"
    text: str
    meaning: str = ""


class DecompositionResponse(BaseModel):
    """Split result; serialized with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    original: str
    prefix: str
    prefix_meaning: str
    root: str
    suffix: str
    suffix_meaning: str
    unmatched: str
    segments: list[SegmentInfo] = []


class BatchSplitResponse(BaseModel):
    results: list[DecompositionResponse]
    count: int


class AffixEntryInfo(BaseModel):
    affix: str
    meaning: str
    length: int
    rank: int  # position in match order


class LexiconEntriesResponse(BaseModel):
    kind: str
    entries: list[AffixEntryInfo]
    total: int
    page: int
    page_size: int


class LexiconStatsResponse(BaseModel):
    kind: str
    size: int
    max_affix_length: int
    length_distribution: dict[int, int]


class LexiconStatusResponse(BaseModel):
    loaded: bool
    prefix_count: int
    suffix_count: int
    prefix_source: str
    suffix_source: str
    loaded_at: datetime | None = None
    error: str | None = None


class ReloadRequest(BaseModel):
    prefix_source: str | None = Field(None, description="JSON file path or http(s) URL")
    suffix_source: str | None = Field(None, description="JSON file path or http(s) URL")
