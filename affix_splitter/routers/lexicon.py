import asyncio

from fastapi import APIRouter, HTTPException, Query

from affix_splitter.config import settings
from affix_splitter.models.schemas import (
    AffixEntryInfo,
    LexiconEntriesResponse,
    LexiconStatsResponse,
    LexiconStatusResponse,
    ReloadRequest,
)
from affix_splitter.routers.deps import require_lexicons
from affix_splitter.services.lexicon import Lexicon
from affix_splitter.services.loader import LexiconFormatError, LexiconSourceError
from affix_splitter.services.registry import PREFIX_KEY, SUFFIX_KEY, registry

router = APIRouter(prefix="/api/lexicon", tags=["lexicon"])


def _get_lexicon(kind: str) -> Lexicon:
    if kind not in (PREFIX_KEY, SUFFIX_KEY):
        raise HTTPException(status_code=404, detail=f"Unknown lexicon '{kind}'")

    return require_lexicons().get(kind)


@router.get("/status", response_model=LexiconStatusResponse)
async def lexicon_status():
    return LexiconStatusResponse(**registry.status())


@router.post("/reload", response_model=LexiconStatusResponse)
async def reload_lexicons(req: ReloadRequest | None = None):
    """Reload both lexicons; on failure the current ones stay active."""
    req = req or ReloadRequest()
    try:
        await asyncio.to_thread(
            registry.load,
            req.prefix_source or settings.PREFIX_SOURCE,
            req.suffix_source or settings.SUFFIX_SOURCE,
            timeout=settings.SOURCE_TIMEOUT,
        )
    except LexiconSourceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except LexiconFormatError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return LexiconStatusResponse(**registry.status())


@router.get("/{kind}/stats", response_model=LexiconStatsResponse)
async def lexicon_stats(kind: str):
    lexicon = _get_lexicon(kind)
    return LexiconStatsResponse(
        kind=kind,
        size=len(lexicon),
        max_affix_length=lexicon.max_affix_length,
        length_distribution=lexicon.length_distribution(),
    )


@router.get("/{kind}", response_model=LexiconEntriesResponse)
async def lexicon_entries(
    kind: str,
    page: int = Query(1, ge=1),
    page_size: int = Query(100, ge=1, le=1000),
    search: str = Query(""),
):
    lexicon = _get_lexicon(kind)
    entries = [
        AffixEntryInfo(affix=e.affix, meaning=e.meaning, length=len(e.affix), rank=i)
        for i, e in enumerate(lexicon)
    ]

    # Filter by search
    if search:
        search_lower = search.lower()
        entries = [
            e
            for e in entries
            if search_lower in e.affix.lower() or search_lower in e.meaning.lower()
        ]

    total = len(entries)
    start = (page - 1) * page_size
    end = start + page_size
    return LexiconEntriesResponse(
        kind=kind,
        entries=entries[start:end],
        total=total,
        page=page,
        page_size=page_size,
    )
