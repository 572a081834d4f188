import json
from dataclasses import asdict

from fastapi import APIRouter, HTTPException, WebSocket, WebSocketDisconnect

from affix_splitter.config import settings
from affix_splitter.models.schemas import (
    BatchSplitRequest,
    BatchSplitResponse,
    DecompositionResponse,
    SegmentInfo,
    SplitRequest,
)
from affix_splitter.routers.deps import require_lexicons
from affix_splitter.services.registry import LexiconSet, registry
from affix_splitter.services.splitter import segments, split

router = APIRouter(prefix="/api/split", tags=["split"])


def _split_word(word: str, lexicons: LexiconSet) -> DecompositionResponse:
    decomposition = split(word, lexicons.prefixes, lexicons.suffixes)
    return DecompositionResponse(
        **asdict(decomposition),
        segments=[SegmentInfo(**s) for s in segments(decomposition)],
    )


@router.post("", response_model=DecompositionResponse)
async def split_word(req: SplitRequest):
    """Split one word into prefix, root and suffix."""
    return _split_word(req.word, require_lexicons())


@router.post("/batch", response_model=BatchSplitResponse)
async def split_batch(req: BatchSplitRequest):
    if len(req.words) > settings.MAX_BATCH_SIZE:
        raise HTTPException(
            status_code=422,
            detail=f"At most {settings.MAX_BATCH_SIZE} words per request",
        )

    # One snapshot for the whole batch, even if a reload lands mid-request
    lexicons = require_lexicons()
    results = [_split_word(w, lexicons) for w in req.words]
    return BatchSplitResponse(results=results, count=len(results))


@router.get("/{word}", response_model=DecompositionResponse)
async def split_word_get(word: str):
    word = word.strip()
    if not word:
        raise HTTPException(status_code=422, detail="word must not be blank")
    return _split_word(word, require_lexicons())


@router.websocket("/ws")
async def split_ws(websocket: WebSocket):
    """Live splitting: each {"word": ...} message gets a decomposition back."""
    await websocket.accept()
    try:
        while True:
            data = await websocket.receive_text()
            try:
                msg = json.loads(data)
                if not isinstance(msg, dict):
                    await websocket.send_json({"error": "Expected a JSON object"})
                    continue

                word = str(msg.get("word", "")).strip()
                if not word:
                    await websocket.send_json({"error": "word must not be blank"})
                    continue

                lexicons = registry.get()
                if lexicons is None:
                    await websocket.send_json({"error": registry.not_loaded_detail()})
                    continue

                response = _split_word(word, lexicons)
                await websocket.send_json(response.model_dump(by_alias=True))
            except json.JSONDecodeError:
                await websocket.send_json({"error": "Invalid JSON"})
    except WebSocketDisconnect:
        pass
