from fastapi import HTTPException

from affix_splitter.services.registry import LexiconSet, registry


def require_lexicons() -> LexiconSet:
    """Return the current lexicons or answer 503 with the last load error."""
    lexicons = registry.get()
    if lexicons is None:
        raise HTTPException(status_code=503, detail=registry.not_loaded_detail())
    return lexicons
