import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timezone

from affix_splitter.services.lexicon import Lexicon
from affix_splitter.services.loader import LexiconLoadError, load_lexicon

logger = logging.getLogger(__name__)

PREFIX_KEY = "prefixes"
SUFFIX_KEY = "suffixes"


@dataclass(frozen=True)
class LexiconSet:
    prefixes: Lexicon
    suffixes: Lexicon
    prefix_source: str = ""
    suffix_source: str = ""
    loaded_at: datetime | None = None

    def get(self, kind: str) -> Lexicon | None:
        """Return the lexicon for 'prefixes' or 'suffixes', else None."""
        if kind == PREFIX_KEY:
            return self.prefixes
        if kind == SUFFIX_KEY:
            return self.suffixes
        return None


class LexiconRegistry:
    """Holds the current prefix/suffix lexicons behind one swappable reference."""

    def __init__(self):
        self._current: LexiconSet | None = None
        self._last_error: str | None = None
        self._reload_lock = threading.Lock()

    def load(self, prefix_source: str, suffix_source: str, timeout: float = 10.0) -> LexiconSet:
        """Load both lexicons, then replace the current set.

        On failure the previous set stays in place and the error is re-raised.
        """
        with self._reload_lock:
            try:
                prefixes = load_lexicon(prefix_source, PREFIX_KEY, timeout)
                suffixes = load_lexicon(suffix_source, SUFFIX_KEY, timeout)
            except LexiconLoadError as e:
                self._last_error = str(e)
                logger.error("Lexicon load failed: %s", e)
                raise

            self._current = LexiconSet(
                prefixes=prefixes,
                suffixes=suffixes,
                prefix_source=prefix_source,
                suffix_source=suffix_source,
                loaded_at=datetime.now(timezone.utc),
            )
            self._last_error = None
            return self._current

    def set(self, lexicons: LexiconSet) -> None:
        """Install an already built set, e.g. one assembled in memory."""
        self._current = lexicons
        self._last_error = None

    def get(self) -> LexiconSet | None:
        return self._current

    @property
    def last_error(self) -> str | None:
        return self._last_error

    def not_loaded_detail(self) -> str:
        detail = "Affix lexicons not loaded"
        if self._last_error:
            detail += f": {self._last_error}"
        return detail

    def status(self) -> dict:
        current = self._current
        return {
            "loaded": current is not None,
            "prefix_count": len(current.prefixes) if current else 0,
            "suffix_count": len(current.suffixes) if current else 0,
            "prefix_source": current.prefix_source if current else "",
            "suffix_source": current.suffix_source if current else "",
            "loaded_at": current.loaded_at if current else None,
            "error": self._last_error,
        }


# Global singleton
registry = LexiconRegistry()
