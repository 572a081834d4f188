from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AffixEntry:
    """A prefix or suffix with its gloss."""

    affix: str
    meaning: str = ""

    def __post_init__(self):
        if not self.affix:
            raise ValueError("affix must be a non-empty string")


class Lexicon:
    """Read-only affix collection, longest affix first.

    Equal-length affixes keep the order they were given in, so the first
    entry that matches a word is always the longest one, with ties going to
    the earlier entry.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[AffixEntry] = ()):
        # sorted() is stable, and stays stable with reverse=True
        self._entries = tuple(sorted(entries, key=lambda e: len(e.affix), reverse=True))

    @classmethod
    def build(cls, entries: Iterable[AffixEntry]) -> "Lexicon":
        return cls(entries)

    @property
    def entries(self) -> tuple[AffixEntry, ...]:
        return self._entries

    @property
    def max_affix_length(self) -> int:
        return len(self._entries[0].affix) if self._entries else 0

    def length_distribution(self) -> dict[int, int]:
        """Return mapping of affix length -> entry count."""
        dist: dict[int, int] = {}
        for entry in self._entries:
            n = len(entry.affix)
            dist[n] = dist.get(n, 0) + 1
        return dist

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[AffixEntry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> AffixEntry:
        return self._entries[index]

    def __repr__(self) -> str:
        return f"Lexicon({len(self._entries)} entries)"
