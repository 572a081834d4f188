from collections.abc import Callable
from dataclasses import dataclass

from affix_splitter.services.lexicon import AffixEntry, Lexicon


@dataclass(frozen=True, slots=True)
class Decomposition:
    original: str
    prefix: str
    prefix_meaning: str
    root: str
    suffix: str
    suffix_meaning: str
    # Always equal to root; kept for consumers that read both fields.
    unmatched: str


def _first_match(lexicon: Lexicon, matches: Callable[[str], bool]) -> AffixEntry | None:
    for entry in lexicon:
        if matches(entry.affix):
            return entry
    return None


def split(word: str, prefixes: Lexicon, suffixes: Lexicon) -> Decomposition:
    """
    Split a word into prefix, root and suffix using longest-match lookup.

    The word is lowercased before matching; lexicon affixes are compared
    as-is. At most one prefix and one suffix are stripped, and the suffix is
    searched for only in what remains after the prefix. An empty root is a
    valid result.
    """
    normalized = word.lower()

    prefix = _first_match(prefixes, normalized.startswith)
    core_after_prefix = normalized[len(prefix.affix):] if prefix else normalized

    suffix = _first_match(suffixes, core_after_prefix.endswith)
    root = (
        core_after_prefix[: len(core_after_prefix) - len(suffix.affix)]
        if suffix
        else core_after_prefix
    )

    return Decomposition(
        original=word,
        prefix=prefix.affix if prefix else "",
        prefix_meaning=prefix.meaning if prefix else "",
        root=root,
        suffix=suffix.affix if suffix else "",
        suffix_meaning=suffix.meaning if suffix else "",
        unmatched=root,
    )


def segments(decomposition: Decomposition) -> list[dict]:
    """Return the displayable pieces of a decomposition in reading order.

    A word with no matched affix comes back as a single "unmatched" segment.
    """
    d = decomposition
    if not d.prefix and not d.suffix:
        if not d.unmatched:
            return []
        return [{"kind": "unmatched", "text": d.unmatched, "meaning": ""}]

    result = []
    if d.prefix:
        result.append({"kind": "prefix", "text": d.prefix, "meaning": d.prefix_meaning})
    if d.root:
        result.append({"kind": "root", "text": d.root, "meaning": ""})
    if d.suffix:
        result.append({"kind": "suffix", "text": d.suffix, "meaning": d.suffix_meaning})
    return result
