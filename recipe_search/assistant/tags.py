"""Tag extraction from free text and the mutable tag store behind the tag UI."""
from __future__ import annotations

import re
from typing import Iterable, Iterator, List, Set

from recipe_search.assistant.state import TagList

# Full-width list separator used when writing tags back into the input field
LIST_SEPARATOR = "、"

_SPLIT_RE = re.compile(r"[,，、\s]+")


def normalize_tag(term: str) -> str:
    return (term or "").strip()


def _dedupe_keep_order(terms: Iterable[str]) -> List[str]:
    """Return unique terms preserving first occurrence order."""
    seen: Set[str] = set()
    return [t for t in terms if t not in seen and not seen.add(t)]


def extract_tags(text: str) -> TagList:
    """
    Split free text into tags on commas, full-width separators and whitespace.
    Empty pieces are dropped and duplicates keep their first position.
    """
    pieces = (normalize_tag(p) for p in _SPLIT_RE.split(text or ""))
    return tuple(_dedupe_keep_order(p for p in pieces if p))


def join_tags(tags: Iterable[str], separator: str = LIST_SEPARATOR) -> str:
    return separator.join(tags)


class TagStore:
    """Ordered set of confirmed tags. Mutations never fail; they report whether anything changed."""

    def __init__(self, tags: Iterable[str] = ()):
        self._tags: List[str] = []
        self.reset(tags)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __contains__(self, term: object) -> bool:
        return isinstance(term, str) and normalize_tag(term) in self._tags

    def __repr__(self) -> str:
        return f"TagStore({self._tags!r})"

    @property
    def tags(self) -> TagList:
        return tuple(self._tags)

    def reset(self, tags: Iterable[str]) -> None:
        cleaned = (normalize_tag(t) for t in tags)
        self._tags = _dedupe_keep_order(t for t in cleaned if t)

    def add(self, term: str) -> bool:
        term = normalize_tag(term)
        if not term or term in self._tags:
            return False
        self._tags.append(term)
        return True

    def remove(self, term: str) -> bool:
        term = normalize_tag(term)
        if term not in self._tags:
            return False
        self._tags.remove(term)
        return True

    def rename(self, old_term: str, new_term: str) -> bool:
        """
        Replace old_term in place. An empty new_term or one equal to old_term cancels.
        A rename onto an existing tag collapses the duplicate right away, keeping
        whichever copy comes first.
        """
        old_term = normalize_tag(old_term)
        new_term = normalize_tag(new_term)
        if not new_term or new_term == old_term or old_term not in self._tags:
            return False
        index = self._tags.index(old_term)
        self._tags[index] = new_term
        self._tags = _dedupe_keep_order(self._tags)
        return True

    def serialize(self, separator: str = LIST_SEPARATOR) -> str:
        return join_tags(self._tags, separator)
