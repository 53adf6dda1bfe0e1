from __future__ import annotations

import re

from recipe_search.assistant.state import SearchType
from recipe_search.assistant.term_banks import DISH_KEYWORDS

_LIST_DELIMITERS = (",", "，", "、")
_WHITESPACE_RE = re.compile(r"\s+")


def looks_like_dish(text: str) -> bool:
    return any(keyword in text for keyword in DISH_KEYWORDS)


def has_ingredients_hint(text: str) -> bool:
    """
    True when the text reads like a list: it has an explicit delimiter or
    splits into more than two whitespace-separated pieces. Leading or trailing
    whitespace counts as a split point.
    """
    if any(d in text for d in _LIST_DELIMITERS):
        return True
    return len(_WHITESPACE_RE.split(text)) > 2


def classify(text: str) -> SearchType:
    """Dish only when a dish keyword matches and nothing hints at a list."""
    text = text or ""
    if looks_like_dish(text) and not has_ingredients_hint(text):
        return SearchType.DISH
    return SearchType.INGREDIENTS
