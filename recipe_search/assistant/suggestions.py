from __future__ import annotations

from itertools import islice
from typing import Iterable, Set

from recipe_search.assistant.state import SearchType, SuggestionSet
from recipe_search.assistant.term_banks import DISH_BANK, INGREDIENT_BANK

MAX_SUGGESTIONS = 6


def suggest(
    text: str,
    search_type: SearchType,
    excluded: Iterable[str] = (),
) -> SuggestionSet:
    """
    Autocomplete candidates for the current text, in bank order.

    Ingredients mode skips anything in `excluded` (the current tag list);
    dish mode ignores it since a dish query holds a single term.
    """
    query = (text or "").strip().lower()
    if not query:
        return ()

    if search_type is SearchType.INGREDIENTS:
        bank = INGREDIENT_BANK
        skip: Set[str] = set(excluded)
    else:
        bank = DISH_BANK
        skip = set()

    matches = (term for term in bank if query in term.lower() and term not in skip)
    return tuple(islice(matches, MAX_SUGGESTIONS))
