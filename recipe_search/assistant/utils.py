from typing import Any, Dict, Iterable

from recipe_search.assistant.classifier import classify
from recipe_search.assistant.state import SearchType, ViewState
from recipe_search.assistant.suggestions import suggest
from recipe_search.assistant.tags import extract_tags


def derive_view_state(raw_text: str) -> ViewState:
    """
    Single reducer for everything derived from the input field: search type,
    tag list and suggestions are always computed together from the same text.
    """
    search_type = classify(raw_text)
    tags = extract_tags(raw_text)
    excluded = tags if search_type is SearchType.INGREDIENTS else ()
    return ViewState(
        search_type=search_type,
        tags=tags,
        suggestions=suggest(raw_text, search_type, excluded),
    )


def view_state_to_context_item(view: ViewState) -> Dict[str, Any]:
    """Minimal serializable dict for UI: mode badge, tag chips, dropdown items."""
    return {
        "searchType": view.search_type.value,
        "tags": list(view.tags),
        "suggestions": list(view.suggestions),
        "showTags": view.show_tags,
        "showSuggestions": view.show_suggestions,
    }


def format_tags_summary(tags: Iterable[str]) -> str:
    """Format tags for log lines (e.g. '鸡蛋, 西红柿'). Safe for empty input."""
    tags = list(tags)
    return ", ".join(tags) if tags else "none yet"
