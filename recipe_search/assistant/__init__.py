"""
Input assistant for recipe search.

Each module owns one concern; this package exposes the entry points:

- Derived input state: `derive_view_state`, `classify`, `extract_tags`, `suggest`.
- Tag editing: `TagStore`, or `InputAssistant` for a whole session.
- Search lifecycle: `SearchOrchestrator` and `stream_orchestrated_search`.
"""

from .classifier import classify
from .errors import (
    EmptyInput,
    ErrorKind,
    RecipeSearchError,
    ServiceRejected,
    TransportFailure,
)
from .schemas import SearchRequest, SearchResponse
from .search_orchestrator import (
    SearchOrchestrator,
    build_search_request,
    stream_orchestrated_search,
)
from .session import InputAssistant
from .state import SearchPhase, SearchState, SearchType, ViewState
from .suggestions import suggest
from .tags import TagStore, extract_tags
from .utils import derive_view_state, view_state_to_context_item

__all__ = [
    "classify",
    "EmptyInput",
    "ErrorKind",
    "RecipeSearchError",
    "ServiceRejected",
    "TransportFailure",
    "SearchRequest",
    "SearchResponse",
    "SearchOrchestrator",
    "build_search_request",
    "stream_orchestrated_search",
    "InputAssistant",
    "SearchPhase",
    "SearchState",
    "SearchType",
    "ViewState",
    "suggest",
    "TagStore",
    "extract_tags",
    "derive_view_state",
    "view_state_to_context_item",
]
