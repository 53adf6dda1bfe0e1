from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

from recipe_search.assistant.errors import ErrorKind

if TYPE_CHECKING:
    from recipe_search.assistant.schemas import SearchRequest, SearchResponse

TagList = Tuple[str, ...]
SuggestionSet = Tuple[str, ...]


class SearchType(str, Enum):
    INGREDIENTS = "ingredients"
    DISH = "dish"


class SearchPhase(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class ViewState:
    search_type: SearchType
    tags: TagList
    suggestions: SuggestionSet

    @property
    def show_tags(self) -> bool:
        return self.search_type is SearchType.INGREDIENTS and bool(self.tags)

    @property
    def show_suggestions(self) -> bool:
        return bool(self.suggestions)


@dataclass(frozen=True)
class SearchState:
    phase: SearchPhase
    request: Optional["SearchRequest"] = None
    payload: Optional["SearchResponse"] = None
    message: Optional[str] = None
    error_kind: Optional[ErrorKind] = None

    @classmethod
    def idle(cls) -> "SearchState":
        return cls(SearchPhase.IDLE)

    @classmethod
    def validating(cls) -> "SearchState":
        return cls(SearchPhase.VALIDATING)

    @classmethod
    def loading(cls, request: "SearchRequest") -> "SearchState":
        return cls(SearchPhase.LOADING, request=request)

    @classmethod
    def success(cls, request: "SearchRequest", payload: "SearchResponse") -> "SearchState":
        return cls(SearchPhase.SUCCESS, request=request, payload=payload)

    @classmethod
    def error(
        cls,
        message: str,
        kind: ErrorKind,
        request: Optional["SearchRequest"] = None,
    ) -> "SearchState":
        return cls(SearchPhase.ERROR, request=request, message=message, error_kind=kind)

    @property
    def is_loading(self) -> bool:
        return self.phase in (SearchPhase.VALIDATING, SearchPhase.LOADING)

    def as_event(self) -> Dict[str, Any]:
        """JSON-friendly summary of the transition, without the payload."""
        return {
            "type": "state",
            "phase": self.phase.value,
            "controlsEnabled": not self.is_loading,
        }


@dataclass(frozen=True)
class Notice:
    """Soft user-facing message produced by a tag edit."""
    level: str
    message: str
    kind: Optional[ErrorKind] = None
