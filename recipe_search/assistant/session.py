"""
Per-user input session: owns the raw text, the tag store and the orchestrator.

The rendering layer holds a reference to one InputAssistant and calls its
methods for every keystroke, tag edit, suggestion pick and submit.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from recipe_search.assistant.errors import ErrorKind
from recipe_search.assistant.search_orchestrator import SearchOrchestrator
from recipe_search.assistant.state import Notice, SearchState, SearchType, ViewState
from recipe_search.assistant.tags import TagStore, extract_tags, normalize_tag
from recipe_search.assistant.utils import derive_view_state

logger = logging.getLogger(__name__)


class InputAssistant:
    def __init__(self, orchestrator: Optional[SearchOrchestrator] = None):
        self.orchestrator = orchestrator or SearchOrchestrator()
        self.raw_text = ""
        self.tag_store = TagStore()
        self.notices: List[Notice] = []
        self.view: ViewState = derive_view_state(self.raw_text)

    @property
    def search_state(self) -> SearchState:
        return self.orchestrator.state

    def _refresh(self) -> ViewState:
        self.view = derive_view_state(self.raw_text)
        self.tag_store.reset(self.view.tags)
        return self.view

    def _commit_tags(self) -> ViewState:
        self.raw_text = self.tag_store.serialize()
        return self._refresh()

    def _notify(self, level: str, message: str, kind: Optional[ErrorKind] = None) -> None:
        self.notices.append(Notice(level=level, message=message, kind=kind))

    def pop_notices(self) -> List[Notice]:
        notices, self.notices = self.notices, []
        return notices

    def handle_input(self, text: str) -> ViewState:
        """Keystroke: the field now holds `text`."""
        self.raw_text = text or ""
        return self._refresh()

    def add_tag(self, term: str) -> ViewState:
        if not self.tag_store.add(term):
            if normalize_tag(term):
                self._notify("info", f"食材已存在：{normalize_tag(term)}", ErrorKind.DUPLICATE_TAG)
            return self.view
        return self._commit_tags()

    def remove_tag(self, term: str) -> ViewState:
        if not self.tag_store.remove(term):
            return self.view
        self._notify("warning", f"已删除食材：{normalize_tag(term)}")
        return self._commit_tags()

    def rename_tag(self, old_term: str, new_term: str) -> ViewState:
        if not self.tag_store.rename(old_term, new_term):
            return self.view
        self._notify("success", f"食材已更新：{normalize_tag(old_term)} → {normalize_tag(new_term)}")
        return self._commit_tags()

    def select_suggestion(self, suggestion: str) -> ViewState:
        """Ingredients mode appends the pick as a tag; dish mode replaces the whole text."""
        if self.view.search_type is SearchType.INGREDIENTS:
            self.tag_store.add(suggestion)
            return self._commit_tags()
        self.raw_text = suggestion
        return self._refresh()

    def select_hint(self, terms: str) -> ViewState:
        if self.view.search_type is SearchType.INGREDIENTS:
            for term in extract_tags(terms):
                self.tag_store.add(term)
            return self._commit_tags()
        self.raw_text = terms
        return self._refresh()

    def clear_input(self) -> ViewState:
        if not self.orchestrator.controls_enabled:
            logger.warning("Clear ignored: a search is in flight")
            return self.view
        self.raw_text = ""
        return self._refresh()

    async def submit(self) -> SearchState:
        return await self.orchestrator.submit(self.raw_text, self.view.search_type)

    def clear_results(self) -> SearchState:
        return self.orchestrator.clear()
