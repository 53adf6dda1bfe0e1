from __future__ import annotations

import asyncio
import logging
from typing import Any, AsyncGenerator, Awaitable, Callable, Dict, Optional, Tuple

from recipe_search.assistant.classifier import classify
from recipe_search.assistant.errors import (
    EMPTY_INGREDIENTS_MESSAGE,
    GENERIC_SEARCH_FAILURE_MESSAGE,
    EmptyInput,
    ErrorKind,
    RecipeSearchError,
    TransportFailure,
)
from recipe_search.assistant.progress import (
    DEFAULT_MESSAGE_PAUSE,
    DEFAULT_STEP_INTERVAL,
    DEFAULT_TYPE_INTERVAL,
    EventSink,
    LoadingProgress,
)
from recipe_search.assistant.schemas import SearchRequest, SearchResponse
from recipe_search.assistant.state import SearchPhase, SearchState, SearchType
from recipe_search.assistant.tags import extract_tags
from recipe_search.assistant.utils import format_tags_summary

logger = logging.getLogger(__name__)

SearchTransport = Callable[[SearchRequest], Awaitable[SearchResponse]]

CANCELLED_MESSAGE = "搜索已取消"


def build_search_request(
    raw_text: str,
    search_type: Optional[SearchType] = None,
) -> SearchRequest:
    """
    Validate the input and build the one request for this submit.
    Raises EmptyInput before anything touches the network.
    """
    text = (raw_text or "").strip()
    if not text:
        raise EmptyInput()

    if search_type is None:
        search_type = classify(raw_text)

    if search_type is SearchType.INGREDIENTS:
        tags = extract_tags(text)
        if not tags:
            raise EmptyInput(EMPTY_INGREDIENTS_MESSAGE)
        return SearchRequest.for_ingredients(tags)
    return SearchRequest.for_dish(text)


def _describe(request: SearchRequest) -> str:
    if request.query_type is SearchType.INGREDIENTS:
        return f"ingredients: {format_tags_summary(request.ingredients or ())}"
    return f"dish: {request.dish_name}"


class SearchOrchestrator:
    """
    Owns the submit -> loading -> result/error lifecycle.

    Events (state transitions, loader choice, progress ticks, result, error)
    go to `emit` as plain dicts. While a search is loading, `submit` and
    `clear` are inert, so at most one request is ever in flight.
    """

    def __init__(
        self,
        search: Optional[SearchTransport] = None,
        *,
        emit: Optional[EventSink] = None,
        step_interval: float = DEFAULT_STEP_INTERVAL,
        type_interval: float = DEFAULT_TYPE_INTERVAL,
        message_pause: float = DEFAULT_MESSAGE_PAUSE,
        rng=None,
    ):
        if search is None:
            from recipe_search.adapters.recipe_adapter import recipe_search
            search = recipe_search
        self._search = search
        self._emit: EventSink = emit or (lambda event: None)
        self._progress_options: Dict[str, Any] = {
            "step_interval": step_interval,
            "type_interval": type_interval,
            "message_pause": message_pause,
            "rng": rng,
        }
        self._progress: Optional[LoadingProgress] = None
        self._state = SearchState.idle()

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def controls_enabled(self) -> bool:
        return not self._state.is_loading

    @property
    def progress_running(self) -> bool:
        return self._progress is not None and self._progress.running

    def _transition(self, state: SearchState) -> SearchState:
        self._state = state
        self._emit(state.as_event())
        return state

    def _fail(self, error: RecipeSearchError, request: Optional[SearchRequest] = None) -> SearchState:
        self._emit({"type": "error", "message": error.message, "kind": error.kind.value})
        return self._transition(SearchState.error(error.message, error.kind, request))

    async def submit(
        self,
        raw_text: str,
        search_type: Optional[SearchType] = None,
    ) -> SearchState:
        """Run one search for the given input. Never raises for validation or transport problems."""
        if not self.controls_enabled:
            logger.warning("Submit ignored: a search is already in flight")
            return self._state

        self._transition(SearchState.validating())
        try:
            request = build_search_request(raw_text, search_type)
        except EmptyInput as e:
            logger.info("Search rejected before sending: %s", e.message)
            return self._fail(e)

        logger.info("Searching recipes (%s)", _describe(request))
        self._transition(SearchState.loading(request))
        self._progress = LoadingProgress(self._emit, **self._progress_options)
        self._progress.start()
        failure: Optional[RecipeSearchError] = None
        try:
            response = await self._search(request)
        except RecipeSearchError as e:
            failure = e
        except asyncio.CancelledError:
            self._transition(SearchState.error(CANCELLED_MESSAGE, ErrorKind.TRANSPORT_FAILURE, request))
            raise
        except Exception:
            logger.exception("Unexpected error during recipe search")
            failure = TransportFailure(GENERIC_SEARCH_FAILURE_MESSAGE)
        finally:
            await self._progress.stop()

        if failure is not None:
            logger.warning("Recipe search failed (%s): %s", failure.kind.value, failure.message)
            return self._fail(failure, request)

        logger.info("Recipe search succeeded (%s)", request.query_type.value)
        self._emit({"type": "result", "payload": response.to_payload()})
        return self._transition(SearchState.success(request, response))

    def clear(self) -> SearchState:
        """Back to Idle after a result or error. Inert while loading."""
        if not self.controls_enabled:
            logger.warning("Clear ignored: a search is in flight")
            return self._state
        if self._state.phase is SearchPhase.IDLE:
            return self._state
        return self._transition(SearchState.idle())


async def stream_orchestrated_search(
    raw_text: str,
    *,
    search: Optional[SearchTransport] = None,
    **options: Any,
) -> AsyncGenerator[Tuple[str, Dict[str, Any]], None]:
    """
    Run one search and stream its events for SSE views.

    Yields (mode, chunk) where:
      - mode == "updates": state transitions
      - mode == "custom": loader/step/status/result/error events
    """
    queue: "asyncio.Queue[Optional[Dict[str, Any]]]" = asyncio.Queue()
    orchestrator = SearchOrchestrator(search, emit=queue.put_nowait, **options)
    task = asyncio.create_task(orchestrator.submit(raw_text))
    task.add_done_callback(lambda _: queue.put_nowait(None))
    try:
        while True:
            event = await queue.get()
            if event is None:
                break
            yield ("updates" if event.get("type") == "state" else "custom"), event
        await task
    finally:
        if not task.done():
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)
