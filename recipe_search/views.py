import json

import httpx
from django.conf import settings
from django.http import JsonResponse, StreamingHttpResponse
from django.shortcuts import render

from recipe_search.adapters.recipe_adapter import recipe_search
from recipe_search.assistant import (
    derive_view_state,
    stream_orchestrated_search,
    view_state_to_context_item,
)
from recipe_search.assistant.term_banks import HINTS, get_hint_items
from recipe_search.clients.recipe_client import get_health


def search_view(request):
    """
    GET-only page that renders the search form with the view state derived from `q`.
    The form submits to the SSE endpoint.
    """
    query = request.GET.get("q") or ""
    return render(request, "recipe_search/search.html", {
        "query": query,
        "view": view_state_to_context_item(derive_view_state(query)),
        "hint_tabs": {category: get_hint_items(category) for category in HINTS},
        "error": None,
    })


def suggest_view(request):
    """
    Per-keystroke endpoint:
      /suggest/?q=current+text

    Returns the derived view state: search type, tag chips and suggestions.
    """
    query = request.GET.get("q") or ""
    return JsonResponse(
        view_state_to_context_item(derive_view_state(query)),
        json_dumps_params={"ensure_ascii": False},
    )


def _sse(event: str, data: dict) -> str:
    """
    Format a Server-Sent Event message.
    """
    return f"event: {event}\ndata: {json.dumps(data, ensure_ascii=False)}\n\n"


def _progress_options() -> dict:
    return {
        "step_interval": settings.RECIPE_LOADING_STEP_INTERVAL,
        "type_interval": settings.RECIPE_LOADING_TYPE_INTERVAL,
        "message_pause": settings.RECIPE_LOADING_MESSAGE_PAUSE,
    }


async def search_stream_view(request):
    """
    SSE endpoint:
      /stream/?q=鸡蛋、西红柿

    Streams:
      - state: phase transitions (controlsEnabled is false while loading)
      - loader / step / status: cosmetic loading progress
      - result: the service payload, unchanged
      - error: one user-facing message
      - done: completion
    """
    # Unstripped, so the search type matches what /suggest/ derives
    query = request.GET.get("q") or ""

    async def event_generator():
        try:
            async for mode, chunk in stream_orchestrated_search(
                query,
                search=recipe_search,
                **_progress_options(),
            ):
                yield _sse(chunk.get("type", mode), chunk)
        except Exception as e:
            yield _sse("error", {"message": str(e)})

        yield _sse("done", {"message": "Search complete"})

    resp = StreamingHttpResponse(
        event_generator(), content_type="text/event-stream")
    # SSE + proxies: prevent buffering
    resp["Cache-Control"] = "no-cache"
    resp["X-Accel-Buffering"] = "no"  # for nginx
    return resp


def health_view(request):
    """Service health plus the upstream recipe service status."""
    try:
        upstream = get_health()
    except (httpx.HTTPError, ValueError) as e:
        return JsonResponse(
            {"status": "degraded", "service": "recipe-assistant", "upstream": {"error": str(e)}},
            status=503,
        )
    return JsonResponse({"status": "ok", "service": "recipe-assistant", "upstream": upstream})
