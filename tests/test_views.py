"""Tests for the recipe search views."""

import json

import httpx
import pytest
from django.test import AsyncClient, Client, override_settings

from recipe_search import views

FAST_LOADING = {
    "RECIPE_LOADING_STEP_INTERVAL": 0.005,
    "RECIPE_LOADING_TYPE_INTERVAL": 0.001,
    "RECIPE_LOADING_MESSAGE_PAUSE": 0.005,
}


def _parse_sse(body: str):
    """Split an SSE body into (event, data) pairs."""
    events = []
    for block in body.strip().split("\n\n"):
        lines = dict(line.split(": ", 1) for line in block.splitlines())
        events.append((lines["event"], json.loads(lines["data"])))
    return events


async def _read_stream(response) -> str:
    chunks = [chunk async for chunk in response.streaming_content]
    return b"".join(chunks).decode("utf-8")


class TestSearchPage:
    """Tests for the search page."""

    def test_renders_form_and_hints(self):
        response = Client().get("/")
        assert response.status_code == 200
        content = response.content.decode("utf-8")
        assert "食材模式" in content
        assert "春笋、韭菜、香椿" in content

    def test_prefilled_dish_query(self):
        response = Client().get("/", {"q": "宫保"})
        content = response.content.decode("utf-8")
        assert "菜品模式" in content
        assert "宫保鸡丁" in content


class TestSuggestView:
    """Tests for the per-keystroke endpoint."""

    def test_ingredient_suggestions(self):
        response = Client().get("/suggest/", {"q": "鸡"})
        assert response.status_code == 200
        data = response.json()
        assert data["searchType"] == "ingredients"
        assert "鸡蛋" in data["suggestions"]
        assert len(data["suggestions"]) <= 6

    def test_dish_classification(self):
        data = Client().get("/suggest/", {"q": "红烧肉"}).json()
        assert data["searchType"] == "dish"
        assert data["showTags"] is False

    def test_missing_query(self):
        data = Client().get("/suggest/").json()
        assert data == {
            "searchType": "ingredients",
            "tags": [],
            "suggestions": [],
            "showTags": False,
            "showSuggestions": False,
        }


class TestSearchStreamView:
    """Tests for the SSE endpoint."""

    @pytest.mark.asyncio
    async def test_streams_result_then_done(self, monkeypatch, fake_search, dish_success_payload):
        monkeypatch.setattr(views, "recipe_search", fake_search)

        with override_settings(**FAST_LOADING):
            response = await AsyncClient().get("/stream/", {"q": "宫保鸡丁"})
            body = await _read_stream(response)

        assert response["Content-Type"] == "text/event-stream"
        events = _parse_sse(body)
        names = [name for name, _ in events]
        assert names[0] == "state"
        assert ("result", {"type": "result", "payload": dish_success_payload}) in events
        assert names[-1] == "done"
        assert fake_search.requests[0].to_payload() == {"queryType": "dish", "dishName": "宫保鸡丁"}

    @pytest.mark.asyncio
    async def test_streams_service_error(self, monkeypatch, fake_search):
        from recipe_search.assistant.errors import ServiceRejected

        fake_search.error = ServiceRejected("按菜名查询时必须提供菜名")
        monkeypatch.setattr(views, "recipe_search", fake_search)

        with override_settings(**FAST_LOADING):
            response = await AsyncClient().get("/stream/", {"q": "红烧肉"})
            events = _parse_sse(await _read_stream(response))

        errors = [data for name, data in events if name == "error"]
        assert errors == [{"type": "error", "message": "按菜名查询时必须提供菜名", "kind": "service_rejected"}]
        assert events[-1][0] == "done"

    @pytest.mark.asyncio
    async def test_padded_query_keeps_suggest_search_type(self, monkeypatch, fake_search):
        monkeypatch.setattr(views, "recipe_search", fake_search)
        suggested = (await AsyncClient().get("/suggest/", {"q": " 红烧肉 "})).json()

        with override_settings(**FAST_LOADING):
            response = await AsyncClient().get("/stream/", {"q": " 红烧肉 "})
            await _read_stream(response)

        assert suggested["searchType"] == "ingredients"
        assert fake_search.requests[0].query_type.value == suggested["searchType"]
        assert fake_search.requests[0].ingredients == ("红烧肉",)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("params", [{}, {"q": "   "}])
    async def test_blank_query_lands_in_empty_input_error(self, fake_search, monkeypatch, params):
        monkeypatch.setattr(views, "recipe_search", fake_search)

        response = await AsyncClient().get("/stream/", params)
        events = _parse_sse(await _read_stream(response))

        assert ("error", {"type": "error", "message": "请输入食材或菜品名称", "kind": "empty_input"}) in events
        phases = [data["phase"] for name, data in events if name == "state"]
        assert phases == ["validating", "error"]
        assert events[-1][0] == "done"
        assert fake_search.requests == []


class TestHealthView:
    """Tests for the health endpoint."""

    def test_upstream_ok(self, monkeypatch):
        monkeypatch.setattr(views, "get_health", lambda: {"status": "ok", "service": "recipe-agent"})
        response = Client().get("/health/")
        assert response.status_code == 200
        assert response.json()["upstream"]["service"] == "recipe-agent"

    def test_upstream_down(self, monkeypatch):
        def down():
            raise httpx.ConnectError("connection refused")

        monkeypatch.setattr(views, "get_health", down)
        response = Client().get("/health/")
        assert response.status_code == 503
        assert response.json()["status"] == "degraded"
