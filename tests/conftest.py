"""Pytest configuration and shared fixtures."""

import os

import django
import httpx
import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "recipe_assistant.settings")
django.setup()

from django.test.utils import setup_test_environment  # noqa: E402

setup_test_environment()

from recipe_search.assistant.schemas import SearchResponse  # noqa: E402


@pytest.fixture
def fast_progress():
    """Loading animation timings short enough to see several ticks per search."""
    return {
        "step_interval": 0.005,
        "type_interval": 0.001,
        "message_pause": 0.005,
    }


@pytest.fixture
def dish_success_payload():
    """Sample success reply for a dish query."""
    return {
        "success": True,
        "type": "dish",
        "result": "## 宫保鸡丁\n\n1. 鸡丁腌制\n2. 爆香花生",
        "timestamp": "2024-05-01T12:00:00+08:00",
    }


@pytest.fixture
def ingredients_success_payload():
    """Sample success reply for an ingredients query, with supplementary data."""
    return {
        "success": True,
        "type": "ingredients",
        "result": "### 推荐菜品\n- 西红柿炒鸡蛋",
        "timestamp": "2024-05-01T12:00:00+08:00",
        "supplementaryData": {
            "ai_available": True,
            "api_available": True,
            "nutrition_tips": "营养均衡",
            "api_recipes": [
                {"title": "Tomato Egg Stir Fry", "readyInMinutes": 15, "servings": 2},
                {"title": "Egg Drop Soup"},
            ],
        },
    }


@pytest.fixture
def events():
    """Collects orchestrator events in emit order."""
    return []


@pytest.fixture
def fake_search(dish_success_payload):
    """Coroutine search transport that records requests and returns the dish payload."""

    class FakeSearch:
        def __init__(self):
            self.requests = []
            self.payload = dish_success_payload
            self.error = None

        async def __call__(self, request):
            self.requests.append(request)
            if self.error is not None:
                raise self.error
            return SearchResponse.model_validate(self.payload)

    return FakeSearch()


@pytest.fixture
def mock_client():
    """Build an AsyncClient whose requests are answered by `handler`."""

    def build(handler):
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return build
