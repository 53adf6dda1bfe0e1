"""Tests for request/response schemas."""

import pytest
from pydantic import ValidationError

from recipe_search.assistant.schemas import SearchRequest, SearchResponse
from recipe_search.assistant.state import SearchType


class TestSearchRequest:
    """Tests for SearchRequest."""

    def test_ingredients_payload(self):
        request = SearchRequest.for_ingredients(["鸡蛋", "西红柿"])
        assert request.to_payload() == {
            "queryType": "ingredients",
            "ingredients": ["鸡蛋", "西红柿"],
        }

    def test_dish_payload(self):
        request = SearchRequest.for_dish(" 宫保鸡丁 ")
        assert request.to_payload() == {"queryType": "dish", "dishName": "宫保鸡丁"}

    def test_is_frozen(self):
        request = SearchRequest.for_dish("宫保鸡丁")
        with pytest.raises(ValidationError):
            request.dish_name = "红烧肉"

    def test_ingredients_query_needs_ingredients(self):
        with pytest.raises(ValidationError):
            SearchRequest(queryType="ingredients", ingredients=[])

    def test_dish_query_needs_name(self):
        with pytest.raises(ValidationError):
            SearchRequest(query_type=SearchType.DISH, dish_name="  ")

    def test_accepts_wire_aliases(self):
        request = SearchRequest.model_validate({"queryType": "dish", "dishName": "红烧肉"})
        assert request.query_type is SearchType.DISH
        assert request.dish_name == "红烧肉"


class TestSearchResponse:
    """Tests for SearchResponse."""

    def test_decodes_supplementary_data(self, ingredients_success_payload):
        response = SearchResponse.model_validate(ingredients_success_payload)
        assert response.type is SearchType.INGREDIENTS
        recipes = response.supplementary_data.api_recipes
        assert recipes[0].ready_in_minutes == 15
        assert recipes[1].servings is None

    def test_payload_round_trips_wire_keys(self, ingredients_success_payload):
        response = SearchResponse.model_validate(ingredients_success_payload)
        assert response.to_payload() == ingredients_success_payload

    def test_minimal_success(self, dish_success_payload):
        response = SearchResponse.model_validate(dish_success_payload)
        assert response.supplementary_data is None
        assert "supplementaryData" not in response.to_payload()

    def test_unknown_type_is_rejected(self):
        with pytest.raises(ValidationError):
            SearchResponse.model_validate({"success": True, "type": "menu", "result": ""})
