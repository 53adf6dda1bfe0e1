"""Pydantic schemas for the recipe search service wire format."""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from recipe_search.assistant.state import SearchType


class SearchRequest(BaseModel):
    """One outbound query. Frozen: built once per submit and never touched again."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    query_type: SearchType = Field(alias="queryType")
    ingredients: Optional[Tuple[str, ...]] = Field(
        default=None,
        description="Tag list for an ingredients query, in display order.",
    )
    dish_name: Optional[str] = Field(
        default=None,
        alias="dishName",
        description="Dish name for a dish query.",
    )

    @model_validator(mode="after")
    def _check_fields_match_type(self) -> "SearchRequest":
        if self.query_type is SearchType.INGREDIENTS and not self.ingredients:
            raise ValueError("an ingredients query needs at least one ingredient")
        if self.query_type is SearchType.DISH and not (self.dish_name or "").strip():
            raise ValueError("a dish query needs a dish name")
        return self

    @classmethod
    def for_ingredients(cls, ingredients) -> "SearchRequest":
        return cls(query_type=SearchType.INGREDIENTS, ingredients=tuple(ingredients))

    @classmethod
    def for_dish(cls, dish_name: str) -> "SearchRequest":
        return cls(query_type=SearchType.DISH, dish_name=dish_name.strip())

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class ApiRecipe(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    title: str
    ready_in_minutes: Optional[int] = Field(default=None, alias="readyInMinutes")
    servings: Optional[int] = None


class SupplementaryData(BaseModel):
    model_config = ConfigDict(extra="allow")

    ai_available: Optional[bool] = None
    api_available: Optional[bool] = None
    nutrition_tips: Optional[str] = None
    api_recipes: Optional[List[ApiRecipe]] = None


class SearchResponse(BaseModel):
    """Decoded success reply. Free-form markdown in `result`, optional structured extras."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    success: bool
    type: Optional[SearchType] = None
    result: str = ""
    timestamp: Optional[str] = None
    supplementary_data: Optional[SupplementaryData] = Field(
        default=None, alias="supplementaryData"
    )
    message: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        """Payload for the result presenter, keyed the way the service sent it."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
