from __future__ import annotations

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from recipe_search.assistant.errors import INVALID_RESPONSE_MESSAGE, TransportFailure
from recipe_search.assistant.schemas import SearchRequest, SearchResponse
from recipe_search.clients.recipe_client import post_recipe_query

logger = logging.getLogger(__name__)


async def recipe_search(
    request: SearchRequest,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> SearchResponse:
    """
    Calls the recipe service and returns the decoded success response.

    Raises ServiceRejected / TransportFailure from the client, and
    TransportFailure when a success reply does not match the expected shape.
    """
    data = await post_recipe_query(request.to_payload(), client=client)
    try:
        return SearchResponse.model_validate(data)
    except ValidationError as e:
        logger.warning("Recipe service reply failed validation: %s", e)
        raise TransportFailure(INVALID_RESPONSE_MESSAGE) from e
