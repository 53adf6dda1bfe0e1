# Recipe search service client
# POST /api/recipes answers {success, type, result, timestamp, supplementaryData}
# GET  /api/health answers {status, service, version, environment}

import logging
from typing import Any, Dict, Optional

import httpx
from cache_memoize import cache_memoize
from environs import Env

from recipe_search.assistant.errors import (
    INVALID_RESPONSE_MESSAGE,
    REQUEST_FAILED_MESSAGE,
    ServiceRejected,
    TransportFailure,
)

logger = logging.getLogger(__name__)

env = Env()
env.read_env()

api_base = env.str("RECIPE_API_BASE", "http://localhost:8080").rstrip("/")
api_timeout = env.float("RECIPE_API_TIMEOUT", 60.0)
health_cache_seconds = env.int("RECIPE_HEALTH_CACHE_SECONDS", 30)


def _get_headers() -> Dict[str, str]:
    """Get common headers for API requests."""
    return {
        "Accept": "application/json",
        "Content-Type": "application/json",
    }


def _decode(response: httpx.Response) -> Dict[str, Any]:
    """
    Decode a search reply, raising for anything that is not a successful one.

    A non-2xx status or `success: false` becomes ServiceRejected carrying the
    service's `message` when it sent one; an unreadable body becomes
    TransportFailure.
    """
    try:
        data = response.json()
    except ValueError:
        if not response.is_success:
            raise ServiceRejected(REQUEST_FAILED_MESSAGE, status_code=response.status_code)
        raise TransportFailure(INVALID_RESPONSE_MESSAGE)

    if not isinstance(data, dict):
        raise TransportFailure(INVALID_RESPONSE_MESSAGE)

    if not response.is_success or not data.get("success"):
        raise ServiceRejected(data.get("message"), status_code=response.status_code)

    return data


async def _make_request(
    method: str,
    endpoint: str,
    payload: Optional[Dict[str, Any]] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> Dict[str, Any]:
    """Make an HTTP request to the recipe search service."""
    if method.lower() != "post":
        raise ValueError(f"Unsupported HTTP method: {method}")

    url = f"{api_base}/{endpoint}"
    headers = _get_headers()
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=api_timeout) as owned:
                response = await owned.post(url, json=payload, headers=headers)
        else:
            response = await client.post(url, json=payload, headers=headers)
    except httpx.HTTPError as e:
        logger.warning("Recipe service unreachable at %s: %s", url, e)
        raise TransportFailure() from e

    return _decode(response)


async def post_recipe_query(
    payload: Dict[str, Any],
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> Dict[str, Any]:
    """
    Send one recipe query.

    Args:
        payload: {"queryType": "ingredients", "ingredients": [...]} or
                 {"queryType": "dish", "dishName": "..."}
        client: optional shared AsyncClient (a fresh one is opened otherwise)

    Returns:
        Dict: The decoded success response
    """
    return await _make_request("POST", "api/recipes", payload, client=client)


def _cache_hit(*args, **kwargs):
    logger.debug("Recipe service health cache hit")


@cache_memoize(health_cache_seconds, hit_callable=_cache_hit)
def get_health() -> Dict[str, Any]:
    """Health of the upstream recipe service. Raises httpx.HTTPError when it is down."""
    response = httpx.get(f"{api_base}/api/health", headers=_get_headers(), timeout=api_timeout)
    if response.status_code == 200:
        return response.json()
    raise httpx.HTTPError(f"HTTP {response.status_code}: {response.text}")
