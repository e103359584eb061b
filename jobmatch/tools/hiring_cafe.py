"""
hiring.cafe listings proxy.

The browser cannot call hiring.cafe directly (CORS), so the backend fetches
and caches the payload.
"""

import logging
from typing import Any

import httpx
from cachetools import TTLCache

from jobmatch.config import settings
from jobmatch.errors import UpstreamError, UpstreamTimeoutError

logger = logging.getLogger(__name__)

_cache: TTLCache = TTLCache(maxsize=1, ttl=settings.hiring_cafe_cache_ttl)


async def fetch_hiring_cafe_jobs(client: httpx.AsyncClient | None = None) -> Any:
    """
    Fetch the latest listings payload (served from cache for a few minutes).

    Raises:
        UpstreamTimeoutError: hiring.cafe did not answer in time
        UpstreamError: Non-2xx status, transport failure or non-JSON body
    """
    if "jobs" in _cache:
        return _cache["jobs"]

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=settings.upstream_timeout) as own_client:
                response = await own_client.get(settings.hiring_cafe_url)
        else:
            response = await client.get(settings.hiring_cafe_url)
        response.raise_for_status()
        data = response.json()
    except httpx.TimeoutException as e:
        logger.error("hiring.cafe timed out: %s", e)
        raise UpstreamTimeoutError("hiring.cafe did not respond in time. Please try again later.") from e
    except httpx.HTTPStatusError as e:
        logger.error("hiring.cafe HTTP error: %s", e.response.status_code)
        raise UpstreamError("Failed to load job listings from hiring.cafe. Please try again later.") from e
    except (httpx.HTTPError, ValueError) as e:
        logger.error("hiring.cafe proxy error: %s", e)
        raise UpstreamError("Failed to load job listings from hiring.cafe. Please try again later.") from e

    _cache["jobs"] = data
    return data


def clear_cache():
    _cache.clear()
