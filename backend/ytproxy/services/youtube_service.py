import logging
from typing import Any, Dict, Optional

import httpx
from fastapi import Request

from ..errors import UpstreamError

logger = logging.getLogger("ytproxy.services.youtube_service")

SEARCH_RESOURCE = "search"
COMMENT_THREADS_RESOURCE = "commentThreads"


class YouTubeClient:
    """
    Thin async client for the YouTube Data API.

    Created once at startup and shared read-only by every request. The API key,
    when configured, is sent as the `key` query parameter.
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient()

    async def list(self, resource: str, params: Dict[str, Any]) -> Any:
        """
        GET `{base_url}/{resource}` and return the decoded JSON body as-is.

        The key is only sent when one is configured.

        Raises:
            UpstreamError: on transport failures, non-2xx statuses and bodies
                that are not JSON. The original exception is chained.
        """
        url = f"{self._base_url}/{resource}"
        query = dict(params)
        if self._api_key:
            query["key"] = self._api_key

        logger.info(f"Calling YouTube {resource}.list with {params}")
        try:
            response = await self._client.get(url, params=query)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise UpstreamError(
                f"YouTube {resource} API error: {e.response.text}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamError(f"YouTube {resource} request failed: {e}") from e
        except ValueError as e:
            raise UpstreamError(f"YouTube {resource} returned invalid JSON: {e}") from e

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()


def get_youtube_client(request: Request) -> YouTubeClient:
    """FastAPI dependency returning the client created at startup."""
    return request.app.state.youtube_client
