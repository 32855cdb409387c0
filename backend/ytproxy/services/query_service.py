"""
Validation and delegation shared by every proxied endpoint.

Each endpoint is described by an `Operation`: which query parameter it reads,
how that value is normalized, which upstream resource it hits and the fixed
parameters sent along with it. `run_operation` is the single execution path.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..errors import ValidationError
from .youtube_service import COMMENT_THREADS_RESOURCE, SEARCH_RESOURCE, YouTubeClient

logger = logging.getLogger("ytproxy.services.query_service")


@dataclass(frozen=True)
class Operation:
    name: str
    param: str
    resource: str
    query_key: str
    lowercase: bool
    fixed_params: Dict[str, Any] = field(default_factory=dict)

    def normalize(self, raw_value: Optional[str]) -> str:
        """Trim (and maybe lowercase) the raw value; raise if nothing is left."""
        value = (raw_value or "").strip()
        if self.lowercase:
            value = value.lower()
        if not value:
            raise ValidationError(self.param)
        return value

    def build_params(self, value: str) -> Dict[str, Any]:
        params = dict(self.fixed_params)
        params[self.query_key] = value
        return params


VIDEO_SEARCH = Operation(
    name="video_search",
    param="search_query",
    resource=SEARCH_RESOURCE,
    query_key="q",
    lowercase=True,
    fixed_params={"part": "snippet", "type": "video", "maxResults": 2},
)

CHANNEL_SEARCH = Operation(
    name="channel_search",
    param="channel",
    resource=SEARCH_RESOURCE,
    query_key="q",
    lowercase=True,
    fixed_params={"part": "snippet", "type": "channel", "maxResults": 4},
)

# Video IDs are case-sensitive
COMMENT_THREADS = Operation(
    name="comment_threads",
    param="videoId",
    resource=COMMENT_THREADS_RESOURCE,
    query_key="videoId",
    lowercase=False,
    fixed_params={"part": "snippet,replies", "maxResults": 5},
)


async def run_operation(
    operation: Operation,
    raw_value: Optional[str],
    client: YouTubeClient,
) -> Any:
    """
    Validate `raw_value` and forward it upstream.

    The upstream payload is returned untouched. Upstream failures are not
    caught here; they reach the application's error handlers unchanged.
    """
    value = operation.normalize(raw_value)
    params = operation.build_params(value)
    logger.info(f"{operation.name}: {operation.query_key}={value!r}")
    return await client.list(operation.resource, params)


async def search_videos(search_query: Optional[str], client: YouTubeClient) -> Any:
    return await run_operation(VIDEO_SEARCH, search_query, client)


async def search_channels(channel: Optional[str], client: YouTubeClient) -> Any:
    return await run_operation(CHANNEL_SEARCH, channel, client)


async def get_comment_threads(video_id: Optional[str], client: YouTubeClient) -> Any:
    return await run_operation(COMMENT_THREADS, video_id, client)
