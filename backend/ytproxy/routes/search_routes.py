from fastapi import APIRouter, Depends, Query
from typing import Optional
from ..services.query_service import search_videos, search_channels
from ..services.youtube_service import YouTubeClient, get_youtube_client

router = APIRouter()

@router.get("/search")
async def search(
    search_query: Optional[str] = Query(None, description="Search term for videos"),
    client: YouTubeClient = Depends(get_youtube_client),
):
    """
    Search YouTube videos. Returns the YouTube search.list payload unchanged.
    """
    return await search_videos(search_query, client)

@router.get("/channels")
async def channels(
    channel: Optional[str] = Query(None, description="Channel name to search for"),
    client: YouTubeClient = Depends(get_youtube_client),
):
    """
    Search YouTube channels. Returns the YouTube search.list payload unchanged.
    """
    return await search_channels(channel, client)
