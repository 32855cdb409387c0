from fastapi import APIRouter, Depends, Query
from typing import Optional
from ..services.query_service import get_comment_threads
from ..services.youtube_service import YouTubeClient, get_youtube_client

router = APIRouter()

@router.get("/comments")
async def comments(
    videoId: Optional[str] = Query(None, description="The ID of the YouTube video"),
    client: YouTubeClient = Depends(get_youtube_client),
):
    """
    Get the top comment threads (with replies) for a YouTube video.
    """
    return await get_comment_threads(videoId, client)
