import logging
from contextlib import asynccontextmanager
from dotenv import load_dotenv

# Load environment variables before importing other modules
load_dotenv()

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .config import get_settings
from .errors import register_error_handlers
from .routes import search_routes, comment_routes
from .services.youtube_service import YouTubeClient

logger = logging.getLogger("ytproxy.main")

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    if not settings.API_KEY:
        logger.warning("API_KEY is not set; YouTube requests will be rejected upstream")

    app.state.youtube_client = YouTubeClient(
        api_key=settings.API_KEY,
        base_url=settings.YOUTUBE_API_URL,
    )
    logger.info(f"YouTube client ready for {settings.YOUTUBE_API_URL}")
    try:
        yield
    finally:
        await app.state.youtube_client.aclose()


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title="YouTube Search Proxy",
        description="Relays video search, channel search and comment thread lookups to the YouTube Data API",
        version=VERSION,
        lifespan=lifespan,
    )

    # Registered first so CORS wraps the error middleware
    register_error_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(search_routes.router, tags=["search"])
    app.include_router(comment_routes.router, tags=["comments"])

    @app.get("/")
    async def root():
        return {
            "message": "Welcome to YouTube Search Proxy",
            "version": VERSION,
            "docs": "/docs",
            "openapi": "/openapi.json"
        }

    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"Server running on port {settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
