"""
Environment-driven settings for the YouTube search proxy.

Values come from the process environment. `main.py` loads a `.env` file with
python-dotenv before this module is imported, so anything defined there is
visible here too.
"""

from functools import lru_cache
from typing import List, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Process configuration.

    Attributes:
        API_KEY:
            YouTube Data API key. `YOUTUBE_API_KEY` is accepted as well.
        YOUTUBE_API_URL:
            Versioned base URL of the YouTube Data API.
        HOST / PORT:
            Address uvicorn binds to.
        LOG_LEVEL:
            Root logging level.
        CORS_ORIGINS:
            Origins allowed by the CORS middleware.
    """

    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore")

    API_KEY: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("API_KEY", "YOUTUBE_API_KEY"),
    )
    YOUTUBE_API_URL: str = "https://www.googleapis.com/youtube/v3"

    HOST: str = "0.0.0.0"
    PORT: int = 3001

    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]


@lru_cache
def get_settings() -> Settings:
    return Settings()
