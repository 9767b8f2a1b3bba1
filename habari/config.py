"""Application configuration via environment variables."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # App
    debug: bool = False
    environment: str = "development"

    # CORS (JSON API only)
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:8000",
    ]

    # Content and data locations
    content_dir: Path = PROJECT_ROOT / "content" / "blog"
    data_dir: Path = PROJECT_ROOT / "data"
    static_dir: Path = PROJECT_ROOT / "static"

    # Listing
    max_display: int = 5  # posts on the home page
    posts_per_page: int = 5
    show_drafts: bool = False

    # Analytics overrides (empty = use data/site.yaml)
    countly_app_key: str = ""
    countly_site_url: str = ""

    model_config = {"env_file": ".env", "env_prefix": "HABARI_", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
