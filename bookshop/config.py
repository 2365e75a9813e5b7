# bookshop/config.py
"""
Service settings, read from ``BOOKSHOP_*`` environment variables or a
``.env`` file.

``catalog_url`` points at the shop backend's book list. When it is empty,
``catalog_file`` (a local JSON dataset) is used instead.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR = Path(__file__).resolve().parent / "data"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BOOKSHOP_", env_file=".env", case_sensitive=False
    )

    # Catalogue source
    catalog_url: Optional[str] = None
    catalog_file: Path = DATA_DIR / "sample_books.json"
    request_timeout: float = 10.0

    # Pagination
    page_size: int = Field(default=12, ge=1)

    # Images
    image_base_url: str = "http://localhost:8080/uploads"
    image_placeholder: str = "/static/placeholder-book.png"

    # Session
    identity_file: Path = DATA_DIR / "user.json"

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
