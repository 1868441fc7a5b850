from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    CONTENT_ROOT: str = "content/posts"
    CONTENT_EXTENSION: str = ".mdx"

    # Locales
    SUPPORTED_LANGUAGES: List[str] = ["ko", "ja", "en"]
    DEFAULT_LANGUAGE: str = "en"

    # Listing
    PAGE_SIZE: int = 10
    PAGE_WINDOW: int = 2
    LATEST_POSTS_LIMIT: int = 3

    # Logging
    LOG_LEVEL: str = "INFO"

    # Our own API Key, empty disables the check
    BLOG_API_KEY: str = ""

    @property
    def content_root_path(self) -> Path:
        return Path(self.CONTENT_ROOT).expanduser()


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
