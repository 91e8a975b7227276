from pathlib import Path
from urllib.parse import urlparse

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

    # Site
    SITE_URL: str = "https://blog.kenev.net"
    SITE_TITLE: str = "kenfdev's Blog"
    SITE_DESCRIPTION: str = "A personal blog about web development"

    # Content and build output
    CONTENT_DIR: str = "src/content/posts"
    OUTPUT_DIR: str = "dist"

    # OG images
    OG_FONT_PATH: str = "public/fonts/NotoSansCJKjp-Bold.otf"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def site_host(self) -> str:
        return urlparse(self.SITE_URL).netloc or self.SITE_URL


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
