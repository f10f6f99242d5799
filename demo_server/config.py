"""Server configuration via pydantic-settings."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Project directory (where this package lives: <project>/demo_server/config.py)
_PROJECT_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Listener
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Files – default to the bundled web_demo directory
    STATIC_ROOT: str = str(_PROJECT_DIR / "web_demo")
    INDEX_DOCUMENT: str = "index.html"

    # Shown in the startup banner and on error pages
    SITE_NAME: str = "Rapid Mixer Demo"

    LOG_LEVEL: str = "INFO"

    @property
    def static_root_path(self) -> Path:
        return Path(self.STATIC_ROOT).resolve()


def _build_settings() -> Settings:
    """Build settings, fixing a relative static root to be absolute."""
    s = Settings(
        _env_file=str(_PROJECT_DIR / ".env"),
        _env_file_encoding="utf-8",
    )
    if not os.path.isabs(s.STATIC_ROOT):
        s.STATIC_ROOT = str(_PROJECT_DIR / s.STATIC_ROOT)
    return s


settings = _build_settings()
