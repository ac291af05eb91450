"""Application configuration.

Configuration is loaded from environment variables. For local development, you can provide a
`.env` file and set `MARKVIEW_ENV_FILE` to point to it.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """markview settings.

    All fields are environment-configurable. Prefix is `MARKVIEW_`.
    """

    model_config = SettingsConfigDict(
        env_prefix="MARKVIEW_",
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Core
    log_level: str = Field(default="INFO")

    # Server
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=3003, ge=1, le=65535)

    # Storage
    upload_dir: Path = Field(default=Path("uploads"))

    # Scanner
    markdown_extensions: list[str] = Field(default_factory=lambda: [".md"])
    skip_dirs: list[str] = Field(default_factory=lambda: ["node_modules"])

    # Preview page
    scroll_lookahead: int = Field(default=100, ge=0)
    mermaid_script_url: str = Field(
        default="https://cdn.jsdelivr.net/npm/mermaid@10.6.1/dist/mermaid.min.js"
    )
    mermaid_theme: str = Field(default="default")


def load_settings() -> Settings:
    """Load settings from env.

    Returns:
        Settings: Parsed settings.
    """

    env_file_override = os.getenv("MARKVIEW_ENV_FILE")
    if env_file_override:
        env_path = Path(env_file_override)
        return Settings(_env_file=env_path)

    default_env = Path.cwd() / ".env"
    if default_env.exists():
        return Settings(_env_file=default_env)

    return Settings()
