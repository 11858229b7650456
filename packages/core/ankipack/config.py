"""Library configuration loaded from environment variables."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for package assembly.

    Every value can be overridden with an ``ANKIPACK_``-prefixed environment
    variable or a ``.env`` file.
    """

    # Logging
    log_level: str = "INFO"

    # Archive
    compression: Literal["deflated", "stored"] = "deflated"
    collection_filename: str = "collection.anki2"
    media_manifest_filename: str = "media"

    model_config = SettingsConfigDict(
        env_prefix="ANKIPACK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
