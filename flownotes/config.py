from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FLOW_NOTES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Storage settings
    data_dir: Path | None = None  # Defaults to the platform's user data directory
    app_dir_name: str = "flow-notes"

    # Web server settings
    cors_origins: list[str] = ["*"]

    log_level: str = "INFO"  # Can be DEBUG, INFO, WARNING, ERROR, CRITICAL


settings = Settings()
