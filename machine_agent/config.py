"""Application settings loaded from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """All configuration is driven by environment variables."""

    # HTTP listener
    agent_host: str = "0.0.0.0"
    agent_port: int = 6565

    # Error log file; a blank dir means "next to the running executable"
    agent_error_log_name: str = "app_error.log"
    agent_error_log_dir: str = ""

    # Operational logging (stderr)
    agent_log_level: str = "INFO"

    agent_show_banner: bool = True

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton – import this from anywhere
settings = Settings()
