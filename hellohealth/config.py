from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Central configuration loaded from environment / .env file."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    # Pages (index.html is read from here, falls back to a built-in page)
    data_dir: str = "."

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Checks file (absolute or relative to CWD)
    checks_file: str = "checks.yaml"

    # Logging
    log_level: str = "INFO"


settings = Settings()
