"""Application settings.

The listen address and the service name are fixed. Only logging and the
OpenAPI metadata can be overridden through ``TASK_MANAGER_*`` variables.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

HOST = "0.0.0.0"
PORT = 8080


class Settings(BaseSettings):
    """Optional overrides loaded from environment variables."""

    # API metadata shown in the OpenAPI docs
    PROJECT_NAME: str = "Task Manager API"
    VERSION: str = "1.0.0"

    # Root log level name (DEBUG, INFO, WARNING, ...)
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="TASK_MANAGER_",
        case_sensitive=True,
        extra="ignore",
    )


# Default settings instance used by the CLI entry point
settings = Settings()
