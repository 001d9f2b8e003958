"""Centralised application settings loaded from environment / .env file."""

from pydantic_settings import BaseSettings

from devtoolkit.domain.entities import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_ICON_SIZE,
    DEFAULT_TEXT_COLOR,
    MAX_ICO_SIZE,
    MAX_ICON_SIZE,
    MIN_ICON_SIZE,
)


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"

    # HTTP adapter
    rate_limit: str = "100/minute"

    # Icon generator
    icon_min_size: int = MIN_ICON_SIZE
    icon_max_size: int = MAX_ICON_SIZE
    ico_max_size: int = MAX_ICO_SIZE
    default_icon_size: int = DEFAULT_ICON_SIZE
    default_background_color: str = DEFAULT_BACKGROUND_COLOR
    default_text_color: str = DEFAULT_TEXT_COLOR

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
