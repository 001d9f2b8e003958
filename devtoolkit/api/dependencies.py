"""FastAPI dependency injection helpers."""

from devtoolkit.config import Settings, settings


def get_settings() -> Settings:
    """Return the process-wide settings; overridable in tests."""
    return settings
