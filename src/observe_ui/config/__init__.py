"""Configuration module for observe_ui.

Usage:
    from observe_ui.config import get_settings

    settings = get_settings()  # Cached singleton
    print(settings.base_url)

Note:
    Page objects take an optional ``settings`` argument so tests can inject
    values directly instead of patching the environment.
"""

from observe_ui.config.logging import configure_logging, get_logger
from observe_ui.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_logger", "get_settings"]
