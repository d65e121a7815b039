"""Infrastructure layer - configuration and logging."""

from tendzd.infrastructure.config import Settings, settings
from tendzd.infrastructure.logging import configure_logging, setup_logging

__all__ = ["Settings", "configure_logging", "settings", "setup_logging"]
