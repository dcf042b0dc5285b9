"""Infrastructure layer - cross-cutting concerns."""

from greeting_service.infrastructure.config import Config, get_config
from greeting_service.infrastructure.logging import setup_logging, get_logger

__all__ = [
    "Config",
    "get_config",
    "setup_logging",
    "get_logger",
]
