"""Outbound adapters - Implementations of outbound port interfaces.

Provides an in-memory user directory and a logging decorator that can
wrap any user name repository.
"""

from greeting_service.adapters.outbound.in_memory_user_name_repository import (
    InMemoryUserNameRepository,
)
from greeting_service.adapters.outbound.logging_user_name_repository import (
    LoggingUserNameRepository,
)

__all__ = [
    "InMemoryUserNameRepository",
    "LoggingUserNameRepository",
]
