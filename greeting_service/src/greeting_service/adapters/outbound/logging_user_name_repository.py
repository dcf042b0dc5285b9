"""Logging decorator for user name repositories.

Wraps any UserNameRepository and emits structured log events around
each lookup. Results and exceptions pass through untouched.
"""

from __future__ import annotations

from typing import Any, Optional

from greeting_service.domain.value_objects.identifiers import UserId
from greeting_service.infrastructure.logging import get_logger
from greeting_service.ports.outbound import UserNameRepository


class LoggingUserNameRepository:
    """UserNameRepository decorator that logs every lookup.

    Example:
        repo = LoggingUserNameRepository(InMemoryUserNameRepository({1: "Alice"}))
        service = HelloService(repo)
    """

    def __init__(self, repository: UserNameRepository, logger: Optional[Any] = None) -> None:
        """Initialize logging decorator.

        Args:
            repository: Repository to delegate lookups to.
            logger: Structured logger; defaults to this module's logger.
        """
        self._repository = repository
        self._logger = logger or get_logger(__name__)

    def get_user_name(self, user_id: UserId) -> str:
        """Delegate the lookup, logging before and after."""
        self._logger.info("user_name_lookup_started", user_id=user_id)
        try:
            user_name = self._repository.get_user_name(user_id)
        except Exception as e:
            self._logger.warning("user_name_lookup_failed", user_id=user_id, error=str(e))
            raise
        self._logger.info("user_name_lookup_succeeded", user_id=user_id, user_name=user_name)
        return user_name
