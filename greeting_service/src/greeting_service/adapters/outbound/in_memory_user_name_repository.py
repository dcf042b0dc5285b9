"""In-memory user directory for testing and development."""

from __future__ import annotations

from typing import Mapping, Optional

from greeting_service.domain.value_objects.identifiers import UserId
from greeting_service.ports.outbound import UserNotFoundError


class InMemoryUserNameRepository:
    """Dict-backed implementation of UserNameRepository.

    Example:
        repo = InMemoryUserNameRepository({1: "Alice"})
        repo.get_user_name(UserId(1))  # "Alice"
    """

    def __init__(self, users: Optional[Mapping[int, str]] = None) -> None:
        self._users: dict[int, str] = dict(users or {})

    def add_user(self, user_id: UserId, user_name: str) -> None:
        """Register or rename a user."""
        self._users[user_id] = user_name

    def get_user_name(self, user_id: UserId) -> str:
        """Get the display name of a user.

        Raises:
            UserNotFoundError: If the user is not registered.
        """
        try:
            return self._users[user_id]
        except KeyError:
            raise UserNotFoundError("user not found") from None

    def __len__(self) -> int:
        return len(self._users)
