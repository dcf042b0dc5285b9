"""Inbound ports - API contracts for the greeting service."""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol

from greeting_service.domain.value_objects.identifiers import UserId


class SayHelloPort(Protocol):
    """Protocol for greeting users.

    Example:
        message = port.say_hello(UserId(1))
    """

    @abstractmethod
    def say_hello(self, user_id: UserId) -> str:
        """Greet a user by name.

        Args:
            user_id: User to greet.

        Returns:
            Greeting message, e.g. "Hello, Alice!".

        Raises:
            UserNotFoundError: If the user name cannot be resolved.
        """
        ...
