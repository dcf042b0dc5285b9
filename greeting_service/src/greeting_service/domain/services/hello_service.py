"""Hello service."""

from __future__ import annotations

from greeting_service.domain.value_objects.identifiers import UserId
from greeting_service.ports.outbound import UserNameRepository


class HelloService:
    """Greets users by name.

    The user's name is resolved through the injected repository port.
    The service holds no per-call state and can be reused freely.

    Example:
        service = HelloService(InMemoryUserNameRepository({1: "Alice"}))
        service.say_hello(UserId(1))  # "Hello, Alice!"
    """

    def __init__(self, user_name_repository: UserNameRepository) -> None:
        """Initialize hello service.

        Args:
            user_name_repository: Port used to resolve user names.
        """
        self._user_name_repository = user_name_repository

    def say_hello(self, user_id: UserId) -> str:
        """Build a greeting for a user.

        Args:
            user_id: User to greet.

        Returns:
            Greeting message.

        Raises:
            Exception: Whatever the repository raised, unchanged.
        """
        user_name = self._user_name_repository.get_user_name(user_id)
        return self._make_hello_message(user_name)

    @staticmethod
    def _make_hello_message(user_name: str) -> str:
        return f"Hello, {user_name}!"
