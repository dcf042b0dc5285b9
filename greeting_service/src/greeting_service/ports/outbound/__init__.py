"""Outbound ports - External dependency interfaces for the greeting service.

Outbound ports define the interfaces for the user directory that the
greeting service depends on to resolve user names.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol

from greeting_service.domain.value_objects.identifiers import UserId


# =============================================================================
# User Name Repository Port
# =============================================================================


class UserNameRepository(Protocol):
    """Protocol for resolving a user's display name.

    Implementations may be backed by a database, a directory service,
    or an in-memory map. Decorators (e.g. logging) implement the same
    protocol and wrap another repository.
    """

    @abstractmethod
    def get_user_name(self, user_id: UserId) -> str:
        """Get the display name of a user.

        Args:
            user_id: User to look up.

        Returns:
            User display name.

        Raises:
            UserNotFoundError: If the user does not exist.
        """
        ...


class UserNotFoundError(LookupError):
    """Raised when a user cannot be found in the directory."""

    pass
