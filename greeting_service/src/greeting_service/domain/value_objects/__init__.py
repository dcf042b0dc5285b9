"""Greeting service value objects."""

from greeting_service.domain.value_objects.identifiers import UserId

__all__ = ["UserId"]
