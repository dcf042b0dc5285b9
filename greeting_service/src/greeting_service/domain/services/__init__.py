"""Domain services."""

from greeting_service.domain.services.hello_service import HelloService

__all__ = ["HelloService"]
