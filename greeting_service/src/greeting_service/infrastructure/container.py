"""Dependency injection container for the greeting service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from greeting_service.adapters.outbound import (
    InMemoryUserNameRepository,
    LoggingUserNameRepository,
)
from greeting_service.domain.services.hello_service import HelloService
from greeting_service.infrastructure.config import Config, get_config
from greeting_service.infrastructure.logging import setup_logging, get_logger
from greeting_service.ports.outbound import UserNameRepository


@dataclass
class Container:
    """Dependency injection container for greeting service components."""

    config: Config
    logger: Any
    user_name_repository: UserNameRepository
    hello_service: HelloService

    _instance: ClassVar[Container | None] = None

    @classmethod
    def create(cls, config: Config | None = None) -> Container:
        """Create and initialize the container with all dependencies."""
        if cls._instance is not None:
            return cls._instance

        config = config or get_config()
        setup_logging(config.observability.log_level, config.observability.log_format)
        logger = get_logger("greeting_service")

        repository: UserNameRepository = InMemoryUserNameRepository(config.directory.users)
        if config.directory.log_lookups:
            repository = LoggingUserNameRepository(repository)

        cls._instance = cls(
            config=config,
            logger=logger,
            user_name_repository=repository,
            hello_service=HelloService(repository),
        )

        logger.info(
            "greeting_service_container_initialized",
            users=len(config.directory.users),
            log_lookups=config.directory.log_lookups,
        )

        return cls._instance

    @classmethod
    def get(cls) -> Container:
        """Get the singleton container instance."""
        if cls._instance is None:
            return cls.create()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the container (useful for testing)."""
        cls._instance = None


def get_container() -> Container:
    """Get the dependency injection container."""
    return Container.get()
