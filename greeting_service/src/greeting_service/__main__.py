"""Entry point: wire the greeting service and report readiness."""

from greeting_service.infrastructure.container import Container


def main() -> None:
    container = Container.create()
    container.logger.info("greeting_service_ready")


if __name__ == "__main__":
    main()
