"""Entry point: wire the order service and report readiness.

Only composes the adapters; no order operations are run.
"""

from order_service.infrastructure.container import Container


def main() -> None:
    container = Container.create()
    container.logger.info("order_service_ready", notifiers=len(container.notifier))


if __name__ == "__main__":
    main()
