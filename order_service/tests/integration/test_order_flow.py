"""Integration tests for the wired order service."""

from decimal import Decimal

import pytest

from order_service.adapters.outbound import (
    BroadcastOrderPlacedNotifier,
    EmailNotifier,
    SMSNotifier,
)
from order_service.domain.entities.product import Product
from order_service.domain.value_objects.identifiers import ProductId, UserId
from order_service.infrastructure.config import Config, NotificationConfig
from order_service.infrastructure.container import Container, build_notifier, get_container


def _config(*channels: str) -> Config:
    return Config(notification=NotificationConfig(channels=list(channels)))


@pytest.mark.integration
class TestBuildNotifier:
    """Tests for channel wiring."""

    def test_channels_in_configured_order(self):
        """Test channels are built in the order listed."""
        notifier = build_notifier(["email", "sms"])

        assert [type(n) for n in notifier.notifiers] == [EmailNotifier, SMSNotifier]

    def test_unknown_channel(self):
        """Test unknown channel names are rejected."""
        with pytest.raises(ValueError, match="pager"):
            build_notifier(["pager"])


@pytest.mark.integration
class TestOrderFlow:
    """End-to-end order placement through the container."""

    def test_container_wiring(self, metrics_registry):
        """Test the container wires a broadcast notifier over the configured channels."""
        container = Container.create(_config("sms", "email"), metrics=metrics_registry)

        assert isinstance(container.notifier, BroadcastOrderPlacedNotifier)
        assert len(container.notifier) == 2
        assert container.order_app.order_placed_notifier is container.notifier
        assert Container.get() is container
        assert get_container() is container

    def test_injected_metrics_carry_version(self, metrics_registry):
        """Test an injected registry still reports the service version."""
        container = Container.create(_config("sms"), metrics=metrics_registry)

        assert container.metrics is metrics_registry
        assert metrics_registry.registry.get_sample_value(
            "order_service_info", {"version": "0.1.0"}
        ) == 1.0

    def test_shop_and_checkout(self, metrics_registry):
        """Test two users shopping independently."""
        container = Container.create(_config("sms"), metrics=metrics_registry)
        app = container.order_app

        app.import_products([
            Product(ProductId("book"), "Book", Decimal("12.50")),
            Product(ProductId("mug"), "Mug", Decimal("8.00")),
        ])
        app.add_item_to_cart(UserId("alice"), ProductId("book"), 2)
        app.add_item_to_cart(UserId("alice"), ProductId("mug"), 1)
        app.add_item_to_cart(UserId("bob"), ProductId("mug"), 4)

        alice_order = app.place_order(UserId("alice"))

        assert alice_order.total_amount == Decimal("33.00")
        assert container.cart_repository.get_cart_items(UserId("alice")) == []
        assert len(container.cart_repository.get_cart_items(UserId("bob"))) == 1
        assert container.order_repository.orders == [alice_order]

        bob_order = app.place_order(UserId("bob"))

        assert bob_order.total_amount == Decimal("32.00")
        assert bob_order.order_id != alice_order.order_id
        assert len(container.order_repository) == 2
        assert metrics_registry.registry.get_sample_value("orders_placed_total") == 2.0


@pytest.mark.integration
def test_entry_point_wires_container(capsys):
    """Test the entry point builds the container and reports readiness."""
    from order_service.__main__ import main

    main()

    assert Container._instance is not None
    assert "order_service_ready" in capsys.readouterr().out
