"""OrderApp application service.

Composes the catalog, cart, order and notification capabilities into
the three order use cases: importing products, adding to a cart and
placing an order.

Usage:
    from order_service.application import OrderApp

    app = (
        OrderApp.builder()
        .with_product_repository(InMemoryProductRepository())
        .with_cart_repository(InMemoryCartRepository())
        .with_order_repository(InMemoryOrderRepository())
        .with_order_placed_notifier(BroadcastOrderPlacedNotifier([SMSNotifier()]))
        .build()
    )
    app.import_products(products)
    app.add_item_to_cart(UserId("u1"), ProductId("p1"), 2)
    order = app.place_order(UserId("u1"))

Placing an order is not transactional: once the order is saved, a
failure while clearing the cart or notifying is raised to the caller
but the saved order stays saved.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional, Sequence

from opentelemetry import trace

from order_service.application.unconfigured import (
    UnconfiguredCartRepository,
    UnconfiguredOrderRepository,
    UnconfiguredProductRepository,
)
from order_service.domain.entities.order import Order, OrderItem
from order_service.domain.entities.product import Product
from order_service.domain.value_objects.identifiers import (
    OrderId,
    ProductId,
    UserId,
    create_order_id,
)
from order_service.infrastructure.logging import get_logger
from order_service.infrastructure.metrics import MetricsRegistry, get_metrics
from order_service.infrastructure.tracing import set_order_attributes, trace_span
from order_service.ports.outbound import (
    CartRepository,
    OrderPlacedNotifier,
    OrderRepository,
    ProductRepository,
)


OrderIdFactory = Callable[[], OrderId]


class OrderApp:
    """Order application service.

    Any repository left out is replaced by a placeholder that raises
    CapabilityNotConfiguredError when used; operations that do not need
    it are unaffected. Without a notifier, placed orders are not
    announced.

    Implements OrderAppPort.
    """

    def __init__(
        self,
        product_repository: Optional[ProductRepository] = None,
        cart_repository: Optional[CartRepository] = None,
        order_repository: Optional[OrderRepository] = None,
        order_placed_notifier: Optional[OrderPlacedNotifier] = None,
        *,
        metrics: Optional[MetricsRegistry] = None,
        order_id_factory: OrderIdFactory = create_order_id,
        logger: Optional[Any] = None,
    ) -> None:
        """Initialize the order app.

        Args:
            product_repository: Product catalog.
            cart_repository: Per-user cart storage.
            order_repository: Placed order storage.
            order_placed_notifier: Notified after each placed order.
            metrics: Metrics registry; defaults to the global one.
            order_id_factory: Generates IDs for new orders.
            logger: Structured logger; defaults to this module's logger.
        """
        self._product_repository: ProductRepository = (
            product_repository if product_repository is not None else UnconfiguredProductRepository()
        )
        self._cart_repository: CartRepository = (
            cart_repository if cart_repository is not None else UnconfiguredCartRepository()
        )
        self._order_repository: OrderRepository = (
            order_repository if order_repository is not None else UnconfiguredOrderRepository()
        )
        self._order_placed_notifier = order_placed_notifier
        self._metrics = metrics if metrics is not None else get_metrics()
        self._order_id_factory = order_id_factory
        self._logger = logger or get_logger(__name__)

    @classmethod
    def builder(cls) -> OrderAppBuilder:
        """Start building an order app capability by capability."""
        return OrderAppBuilder()

    @property
    def product_repository(self) -> ProductRepository:
        return self._product_repository

    @property
    def cart_repository(self) -> CartRepository:
        return self._cart_repository

    @property
    def order_repository(self) -> OrderRepository:
        return self._order_repository

    @property
    def order_placed_notifier(self) -> Optional[OrderPlacedNotifier]:
        return self._order_placed_notifier

    # -------------------------------------------------------------------------
    # Use cases
    # -------------------------------------------------------------------------

    def import_products(self, products: Sequence[Product]) -> None:
        """Import products into the catalog.

        Upsert semantics are the repository's responsibility.

        Args:
            products: Products to import.
        """
        with self._operation("import_products", count=len(products)):
            self._product_repository.import_products(products)

        self._metrics.products_imported_total.inc(len(products))
        self._logger.info("products_imported", count=len(products))

    def add_item_to_cart(self, user_id: UserId, product_id: ProductId, quantity: int) -> None:
        """Add a product to a user's cart at the product's current price.

        Args:
            user_id: Cart owner.
            product_id: Product to add.
            quantity: Number of units.

        Raises:
            ProductNotFoundError: If the catalog has no such product.
            ValueError: If quantity is not a positive integer.
        """
        with self._operation("add_item_to_cart", user_id=user_id, product_id=product_id):
            product = self._product_repository.get_product_by_id(product_id)
            item = OrderItem(product_id=product.product_id, quantity=quantity, price=product.price)
            self._cart_repository.add_item_to_cart(user_id, item)

        self._metrics.cart_items_added_total.inc(quantity)
        self._logger.info(
            "cart_item_added",
            user_id=user_id,
            product_id=product_id,
            quantity=quantity,
            price=item.price,
        )

    def place_order(self, user_id: UserId) -> Order:
        """Turn a user's cart into an order.

        Steps run in sequence: read cart, save order, clear cart, notify.
        The first failure is raised unchanged and later steps are skipped.
        Completed steps are not rolled back. An empty cart yields an order
        with no items and a zero total.

        Args:
            user_id: Cart owner.

        Returns:
            The placed order.
        """
        with trace_span("order.place", {"order.user_id": user_id}) as span:
            with self._operation("place_order", user_id=user_id):
                order = self._checkout(user_id, span)

        self._metrics.orders_placed_total.inc()
        self._metrics.order_total_amount.observe(float(order.total_amount))
        self._logger.info(
            "order_placed",
            order_id=order.order_id,
            user_id=user_id,
            items=len(order.items),
            total_amount=order.total_amount,
        )
        return order

    def _checkout(self, user_id: UserId, span: trace.Span) -> Order:
        items = self._cart_repository.get_cart_items(user_id)
        order = Order.place(self._order_id_factory(), user_id, items)
        set_order_attributes(span, order)

        self._order_repository.save_order(order)
        try:
            self._cart_repository.clear_cart(user_id)
            if self._order_placed_notifier is not None:
                self._order_placed_notifier.notify_order_placed(order)
        except Exception:
            self._logger.error(
                "order_saved_but_follow_up_failed",
                order_id=order.order_id,
                user_id=user_id,
            )
            raise
        return order

    @contextmanager
    def _operation(self, operation: str, **context: Any) -> Iterator[None]:
        """Count an operation's outcome and log failures."""
        try:
            yield
        except Exception as e:
            self._metrics.order_operations_total.labels(operation=operation, status="error").inc()
            self._logger.warning(
                "order_operation_failed",
                operation=operation,
                error=str(e),
                error_type=type(e).__name__,
                **context,
            )
            raise
        self._metrics.order_operations_total.labels(operation=operation, status="success").inc()


class OrderAppBuilder:
    """Builds an OrderApp from optional capabilities.

    Example:
        app = OrderAppBuilder().with_product_repository(repo).build()
    """

    def __init__(self) -> None:
        self._product_repository: Optional[ProductRepository] = None
        self._cart_repository: Optional[CartRepository] = None
        self._order_repository: Optional[OrderRepository] = None
        self._order_placed_notifier: Optional[OrderPlacedNotifier] = None
        self._metrics: Optional[MetricsRegistry] = None
        self._order_id_factory: OrderIdFactory = create_order_id
        self._logger: Optional[Any] = None

    def with_product_repository(self, repository: ProductRepository) -> OrderAppBuilder:
        self._product_repository = repository
        return self

    def with_cart_repository(self, repository: CartRepository) -> OrderAppBuilder:
        self._cart_repository = repository
        return self

    def with_order_repository(self, repository: OrderRepository) -> OrderAppBuilder:
        self._order_repository = repository
        return self

    def with_order_placed_notifier(self, notifier: OrderPlacedNotifier) -> OrderAppBuilder:
        self._order_placed_notifier = notifier
        return self

    def with_metrics(self, metrics: MetricsRegistry) -> OrderAppBuilder:
        self._metrics = metrics
        return self

    def with_order_id_factory(self, factory: OrderIdFactory) -> OrderAppBuilder:
        self._order_id_factory = factory
        return self

    def with_logger(self, logger: Any) -> OrderAppBuilder:
        self._logger = logger
        return self

    def build(self) -> OrderApp:
        """Create the order app from the capabilities supplied so far."""
        return OrderApp(
            product_repository=self._product_repository,
            cart_repository=self._cart_repository,
            order_repository=self._order_repository,
            order_placed_notifier=self._order_placed_notifier,
            metrics=self._metrics,
            order_id_factory=self._order_id_factory,
            logger=self._logger,
        )
