from django.apps import AppConfig


class OrdersConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "modules.orders"
    label = "orders"

    def ready(self) -> None:
        from modules.orders.events import OrderCancelled, OrderCreated, OrderDelivered
        from modules.orders.handlers import (
            order_cancelled_handler,
            order_created_handler,
            order_delivered_handler,
        )
        from shared.domain.bus import subscribe_all
        from shared.infrastructure.bus import event_bus

        subscribe_all(
            event_bus,
            {
                OrderCreated: order_created_handler,
                OrderCancelled: order_cancelled_handler,
                OrderDelivered: order_delivered_handler,
            },
        )
