from django.apps import AppConfig


class DeliveriesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "modules.deliveries"
    label = "deliveries"

    def ready(self) -> None:
        from modules.deliveries.events import DeliveryStatusChanged, DriverAssigned
        from modules.deliveries.handlers import (
            delivery_status_changed_handler,
            driver_assigned_handler,
        )
        from shared.domain.bus import subscribe_all
        from shared.infrastructure.bus import event_bus

        subscribe_all(
            event_bus,
            {
                DeliveryStatusChanged: delivery_status_changed_handler,
                DriverAssigned: driver_assigned_handler,
            },
        )
