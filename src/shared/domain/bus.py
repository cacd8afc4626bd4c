"""Event bus contracts.

Modules publish through ``IEventBus`` and react through ``IEventHandler``
without knowing whether dispatch is in-process or brokered.
"""

from __future__ import annotations

from typing import Generic, Mapping, Protocol, Type, TypeVar

from shared.domain.events import DomainEvent

E = TypeVar("E", bound=DomainEvent, contravariant=True)


class IEventHandler(Protocol, Generic[E]):
    """Reacts to one event type.

    The outbox relay may hand an event over more than once after a crash,
    so handlers must tolerate duplicates.
    """

    def handle(self, event: E) -> None: ...


class IEventBus(Protocol):
    def publish(self, event: DomainEvent) -> int:
        """Dispatch *event* and return the number of handlers that ran."""
        ...

    def subscribe(self, event_class: Type[E], handler: IEventHandler[E]) -> None: ...


def subscribe_all(
    bus: IEventBus, subscriptions: Mapping[Type[DomainEvent], IEventHandler]
) -> None:
    """Register a module's handlers from its ``AppConfig.ready``."""
    for event_class, handler in subscriptions.items():
        bus.subscribe(event_class, handler)
