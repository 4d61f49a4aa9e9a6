import logging
from collections import defaultdict
from collections.abc import Awaitable, Callable

from backend.application.interfaces import IEventBus
from backend.core import config
from backend.domain.events import AppointmentEvent

logger = logging.getLogger(__name__)

EventHandler = Callable[[dict], Awaitable[None]]


class InMemoryEventBus(IEventBus):
    """In-process event bus.

    Every published event is serialised to a JSON-ready envelope, logged
    and handed to the handlers subscribed to its name in the order they
    subscribed. Nothing is retained after delivery. A failing handler stops
    delivery and the error reaches the publisher.
    """

    def __init__(self, source: str | None = None) -> None:
        self.source = source or config.EVENT_BUS_SOURCE
        self._handlers: dict[str, list[EventHandler]] = defaultdict(list)

    def subscribe(self, event_name: str, handler: EventHandler) -> None:
        self._handlers[event_name].append(handler)

    async def publish(self, event: AppointmentEvent, event_name: str) -> None:
        envelope = {
            'event_name': event_name,
            'source': self.source,
            'payload': event.model_dump(mode='json'),
        }
        logger.info('Publishing %s for appointment %s', event_name, event.appointment_id)

        for handler in self._handlers.get(event_name, []):
            await handler(envelope)
