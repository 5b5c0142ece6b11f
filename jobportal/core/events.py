"""
In-process real-time channel for row-change events.

Services publish a RowEvent after a successful insert; subscribers receive
the events for the (table, event type) pair they asked for through their own
asyncio.Queue, in the order they were published. A subscriber that falls
behind loses its oldest events rather than blocking the publisher.
"""
import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Tuple

from jobportal.core.config import settings
from jobportal.core.logging import get_logger

logger = get_logger(__name__)

INSERT = "insert"

_CLOSED = object()


@dataclass(frozen=True)
class RowEvent:
    """A typed row-change event."""

    table: str
    event_type: str
    record: Dict[str, Any]
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_message(self) -> Dict[str, Any]:
        return {
            "table": self.table,
            "event": self.event_type,
            "record": self.record,
            "occurred_at": self.occurred_at.isoformat(),
        }


RecordFilter = Callable[[Dict[str, Any]], bool]


class Subscription:
    """One consumer's view of a channel. Iterate it to receive events."""

    def __init__(
        self,
        bus: "EventBus",
        key: Tuple[str, str],
        *,
        where: Optional[RecordFilter] = None,
        maxsize: int = 100,
    ):
        self._bus = bus
        self.key = key
        self._where = where
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=maxsize)
        self._closed = False
        self.dropped = 0

    @property
    def closed(self) -> bool:
        return self._closed

    def _deliver(self, event: RowEvent) -> None:
        if self._closed:
            return
        if self._where is not None and not self._where(event.record):
            return
        if self._queue.full():
            self._queue.get_nowait()
            self.dropped += 1
            logger.warning("event_dropped", table=event.table, dropped=self.dropped)
        self._queue.put_nowait(event)

    def unsubscribe(self) -> None:
        """Detach from the bus and wake any pending reader."""
        if self._closed:
            return
        self._closed = True
        self._bus._detach(self)
        if self._queue.full():
            self._queue.get_nowait()
        self._queue.put_nowait(_CLOSED)

    async def get(self) -> Optional[RowEvent]:
        """Next event, or None once the subscription is closed."""
        if self._closed and self._queue.empty():
            return None
        item = await self._queue.get()
        if item is _CLOSED:
            return None
        return item

    def __aiter__(self):
        return self

    async def __anext__(self) -> RowEvent:
        event = await self.get()
        if event is None:
            raise StopAsyncIteration
        return event


class EventBus:
    """Publish/subscribe channel keyed by (table, event type)."""

    def __init__(self, queue_size: int = 100):
        self._queue_size = queue_size
        self._subscriptions: Dict[Tuple[str, str], List[Subscription]] = {}

    def subscribe(
        self,
        table: str,
        event_type: str = INSERT,
        *,
        where: Optional[RecordFilter] = None,
    ) -> Subscription:
        key = (table, event_type)
        subscription = Subscription(self, key, where=where, maxsize=self._queue_size)
        self._subscriptions.setdefault(key, []).append(subscription)
        logger.debug("channel_subscribed", table=table, event_type=event_type)
        return subscription

    def publish(self, event: RowEvent) -> int:
        """Fan an event out to current subscribers. Returns how many were offered it."""
        subscribers = list(self._subscriptions.get((event.table, event.event_type), []))
        for subscription in subscribers:
            subscription._deliver(event)
        return len(subscribers)

    def publish_insert(self, table: str, record: Dict[str, Any]) -> int:
        return self.publish(RowEvent(table=table, event_type=INSERT, record=record))

    def subscriber_count(self, table: str, event_type: str = INSERT) -> int:
        return len(self._subscriptions.get((table, event_type), []))

    def close(self) -> None:
        """Close every subscription. Used at shutdown."""
        for subscriptions in list(self._subscriptions.values()):
            for subscription in list(subscriptions):
                subscription.unsubscribe()
        self._subscriptions.clear()

    def _detach(self, subscription: Subscription) -> None:
        subscriptions = self._subscriptions.get(subscription.key, [])
        if subscription in subscriptions:
            subscriptions.remove(subscription)
        if not subscriptions:
            self._subscriptions.pop(subscription.key, None)


event_bus = EventBus(queue_size=settings.event_queue_size)
