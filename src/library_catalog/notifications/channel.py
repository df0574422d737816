"""Publisher and subscribers for catalog change events."""

from __future__ import annotations

import asyncio
import threading
from collections import defaultdict
from enum import Enum
from typing import Any

from ..logging import get_logger

logger = get_logger(__name__)

_CLOSED = object()


def _topic_name(topic: str | Enum) -> str:
    return topic.value if isinstance(topic, Enum) else topic


class Subscriber:
    """One consumer of a topic, iterated with ``async for``.

    Events are buffered in a queue owned by the event loop that created the
    subscriber. When ``maxsize`` events are waiting, new events are dropped
    so a slow consumer never holds up the publisher.
    """

    def __init__(self, channel: NotificationChannel, topic: str, maxsize: int) -> None:
        self.topic = topic
        self._channel = channel
        self._maxsize = maxsize
        self._loop = asyncio.get_running_loop()
        self._queue: asyncio.Queue[Any] = asyncio.Queue()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def orphaned(self) -> bool:
        """The owning event loop has shut down, so nothing can consume events."""
        return self._loop.is_closed()

    def pending(self) -> int:
        return self._queue.qsize()

    def deliver(self, payload: Any) -> None:
        """Hand an event to this subscriber from any thread."""
        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None

        if running is self._loop:
            self._enqueue(payload)
        else:
            self._loop.call_soon_threadsafe(self._enqueue, payload)

    def _enqueue(self, payload: Any) -> None:
        if payload is not _CLOSED and self._queue.qsize() >= self._maxsize:
            logger.warning("Subscriber queue full, dropping event", topic=self.topic)
            return
        self._queue.put_nowait(payload)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._channel.unsubscribe(self)
        if not self.orphaned:
            self.deliver(_CLOSED)

    def __enter__(self) -> Subscriber:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __aiter__(self) -> Subscriber:
        return self

    async def __anext__(self) -> Any:
        payload = await self._queue.get()
        if payload is _CLOSED:
            # Leave the marker in place so later reads also stop
            self._queue.put_nowait(_CLOSED)
            raise StopAsyncIteration
        return payload


class NotificationChannel:
    """Process-wide publish point with independent subscribers per topic."""

    def __init__(self, queue_size: int = 100) -> None:
        self.queue_size = queue_size
        self._subscribers: dict[str, list[Subscriber]] = defaultdict(list)
        self._lock = threading.Lock()

    def subscribe(self, topic: str | Enum) -> Subscriber:
        """Register a new subscriber. Must be called from a running event loop."""
        name = _topic_name(topic)
        subscriber = Subscriber(self, name, self.queue_size)
        with self._lock:
            self._subscribers[name].append(subscriber)
        logger.debug("Subscriber registered", topic=name)
        return subscriber

    def unsubscribe(self, subscriber: Subscriber) -> None:
        with self._lock:
            subscribers = self._subscribers.get(subscriber.topic, [])
            if subscriber in subscribers:
                subscribers.remove(subscriber)
                logger.debug("Subscriber removed", topic=subscriber.topic)

    def subscriber_count(self, topic: str | Enum) -> int:
        with self._lock:
            return len(self._subscribers.get(_topic_name(topic), []))

    def publish(self, topic: str | Enum, payload: Any) -> int:
        """Fan an event out to every current subscriber of ``topic``.

        Never blocks and never raises for a subscriber's sake: a delivery
        that fails is logged and skipped, and subscribers whose event loop
        has shut down are removed. Returns the number of subscribers
        the event was handed to.
        """
        name = _topic_name(topic)
        with self._lock:
            subscribers = list(self._subscribers.get(name, []))

        delivered = 0
        for subscriber in subscribers:
            if subscriber.orphaned:
                self._drop(subscriber)
                continue
            try:
                subscriber.deliver(payload)
                delivered += 1
            except Exception as e:
                logger.error("Failed to deliver event", topic=name, error=str(e))
                if subscriber.orphaned:
                    self._drop(subscriber)

        logger.debug("Event published", topic=name, subscribers=delivered)
        return delivered

    def _drop(self, subscriber: Subscriber) -> None:
        logger.warning("Dropping subscriber of a closed event loop", topic=subscriber.topic)
        subscriber.close()

    def close(self) -> None:
        """End every open subscription."""
        with self._lock:
            subscribers = [s for group in self._subscribers.values() for s in group]

        for subscriber in subscribers:
            try:
                subscriber.close()
            except Exception as e:
                logger.error("Failed to close subscriber", topic=subscriber.topic, error=str(e))
        logger.info("Notification channel closed", subscribers=len(subscribers))
