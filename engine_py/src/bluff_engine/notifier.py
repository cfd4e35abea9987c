"""
Synchronous notification channel from the engine to its observers.
"""

import logging
from typing import Callable, List, Optional, Tuple, Union

from .events import Notification, NotificationType

logger = logging.getLogger(__name__)

Subscriber = Callable[[Notification], None]


class EventNotifier:
    """
    Ordered list of subscriber callbacks.

    ``emit`` calls every matching subscriber in subscription order before
    returning. A failing subscriber is logged and skipped; the engine never
    sees the error.
    """

    def __init__(self):
        self._subscribers: List[Tuple[Optional[NotificationType], Subscriber]] = []

    def subscribe(
        self,
        callback: Subscriber,
        event_type: Optional[Union[NotificationType, str]] = None,
    ) -> Subscriber:
        """
        Register a callback for every notification, or only for ``event_type``.

        Returns the callback so it can be used as a decorator.
        """
        if event_type is not None:
            event_type = NotificationType(event_type)
        self._subscribers.append((event_type, callback))
        return callback

    def unsubscribe(self, callback: Subscriber) -> None:
        self._subscribers = [(t, cb) for t, cb in self._subscribers if cb is not callback]

    def clear(self) -> None:
        self._subscribers = []

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def emit(self, event: Notification) -> None:
        logger.debug(f"step {event.step}: {event.type.value}")
        for event_type, callback in list(self._subscribers):
            if event_type is not None and event_type != event.type:
                continue
            try:
                callback(event)
            except Exception as e:
                logger.error(f"Subscriber {callback!r} failed on {event.type.value}: {e}")
