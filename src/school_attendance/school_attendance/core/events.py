from __future__ import annotations

import logging
from collections import defaultdict
from typing import Callable

from .enums import Signal

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class EventBus:
    """Publish/subscribe channel owned by the container.

    Views subscribe at construction and call the returned function on teardown.
    """

    def __init__(self) -> None:
        self._listeners: dict[Signal, list[Listener]] = defaultdict(list)

    def subscribe(self, signal: Signal, listener: Listener) -> Callable[[], None]:
        self._listeners[signal].append(listener)

        def unsubscribe() -> None:
            try:
                self._listeners[signal].remove(listener)
            except ValueError:
                pass

        return unsubscribe

    def publish(self, signal: Signal) -> None:
        listeners = list(self._listeners.get(signal, ()))
        logger.debug("publish %s to %d listener(s)", signal.value, len(listeners))
        for listener in listeners:
            listener()

    def listener_count(self, signal: Signal) -> int:
        return len(self._listeners.get(signal, ()))
