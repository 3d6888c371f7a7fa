from __future__ import annotations
import logging
from collections import deque
from typing import Callable, FrozenSet, Iterable, Optional
from gameui.core.ui_event import UIEvent, UIEventType

logger = logging.getLogger(__name__)

UIEventCallback = Callable[[UIEvent], None]


class EventListener:
    """Publishes UIEvents from the manager and its dialogs to interested callbacks.

    Callbacks run in subscription order. A subscription may be limited to some
    UIEventTypes. A failing callback is logged and the rest still run.
    """

    def __init__(self):
        # (callback, accepted types or None for every type)
        self._subscriptions: list[tuple[UIEventCallback, Optional[FrozenSet[UIEventType]]]] = []
        # Events published from inside a callback wait for the current one to finish
        self._pending: deque[UIEvent] = deque()
        self._delivering = False

    def subscribe(self, callback: UIEventCallback, types: Optional[Iterable[UIEventType]] = None):
        """Subscribe ``callback``; subscribing again widens its type filter."""
        wanted = frozenset(types) if types is not None else None
        for index, (cb, accepted) in enumerate(self._subscriptions):
            if cb == callback:
                if accepted is not None:
                    self._subscriptions[index] = (cb, None if wanted is None else accepted | wanted)
                return
        self._subscriptions.append((callback, wanted))

    def unsubscribe(self, callback: UIEventCallback):
        self._subscriptions = [(cb, accepted) for cb, accepted in self._subscriptions if cb != callback]

    def publish(self, event: UIEvent):
        self._pending.append(event)
        if self._delivering:
            return
        self._delivering = True
        try:
            while self._pending:
                self._deliver(self._pending.popleft())
        finally:
            self._delivering = False

    def _deliver(self, event: UIEvent) -> None:
        for callback, accepted in list(self._subscriptions):
            if accepted is not None and event.type not in accepted:
                continue
            try:
                callback(event)
            except Exception:
                logger.exception("Subscriber %r failed on %s", callback, event.type.name)


__all__ = ["EventListener", "UIEventCallback"]
