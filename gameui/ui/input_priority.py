from __future__ import annotations
import logging
from typing import Callable, Optional
import pygame

logger = logging.getLogger(__name__)

KeyListener = Callable[[pygame.event.Event], bool]


class InputPriorityStack:
    """Ordered key-down listeners, front first.

    dispatch() walks the list front to back and stops at the first listener
    returning True. A modal promotes itself with register_top() and consumes
    every key, so nothing registered before it sees the event until it
    unregisters.
    """

    def __init__(self) -> None:
        self._listeners: list[KeyListener] = []

    # ── queries ─────────────────────────────────────────────────────

    @property
    def front(self) -> Optional[KeyListener]:
        return self._listeners[0] if self._listeners else None

    def listeners(self) -> tuple[KeyListener, ...]:
        return tuple(self._listeners)

    def __contains__(self, listener: object) -> bool:
        return listener in self._listeners

    def __len__(self) -> int:
        return len(self._listeners)

    # ── mutation ────────────────────────────────────────────────────

    def register(self, listener: KeyListener) -> None:
        """Append behind every current listener (ordinary windows)."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def register_top(self, listener: KeyListener) -> None:
        """Move or insert ``listener`` in front of every current listener."""
        if listener in self._listeners:
            self._listeners.remove(listener)
        self._listeners.insert(0, listener)
        logger.debug("Key priority -> %r (%d listeners)", listener, len(self._listeners))

    def unregister(self, listener: KeyListener) -> bool:
        if listener not in self._listeners:
            return False
        self._listeners.remove(listener)
        return True

    def clear(self) -> None:
        self._listeners.clear()

    # ── dispatch ────────────────────────────────────────────────────

    def dispatch(self, event: pygame.event.Event) -> bool:
        """Deliver ``event``; returns True when a listener consumed it."""
        for listener in list(self._listeners):
            # Skip listeners unregistered earlier in this same dispatch
            if listener not in self._listeners:
                continue
            if listener(event):
                return True
        return False


__all__ = ["InputPriorityStack", "KeyListener"]
