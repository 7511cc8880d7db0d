"""Named events and a dispatcher that forwards them to listeners."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

_log = logging.getLogger(__name__)

EVENT_BATTERY_LEVEL = "battery_level"
EVENT_CONNECTED = "connected"
EVENT_DISCONNECTED = "disconnected"


class Event:
    """An event identified by its name."""

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class EventListener(ABC):
    """Something that reacts to dispatched events."""

    @abstractmethod
    def handle_event(self, event: Event) -> None:
        """React to ``event``."""


class EventDispatcher:
    """Delivers each posted event to every registered listener, in order."""

    def __init__(self) -> None:
        self._listeners: list[EventListener] = []

    def post_event(self, event: Event) -> None:
        """Dispatch ``event`` to all listeners."""
        _log.info("Event dispatched: %s (%r)", event.name, event)
        for listener in self._listeners:
            listener.handle_event(event)

    def add_event_listener(self, listener: EventListener) -> None:
        """Register ``listener`` to receive future events."""
        self._listeners.append(listener)