"""Minimal synchronous event emitter."""

from __future__ import annotations

import contextlib
import logging
import threading
from types import MethodType
from typing import Any, Callable

from bareemitter.config import Config, ConfigType
from bareemitter.lib.package_info import get_package_info

Listener = Callable[..., None]


def _same_listener(registered: Listener, listener: Listener) -> bool:
    """Match by identity. Bound methods match when they bind the same function to the same object."""
    if registered is listener:
        return True
    if isinstance(registered, MethodType) and isinstance(listener, MethodType):
        return registered.__self__ is listener.__self__ and registered.__func__ is listener.__func__
    return False


class BareEmitter:
    """Register listeners by event name and call them synchronously on emit.

    Listeners run in registration order on the caller's stack. Exceptions raised
    by a listener propagate out of emit() and stop the remaining listeners.
    Removal matches listeners by identity; a bound method matches any other
    bound method of the same function on the same object.
    """

    def __init__(self, config: type[Config] | ConfigType = Config) -> None:
        if isinstance(config, ConfigType):
            config = config.value
        self.config = config

        info = get_package_info()
        self.author = info.author
        self.version = info.version
        self.description = info.description
        self.license = info.license

        self._events: dict[str, list[Listener]] = {}
        self._lock = threading.RLock() if config.THREAD_SAFE else contextlib.nullcontext()

    def on(self, event_name: str, listener: Listener) -> None:
        """Append a listener for an event. The same listener may be added more than once."""
        with self._lock:
            if event_name not in self._events:
                self._events[event_name] = []
            self._events[event_name].append(listener)
        logging.debug(f"Listener added for event: {event_name}")

    def off(self, event_name: str, listener: Listener | None = None) -> None:
        """Remove a listener, or every listener for the event when none is given.

        Unknown event names are ignored. An event left with no listeners is
        dropped from the registry.
        """
        with self._lock:
            if event_name not in self._events:
                return
            if listener is None:
                del self._events[event_name]
                logging.debug(f"All listeners removed for event: {event_name}")
                return

            current = self._events[event_name]
            remaining = [fn for fn in current if not _same_listener(fn, listener)]
            if len(remaining) == len(current):
                return
            if remaining:
                self._events[event_name] = remaining
            else:
                del self._events[event_name]
        logging.debug(f"Listener removed for event: {event_name}")

    def once(self, event_name: str, listener: Listener) -> None:
        """Add a listener that runs on the next emit only.

        The registry holds a wrapper, not ``listener`` itself, so
        ``off(event_name, listener)`` cannot cancel it. Use ``off(event_name)``
        to clear the event instead.
        """
        fired = False

        def once_wrapper(*args: Any) -> None:
            nonlocal fired
            with self._lock:
                if fired:
                    return
                fired = True
            # Detach before calling so a re-entrant emit cannot reach this wrapper again
            self.off(event_name, once_wrapper)
            listener(*args)

        self.on(event_name, once_wrapper)

    def emit(self, event_name: str, *args: Any) -> bool:
        """Call every listener registered for the event with ``args``.

        Listeners are snapshotted first: ones added during this call wait for the
        next emit, and ones removed during this call still run.

        Returns:
            bool: True if the event had listeners, False otherwise.
        """
        with self._lock:
            listeners = self._events.get(event_name)
            if not listeners:
                return False
            snapshot = list(listeners)

        if self.config.LOG_EMITS:
            logging.debug(f"Emitting event: {event_name} to {len(snapshot)} listener(s)")
        for fn in snapshot:
            fn(*args)
        return True

    def listeners(self, event_name: str) -> list[Listener]:
        """Return a copy of the listeners registered for an event."""
        with self._lock:
            return list(self._events.get(event_name, []))

    def listener_count(self, event_name: str) -> int:
        with self._lock:
            return len(self._events.get(event_name, []))

    def event_names(self) -> list[str]:
        """Return the names of events that currently have listeners."""
        with self._lock:
            return list(self._events)
