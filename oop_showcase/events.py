"""
Event Emitter Mixin

Adds named-event subscription to any class. Listener errors are logged and
do not break the emitting operation.
"""

from typing import Any, Callable, Dict, List
import logging

logger = logging.getLogger(__name__)


class EventEmitterMixin:
    """Mixin to add on/off/emit to domain classes"""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._listeners: Dict[str, List[Callable[..., Any]]] = {}

    def on(self, event: str, listener: Callable[..., Any]) -> None:
        """Subscribe listener to event"""
        self._listeners.setdefault(event, []).append(listener)

    def off(self, event: str, listener: Callable[..., Any]) -> None:
        """Unsubscribe listener from event"""
        try:
            self._listeners.get(event, []).remove(listener)
        except ValueError:
            logger.warning(
                f"Listener {getattr(listener, '__name__', repr(listener))} was not subscribed to {event}"
            )

    def emit(self, event: str, *args) -> int:
        """
        Call every listener of event with args

        Returns:
            Number of listeners that ran without error
        """
        delivered = 0
        for listener in list(self._listeners.get(event, [])):
            try:
                listener(*args)
                delivered += 1
            except Exception as e:
                logger.error(
                    f"Error in listener {getattr(listener, '__name__', repr(listener))} for {event}: {e}"
                )
        return delivered

    def listener_count(self, event: str) -> int:
        return len(self._listeners.get(event, []))
