"""
Translation change events and a synchronous dispatcher
"""
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Iterator, List
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TranslationUpdated:
    """One translation write on a model instance"""

    model: Any
    key: str
    locale: str
    old_value: Any
    new_value: Any


Listener = Callable[[TranslationUpdated], None]


class EventDispatcher:
    """
    In-process pub/sub for translation events.
    Listeners are called synchronously, in subscription order.
    """

    def __init__(self):
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Listener:
        """Register a listener; returns it so this can be used as a decorator"""
        self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, event: TranslationUpdated) -> None:
        """
        Deliver an event to every listener.

        Args:
            event: Event to deliver
        """
        logger.debug(
            f"TranslationUpdated: {type(event.model).__name__}.{event.key}[{event.locale}] "
            f"{event.old_value!r} -> {event.new_value!r}"
        )
        for listener in list(self._listeners):
            listener(event)

    @contextmanager
    def listen(self) -> Iterator[List[TranslationUpdated]]:
        """
        Collect events emitted inside the block.

        Usage:
            with dispatcher.listen() as events:
                model.set_translation("name", "en", "Hello")
            assert len(events) == 1
        """
        captured: List[TranslationUpdated] = []
        self.subscribe(captured.append)
        try:
            yield captured
        finally:
            self.unsubscribe(captured.append)


# Default sink used by models
dispatcher = EventDispatcher()
