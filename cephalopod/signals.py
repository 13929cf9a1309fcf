"""Signals that notify subscribed slots, with changes made during firing deferred."""

from __future__ import annotations

from typing import Callable


class Signal:
    """An event source that calls the handlers of its subscribed slots."""

    def __init__(self) -> None:
        self._subscribers: list[tuple[Slot, Callable[..., None]]] = []
        self._firing_count = 0
        self._deferred: list[Callable[[], None]] = []

    def fire(self, *args: object) -> None:
        """Call every subscribed handler with the given arguments.

        Connections and disconnections requested through the signal while it
        fires take effect, last requested first, once firing has finished.
        """
        self._firing_count += 1
        try:
            for _, handler in list(self._subscribers):
                handler(*args)
        finally:
            self._firing_count -= 1
            if self._firing_count == 0:
                while self._deferred:
                    self._deferred.pop()()

    def is_firing(self) -> bool:
        return self._firing_count > 0

    def connect(self, slot: Slot, handler: Callable[..., None]) -> None:
        """Subscribe a slot, deferring the change if the signal is firing."""
        if self.is_firing():
            self._deferred.append(lambda: self.connect(slot, handler))
        else:
            slot.connect(self, handler)

    def disconnect(self, slot: Slot) -> None:
        """Unsubscribe a slot, deferring the change if the signal is firing."""
        if self.is_firing():
            self._deferred.append(lambda: self.disconnect(slot))
        else:
            slot.disconnect(self)

    def is_connected_to(self, slot: Slot) -> bool:
        return slot.is_connected_to(self)

    def close(self) -> None:
        """Drop every subscriber and tell each slot the signal is gone."""
        for slot, _ in list(self._subscribers):
            slot._forget_signal(self)
        self._subscribers.clear()

    def _add_subscriber(self, slot: Slot, handler: Callable[..., None]) -> None:
        self._subscribers.append((slot, handler))

    def _remove_subscriber(self, slot: Slot) -> None:
        self._subscribers = [(s, h) for s, h in self._subscribers if s is not slot]

    def _has_subscriber(self, slot: Slot) -> bool:
        return any(s is slot for s, _ in self._subscribers)


class Slot:
    """Mixin for objects that receive signals and track their connections."""

    @property
    def _signals(self) -> list[Signal]:
        signals = self.__dict__.get("_slot_signals")
        if signals is None:
            signals = []
            self.__dict__["_slot_signals"] = signals
        return signals

    def connect(self, signal: Signal, handler: Callable[..., None]) -> None:
        """Subscribe to a signal immediately."""
        signal._add_subscriber(self, handler)
        self._signals.append(signal)

    def disconnect(self, signal: Signal) -> None:
        """Unsubscribe from a signal immediately."""
        signal._remove_subscriber(self)
        self._forget_signal(signal)

    def is_connected_to(self, signal: Signal) -> bool:
        return signal._has_subscriber(self)

    def disconnect_all(self) -> None:
        """Unsubscribe from every signal this slot is connected to."""
        for signal in self._signals:
            signal._remove_subscriber(self)
        self._signals.clear()

    def _forget_signal(self, signal: Signal) -> None:
        self._signals[:] = [s for s in self._signals if s is not signal]