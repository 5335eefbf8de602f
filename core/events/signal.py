from __future__ import annotations

from threading import Lock
from typing import Callable, Generic, List, TypeVar

T = TypeVar("T")
Slot = Callable[[T], None]


class Signal(Generic[T]):
    """
    Synchronous publish/subscribe channel carrying one payload type.

    Slots run in connection order on the emitting thread. A slot that
    raises ReferenceError (a weak proxy whose target was collected) is
    dropped; any other error propagates to the emitter.
    """

    def __init__(self) -> None:
        self._slots: List[Slot] = []
        self._guard = Lock()

    @property
    def subscriber_count(self) -> int:
        return len(self._slots)

    def connect(self, slot: Slot) -> Callable[[], None]:
        with self._guard:
            if slot not in self._slots:
                self._slots.append(slot)
        return lambda: self.disconnect(slot)

    def disconnect(self, slot: Slot) -> None:
        with self._guard:
            try:
                self._slots.remove(slot)
            except ValueError:
                pass

    def emit(self, payload: T) -> None:
        with self._guard:
            slots = tuple(self._slots)
        for slot in slots:
            try:
                slot(payload)
            except ReferenceError:
                self.disconnect(slot)
