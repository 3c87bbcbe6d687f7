from __future__ import annotations

from abc import ABC, abstractmethod


class TickClock(ABC):
    """Monotonic source of scheduler ticks (block height in the chain model)."""

    @abstractmethod
    def current_tick(self) -> int: ...


class ManualClock(TickClock):
    """Clock advanced explicitly by the host; used by tests and simulations."""

    def __init__(self, start: int = 0) -> None:
        if start < 0:
            raise ValueError(f"Clock cannot start at a negative tick ({start})")
        self._tick = start

    def current_tick(self) -> int:
        return self._tick

    def advance(self, ticks: int = 1) -> int:
        if ticks < 0:
            raise ValueError("Clock cannot move backwards")
        self._tick += ticks
        return self._tick

    def set(self, tick: int) -> None:
        if tick < self._tick:
            raise ValueError(
                f"Clock cannot move backwards (current={self._tick}, requested={tick})"
            )
        self._tick = tick
