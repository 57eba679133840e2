"""Signals, simulated timers and rectangles shared by the game objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


class Signal:
    """A list of callbacks that are called, in connection order, on emit."""

    def __init__(self) -> None:
        self._callbacks: list[Callable[..., Any]] = []

    def connect(self, callback: Callable[..., Any]) -> None:
        self._callbacks.append(callback)

    def disconnect(self, callback: Callable[..., Any]) -> None:
        try:
            self._callbacks.remove(callback)
        except ValueError:
            raise ValueError("callback is not connected") from None

    def emit(self, *args: Any) -> None:
        for callback in list(self._callbacks):
            callback(*args)

    def __len__(self) -> int:
        return len(self._callbacks)


class Timer:
    """A repeating timer driven by simulated milliseconds."""

    def __init__(self) -> None:
        self.timeout = Signal()
        self._interval = 0
        self._remaining = 0
        self._active = False

    @property
    def interval(self) -> int:
        return self._interval

    def start(self, interval: int) -> None:
        if interval < 0:
            raise ValueError("timer interval must not be negative")
        self._interval = interval
        self._remaining = interval
        self._active = True

    def stop(self) -> None:
        self._active = False

    def is_active(self) -> bool:
        return self._active

    def remaining_time(self) -> int:
        """Milliseconds until the next timeout, or -1 when stopped."""
        return self._remaining if self._active else -1

    def advance(self, ms: int) -> None:
        if ms < 0:
            raise ValueError("cannot advance by a negative time")
        while self._active and ms >= self._remaining:
            ms -= self._remaining
            self._remaining = self._interval
            self.timeout.emit()
            if self._active and self._remaining == 0:
                return
        if self._active:
            self._remaining -= ms


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in scene coordinates."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def intersects(self, other: Rect) -> bool:
        if self.width <= 0 or self.height <= 0 or other.width <= 0 or other.height <= 0:
            return False
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )

    def contains(self, x: float, y: float) -> bool:
        return self.x <= x <= self.right and self.y <= y <= self.bottom