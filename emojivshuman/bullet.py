"""Projectiles and collectable drops."""

from __future__ import annotations

from typing import Any

from .core import Rect, Signal

BOUNCE_DURATION = 1500
_PEAK_AT = 0.3


def _out_bounce(t: float) -> float:
    if t < 1 / 2.75:
        return 7.5625 * t * t
    if t < 2 / 2.75:
        t -= 1.5 / 2.75
        return 7.5625 * t * t + 0.75
    if t < 2.5 / 2.75:
        t -= 2.25 / 2.75
        return 7.5625 * t * t + 0.9375
    t -= 2.625 / 2.75
    return 7.5625 * t * t + 0.984375


def _lerp(a: tuple[float, float], b: tuple[float, float], f: float) -> tuple[float, float]:
    return a[0] + (b[0] - a[0]) * f, a[1] + (b[1] - a[1]) * f


class Bullet:
    """A plain shot that flies right and hurts the first human it hits."""

    image = "Bullet/Drew.png"
    size = (60.0, 60.0)
    scale = 0.3
    damage = 20

    def __init__(self) -> None:
        self.x = 0.0
        self.y = 0.0
        self.destroyed = Signal()

    def destroy(self) -> None:
        self.destroyed.emit()

    def bounding_rect(self) -> Rect:
        width, height = self.size
        return Rect(self.x, self.y, width * self.scale, height * self.scale)


class Starb(Bullet):
    """A collectable star that bounces out of its producer."""

    image = "others/Star.png"
    size = (80.0, 80.0)

    def __init__(self) -> None:
        super().__init__()
        self.picked_up = Signal()
        self._peak: tuple[float, float] | None = None
        self._path: tuple[tuple[float, float], ...] | None = None
        self._elapsed = 0

    @property
    def bouncing(self) -> bool:
        return self._path is not None

    def setup_animation(self, x: float, y: float) -> None:
        self._peak = (x + 10, y - 5)

    def start_bounce(self, x: float, y: float) -> None:
        if self._peak is None:
            raise RuntimeError("setup_animation must be called before start_bounce")
        self._path = ((x, y), self._peak, (x + 35, y + 30))
        self._elapsed = 0
        self.x, self.y = x, y

    def advance(self, ms: int) -> None:
        if self._path is None:
            return
        self._elapsed = min(self._elapsed + ms, BOUNCE_DURATION)
        start, peak, end = self._path
        progress = _out_bounce(self._elapsed / BOUNCE_DURATION)
        if progress <= _PEAK_AT:
            self.x, self.y = _lerp(start, peak, progress / _PEAK_AT)
        else:
            self.x, self.y = _lerp(peak, end, (progress - _PEAK_AT) / (1 - _PEAK_AT))
        if self._elapsed >= BOUNCE_DURATION:
            self.x, self.y = end
            self._path = None

    def pick_up(self) -> None:
        self.picked_up.emit()


class Coinb(Starb):
    """A collectable coin dropped by a defeated human."""

    image = "others/Coin.png"
    size = (40.0, 40.0)
    scale = 0.9


class Blood(Bullet):
    """A shot that makes the human bleed."""

    image = "Bullet/Blood.png"
    damage = 15


class Heart(Bullet):
    """A piercing shot that hurts each human only once."""

    image = "Bullet/Heart.png"
    damage = 20

    def __init__(self) -> None:
        super().__init__()
        self.hit_humans: list[Any] = []


class Snow(Bullet):
    """A shot that slows the human down."""

    image = "Bullet/Snow.png"
    damage = 20


class Rocketb(Bullet):
    """A rocket that sweeps a whole row."""

    image = "Props/Rocket.png"
    size = (200.0, 100.0)
    scale = 0.4
    damage = 5000


_BY_CODE: dict[int, type[Bullet]] = {
    1: Bullet,
    2: Heart,
    3: Blood,
    4: Snow,
    5: Starb,
    6: Rocketb,
}


def make_bullet(code: int) -> Bullet:
    """Create a bullet from its archive code."""
    try:
        return _BY_CODE[code]()
    except KeyError:
        raise ValueError(f"unknown bullet code: {code}") from None


def bullet_code(bullet: Bullet) -> int:
    """Return the archive code of a bullet."""
    for kind, code in ((Heart, 2), (Blood, 3), (Snow, 4), (Starb, 5), (Rocketb, 6)):
        if isinstance(bullet, kind):
            return code
    return 1