"""The advancing humans."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .core import Rect, Signal, Timer

if TYPE_CHECKING:
    from .plant import Plant

FLASH_DURATION = 100
FLASH_ALPHA = 200
BLOOD_INTERVAL = 1000
BLOOD_DAMAGE = 5
SLOW_FACTOR = 0.6


@dataclass(frozen=True)
class _Kind:
    name: str
    speed: float
    health: int
    damage: int
    scale: float
    size: tuple[float, float]


_KINDS = {
    1: _Kind("Boy", 1.0, 100, 20, 0.2, (300.0, 350.0)),
    2: _Kind("Father", 0.5, 200, 20, 0.35, (200.0, 230.0)),
    3: _Kind("Grandpa", 0.5, 400, 20, 0.4, (180.0, 200.0)),
    4: _Kind("Oldman", 0.5, 600, 20, 0.4, (180.0, 200.0)),
    5: _Kind("Onepunch", 0.35, 800, 200, 0.5, (150.0, 160.0)),
}

_STAGES = ((0.8, 1.0), (0.6, 0.8), (0.4, 0.6), (0.2, 0.4), (0.0, 0.2))


class Human:
    """A human walking along one row toward the house."""

    def __init__(self, human_type: int, row: int) -> None:
        try:
            kind = _KINDS[human_type]
        except KeyError:
            raise ValueError(f"unknown human type: {human_type}") from None
        self.human_type = human_type
        self.row = row
        self.name = kind.name
        self.speed = kind.speed
        self.health = kind.health
        self.max_health = kind.health
        self.damage = kind.damage
        self.scale = kind.scale
        self.width, self.height = kind.size
        self.x = 0.0
        self.y = 0.0
        self.attack_countdown = 0
        self.moveable = True
        self.is_blood = False
        self.is_slow = False
        self.blood_timer = Timer()
        self.dead = Signal()
        self._stage = 1
        self._flash_elapsed: int | None = None

    @property
    def flash_alpha(self) -> int:
        if self._flash_elapsed is None:
            return 0
        return int(FLASH_ALPHA * (1 - self._flash_elapsed / FLASH_DURATION))

    def stop(self) -> None:
        self.blood_timer.stop()

    def start(self) -> None:
        if self.is_blood:
            self.blood_timer.start(100)

    def get_hurt(self, damage: int) -> None:
        self.health -= damage
        self._flash_elapsed = 0
        for stage, (low, high) in enumerate(_STAGES, start=1):
            if low * self.max_health < self.health <= high * self.max_health:
                self._stage = stage
                break
        if self.health <= 0:
            self.dead.emit(self)

    def attack(self, plant: Plant) -> None:
        plant.get_hurt(self.damage)

    def blood(self) -> None:
        if self.is_blood:
            self.blood_timer.start(BLOOD_INTERVAL)
            self.blood_timer.timeout.connect(lambda: self.get_hurt(BLOOD_DAMAGE))

    def slow(self) -> None:
        if self.is_slow:
            self.speed *= SLOW_FACTOR

    def advance(self, ms: int) -> None:
        self.blood_timer.advance(ms)
        if self._flash_elapsed is not None:
            self._flash_elapsed += ms
            if self._flash_elapsed >= FLASH_DURATION:
                self._flash_elapsed = None

    def image_name(self) -> str:
        return f"Enemy/{self._stage}{self.name}.png"

    def bounding_rect(self) -> Rect:
        return Rect(self.x, self.y, self.width * self.scale, self.height * self.scale)