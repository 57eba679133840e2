"""The emoji defenders."""

from __future__ import annotations

from .bullet import Bullet, Starb, make_bullet
from .core import Rect, Signal, Timer

FLASH_DURATION = 100
FLASH_ALPHA = 200
DEFAULT_ATTACK_TIME = 2500
SECOND_SHOT_DELAY = 297

# plant type -> (animation number, bullet code)
_KINDS = {
    1: (1, 1),
    2: (6, 1),
    3: (4, 2),
    4: (3, 3),
    5: (7, 4),
    6: (2, 1),
}


class Plant:
    """An emoji planted on the grid that shoots along its row."""

    size = (200.0, 200.0)
    scale = 0.25

    def __init__(self, plant_type: int, row: int, col: int) -> None:
        try:
            animation, bullet_type = _KINDS[plant_type]
        except KeyError:
            raise ValueError(f"unknown plant type: {plant_type}") from None
        self.plant_type = plant_type
        self.row = row
        self.col = col
        self.health = 100
        self.bullet_type = bullet_type
        self.attack_time = 10000 if plant_type == 2 else DEFAULT_ATTACK_TIME
        self.remaining_time = 0
        self.image = f"Emoji/Emoji{animation}.gif"
        self.paused = False
        self.x = 0.0
        self.y = 0.0
        self.clicked = Signal()
        self.attack = Signal()
        self.dead = Signal()
        self.a_timer = Timer()
        self.a_timer.timeout.connect(self._on_attack_timer)
        self._flash_elapsed: int | None = None

    @property
    def flash_alpha(self) -> int:
        if self._flash_elapsed is None:
            return 0
        return int(FLASH_ALPHA * (1 - self._flash_elapsed / FLASH_DURATION))

    def _on_attack_timer(self) -> None:
        self._fire()
        self.a_timer.start(self.attack_time)

    def _shot(self, bullet: Bullet) -> Bullet:
        bullet.x, bullet.y = self.x + 30, self.y + 10
        return bullet

    def _fire(self) -> None:
        self.attack.emit(self._shot(make_bullet(self.bullet_type)))

    def click(self) -> None:
        self.clicked.emit()

    def stop(self) -> None:
        if self.a_timer.is_active():
            self.remaining_time = self.a_timer.remaining_time()
        self.a_timer.stop()
        self.paused = True

    def start(self) -> None:
        if self.remaining_time:
            self.a_timer.start(self.remaining_time)
            self.remaining_time = 0
        self.paused = False

    def get_hurt(self, damage: int) -> None:
        self.health -= damage
        self._flash_elapsed = 0
        if self.health <= 0:
            self.dead.emit(self)

    def advance(self, ms: int) -> None:
        self.a_timer.advance(ms)
        if self._flash_elapsed is not None:
            self._flash_elapsed += ms
            if self._flash_elapsed >= FLASH_DURATION:
                self._flash_elapsed = None

    def bounding_rect(self) -> Rect:
        width, height = self.size
        return Rect(self.x, self.y, width * self.scale, height * self.scale)


class Laugh(Plant):
    """An emoji that fires two shots in quick succession."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(6, row, col)
        self.remaining_time2 = 0
        self.a_timer2 = Timer()
        self.a_timer2.timeout.connect(self._second_shot)

    def _second_shot(self) -> None:
        self.attack.emit(self._shot(Bullet()))
        self.a_timer2.stop()

    def _fire(self) -> None:
        self.attack.emit(self._shot(Bullet()))
        self.a_timer2.start(SECOND_SHOT_DELAY)

    def stop(self) -> None:
        if self.a_timer.is_active():
            self.remaining_time = self.a_timer.remaining_time()
        if self.a_timer2.is_active():
            self.remaining_time2 = self.a_timer2.remaining_time()
        self.a_timer.stop()
        self.a_timer2.stop()
        self.paused = True

    def start(self) -> None:
        if self.remaining_time:
            self.a_timer.start(self.remaining_time)
            self.remaining_time = 0
        if self.remaining_time2:
            self.a_timer2.start(self.remaining_time2)
            self.remaining_time2 = 0
        self.paused = False

    def advance(self, ms: int) -> None:
        super().advance(ms)
        self.a_timer2.advance(ms)


class Stars(Plant):
    """An emoji that produces collectable stars."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(2, row, col)
        self.star_generated = Signal()
        self.a_timer.start(self.attack_time)

    def _fire(self) -> None:
        star = Starb()
        star.setup_animation(self.x, self.y)
        star.x, star.y = self.x + 40, self.y + 10
        star.start_bounce(self.x, self.y)
        self.star_generated.emit(star)


def make_plant(plant_type: int, row: int, col: int) -> Plant:
    """Create the right plant class for a plant type."""
    if plant_type == 2:
        return Stars(row, col)
    if plant_type == 6:
        return Laugh(row, col)
    return Plant(plant_type, row, col)