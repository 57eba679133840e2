"""The level: lawn grid, cards, emojis, humans and the frame loop."""

from __future__ import annotations

import random
from pathlib import Path
from typing import Any

from .archive import (
    DEFAULT_ARCHIVE_TEXT,
    Archive,
    ArchiveError,
    BulletRecord,
    HumanRecord,
    PlantRecord,
    load_archive,
    save_archive,
)
from .brick import Brick
from .bullet import Blood, Bullet, Coinb, Heart, Rocketb, Snow, Starb, bullet_code, make_bullet
from .card import Card
from .core import Signal, Timer
from .human import Human
from .menus import PauseButton, PauseWidget
from .plant import Plant, Stars, make_plant

WIDTH = 800
HEIGHT = 460
FRAME_MS = 33
HUMAN_INTERVAL = 10000
PLANT_ATTACK_TIME = 2500
STAR_PERIOD = 150
STAR_INCOME = 30
STAR_PICKUP = 25
COIN_PICKUP = 1
COIN_DROP_CHANCE = 2
BULLET_SPEED = 3.5
LOSE_LINE = 90
ATTACK_FRAMES = 30
ROCKET_COUNT = 5
NOTICE_MS = 2000

NO_SELECTION = 10
SHOVEL = 0
ROCKET = 7
CANDY = 8

ARCHIVE_NAME = "Archive.txt"
NORMAL_NAME = "Normal.txt"

LOSE_TEXT = "失败！\n人类最终战胜了抽象！"
WIN_TEXT = "胜利！\n抽象最终统治了人类！"
CANDY_TEXT = "Emoji全都充满了活力！"

_CARD_X = {1: 215, 2: 217, 3: 215}


def _cell_position(row: int, col: int) -> tuple[float, float]:
    step = 83 if col in (6, 7) else 80
    return 195 + (col - 1) * step, 90 + (row - 1) * 53


class Game:
    """One running level, loaded from and saved to a plain-text archive."""

    def __init__(self, path: str | Path, rng: Any = None) -> None:
        self.path = Path(path)
        self.directory = self.path.parent
        self.rng = rng if rng is not None else random.Random()

        self.sound = Signal()
        self.back_requested = Signal()
        self.restart_requested = Signal()

        self.star = 100
        self.coin = 10
        self.max_round = 30
        self.round = 0
        self.update_star_countdown = 0
        self.human_g_remaining_time = 0
        self.human_dense = 1
        self.human_type_limit = 2
        self.selected = NO_SELECTION
        self.won = False
        self.lost = False
        self.paused = False
        self.notice: str | None = None
        self._notice_left = 0
        self._banner: str | None = None

        self.bricks: list[list[Brick | None]] = []
        self.plants: list[Plant] = []
        self.bullets: list[Bullet] = []
        self.humans: list[Human] = []
        self.coins: list[Coinb] = []
        self.cards: list[Card] = []

        self._setup_cards()
        self._setup_props()
        self._apply_archive(load_archive(self.path))

        self.detect_timer = Timer()
        self.detect_timer.start(FRAME_MS)
        self.detect_timer.timeout.connect(self.tick)

        self.menu_button = PauseButton("菜单")
        self.menu_button.x, self.menu_button.y = WIDTH - 100, 0
        self.pause_widget = PauseWidget()
        self.pause_widget.x = WIDTH * 0.5 - 100
        self.pause_widget.y = HEIGHT * 0.5 - 125
        self.menu_button.clicked.connect(self.pause)
        self.pause_widget.close.connect(self.resume)
        self.pause_widget.exit.connect(self.back_requested.emit)
        self.pause_widget.restart.connect(self.restart_requested.emit)

        self.human_timer = Timer()
        self.human_timer.start(HUMAN_INTERVAL)
        self.human_timer.timeout.connect(self._on_human_timer)

    @property
    def banner(self) -> str | None:
        """The win or lose text, hidden while the pause dialog is open."""
        return None if self.paused else self._banner

    # setup

    def _setup_cards(self) -> None:
        shovel = Card(SHOVEL)
        shovel.x, shovel.y = 598, 7
        shovel.clicked.connect(self._on_shovel_card)
        self.cards.append(shovel)
        for index in range(6):
            card = Card(index + 1)
            card.x, card.y = _CARD_X.get(index, 213) + index * 55, 7
            card.clicked.connect(self._select)
            self.cards.append(card)

    def _setup_props(self) -> None:
        rocket = Card(ROCKET)
        rocket.x, rocket.y = 10, 100
        rocket.clicked.connect(self._select)
        rocket.clicked.connect(self._fire_rockets)
        self.cards.append(rocket)
        candy = Card(CANDY)
        candy.x, candy.y = 10, 175
        candy.clicked.connect(self._use_candy)
        self.cards.append(candy)

    def _apply_archive(self, archive: Archive) -> None:
        self.human_g_remaining_time = archive.human_g_remaining_time
        self.star = archive.star
        self.coin = archive.coin
        self.update_star_countdown = archive.update_star_countdown
        self.max_round = archive.max_round
        self.round = archive.round
        self._load_bricks(archive.map)

        for record in archive.plants:
            brick = self._brick(record.row, record.col)
            if brick is None:
                raise ArchiveError(
                    f"plant at row {record.row}, column {record.col} stands on no brick"
                )
            plant = make_plant(record.plant_type, record.row, record.col)
            plant.health = record.health
            plant.remaining_time = record.remaining_time
            plant.x, plant.y = record.x, record.y
            self.plants.append(plant)
            plant.start()
            brick.is_plant = True
            self._wire_plant(plant, brick)

        for record in archive.bullets:
            bullet = make_bullet(record.code)
            bullet.x, bullet.y = record.x, record.y
            self._add_bullet(bullet)

        for record in archive.humans:
            human = Human(record.human_type, record.row)
            human.health = record.health
            human.attack_countdown = record.attack_countdown
            human.is_blood = record.is_blood
            human.is_slow = record.is_slow
            human.x, human.y = record.x, record.y
            self._add_human(human)

    def _load_bricks(self, grid: list[list[bool]]) -> None:
        for i, cells in enumerate(grid):
            row: list[Brick | None] = []
            for j, cell in enumerate(cells):
                if not cell:
                    row.append(None)
                    continue
                brick = Brick(i + 1, j + 1)
                brick.x, brick.y = _cell_position(i + 1, j + 1)
                brick.clicked.connect(
                    lambda r, c, brick=brick: self._plant_at(brick, r, c)
                )
                row.append(brick)
            self.bricks.append(row)

    def _brick(self, row: int, col: int) -> Brick | None:
        if not (1 <= row <= len(self.bricks) and 1 <= col <= len(self.bricks[row - 1])):
            return None
        return self.bricks[row - 1][col - 1]

    def _all_bricks(self) -> list[Brick]:
        return [brick for row in self.bricks for brick in row if brick is not None]

    # wiring

    def _select(self, card_type: int) -> None:
        self.selected = card_type

    def _on_shovel_card(self, card_type: int) -> None:
        self.selected = card_type
        self.sound.emit("shovel")

    def _fire_rockets(self, _card_type: int) -> None:
        self.sound.emit("prop")
        for index in range(ROCKET_COUNT):
            rocket = Rocketb()
            rocket.x, rocket.y = 30, 100 + index * 53
            self._add_bullet(rocket)
        self.coin -= self.cards[ROCKET].coin_cost

    def _use_candy(self, _card_type: int) -> None:
        self.sound.emit("prop")
        self.notice = CANDY_TEXT
        self._notice_left = NOTICE_MS
        for plant in self.plants:
            plant.health = 100
        self.coin -= self.cards[CANDY].coin_cost

    def _plant_at(self, brick: Brick, row: int, col: int) -> None:
        if self.selected in (NO_SELECTION, SHOVEL, ROCKET, CANDY):
            return
        plant = make_plant(self.selected, row, col)
        plant.x, plant.y = _cell_position(row, col)
        self.sound.emit("plant")
        self.star -= self.cards[self.selected].star_cost
        self._wire_plant(plant, brick)
        self.plants.append(plant)
        self.selected = NO_SELECTION
        brick.is_plant = True

    def _wire_plant(self, plant: Plant, brick: Brick) -> None:
        plant.clicked.connect(lambda: self._shovel(plant, brick))
        plant.attack.connect(self._add_bullet)
        if isinstance(plant, Stars):
            plant.star_generated.connect(self._add_bullet)
        plant.dead.connect(lambda _plant: self._remove_plant(plant, brick))

    def _shovel(self, plant: Plant, brick: Brick) -> None:
        if self.selected != SHOVEL:
            return
        if plant in self.plants:
            self.plants.remove(plant)
        self.selected = NO_SELECTION
        brick.is_plant = False

    def _remove_plant(self, plant: Plant, brick: Brick) -> None:
        if plant in self.plants:
            self.plants.remove(plant)
        brick.is_plant = False

    def _add_bullet(self, bullet: Bullet) -> None:
        self.bullets.append(bullet)
        bullet.destroyed.connect(lambda: self._remove_bullet(bullet))
        if isinstance(bullet, Starb):
            bullet.picked_up.connect(lambda: self._collect_star(bullet))

    def _remove_bullet(self, bullet: Bullet) -> None:
        if bullet in self.bullets:
            self.bullets.remove(bullet)

    def _collect_star(self, star: Starb) -> None:
        if star not in self.bullets:
            return
        self.star += STAR_PICKUP
        self.bullets.remove(star)

    def _add_human(self, human: Human) -> None:
        self.humans.append(human)
        human.dead.connect(self._on_human_dead)

    def _on_human_dead(self, human: Human) -> None:
        if human not in self.humans:
            return
        if self.rng.randint(1, 10) <= COIN_DROP_CHANCE:
            coin = Coinb()
            coin.setup_animation(human.x, human.y)
            coin.x, coin.y = human.x + 40, human.y + 10
            coin.start_bounce(human.x, human.y)
            self.coins.append(coin)
            self.sound.emit("money")
            coin.picked_up.connect(lambda: self._collect_coin(coin))
        self.humans.remove(human)

    def _collect_coin(self, coin: Coinb) -> None:
        if coin not in self.coins:
            return
        self.coin += COIN_PICKUP
        self.coins.remove(coin)

    def _on_human_timer(self) -> None:
        self.generate_humans()
        self.human_timer.start(HUMAN_INTERVAL)

    # player actions

    def select_card(self, card_type: int) -> bool:
        """Click the card of a type; return whether it was selectable."""
        return self.cards[card_type].click()

    def click_brick(self, row: int, col: int) -> bool:
        """Click the grid cell at ``row``, ``col`` (1-based)."""
        brick = self._brick(row, col)
        if brick is None:
            return False
        return brick.click()

    def click_plant(self, plant: Plant) -> None:
        plant.click()

    def pick_up(self, item: Starb) -> None:
        item.pick_up()

    def _halt(self) -> None:
        for plant in self.plants:
            plant.stop()
        for human in self.humans:
            human.stop()
        for brick in self._all_bricks():
            brick.is_pause = True
        self.detect_timer.stop()

    def pause(self) -> None:
        """Freeze the level and open the pause dialog."""
        if self.paused:
            return
        self._halt()
        self.human_g_remaining_time = self.human_timer.remaining_time()
        self.human_timer.stop()
        self.paused = True
        self.sound.emit("pause")

    def resume(self) -> None:
        """Close the pause dialog and continue unless the level is over."""
        self.paused = False
        if self.lost or self.won:
            return
        for plant in self.plants:
            plant.start()
        for human in self.humans:
            human.start()
        for brick in self._all_bricks():
            brick.is_pause = False
        self.detect_timer.start(FRAME_MS)
        self.human_timer.start(max(self.human_g_remaining_time, 0))

    # simulation

    def generate_humans(self) -> None:
        """Spawn the next wave of humans."""
        if self.round >= self.max_round:
            return
        self.human_dense = self.round // 2 + 1
        self.human_type_limit = 5 if self.round // 5 > 3 else self.round // 5 + 2
        self.round += 1
        for index in range(self.human_dense):
            row = self.rng.randint(1, 5)
            human_type = self.rng.randint(1, self.human_type_limit)
            human = Human(human_type, row)
            human.x = WIDTH - 0.1 * index * human.width
            human.y = 90 + (row - 1) * 53
            if human_type == 1:
                human.x, human.y = WIDTH - 0.3 * human.width, 100 + (row - 1) * 53
            elif human_type == 5:
                human.x, human.y = WIDTH - 0.3 * human.width, 87 + (row - 1) * 53
            self._add_human(human)
        self.sound.emit("human_generate")

    def _lose(self) -> None:
        self.lost = True
        self._halt()
        self.human_timer.stop()
        self._banner = LOSE_TEXT
        self.sound.emit("lose")

    def _win(self) -> None:
        self.won = True
        self._halt()
        self.human_timer.stop()
        self._banner = WIN_TEXT
        self.sound.emit("win")

    def tick(self) -> None:
        """Run one frame of the level."""
        self.update_star_countdown += 1
        if self.update_star_countdown >= STAR_PERIOD:
            self.star += STAR_INCOME
            self.update_star_countdown -= STAR_PERIOD

        for card in self.cards:
            blocked = self.star < card.star_cost or self.coin < card.coin_cost
            card.set_disabled_state(blocked)
            card.selectable = not blocked

        rows = {human.row for human in self.humans}
        for plant in self.plants:
            if isinstance(plant, Stars):
                continue
            if plant.row in rows:
                if not plant.a_timer.is_active():
                    plant.a_timer.start(PLANT_ATTACK_TIME)
            else:
                plant.a_timer.stop()

        crossed = False
        for human in self.humans:
            if human.moveable:
                human.x -= human.speed
            if human.x <= LOSE_LINE:
                crossed = True
        if crossed:
            self._lose()

        for bullet in reversed(list(self.bullets)):
            if isinstance(bullet, Starb) or bullet not in self.bullets:
                continue
            bullet.x += BULLET_SPEED
            if bullet.x >= WIDTH:
                bullet.destroy()

        for bullet in reversed(list(self.bullets)):
            if isinstance(bullet, Starb) or bullet not in self.bullets:
                continue
            self._collide(bullet)

        for human in list(self.humans):
            if human not in self.humans:
                continue
            area = human.bounding_rect()
            blocked = False
            for plant in list(self.plants):
                if plant not in self.plants or not area.intersects(plant.bounding_rect()):
                    continue
                if plant.row != human.row:
                    return
                human.moveable = False
                blocked = True
                human.attack_countdown += 1
                if human.attack_countdown >= ATTACK_FRAMES:
                    human.attack(plant)
                    human.attack_countdown = 0
                break
            if not blocked:
                human.moveable = True

        if not self.won and self.round >= self.max_round and not self.humans:
            self._win()

    def _collide(self, bullet: Bullet) -> None:
        area = bullet.bounding_rect()
        for human in list(self.humans):
            if human not in self.humans or not area.intersects(human.bounding_rect()):
                continue
            if isinstance(bullet, Heart):
                if human not in bullet.hit_humans:
                    human.get_hurt(bullet.damage)
                    bullet.hit_humans.append(human)
                continue
            if isinstance(bullet, Blood):
                if not human.is_blood:
                    human.is_blood = True
                    human.blood()
                human.get_hurt(bullet.damage)
                bullet.destroy()
            elif isinstance(bullet, Snow):
                if not human.is_slow:
                    human.is_slow = True
                    human.slow()
                human.get_hurt(bullet.damage)
                bullet.destroy()
            elif isinstance(bullet, Rocketb):
                human.get_hurt(bullet.damage)
            else:
                human.get_hurt(bullet.damage)
                bullet.destroy()
            return

    def _step(self, ms: int) -> None:
        for plant in list(self.plants):
            plant.advance(ms)
        for human in list(self.humans):
            human.advance(ms)
        for bullet in list(self.bullets):
            if isinstance(bullet, Starb):
                bullet.advance(ms)
        for coin in list(self.coins):
            coin.advance(ms)
        if self.notice is not None:
            self._notice_left -= ms
            if self._notice_left <= 0:
                self.notice = None
        self.detect_timer.advance(ms)
        self.human_timer.advance(ms)

    def advance(self, ms: int) -> None:
        """Let ``ms`` milliseconds of game time pass."""
        if ms < 0:
            raise ValueError("cannot advance by a negative time")
        while ms > 0:
            step = ms
            for timer in (self.detect_timer, self.human_timer):
                if timer.is_active():
                    step = min(step, timer.remaining_time())
            step = max(step, 1) if step > 0 else 0
            self._step(step)
            ms -= step

    # persistence

    def to_archive(self) -> Archive:
        """Snapshot the level as an archive."""
        return Archive(
            human_g_remaining_time=self.human_g_remaining_time,
            star=self.star,
            coin=self.coin,
            update_star_countdown=self.update_star_countdown,
            max_round=self.max_round,
            round=self.round,
            map=[[brick is not None for brick in row] for row in self.bricks],
            plants=[
                PlantRecord(p.plant_type, p.health, p.row, p.col, p.remaining_time, p.x, p.y)
                for p in self.plants
            ],
            bullets=[BulletRecord(bullet_code(b), b.x, b.y) for b in self.bullets],
            humans=[
                HumanRecord(
                    h.human_type,
                    h.health,
                    h.row,
                    h.attack_countdown,
                    h.is_blood,
                    h.is_slow,
                    h.x,
                    h.y,
                )
                for h in self.humans
            ],
        )

    def save(self) -> None:
        """Write the level to the save file next to the loaded one."""
        save_archive(self.to_archive(), self.directory / ARCHIVE_NAME)

    def close(self) -> None:
        """Save an unfinished level, or reset the save file after a finished one."""
        if not self.won and not self.lost:
            self.save()
            return
        try:
            content = (self.directory / NORMAL_NAME).read_text(encoding="utf-8")
        except FileNotFoundError:
            content = DEFAULT_ARCHIVE_TEXT
        (self.directory / ARCHIVE_NAME).write_text(content, encoding="utf-8")