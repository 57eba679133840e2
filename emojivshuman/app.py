"""The start menu, switching between levels, and the window loop."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

from .bullet import Coinb, Heart, Blood, Snow, Rocketb, Starb
from .card import Card
from .core import Rect, Signal
from .game import ARCHIVE_NAME, HEIGHT, NORMAL_NAME, WIDTH, Game
from .human import Human
from .menus import CORNER_RADIUS, TEXT_COLOR, PauseButton

TITLE = "Emoji-Vs-Human"
MENU_WIDTH = 794
MENU_HEIGHT = 446
FPS = 30

CARD_SIZE = (64.0, 90.0)
CELL_SIZE = (80.0, 53.0)

MENU_BACKGROUND = (60, 120, 60)
LAWN_COLOR = (90, 160, 70)
BRICK_COLOR = (110, 180, 85)
BLOCKED_COLOR = (120, 120, 120)
CARD_COLOR = (230, 210, 150)
PLANT_COLOR = (250, 210, 40)
HUMAN_COLOR = (200, 150, 120)
STAR_COLOR = (255, 230, 0)
COIN_COLOR = (240, 180, 20)
LABEL_COLOR = (0, 0, 0)
ALERT_COLOR = (255, 0, 0)

_BULLET_COLORS = {
    Heart: (230, 60, 120),
    Blood: (170, 0, 0),
    Snow: (150, 200, 255),
    Rocketb: (90, 90, 90),
}

_PROP_LABELS = ((7, "10金币", (60, 130)), (8, "5金币", (60, 205)))


def _card_rect(card: Card) -> Rect:
    width, height = CARD_SIZE
    return Rect(card.x, card.y, width * card.scale, height * card.scale)


def _cell_rect(x: float, y: float) -> Rect:
    return Rect(x, y, *CELL_SIZE)


class App:
    """The start window: opens a new or saved level and returns to the menu."""

    def __init__(self, directory: str | Path = ".", rng: Any = None) -> None:
        self.directory = Path(directory)
        self.rng = rng
        self.game: Game | None = None
        self.sound = Signal()
        self.start_button = PauseButton("新的游戏")
        self.start_button.x = (MENU_WIDTH - 100) * 0.5
        self.start_button.y = MENU_HEIGHT * 0.5
        self.load_button = PauseButton("读取存档")
        self.load_button.x = (MENU_WIDTH - 100) * 0.5
        self.load_button.y = MENU_HEIGHT * 0.6
        self.start_button.clicked.connect(self.new_game)
        self.load_button.clicked.connect(self.load_game)
        self._pressed: tuple[PauseButton, float, float] | None = None

    @property
    def showing_menu(self) -> bool:
        return self.game is None

    def _open(self, name: str) -> Game:
        game = Game(self.directory / name, rng=self.rng)
        game.back_requested.connect(self.back_to_menu)
        game.restart_requested.connect(self.restart)
        self.game = game
        return game

    def new_game(self) -> Game:
        """Start a fresh level from the normal save file."""
        self.sound.emit("button_click")
        return self._open(NORMAL_NAME)

    def load_game(self) -> Game:
        """Resume the level kept in the archive save file."""
        self.sound.emit("button_click")
        return self._open(ARCHIVE_NAME)

    def back_to_menu(self) -> None:
        """Close the running level and show the start menu again."""
        game, self.game = self.game, None
        self._pressed = None
        if game is not None:
            game.close()

    def restart(self) -> Game:
        """Replace the running level with a fresh one."""
        old = self.game
        self._pressed = None
        game = self._open(NORMAL_NAME)
        if old is not None:
            old.close()
        return game

    # input

    def _buttons(self) -> list[tuple[PauseButton, float, float]]:
        game = self.game
        if game is None:
            return [(b, b.x, b.y) for b in (self.start_button, self.load_button)]
        if game.paused:
            widget = game.pause_widget
            return [(b, widget.x + b.x, widget.y + b.y) for b in widget.buttons]
        return [(game.menu_button, game.menu_button.x, game.menu_button.y)]

    def _mouse_down(self, x: float, y: float) -> None:
        for button, left, top in self._buttons():
            if button.rect.contains(x - left, y - top):
                button.press()
                self._pressed = (button, left, top)
                return
        game = self.game
        if game is None or game.paused:
            return
        pickables = [*game.coins, *(b for b in game.bullets if isinstance(b, Starb))]
        for item in reversed(pickables):
            if item.bounding_rect().contains(x, y):
                game.pick_up(item)
                return
        for card in game.cards:
            if _card_rect(card).contains(x, y):
                game.select_card(card.card_type)
                return
        for plant in reversed(game.plants):
            if plant.bounding_rect().contains(x, y):
                game.click_plant(plant)
                return
        for row in game.bricks:
            for brick in row:
                if brick is not None and _cell_rect(brick.x, brick.y).contains(x, y):
                    game.click_brick(brick.row, brick.col)
                    return

    def _mouse_up(self, x: float, y: float) -> None:
        if self._pressed is None:
            return
        button, left, top = self._pressed
        self._pressed = None
        button.release(x - left, y - top)

    def _mouse_move(self, x: float, y: float) -> None:
        for button, left, top in self._buttons():
            if button.rect.contains(x - left, y - top):
                button.hover_enter()
            else:
                button.hover_leave()
        if self.game is not None:
            for card in self.game.cards:
                if _card_rect(card).contains(x, y):
                    card.hover_enter()
                else:
                    card.hover_leave()

    # drawing

    def _draw(self, pygame: Any, screen: Any, font: Any, big: Any) -> None:
        def box(rect: Rect) -> Any:
            return pygame.Rect(int(rect.x), int(rect.y), int(rect.width), int(rect.height))

        def text(surface_font: Any, value: str, color: tuple[int, int, int], pos: tuple[float, float]) -> None:
            screen.blit(surface_font.render(value, True, color), (int(pos[0]), int(pos[1])))

        def centered(surface_font: Any, lines: str, color: tuple[int, int, int], top: float) -> None:
            for index, line in enumerate(lines.split("\n")):
                image = surface_font.render(line, True, color)
                left = (screen.get_width() - image.get_width()) * 0.5
                screen.blit(image, (int(left), int(top + index * image.get_height())))

        def button(item: PauseButton, left: float, top: float) -> None:
            area = box(Rect(left, top, item.rect.width, item.rect.height))
            pygame.draw.rect(screen, item.fill_color(), area, border_radius=CORNER_RADIUS)
            image = font.render(item.text, True, TEXT_COLOR)
            screen.blit(image, image.get_rect(center=area.center))

        game = self.game
        if game is None:
            screen.fill(MENU_BACKGROUND)
            centered(big, TITLE, TEXT_COLOR, MENU_HEIGHT * 0.2)
            for item, left, top in self._buttons():
                button(item, left, top)
            return

        screen.fill(LAWN_COLOR)
        for row in game.bricks:
            for brick in row:
                if brick is not None:
                    pygame.draw.rect(screen, BRICK_COLOR, box(_cell_rect(brick.x, brick.y)), 1)
        for i, row in enumerate(game.bricks):
            for j, brick in enumerate(row):
                if brick is None:
                    area = Rect(195 + j * 83, 80 + i * 53, *CELL_SIZE)
                    pygame.draw.rect(screen, BLOCKED_COLOR, box(area))

        for card in game.cards:
            if card.opacity < 0.5:
                continue
            area = box(_card_rect(card))
            pygame.draw.rect(screen, CARD_COLOR, area)
            cost = card.star_cost or card.coin_cost
            text(font, str(cost), LABEL_COLOR, (area.x + 2, area.bottom - 20))
            if card.overlay is not None:
                shade = pygame.Surface(area.size, pygame.SRCALPHA)
                shade.fill(card.overlay)
                screen.blit(shade, area.topleft)
        for card_type, label, pos in _PROP_LABELS:
            text(font, label, LABEL_COLOR, pos)

        for plant in game.plants:
            area = box(plant.bounding_rect())
            pygame.draw.ellipse(screen, PLANT_COLOR, area)
            text(font, str(plant.health), LABEL_COLOR, (area.x, area.bottom))
        for human in game.humans:
            area = box(human.bounding_rect())
            pygame.draw.rect(screen, HUMAN_COLOR, area)
            text(font, str(human.health), LABEL_COLOR, (area.x, area.y - 18))
        for bullet in game.bullets:
            color = STAR_COLOR if isinstance(bullet, Starb) else (255, 255, 255)
            for kind, kind_color in _BULLET_COLORS.items():
                if isinstance(bullet, kind):
                    color = kind_color
            pygame.draw.ellipse(screen, color, box(bullet.bounding_rect()))
        for coin in game.coins:
            pygame.draw.ellipse(screen, COIN_COLOR, box(coin.bounding_rect()))

        text(font, str(game.star), LABEL_COLOR, (164, 68))
        text(font, str(game.coin), LABEL_COLOR, (30, 63))
        text(font, f"波数:{game.round} / {game.max_round}", ALERT_COLOR, (WIDTH * 0.8, HEIGHT * 0.9))
        if game.notice is not None:
            centered(big, game.notice, ALERT_COLOR, HEIGHT * 0.4)
        if game.banner is not None:
            centered(big, game.banner, ALERT_COLOR, HEIGHT * 0.3)

        button(game.menu_button, game.menu_button.x, game.menu_button.y)
        if game.paused:
            widget = game.pause_widget
            area = box(Rect(widget.x, widget.y, widget.rect.width, widget.rect.height))
            pygame.draw.rect(screen, widget.background, area)
            border_color, border_width = widget.border
            pygame.draw.rect(screen, border_color, area, border_width)
            for item, left, top in self._buttons():
                button(item, left, top)

    def run(self) -> None:
        """Open the window and run until it is closed."""
        import pygame

        pygame.init()
        try:
            screen = pygame.display.set_mode((WIDTH, HEIGHT))
            pygame.display.set_caption(TITLE)
            font = pygame.font.SysFont("arial", 17, bold=True)
            big = pygame.font.SysFont("arial", 35, bold=True)
            clock = pygame.time.Clock()
            running = True
            while running:
                elapsed = clock.tick(FPS)
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        self._mouse_down(*event.pos)
                    elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                        self._mouse_up(*event.pos)
                    elif event.type == pygame.MOUSEMOTION:
                        self._mouse_move(*event.pos)
                if self.game is not None:
                    self.game.advance(elapsed)
                self._draw(pygame, screen, font, big)
                pygame.display.flip()
        finally:
            self.back_to_menu()
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="emojivshuman", description="Defend the lawn with emojis.")
    parser.add_argument(
        "--directory",
        default=".",
        help="directory that holds Normal.txt and Archive.txt",
    )
    args = parser.parse_args(argv)
    App(args.directory).run()
    return 0