"""The menu button and the pause dialog."""

from __future__ import annotations

from .core import Rect, Signal

NORMAL_COLOR = (165, 42, 42)
HOVER_COLOR = (139, 69, 19)
PRESS_COLOR = (101, 67, 33)
TEXT_COLOR = (255, 255, 255)
FONT = ("Arial", 12, "bold")
CORNER_RADIUS = 5

BUTTON_WIDTH = 100
BUTTON_HEIGHT = 40
BUTTON_SPACING = 20
BUTTONS_TOP = 30
BUTTONS_LEFT = 50

WIDGET_WIDTH = 200
WIDGET_HEIGHT = 250
WIDGET_BACKGROUND = (240, 240, 240)
WIDGET_BORDER = ((0, 0, 0), 2)


class PauseButton:
    """A rounded text button that emits ``clicked`` on a press then release inside it."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.rect = Rect(0, 0, BUTTON_WIDTH, BUTTON_HEIGHT)
        self.x = 0.0
        self.y = 0.0
        self.hovered = False
        self.pressed = False
        self.clicked = Signal()

    def press(self) -> None:
        self.pressed = True

    def release(self, x: float, y: float) -> bool:
        """Release at ``(x, y)`` in button coordinates; return whether it clicked."""
        fired = self.pressed and self.rect.contains(x, y)
        self.pressed = False
        if fired:
            self.clicked.emit()
        return fired

    def hover_enter(self) -> None:
        self.hovered = True

    def hover_leave(self) -> None:
        self.hovered = False

    def fill_color(self) -> tuple[int, int, int]:
        if self.pressed:
            return PRESS_COLOR
        if self.hovered:
            return HOVER_COLOR
        return NORMAL_COLOR

    def scene_rect(self) -> Rect:
        return Rect(self.x + self.rect.x, self.y + self.rect.y, self.rect.width, self.rect.height)


class PauseWidget:
    """The pause dialog with continue, restart and back-to-menu buttons."""

    def __init__(self) -> None:
        self.rect = Rect(0, 0, WIDGET_WIDTH, WIDGET_HEIGHT)
        self.background = WIDGET_BACKGROUND
        self.border = WIDGET_BORDER
        self.x = 0.0
        self.y = 0.0
        self.close = Signal()
        self.exit = Signal()
        self.restart = Signal()
        self.close_button = PauseButton("继续游戏")
        self.restart_button = PauseButton("重新开始")
        self.exit_button = PauseButton("返回主界面")
        self.close_button.clicked.connect(self.close.emit)
        self.restart_button.clicked.connect(self.restart.emit)
        self.exit_button.clicked.connect(self.exit.emit)
        for index, button in enumerate(self.buttons):
            button.x = BUTTONS_LEFT
            button.y = BUTTONS_TOP + index * (BUTTON_HEIGHT + BUTTON_SPACING)

    @property
    def buttons(self) -> tuple[PauseButton, PauseButton, PauseButton]:
        return self.close_button, self.restart_button, self.exit_button

    def button_at(self, x: float, y: float) -> PauseButton | None:
        """The button under ``(x, y)`` in dialog coordinates, if any."""
        for button in self.buttons:
            if button.scene_rect().contains(x, y):
                return button
        return None