"""A plantable tile of the lawn grid."""

from __future__ import annotations

from .core import Signal


class Brick:
    """A grid cell that reports clicks while it is empty and the game runs."""

    image = "others/Brick.png"
    scale = 0.66
    opacity = 0.01

    def __init__(self, row: int, col: int) -> None:
        self.row = row
        self.col = col
        self.x = 0.0
        self.y = 0.0
        self.is_plant = False
        self.is_pause = False
        self.clicked = Signal()

    def click(self) -> bool:
        """Emit ``clicked(row, col)`` unless occupied or paused."""
        if self.is_plant or self.is_pause:
            return False
        self.clicked.emit(self.row, self.col)
        return True