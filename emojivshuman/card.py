"""Selectable cards for emojis, the shovel and props."""

from __future__ import annotations

from .core import Signal

ARROW_CURSOR = "arrow"
POINTING_HAND_CURSOR = "pointing_hand"

# card type -> (image, stars needed, coins needed, scale, opacity)
_CARDS: dict[int, tuple[str, int, int, float, float]] = {
    0: ("Card/Sweat.png", 0, 0, 0.8, 0.01),
    1: ("Card/Sweat.png", 50, 0, 0.8, 1.0),
    2: ("Card/Stars.png", 50, 0, 0.8, 1.0),
    3: ("Card/Love.png", 75, 0, 0.8, 1.0),
    4: ("Card/Hot.png", 75, 0, 0.8, 1.0),
    5: ("Card/Cold.png", 75, 0, 0.8, 1.0),
    6: ("Card/Laugh.png", 100, 0, 0.8, 1.0),
    7: ("Props/Rocket.png", 0, 10, 0.5, 1.0),
    8: ("Props/Suger.png", 0, 5, 0.5, 1.0),
}

DISABLED_OVERLAY = (128, 128, 128, 128)


class Card:
    """A card of one type; type 0 is the shovel, 7 and 8 are props."""

    def __init__(self, card_type: int) -> None:
        try:
            image, stars, coins, scale, opacity = _CARDS[card_type]
        except KeyError:
            raise ValueError(f"unknown card type: {card_type}") from None
        self.card_type = card_type
        self.image = image
        self.star_cost = stars
        self.coin_cost = coins
        self.scale = scale
        self.opacity = opacity
        self.x = 0.0
        self.y = 0.0
        self.selectable = False
        self.disabled = False
        self.cursor = ARROW_CURSOR
        self.clicked = Signal()

    @property
    def overlay(self) -> tuple[int, int, int, int] | None:
        """The grey RGBA tint drawn over a disabled card."""
        return DISABLED_OVERLAY if self.disabled else None

    def click(self) -> bool:
        if not self.selectable:
            return False
        self.clicked.emit(self.card_type)
        return True

    def set_disabled_state(self, disabled: bool) -> bool:
        """Set the greyed-out state; return whether it changed."""
        if self.disabled == disabled:
            return False
        self.disabled = disabled
        return True

    def hover_enter(self) -> None:
        if self.selectable:
            self.cursor = POINTING_HAND_CURSOR

    def hover_leave(self) -> None:
        self.cursor = ARROW_CURSOR