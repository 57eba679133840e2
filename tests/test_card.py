import pytest

from emojivshuman.card import ARROW_CURSOR, DISABLED_OVERLAY, POINTING_HAND_CURSOR, Card


@pytest.mark.parametrize(
    "card_type, stars, coins",
    [(0, 0, 0), (1, 50, 0), (2, 50, 0), (3, 75, 0), (6, 100, 0), (7, 0, 10), (8, 0, 5)],
)
def test_costs(card_type, stars, coins):
    card = Card(card_type)
    assert (card.star_cost, card.coin_cost) == (stars, coins)


def test_unknown_type_raises():
    with pytest.raises(ValueError):
        Card(9)


def test_click_requires_selectable():
    card = Card(3)
    calls = []
    card.clicked.connect(calls.append)
    assert card.click() is False
    card.selectable = True
    assert card.click() is True
    assert calls == [3]


def test_disabled_state_reports_change_and_overlay():
    card = Card(1)
    assert card.overlay is None
    assert card.set_disabled_state(True) is True
    assert card.set_disabled_state(True) is False
    assert card.overlay == DISABLED_OVERLAY
    card.set_disabled_state(False)
    assert card.overlay is None


def test_hover_cursor_only_when_selectable():
    card = Card(2)
    card.hover_enter()
    assert card.cursor == ARROW_CURSOR
    card.selectable = True
    card.hover_enter()
    assert card.cursor == POINTING_HAND_CURSOR
    card.hover_leave()
    assert card.cursor == ARROW_CURSOR