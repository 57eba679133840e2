import random

import pytest

from emojivshuman.archive import DEFAULT_ARCHIVE_TEXT, ArchiveError, load_archive
from emojivshuman.bullet import Rocketb, Starb
from emojivshuman.game import (
    CANDY_TEXT,
    HUMAN_INTERVAL,
    LOSE_TEXT,
    NO_SELECTION,
    WIN_TEXT,
    Game,
)


class _Rng:
    def __init__(self, *values):
        self.values = list(values)

    def randint(self, low, high):
        value = self.values.pop(0) if self.values else low
        return min(max(value, low), high)


@pytest.fixture
def game(tmp_path):
    g = Game(tmp_path / "Normal.txt", rng=_Rng())
    g.tick()
    return g


def test_new_game_writes_default_archive(tmp_path):
    g = Game(tmp_path / "Normal.txt", rng=_Rng())
    assert (tmp_path / "Normal.txt").read_text(encoding="utf-8") == DEFAULT_ARCHIVE_TEXT
    assert (g.star, g.coin, g.max_round, g.round) == (100, 10, 30, 0)
    assert all(brick is not None for row in g.bricks for brick in row)
    assert len(g.bricks) == 5


def test_cards_become_selectable_after_first_frame(tmp_path):
    g = Game(tmp_path / "Normal.txt", rng=_Rng())
    assert g.select_card(1) is False
    g.tick()
    assert g.select_card(1) is True
    assert g.selected == 1


def test_planting_costs_stars_and_occupies_brick(game):
    assert game.select_card(1)
    before = game.star
    assert game.click_brick(2, 3)
    plant = game.plants[0]
    brick = game.bricks[1][2]
    assert (plant.row, plant.col) == (2, 3)
    assert (plant.x, plant.y) == (brick.x, brick.y)
    assert game.star == before - game.cards[1].star_cost
    assert brick.is_plant
    assert game.selected == NO_SELECTION
    assert game.click_brick(2, 3) is False


def test_click_without_selection_plants_nothing(game):
    game.click_brick(1, 1)
    assert game.plants == []


def test_shovel_removes_plant(game):
    game.select_card(1)
    game.click_brick(1, 1)
    plant = game.plants[0]
    game.click_plant(plant)
    assert game.plants == [plant]
    game.select_card(0)
    game.click_plant(plant)
    assert game.plants == []
    assert not game.bricks[0][0].is_plant
    assert game.selected == NO_SELECTION


def test_star_income_every_150_frames(game):
    before = game.star
    for _ in range(149):
        game.tick()
    assert game.star == before + 30
    assert game.update_star_countdown == 0


def test_generate_humans_waves(game):
    game.generate_humans()
    assert game.round == 1
    assert len(game.humans) == 1
    assert game.humans[0].row == 1
    game.round = 2
    game.generate_humans()
    assert game.round == 3
    assert len(game.humans) == 3
    game.round = game.max_round
    game.generate_humans()
    assert game.round == game.max_round
    assert len(game.humans) == 3


def test_generate_humans_uses_random_row_and_type(tmp_path):
    g = Game(tmp_path / "Normal.txt", rng=_Rng(3, 2))
    g.generate_humans()
    human = g.humans[0]
    assert (human.row, human.human_type) == (3, 2)


def test_plant_shoots_human_in_its_row(tmp_path):
    g = Game(tmp_path / "Normal.txt", rng=_Rng(1, 2))
    g.tick()
    g.select_card(1)
    g.click_brick(1, 1)
    g.generate_humans()
    human = g.humans[0]
    g.advance(9000)
    assert human.health < human.max_health


def test_human_crossing_line_loses(game):
    game.generate_humans()
    game.humans[0].x = 50
    game.tick()
    assert game.lost
    assert game.banner == LOSE_TEXT
    assert not game.detect_timer.is_active()
    game.pause()
    assert game.banner is None
    game.resume()
    assert game.banner == LOSE_TEXT
    assert not game.detect_timer.is_active()


def test_last_round_without_humans_wins(game):
    game.round = game.max_round
    game.tick()
    assert game.won
    assert game.banner == WIN_TEXT


def test_pause_and_resume(game):
    game.pause()
    assert game.paused
    assert game.click_brick(1, 1) is False
    assert not game.detect_timer.is_active()
    assert game.human_g_remaining_time == HUMAN_INTERVAL
    game.resume()
    assert game.detect_timer.is_active()
    assert game.human_timer.remaining_time() == game.human_g_remaining_time


def test_menu_button_pauses(game):
    sounds = []
    game.sound.connect(sounds.append)
    game.menu_button.press()
    game.menu_button.release(1, 1)
    assert game.paused
    assert "pause" in sounds


def test_pause_dialog_buttons_emit_requests(game):
    events = []
    game.restart_requested.connect(lambda: events.append("restart"))
    game.back_requested.connect(lambda: events.append("back"))
    for button in (game.pause_widget.restart_button, game.pause_widget.exit_button):
        button.press()
        button.release(1, 1)
    assert events == ["restart", "back"]


def test_rocket_prop(game):
    before = game.coin
    assert game.select_card(7)
    rockets = [b for b in game.bullets if isinstance(b, Rocketb)]
    assert len(rockets) == 5
    assert game.coin == before - game.cards[7].coin_cost
    assert game.selected == 7


def test_candy_heals_plants(game):
    game.select_card(1)
    game.click_brick(1, 1)
    plant = game.plants[0]
    plant.get_hurt(30)
    assert game.select_card(8)
    assert plant.health == 100
    assert game.notice == CANDY_TEXT
    game.advance(2000)
    assert game.notice is None


def test_dead_human_may_drop_coin(tmp_path):
    g = Game(tmp_path / "Normal.txt", rng=_Rng(1, 2, 1))
    g.generate_humans()
    human = g.humans[0]
    human.get_hurt(human.max_health)
    assert g.humans == []
    assert len(g.coins) == 1
    before = g.coin
    g.pick_up(g.coins[0])
    assert g.coin == before + 1
    assert g.coins == []


def test_dead_human_without_drop(tmp_path):
    g = Game(tmp_path / "Normal.txt", rng=_Rng(1, 2, 5))
    g.generate_humans()
    g.humans[0].get_hurt(10000)
    assert g.humans == []
    assert g.coins == []


def test_star_producer_and_pickup(tmp_path):
    g = Game(tmp_path / "Normal.txt", rng=random.Random(3))
    g.tick()
    g.select_card(2)
    g.click_brick(1, 1)
    g.advance(10000)
    stars = [b for b in g.bullets if isinstance(b, Starb)]
    assert len(stars) == 1
    before = g.star
    g.pick_up(stars[0])
    assert g.star == before + 25
    assert stars[0] not in g.bullets


def test_save_and_load_round_trip(game, tmp_path):
    game.select_card(1)
    game.click_brick(2, 3)
    game.save()
    other = Game(tmp_path / "Archive.txt", rng=_Rng())
    assert [(p.plant_type, p.row, p.col) for p in other.plants] == [(1, 2, 3)]
    assert other.star == game.star
    assert other.bricks[1][2].is_plant
    assert other.to_archive() == game.to_archive()


def test_close_unfinished_saves(game, tmp_path):
    game.star = 77
    game.close()
    assert load_archive(tmp_path / "Archive.txt").star == 77


def test_close_after_loss_resets_archive(game, tmp_path):
    game.star = 77
    game.save()
    assert load_archive(tmp_path / "Archive.txt").star == 77
    game.generate_humans()
    game.humans[0].x = 10
    game.tick()
    assert game.lost
    game.close()
    reset = load_archive(tmp_path / "Archive.txt")
    assert (reset.star, reset.coin, reset.round) == (100, 10, 0)
    assert (tmp_path / "Archive.txt").read_text(encoding="utf-8") == (
        tmp_path / "Normal.txt"
    ).read_text(encoding="utf-8")


def test_map_with_missing_brick(tmp_path):
    text = DEFAULT_ARCHIVE_TEXT.replace("MAP:\n1 1 1 1 1 1 1", "MAP:\n0 1 1 1 1 1 1")
    path = tmp_path / "Custom.txt"
    path.write_text(text, encoding="utf-8")
    g = Game(path, rng=_Rng())
    assert g.bricks[0][0] is None
    assert g.click_brick(1, 1) is False
    assert g.to_archive().map[0][0] is False


def test_plant_on_missing_brick_is_rejected(tmp_path):
    text = DEFAULT_ARCHIVE_TEXT.replace(
        "MAP:\n1 1 1 1 1 1 1", "MAP:\n0 1 1 1 1 1 1"
    ).replace("PlantList:\n0", "PlantList:\n1\n1 100 1 1 0 195 90")
    path = tmp_path / "Custom.txt"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(ArchiveError):
        Game(path, rng=_Rng())


def test_unknown_bullet_code_is_rejected(tmp_path):
    text = DEFAULT_ARCHIVE_TEXT.replace("BulletList:\n0", "BulletList:\n1\n9 10 10")
    path = tmp_path / "Custom.txt"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(ValueError):
        Game(path, rng=_Rng())


def test_advance_rejects_negative(game):
    with pytest.raises(ValueError):
        game.advance(-1)