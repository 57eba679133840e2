import pytest

from emojivshuman.human import Human
from emojivshuman.plant import Plant


def test_stats_from_type():
    boy = Human(1, 3)
    assert (boy.health, boy.max_health, boy.speed, boy.damage) == (100, 100, 1, 20)
    assert boy.row == 3
    punch = Human(5, 1)
    assert punch.damage == 200
    assert punch.health == 800


def test_unknown_type_raises():
    with pytest.raises(ValueError):
        Human(6, 1)


def test_initial_image_is_first_stage():
    assert Human(2, 1).image_name() == "Enemy/1Father.png"


def test_image_stage_follows_health():
    boy = Human(1, 1)
    boy.get_hurt(30)
    assert boy.health == boy.max_health - 30
    assert boy.image_name() == "Enemy/2Boy.png"
    boy.get_hurt(65)
    assert boy.image_name() == "Enemy/5Boy.png"


def test_dead_emitted_with_self():
    boy = Human(1, 1)
    deaths = []
    boy.dead.connect(deaths.append)
    boy.get_hurt(99)
    assert deaths == []
    boy.get_hurt(1)
    assert deaths == [boy]


def test_flash_fades_out():
    human = Human(3, 1)
    assert human.flash_alpha == 0
    human.get_hurt(1)
    assert human.flash_alpha == 200
    human.advance(50)
    assert 0 < human.flash_alpha < 200
    human.advance(50)
    assert human.flash_alpha == 0


def test_blood_only_when_flagged():
    human = Human(2, 1)
    human.blood()
    assert not human.blood_timer.is_active()
    human.is_blood = True
    human.blood()
    start = human.health
    human.advance(1000)
    assert human.health == start - 5


def test_resume_restarts_blood_timer_short():
    human = Human(2, 1)
    human.is_blood = True
    human.blood()
    human.stop()
    assert not human.blood_timer.is_active()
    human.start()
    assert human.blood_timer.interval == 100


def test_slow_only_when_flagged():
    human = Human(2, 1)
    base = human.speed
    human.slow()
    assert human.speed == base
    human.is_slow = True
    human.slow()
    assert human.speed == pytest.approx(base * 0.6)


def test_attack_hurts_plant():
    human = Human(5, 1)
    plant = Plant(1, 1, 1)
    before = plant.health
    human.attack(plant)
    assert plant.health == before - human.damage


def test_bounding_rect_at_position():
    human = Human(1, 1)
    human.x, human.y = 500.0, 90.0
    rect = human.bounding_rect()
    assert (rect.x, rect.y) == (500.0, 90.0)
    assert rect.width > 0 and rect.height > 0