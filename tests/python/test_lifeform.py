from __future__ import annotations

from pygame.math import Vector2

from alsim.sim.core.config import FoodConfig, LifeFormConfig, SimulationConfig
from alsim.sim.core.food import Food
from alsim.sim.core.lifeform import LifeForm
from alsim.sim.core.world import World


def _make_life_form(life_form_id: int, energy: float = 5.0) -> LifeForm:
    return LifeForm(
        id=life_form_id,
        position=Vector2(),
        velocity=Vector2(),
        energy=energy,
        speed_factor=1.0,
        color=(1, 2, 3),
    )


def test_entities_use_slots():
    life_form = _make_life_form(1)
    food = Food(position=Vector2())

    assert not hasattr(life_form, "__dict__")
    assert not hasattr(food, "__dict__")
    assert hasattr(LifeForm, "__slots__")
    assert hasattr(Food, "__slots__")
    assert food.present


def test_alive_tracks_positive_energy():
    assert _make_life_form(1, energy=0.01).alive
    assert not _make_life_form(2, energy=0.0).alive
    assert not _make_life_form(3, energy=-1.0).alive


def test_spawned_life_forms_do_not_share_vectors():
    config = SimulationConfig(
        seed=3,
        life_forms=LifeFormConfig(initial_count=2),
        food=FoodConfig(initial_count=0),
    )
    world = World(config)
    first, second = world.life_forms

    assert first.position is not second.position
    assert first.velocity is not second.velocity
    first.position.x += 1000.0
    assert second.position.x <= config.world_width
