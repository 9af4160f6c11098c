from __future__ import annotations

import pytest
from pytest import approx

from alsim.sim.core.config import FoodConfig, LifeFormConfig, SimulationConfig
from alsim.sim.core.rng import DeterministicRng
from alsim.sim.core.world import World
from alsim.sim.systems import lifecycle
from alsim.sim.systems.lifecycle import apply_turnover, mutate_speed_factor


def _empty_world(max_life_forms: int = 200, seed: int = 21) -> World:
    config = SimulationConfig(
        seed=seed,
        life_forms=LifeFormConfig(initial_count=0, max_count=max_life_forms),
        food=FoodConfig(initial_count=0),
    )
    return World(config)


def test_mutated_speed_factor_stays_within_bounds():
    world = _empty_world()
    for base in (0.5, 1.0, 2.0):
        for _ in range(200):
            mutated = mutate_speed_factor(world, base)
            assert 0.5 <= mutated <= 2.0
            assert abs(mutated - base) <= 0.2 + 1e-12


def test_dead_life_forms_are_dropped():
    world = _empty_world()
    world.spawn_life_form(10.0, 10.0, 0.0, 1.0, (1, 1, 1))
    world.spawn_life_form(20.0, 20.0, 30.0, 1.0, (2, 2, 2))
    world.spawn_life_form(30.0, 30.0, -1.0, 1.0, (3, 3, 3))

    births, deaths = apply_turnover(world)

    assert (births, deaths) == (0, 2)
    assert [life_form.id for life_form in world.life_forms] == [1]


def test_reproduction_halves_parent_and_spawns_offspring():
    world = _empty_world()
    world.spawn_life_form(200.0, 150.0, 90.0, 1.0, (12, 34, 56))

    births, deaths = apply_turnover(world)

    assert (births, deaths) == (1, 0)
    parent, child = world.life_forms
    assert parent.id == 0
    assert child.id == 1
    assert parent.energy == approx(45.0)
    assert child.energy == approx(45.0)
    assert child.color == (12, 34, 56)
    assert child.generation == 1
    assert 0.8 <= child.speed_factor <= 1.2
    assert abs(child.position.x - parent.position.x) <= 5.0
    assert abs(child.position.y - parent.position.y) <= 5.0


def test_offspring_rejected_when_scanned_generation_is_full():
    world = _empty_world(max_life_forms=3)
    for index in range(3):
        world.spawn_life_form(100.0 * (index + 1), 100.0, 90.0, 1.0, (index, index, index))

    births, deaths = apply_turnover(world)

    assert (births, deaths) == (0, 0)
    assert [life_form.id for life_form in world.life_forms] == [0, 1, 2]
    # The first two parents were halved before their offspring were rejected;
    # the last one had no headroom and was carried over unchanged.
    assert [life_form.energy for life_form in world.life_forms] == approx([45.0, 45.0, 90.0])


def test_turnover_leaves_generation_untouched_on_failure(monkeypatch):
    world = _empty_world()
    world.spawn_life_form(10.0, 10.0, 90.0, 1.0, (1, 1, 1))
    world.spawn_life_form(20.0, 20.0, 0.0, 1.0, (2, 2, 2))
    before = world.life_forms

    def _explode(*args, **kwargs):
        raise RuntimeError("spawn failed")

    monkeypatch.setattr(lifecycle, "spawn_life_form", _explode)

    with pytest.raises(RuntimeError):
        apply_turnover(world)

    assert world.life_forms == before
    assert world.life_forms[0].energy == approx(90.0)
    assert world.life_forms[1].energy == approx(0.0)


def test_population_never_exceeds_capacity():
    config = SimulationConfig(
        seed=77,
        life_forms=LifeFormConfig(initial_count=10, max_count=25, reproduction_threshold=10.0),
        food=FoodConfig(initial_count=80, max_count=100),
    )
    world = World(config, rng=DeterministicRng(77))
    for _ in range(150):
        world.simulate_step()
        assert len(world.life_forms) <= 25
        assert len(world.food) <= 100
