from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pygame.math import Vector2

from ..core.food import Food
from ..core.lifeform import Color, LifeForm
from ..utils.math2d import random_velocity

if TYPE_CHECKING:
    from ..core.world import World

logger = logging.getLogger(__name__)


def spawn_life_form(
    world: World,
    population: list[LifeForm],
    x: float,
    y: float,
    energy: float,
    speed_factor: float,
    color: Color,
    generation: int = 0,
) -> bool:
    config = world._config.life_forms
    if len(population) >= config.max_count:
        logger.debug("Life form capacity %d reached, spawn rejected", config.max_count)
        return False
    life_form = LifeForm(
        id=world._next_id,
        position=Vector2(x, y),
        velocity=random_velocity(world._rng, config.max_speed, speed_factor),
        energy=energy,
        speed_factor=speed_factor,
        color=color,
        generation=generation,
    )
    world._next_id += 1
    population.append(life_form)
    return True


def spawn_food(world: World, pool: list[Food], x: float, y: float) -> bool:
    max_count = world._config.food.max_count
    # Absent entries still occupy a slot until the pool is compacted.
    if len(pool) >= max_count:
        logger.debug("Food capacity %d reached, spawn rejected", max_count)
        return False
    pool.append(Food(position=Vector2(x, y)))
    return True


def spawn_food_anywhere(world: World, pool: list[Food]) -> bool:
    x = world._rng.next_float() * world._config.world_width
    y = world._rng.next_float() * world._config.world_height
    return spawn_food(world, pool, x, y)
