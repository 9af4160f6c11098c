from __future__ import annotations

from typing import Sequence

from ..core.config import LifeFormConfig
from ..core.food import Food
from ..core.lifeform import LifeForm
from ..core.rng import DeterministicRng
from ..utils.math2d import distance_sq, random_velocity, velocity_towards

WANDER_CHANCE = 0.01


def nearest_food(life_form: LifeForm, foods: Sequence[Food]) -> Food | None:
    """Return the present food closest to ``life_form``.

    Ties keep the first item in scan order.
    """
    best: Food | None = None
    best_dist_sq = 0.0
    x = life_form.position.x
    y = life_form.position.y
    for food in foods:
        if not food.present:
            continue
        dist_sq = distance_sq(x, y, food.position.x, food.position.y)
        if best is None or dist_sq < best_dist_sq:
            best = food
            best_dist_sq = dist_sq
    return best


def steer(life_form: LifeForm, foods: Sequence[Food], config: LifeFormConfig, rng: DeterministicRng) -> None:
    target = nearest_food(life_form, foods)
    if target is not None:
        life_form.velocity = velocity_towards(
            target.position.x - life_form.position.x,
            target.position.y - life_form.position.y,
            config.max_speed * life_form.speed_factor,
        )
        return
    if rng.next_float() < WANDER_CHANCE:
        life_form.velocity = random_velocity(rng, config.max_speed, life_form.speed_factor)
