from __future__ import annotations

from typing import TYPE_CHECKING

from ..utils.math2d import distance_sq
from .spawning import spawn_food_anywhere

if TYPE_CHECKING:
    from ..core.world import World

RESPAWN_CHANCE = 0.8


def resolve_interactions(world: World) -> tuple[int, int]:
    """Feed life forms from overlapping food and compact the pool.

    Life forms are visited in collection order, so the earliest one wins any
    contested item. Food respawned during the pass is appended to the pool and
    can be eaten later in the same pass.
    """
    config = world._config
    reach = config.life_forms.radius + config.food.radius
    reach_sq = reach * reach
    energy_gain = config.food.energy_gain
    pool = world._food
    consumed = 0
    respawned = 0

    for life_form in world._life_forms:
        x = life_form.position.x
        y = life_form.position.y
        index = 0
        while index < len(pool):
            food = pool[index]
            index += 1
            if not food.present:
                continue
            if distance_sq(x, y, food.position.x, food.position.y) >= reach_sq:
                continue
            life_form.energy += energy_gain
            food.present = False
            consumed += 1
            if world._rng.next_float() < RESPAWN_CHANCE and spawn_food_anywhere(world, pool):
                respawned += 1

    pool[:] = [food for food in pool if food.present]
    return consumed, respawned
