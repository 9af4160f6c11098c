from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from ..core.config import SPEED_FACTOR_BOUNDS
from ..core.lifeform import LifeForm
from ..utils.math2d import clamp_value
from .spawning import spawn_life_form

if TYPE_CHECKING:
    from ..core.world import World

SPEED_FACTOR_MUTATION = 0.2
OFFSPRING_JITTER = 5.0


def mutate_speed_factor(world: World, speed_factor: float) -> float:
    mutated = speed_factor + world._rng.next_range(-SPEED_FACTOR_MUTATION, SPEED_FACTOR_MUTATION)
    return clamp_value(mutated, SPEED_FACTOR_BOUNDS[0], SPEED_FACTOR_BOUNDS[1])


def apply_turnover(world: World) -> tuple[int, int]:
    """Build the next generation from the current one.

    Offspring are spawned into the generation being scanned, so they are
    visited later in the same pass and count against its capacity. The parent
    is appended before its offspring is spawned; when the scanned generation
    is already full the offspring is silently lost.
    """
    species = world._config.life_forms
    max_count = species.max_count
    current: list[LifeForm] = list(world._life_forms)
    next_generation: list[LifeForm] = []
    births = 0
    deaths = 0

    index = 0
    while index < len(current):
        life_form = current[index]
        index += 1
        if life_form.energy <= 0:
            deaths += 1
            continue

        if life_form.energy >= species.reproduction_threshold and len(next_generation) + 1 < max_count:
            parent = replace(
                life_form,
                position=life_form.position.copy(),
                velocity=life_form.velocity.copy(),
                energy=life_form.energy / 2,
            )
            child_speed_factor = mutate_speed_factor(world, parent.speed_factor)
            next_generation.append(parent)
            child_x = parent.position.x + world._rng.next_range(-OFFSPRING_JITTER, OFFSPRING_JITTER)
            child_y = parent.position.y + world._rng.next_range(-OFFSPRING_JITTER, OFFSPRING_JITTER)
            if spawn_life_form(
                world,
                current,
                child_x,
                child_y,
                parent.energy,
                child_speed_factor,
                parent.color,
                generation=parent.generation + 1,
            ):
                births += 1
        elif len(next_generation) < max_count:
            next_generation.append(life_form)

    world._life_forms = next_generation
    return births, deaths
