from __future__ import annotations

from typing import Sequence

from ..core.config import SimulationConfig
from ..core.food import Food
from ..core.lifeform import LifeForm
from ..core.rng import DeterministicRng
from ..utils.math2d import clamp_value
from . import steering


def bounce(position: float, velocity: float, radius: float, extent: float) -> tuple[float, float]:
    if position - radius < 0:
        return radius, -velocity
    if position + radius > extent:
        return extent - radius, -velocity
    return position, velocity


def update_life_form(
    life_form: LifeForm,
    foods: Sequence[Food],
    config: SimulationConfig,
    rng: DeterministicRng,
) -> None:
    species = config.life_forms
    life_form.energy -= species.energy_loss_per_step

    position = life_form.position
    velocity = life_form.velocity
    x = position.x + velocity.x
    y = position.y + velocity.y
    vx = velocity.x
    vy = velocity.y
    x, vx = bounce(x, vx, species.radius, config.world_width)
    y, vy = bounce(y, vy, species.radius, config.world_height)
    position.x = x
    position.y = y
    velocity.x = vx
    velocity.y = vy

    steering.steer(life_form, foods, species, rng)

    life_form.energy = clamp_value(life_form.energy, 0.0, species.max_energy)
