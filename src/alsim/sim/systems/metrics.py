from __future__ import annotations

from typing import Sequence

from ..core.lifeform import LifeForm
from ..types.metrics import TickMetrics


def population_stats(life_forms: Sequence[LifeForm]) -> tuple[int, float, float, int]:
    population = len(life_forms)
    if population == 0:
        return 0, 0.0, 0.0, 0
    energy_sum = 0.0
    speed_sum = 0.0
    max_generation = 0
    for life_form in life_forms:
        energy_sum += life_form.energy
        speed_sum += life_form.speed_factor
        if life_form.generation > max_generation:
            max_generation = life_form.generation
    return population, energy_sum / population, speed_sum / population, max_generation


def create_metrics(
    tick: int,
    births: int,
    deaths: int,
    food: int,
    food_consumed: int,
    food_respawned: int,
    duration_ms: float,
    stats: tuple[int, float, float, int],
) -> TickMetrics:
    population, avg_energy, avg_speed_factor, max_generation = stats
    return TickMetrics(
        tick=tick,
        population=population,
        births=births,
        deaths=deaths,
        food=food,
        food_consumed=food_consumed,
        food_respawned=food_respawned,
        average_energy=avg_energy,
        average_speed_factor=avg_speed_factor,
        max_generation=max_generation,
        tick_duration_ms=duration_ms,
    )
