from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class TickMetrics:
    tick: int
    population: int
    births: int
    deaths: int
    food: int
    food_consumed: int
    food_respawned: int
    average_energy: float
    average_speed_factor: float
    max_generation: int
    tick_duration_ms: float = 0.0
