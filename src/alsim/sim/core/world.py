from __future__ import annotations

import logging
from time import perf_counter
from typing import Any, Dict, Tuple

from .config import SimulationConfig, validate_config
from .food import Food
from .lifeform import Color, LifeForm
from .rng import DeterministicRng
from ..systems import interactions, lifecycle, metrics as metrics_system, movement, spawning
from ..types.metrics import TickMetrics
from ..types.snapshot import Snapshot, SnapshotMetadata, SnapshotWorld

logger = logging.getLogger(__name__)


class World:
    def __init__(self, config: SimulationConfig, rng: DeterministicRng | None = None):
        self._config = validate_config(config)
        self._rng = rng if rng is not None else DeterministicRng(config.seed)
        self._life_forms: list[LifeForm] = []
        self._food: list[Food] = []
        self._next_id = 0
        self._tick = 0
        self._metrics: TickMetrics | None = None
        self._bootstrap()

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def life_forms(self) -> Tuple[LifeForm, ...]:
        return tuple(self._life_forms)

    @property
    def food(self) -> Tuple[Food, ...]:
        return tuple(self._food)

    @property
    def tick(self) -> int:
        return self._tick

    @property
    def metrics(self) -> TickMetrics | None:
        return self._metrics

    def reset(self) -> None:
        self._life_forms.clear()
        self._food.clear()
        self._rng.reset()
        self._next_id = 0
        self._tick = 0
        self._metrics = None
        self._bootstrap()

    def spawn_life_form(
        self, x: float, y: float, energy: float, speed_factor: float, color: Color
    ) -> bool:
        return spawning.spawn_life_form(self, self._life_forms, x, y, energy, speed_factor, color)

    def spawn_food(self, x: float, y: float) -> bool:
        return spawning.spawn_food(self, self._food, x, y)

    def simulate_step(self) -> TickMetrics:
        start = perf_counter()
        config = self._config
        had_life = bool(self._life_forms)

        food_snapshot = tuple(self._food)
        for life_form in self._life_forms:
            movement.update_life_form(life_form, food_snapshot, config, self._rng)

        consumed, respawned = interactions.resolve_interactions(self)
        births, deaths = lifecycle.apply_turnover(self)

        self._tick += 1
        duration_ms = (perf_counter() - start) * 1000.0
        self._metrics = metrics_system.create_metrics(
            self._tick,
            births,
            deaths,
            len(self._food),
            consumed,
            respawned,
            duration_ms,
            metrics_system.population_stats(self._life_forms),
        )
        if had_life and not self._life_forms:
            logger.info("Population extinct at tick %d (%d food remaining)", self._tick, len(self._food))
        return self._metrics

    def snapshot(self) -> Snapshot:
        metrics = self._metrics
        if metrics is None:
            metrics = metrics_system.create_metrics(
                self._tick, 0, 0, len(self._food), 0, 0, 0.0, metrics_system.population_stats(self._life_forms)
            )
        return Snapshot(
            tick=self._tick,
            metrics=metrics,
            life_forms=tuple(self._life_form_snapshot(life_form) for life_form in self._life_forms),
            food=tuple({"x": food.position.x, "y": food.position.y} for food in self._food if food.present),
            world=SnapshotWorld(width=self._config.world_width, height=self._config.world_height),
            metadata=SnapshotMetadata(
                seed=self._rng.seed,
                config_version=self._config.config_version,
                max_energy=self._config.life_forms.max_energy,
                life_form_radius=self._config.life_forms.radius,
                food_radius=self._config.food.radius,
            ),
        )

    def _bootstrap(self) -> None:
        species = self._config.life_forms
        width = self._config.world_width
        height = self._config.world_height
        for _ in range(species.initial_count):
            color = self._rng.next_color()
            x = self._rng.next_float() * width
            y = self._rng.next_float() * height
            self.spawn_life_form(x, y, species.max_energy / 2.0, species.initial_speed_factor, color)
        for _ in range(self._config.food.initial_count):
            spawning.spawn_food_anywhere(self, self._food)
        logger.info(
            "World initialised: %d life forms, %d food in %.0fx%.0f (seed %d)",
            len(self._life_forms),
            len(self._food),
            width,
            height,
            self._rng.seed,
        )

    @staticmethod
    def _life_form_snapshot(life_form: LifeForm) -> Dict[str, Any]:
        return {
            "id": life_form.id,
            "x": life_form.position.x,
            "y": life_form.position.y,
            "vx": life_form.velocity.x,
            "vy": life_form.velocity.y,
            "energy": life_form.energy,
            "speed_factor": life_form.speed_factor,
            "color": life_form.color,
            "generation": life_form.generation,
        }
