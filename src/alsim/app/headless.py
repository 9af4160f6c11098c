from __future__ import annotations

import argparse
import csv
import json
import logging
from pathlib import Path
from typing import Optional

from ..sim.core.config import SimulationConfig
from ..sim.core.world import World
from ..sim.types.metrics import TickMetrics
from .logging_config import configure_logging

logger = logging.getLogger(__name__)

_HEADER = [
    "tick",
    "population",
    "births",
    "deaths",
    "food",
    "food_consumed",
    "avg_energy",
    "avg_speed_factor",
    "max_generation",
    "tick_ms",
]


def _format_row(metrics: TickMetrics, tick_ms: float) -> list[object]:
    return [
        metrics.tick,
        metrics.population,
        metrics.births,
        metrics.deaths,
        metrics.food,
        metrics.food_consumed,
        f"{metrics.average_energy:.4f}",
        f"{metrics.average_speed_factor:.4f}",
        metrics.max_generation,
        f"{tick_ms:.3f}",
    ]


def _summary_stats(values: list[float]) -> dict[str, float]:
    if not values:
        return {"min": 0.0, "max": 0.0, "avg": 0.0}
    return {
        "min": float(min(values)),
        "max": float(max(values)),
        "avg": float(sum(values) / len(values)),
    }


def run_headless(
    steps: int,
    seed: Optional[int],
    log_path: Optional[Path],
    deterministic_log: bool = False,
    summary_path: Optional[Path] = None,
    config_path: Optional[Path] = None,
    stop_when_extinct: bool = False,
) -> int:
    config = SimulationConfig.from_yaml(config_path) if config_path else SimulationConfig()
    if seed is not None:
        config.seed = seed
    world = World(config)

    writer = None
    csv_file = None
    if log_path:
        csv_file = Path(log_path).open("w", newline="")
        writer = csv.writer(csv_file)
        writer.writerow(_HEADER)

    population_series: list[float] = []
    food_series: list[float] = []
    peak_population = (len(world.life_forms), 0)
    extinct_at: Optional[int] = None
    ticks_run = 0

    try:
        for _ in range(steps):
            metrics = world.simulate_step()
            ticks_run += 1
            tick_ms = 0.0 if deterministic_log else metrics.tick_duration_ms
            population_series.append(float(metrics.population))
            food_series.append(float(metrics.food))
            if metrics.population > peak_population[0]:
                peak_population = (metrics.population, metrics.tick)
            if writer:
                writer.writerow(_format_row(metrics, tick_ms))
            if metrics.population == 0 and extinct_at is None:
                extinct_at = metrics.tick
                if stop_when_extinct:
                    break
    finally:
        if csv_file:
            csv_file.close()

    logger.info(
        "Headless run finished after %d ticks: %d life forms, %d food",
        ticks_run,
        len(world.life_forms),
        len(world.food),
    )

    if summary_path:
        summary = {
            "steps": steps,
            "seed": config.seed,
            "ticks_run": ticks_run,
            "deterministic_log": deterministic_log,
            "extinct_at": extinct_at,
            "final": {"population": len(world.life_forms), "food": len(world.food)},
            "population": _summary_stats(population_series),
            "food": _summary_stats(food_series),
            "peaks": {"population": {"value": peak_population[0], "tick": peak_population[1]}},
        }
        Path(summary_path).write_text(json.dumps(summary, indent=2))
    return ticks_run


def main() -> None:
    parser = argparse.ArgumentParser(description="Headless artificial life simulation")
    parser.add_argument("--steps", type=int, default=3000)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--config", type=Path, default=None, help="YAML configuration file")
    parser.add_argument("--log", type=Path, default=None, help="CSV file to write metrics")
    parser.add_argument(
        "--summary",
        type=Path,
        default=None,
        help="Optional JSON file to write summary stats for the run.",
    )
    parser.add_argument(
        "--deterministic-log",
        action="store_true",
        help="Write deterministic CSV (tick_ms is forced to 0.000 so identical seeds match).",
    )
    parser.add_argument(
        "--stop-when-extinct",
        action="store_true",
        help="Stop as soon as no life forms remain.",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: ALSIM_LOG_LEVEL or INFO)")
    args = parser.parse_args()
    configure_logging(level=args.log_level)
    run_headless(
        args.steps,
        args.seed,
        args.log,
        deterministic_log=args.deterministic_log,
        summary_path=args.summary,
        config_path=args.config,
        stop_when_extinct=args.stop_when_extinct,
    )


if __name__ == "__main__":
    main()
