from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

SPEED_FACTOR_BOUNDS = (0.5, 2.0)


@dataclass
class LifeFormConfig:
    initial_count: int = 10
    max_count: int = 200
    radius: float = 8.0
    max_energy: float = 100.0
    reproduction_threshold: float = 80.0
    energy_loss_per_step: float = 0.05
    # Simulation units per tick at speed_factor 1.0
    max_speed: float = 1.5
    initial_speed_factor: float = 1.0


@dataclass
class FoodConfig:
    initial_count: int = 50
    max_count: int = 100
    radius: float = 3.0
    energy_gain: float = 20.0


@dataclass
class SimulationConfig:
    world_width: float = 800.0
    world_height: float = 600.0
    seed: int = 42
    config_version: str = "v1"
    life_forms: LifeFormConfig = field(default_factory=LifeFormConfig)
    food: FoodConfig = field(default_factory=FoodConfig)

    @staticmethod
    def from_yaml(path: Path) -> "SimulationConfig":
        data = yaml.safe_load(Path(path).read_text()) or {}
        return load_config(data.get("simulation", data))


@dataclass
class ViewerConfig:
    frame_delay_ms: int = 10
    background_color: tuple[int, int, int] = (173, 216, 230)
    food_color: tuple[int, int, int] = (76, 175, 80)
    energy_bar_height: int = 3
    energy_bar_offset: int = 5


@dataclass
class AppConfig:
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    viewer: ViewerConfig = field(default_factory=ViewerConfig)

    @staticmethod
    def from_yaml(path: Path) -> "AppConfig":
        data = yaml.safe_load(Path(path).read_text()) or {}
        return load_app_config(data)


def validate_config(config: SimulationConfig) -> SimulationConfig:
    if config.world_width <= 0 or config.world_height <= 0:
        raise ValueError(
            f"World extents must be positive, got {config.world_width}x{config.world_height}"
        )
    life_forms = config.life_forms
    food = config.food
    for name, value in (
        ("life_forms.initial_count", life_forms.initial_count),
        ("life_forms.max_count", life_forms.max_count),
        ("food.initial_count", food.initial_count),
        ("food.max_count", food.max_count),
    ):
        if value < 0:
            raise ValueError(f"{name} must not be negative, got {value}")
    if life_forms.radius < 0 or food.radius < 0:
        raise ValueError("Collision radii must not be negative")
    if life_forms.max_energy <= 0:
        raise ValueError(f"life_forms.max_energy must be positive, got {life_forms.max_energy}")
    if life_forms.max_speed <= 0:
        raise ValueError(f"life_forms.max_speed must be positive, got {life_forms.max_speed}")
    low, high = SPEED_FACTOR_BOUNDS
    if not low <= life_forms.initial_speed_factor <= high:
        raise ValueError(
            f"life_forms.initial_speed_factor must lie in [{low}, {high}], got {life_forms.initial_speed_factor}"
        )
    if life_forms.energy_loss_per_step < 0:
        raise ValueError(
            f"life_forms.energy_loss_per_step must not be negative, got {life_forms.energy_loss_per_step}"
        )
    if food.energy_gain < 0:
        raise ValueError(f"food.energy_gain must not be negative, got {food.energy_gain}")
    return config


def _color(value: tuple[int, int, int] | list[int] | None, default: tuple[int, int, int]) -> tuple[int, int, int]:
    if value is None:
        return default
    if not isinstance(value, (tuple, list)) or len(value) != 3:
        raise ValueError(f"Colors need three channels, got {value!r}")
    return (int(value[0]), int(value[1]), int(value[2]))


def load_config(raw: dict) -> SimulationConfig:
    life_forms = LifeFormConfig(**raw.get("life_forms", {}))
    food = FoodConfig(**raw.get("food", {}))
    sim_values = {k: v for k, v in raw.items() if k not in {"life_forms", "food"}}
    return validate_config(SimulationConfig(life_forms=life_forms, food=food, **sim_values))


def load_app_config(raw: dict) -> AppConfig:
    default_viewer = ViewerConfig()
    viewer_raw = dict(raw.get("viewer", {}))
    viewer = ViewerConfig(
        background_color=_color(viewer_raw.pop("background_color", None), default_viewer.background_color),
        food_color=_color(viewer_raw.pop("food_color", None), default_viewer.food_color),
        **viewer_raw,
    )
    flat = {k: v for k, v in raw.items() if k != "viewer"}
    return AppConfig(simulation=load_config(raw.get("simulation", flat)), viewer=viewer)
