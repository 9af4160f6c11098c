from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .metrics import TickMetrics


@dataclass(frozen=True, slots=True)
class Snapshot:
    tick: int
    metrics: TickMetrics
    life_forms: Tuple[Dict[str, Any], ...]
    food: Tuple[Dict[str, float], ...]
    world: "SnapshotWorld"
    metadata: "SnapshotMetadata"


@dataclass(frozen=True, slots=True)
class SnapshotWorld:
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class SnapshotMetadata:
    seed: int
    config_version: str
    max_energy: float
    life_form_radius: float
    food_radius: float
