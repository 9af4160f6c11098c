from __future__ import annotations

import math
from typing import TYPE_CHECKING

from pygame.math import Vector2

if TYPE_CHECKING:
    from ..core.rng import DeterministicRng


def distance_sq(x1: float, y1: float, x2: float, y2: float) -> float:
    dx = x1 - x2
    dy = y1 - y2
    return dx * dx + dy * dy


def clamp_value(value: float, min_value: float, max_value: float) -> float:
    return max(min_value, min(max_value, value))


def velocity_towards(dx: float, dy: float, speed: float) -> Vector2:
    # atan2(0, 0) is 0, so a zero offset heads along +x
    angle = math.atan2(dy, dx)
    return Vector2(math.cos(angle) * speed, math.sin(angle) * speed)


def random_velocity(rng: DeterministicRng, max_speed: float, speed_factor: float) -> Vector2:
    scale = max_speed * speed_factor
    vx = (rng.next_float() - 0.5) * scale
    vy = (rng.next_float() - 0.5) * scale
    return Vector2(vx, vy)
