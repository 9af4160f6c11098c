from __future__ import annotations

from dataclasses import dataclass

from pygame.math import Vector2

Color = tuple[int, int, int]


@dataclass(slots=True)
class LifeForm:
    id: int
    position: Vector2
    velocity: Vector2
    energy: float
    speed_factor: float
    color: Color
    generation: int = 0

    @property
    def alive(self) -> bool:
        return self.energy > 0
