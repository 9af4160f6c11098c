from __future__ import annotations

from dataclasses import dataclass

from pygame.math import Vector2


@dataclass(slots=True)
class Food:
    position: Vector2
    # Cleared on consumption; absent entries are purged at the end of the interaction pass.
    present: bool = True
