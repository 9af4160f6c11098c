from __future__ import annotations

import pygame

from ..sim.core.config import ViewerConfig
from ..sim.types.snapshot import Snapshot


def energy_bar_color(energy: float, max_energy: float) -> tuple[int, int, int]:
    ratio = max(0.0, min(1.0, energy / max_energy))
    return (int(255 * (1.0 - ratio)), int(255 * ratio), 0)


def _to_pixel(x: float, y: float) -> tuple[int, int]:
    return (int(round(x)), int(round(y)))


def draw_snapshot(surface: pygame.Surface, snapshot: Snapshot, viewer: ViewerConfig) -> None:
    surface.fill(viewer.background_color)
    metadata = snapshot.metadata
    food_radius = max(1, int(metadata.food_radius))
    life_form_radius = max(1, int(metadata.life_form_radius))

    for food in snapshot.food:
        pygame.draw.circle(surface, viewer.food_color, _to_pixel(food["x"], food["y"]), food_radius)

    for life_form in snapshot.life_forms:
        energy = life_form["energy"]
        if energy <= 0:
            continue
        px, py = _to_pixel(life_form["x"], life_form["y"])
        pygame.draw.circle(surface, life_form["color"], (px, py), life_form_radius)
        ratio = max(0.0, min(1.0, energy / metadata.max_energy))
        bar_width = int(life_form_radius * 2 * ratio)
        if bar_width > 0:
            bar = pygame.Rect(
                px - life_form_radius,
                py - life_form_radius - viewer.energy_bar_offset,
                bar_width,
                viewer.energy_bar_height,
            )
            pygame.draw.rect(surface, energy_bar_color(energy, metadata.max_energy), bar)
