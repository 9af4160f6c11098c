from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

import pygame

from ..sim.core.config import AppConfig
from ..sim.core.world import World
from .logging_config import configure_logging
from .render import draw_snapshot

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Artificial Life Simulator"


def _quit_requested(events: list[pygame.event.Event]) -> bool:
    for event in events:
        if event.type == pygame.QUIT:
            return True
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return True
    return False


def run_viewer(config: AppConfig, max_frames: Optional[int] = None) -> int:
    simulation = config.simulation
    world = World(simulation)
    pygame.init()
    frames = 0
    try:
        screen = pygame.display.set_mode((int(simulation.world_width), int(simulation.world_height)))
        pygame.display.set_caption(WINDOW_TITLE)
        logger.info("Press ESC or close the window to quit.")
        while max_frames is None or frames < max_frames:
            if _quit_requested(pygame.event.get()):
                break
            world.simulate_step()
            draw_snapshot(screen, world.snapshot(), config.viewer)
            pygame.display.flip()
            frames += 1
            if config.viewer.frame_delay_ms > 0:
                pygame.time.delay(config.viewer.frame_delay_ms)
    finally:
        pygame.quit()
    logger.info(
        "Simulation ended after %d frames: %d life forms, %d food",
        frames,
        len(world.life_forms),
        len(world.food),
    )
    return frames


def main() -> None:
    parser = argparse.ArgumentParser(description="Artificial life simulation viewer")
    parser.add_argument("--config", type=Path, default=None, help="YAML configuration file")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--frames", type=int, default=None, help="Stop after this many frames")
    parser.add_argument("--log-level", default=None, help="Logging level (default: ALSIM_LOG_LEVEL or INFO)")
    args = parser.parse_args()
    configure_logging(level=args.log_level)
    config = AppConfig.from_yaml(args.config) if args.config else AppConfig()
    if args.seed is not None:
        config.simulation.seed = args.seed
    run_viewer(config, max_frames=args.frames)


if __name__ == "__main__":
    main()
