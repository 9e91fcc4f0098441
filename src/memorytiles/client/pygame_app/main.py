from __future__ import annotations

import argparse

import pygame  # type: ignore[import-not-found]

from memorytiles.paths import get_paths
from memorytiles.services.content import ContentService
from memorytiles.services.scheduler import FrameScheduler
from memorytiles.services.telemetry import TelemetryService

from .app import App, GameContext
from .asset_manager import AssetManager
from .scenes.boot import BootScene


def main() -> int:
    parser = argparse.ArgumentParser(prog="memorytiles")
    parser.add_argument("--width", type=int, default=1024)
    parser.add_argument("--height", type=int, default=768)
    parser.add_argument("--cards", type=int, default=None, help="Cards in the first round (default from rules.json).")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible decks.")
    args = parser.parse_args()

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption("Memory Tiles")

    clock = pygame.time.Clock()
    paths = get_paths()

    ctx = GameContext(
        screen=screen,
        clock=clock,
        paths=paths,
        assets=AssetManager(),
        content=ContentService(data_dir=paths.data_dir, schema_dir=paths.schema_dir),
        telemetry=TelemetryService(paths.telemetry_path),
        scheduler=FrameScheduler(),
        initial_count=args.cards,
        seed=args.seed,
    )

    app = App(ctx, BootScene(ctx))
    try:
        return app.run()
    finally:
        pygame.quit()


if __name__ == "__main__":
    raise SystemExit(main())
