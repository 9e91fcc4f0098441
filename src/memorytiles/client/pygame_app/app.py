from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

import pygame  # type: ignore[import-not-found]

from memorytiles.controller import GameController
from memorytiles.engine.round import RoundConfig
from memorytiles.engine.types import SymbolPool
from memorytiles.paths import Paths
from memorytiles.services.content import ContentService
from memorytiles.services.scheduler import FrameScheduler
from memorytiles.services.telemetry import TelemetryService

from .asset_manager import AssetManager


@dataclass
class SceneTransition:
    next_scene: "Scene"


class Scene(Protocol):
    def handle_event(self, event: pygame.event.Event) -> None: ...
    def update(self, dt: float) -> SceneTransition | None: ...
    def render(self, screen: pygame.Surface) -> None: ...


@dataclass
class GameContext:
    screen: pygame.Surface
    clock: pygame.time.Clock
    paths: Paths
    assets: AssetManager
    content: ContentService
    telemetry: TelemetryService
    scheduler: FrameScheduler
    initial_count: int | None = None
    seed: int | None = None

    # Loaded at boot
    symbols: Optional[SymbolPool] = None
    rules: Optional[RoundConfig] = None
    controller: Optional[GameController] = None


class App:
    def __init__(self, ctx: GameContext, initial_scene: Scene) -> None:
        self.ctx = ctx
        self.scene: Scene = initial_scene
        self.running = True

    def run(self) -> int:
        while self.running:
            dt = self.ctx.clock.tick(60) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                    break
                self.scene.handle_event(event)

            # deferred engine work (clock ticks, mismatch clear) runs on frame time
            self.ctx.scheduler.advance(dt)

            tr = self.scene.update(dt)
            if tr is not None:
                self._leave_scene()
                self.scene = tr.next_scene

            self.scene.render(self.ctx.screen)
            pygame.display.flip()

        self._leave_scene()
        if self.ctx.controller is not None:
            self.ctx.controller.close()
        return 0

    def _leave_scene(self) -> None:
        on_exit = getattr(self.scene, "on_exit", None)
        if on_exit is not None:
            on_exit()
