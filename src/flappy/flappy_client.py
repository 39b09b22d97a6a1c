#!/usr/bin/env python3
"""
flappy_client.py

pygame host for the simulation: window, fixed-timestep loop, rendering and input.
The engine never sees pygame; this module only reads its state and calls
flap() / reset().
"""

import argparse
import sys
from typing import List, Optional

import pygame
from loguru import logger

from .config import ConfigError, ScoringPolicy, SimulationConfig
from .constants import (
    RENDER_FPS, TICK_TIME, FIXED_STEP, WINDOW_TITLE,
    COLOR_SKY, COLOR_BIRD, COLOR_PIPE, COLOR_TEXT, COLOR_GAME_OVER,
    SCORE_POS, GAME_OVER_POS, GAME_OVER_TEXT, FONT_SIZE
)
from .data_models import GamePhase, SimulationState
from .physics_engine import SimulationEngine

FLAP_KEY = pygame.K_SPACE
RESTART_KEY = pygame.K_RETURN
MAX_TICKS_PER_FRAME = 5         # Drop time instead of spiralling after a stall


# ----------------- Rendering -----------------

class Renderer:
    """Draws a SimulationState onto a surface. Read-only with respect to the state."""

    def __init__(self, screen: pygame.Surface, config: SimulationConfig):
        self.screen = screen
        self.config = config
        if not pygame.font.get_init():
            pygame.font.init()
        self.font = pygame.font.Font(None, FONT_SIZE)

    def draw(self, state: SimulationState):
        cfg = self.config
        screen = self.screen

        screen.fill(COLOR_SKY)

        flyer = state.flyer
        pygame.draw.ellipse(screen, COLOR_BIRD, (flyer.x, flyer.y, flyer.size, flyer.size))

        for gate in state.gates:
            pygame.draw.rect(screen, COLOR_PIPE, gate.top_wall(cfg.gate_width))
            pygame.draw.rect(screen, COLOR_PIPE,
                             gate.bottom_wall(cfg.gate_width, cfg.gap_height, cfg.screen_height))

        score_text = self.font.render(f"Score: {state.score}", True, COLOR_TEXT)
        screen.blit(score_text, SCORE_POS)

        if state.phase is GamePhase.OVER:
            over_text = self.font.render(GAME_OVER_TEXT, True, COLOR_GAME_OVER)
            screen.blit(over_text, GAME_OVER_POS)


# ----------------- Input -----------------

class InputHandler:
    """Turns key-down edges into engine calls. Held keys never repeat."""

    def __init__(self, engine: SimulationEngine):
        self.engine = engine
        self.quit_requested = False

    def handle(self, event: pygame.event.Event) -> bool:
        """Returns True if the event was consumed."""
        if event.type == pygame.QUIT:
            self.quit_requested = True
            return True
        if event.type != pygame.KEYDOWN:
            return False

        phase = self.engine.state.phase
        if event.key == pygame.K_ESCAPE:
            self.quit_requested = True
            return True
        if event.key == FLAP_KEY and phase is GamePhase.PLAYING:
            return self.engine.flap()
        if event.key == RESTART_KEY and phase is GamePhase.OVER:
            self.engine.reset()
            return True
        return False


# ----------------- Game Client (loop) -----------------

class FlappyClient:
    def __init__(self, config: Optional[SimulationConfig] = None,
                 seed: Optional[int] = None, fps: int = RENDER_FPS):
        self.config = config or SimulationConfig()
        self.engine = SimulationEngine(self.config, seed=seed)
        self.input = InputHandler(self.engine)
        self.fps = fps

        # Time Management
        self.clock: Optional[pygame.time.Clock] = None
        self.tick_timer = 0.0
        self.screen: Optional[pygame.Surface] = None
        self.renderer: Optional[Renderer] = None

    def _open_window(self):
        pygame.init()
        pygame.key.set_repeat()  # disabled: one KEYDOWN per press
        self.screen = pygame.display.set_mode((self.config.screen_width, self.config.screen_height))
        pygame.display.set_caption(WINDOW_TITLE)
        self.renderer = Renderer(self.screen, self.config)
        self.clock = pygame.time.Clock()

    def step_frame(self, frame_seconds: float, now: float) -> int:
        """
        Converts wall time into whole fixed ticks and advances the engine.
        Returns the number of ticks run.
        """
        self.tick_timer += frame_seconds
        ticks = 0
        while self.tick_timer >= TICK_TIME and ticks < MAX_TICKS_PER_FRAME:
            self.tick_timer -= TICK_TIME
            self.engine.advance(FIXED_STEP, now)
            ticks += 1
        if self.tick_timer >= TICK_TIME:
            self.tick_timer = 0.0
        return ticks

    def run(self):
        """The main client execution loop."""
        self._open_window()
        logger.info(f"Client started ({self.config.screen_width}x{self.config.screen_height} @ {self.fps} fps)")

        while not self.input.quit_requested:
            frame_seconds = self.clock.tick(self.fps) / 1000.0

            for event in pygame.event.get():
                self.input.handle(event)

            self.step_frame(frame_seconds, pygame.time.get_ticks() / 1000.0)

            self.renderer.draw(self.engine.state)
            pygame.display.flip()

        logger.info(f"Client stopped, final score {self.engine.state.score}")
        pygame.quit()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Flappy Bird clone.")
    p.add_argument("--seed", type=int, default=None,
                   help="Seed for gate placement. Omit for a random run.")
    p.add_argument("--fps", type=int, default=RENDER_FPS, help="Render frames per second")
    p.add_argument("--scoring", choices=[policy.value for policy in ScoringPolicy],
                   default=ScoringPolicy.EXACT.value,
                   help="exact: score when a gate lands on the flyer; crossing: when it passes")
    p.add_argument("--gap-range", type=int, nargs=2, metavar=("MIN", "MAX"),
                   default=None, help="Gap top drawn from [MIN, MAX)")
    p.add_argument("--spawn-interval", type=float, default=None,
                   help="Seconds between gate spawns")
    p.add_argument("--verbose", action="store_true", help="Log spawns and score events")
    return p.parse_args(argv)


def build_config(args: argparse.Namespace) -> SimulationConfig:
    overrides = {"scoring_policy": ScoringPolicy(args.scoring)}
    if args.gap_range is not None:
        overrides["gap_y_min"], overrides["gap_y_max"] = args.gap_range
    if args.spawn_interval is not None:
        overrides["spawn_interval"] = args.spawn_interval
    return SimulationConfig(**overrides)


def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "INFO")

    try:
        config = build_config(args)
    except ConfigError as e:
        sys.exit(f"Invalid configuration: {e}")

    FlappyClient(config, seed=args.seed, fps=args.fps).run()


if __name__ == "__main__":
    main()
