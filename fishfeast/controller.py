"""
controller.py — Controller layer.

Responsibilities:
  - Own the pygame event loop.
  - Translate raw keyboard / mouse / touch events into input intents
    and shell commands (start, restart, pause).
  - Pump the frame driver once per displayed frame, then ask the view
    to render.
  - Know nothing about rendering details (that's the View's job).
  - Know nothing about game rules (that's the Model's job).

The controller is the only layer that imports pygame directly for events.
"""

import logging
import sys

import pygame

from .config import (
    WIDTH, HEIGHT, FPS, OFFSET_X, OFFSET_Y,
    STATE_IDLE, STATE_PLAYING, STATE_PAUSED, STATE_OVER,
)
from .controls import InputSampler
from .driver import FrameDriver, GameLoop
from .model import GameModel
from .persistence import BestScoreStore
from .view import GameView

logger = logging.getLogger(__name__)

# Arrows and WASD share the same four intents
KEY_INTENTS = {
    pygame.K_UP:    "up",    pygame.K_w: "up",
    pygame.K_DOWN:  "down",  pygame.K_s: "down",
    pygame.K_LEFT:  "left",  pygame.K_a: "left",
    pygame.K_RIGHT: "right", pygame.K_d: "right",
}

_MOUSE = "mouse"


class GameController:
    """
    Owns the main loop.
    Glues Model <-> View without them knowing about each other.
    """

    def __init__(self, store: BestScoreStore = None):
        pygame.init()
        self.screen   = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("FISH FEAST")
        self.clock    = pygame.time.Clock()
        self.controls = InputSampler()
        self.model    = GameModel(store or BestScoreStore())
        self.driver   = FrameDriver()
        self.loop     = GameLoop(self.model, self.controls, self.driver)
        self.view     = GameView(self.screen)

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> None:
        """Start and run the game loop until the player quits."""
        while True:
            frame_dt = self.clock.tick(FPS) / 1000.0
            self._handle_events()
            self.driver.pump(pygame.time.get_ticks())
            self.view.render(self.model, frame_dt)

    # ── Event dispatch ────────────────────────────────────────────
    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit()
            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event.key)
            elif event.type == pygame.KEYUP:
                if event.key in KEY_INTENTS:
                    self.controls.release(KEY_INTENTS[event.key])
            elif event.type == pygame.WINDOWFOCUSLOST:
                self.controls.clear()
            else:
                self._handle_pointer(event)

    def _handle_keydown(self, key: int) -> None:
        # Q quits from any state
        if key == pygame.K_q:
            self._quit()

        if key in KEY_INTENTS:
            self.controls.press(KEY_INTENTS[key])

        state = self.model.state

        if state == STATE_IDLE:
            if key in (pygame.K_RETURN, pygame.K_SPACE):
                self.loop.start()
        elif state in (STATE_PLAYING, STATE_PAUSED):
            if key in (pygame.K_p, pygame.K_ESCAPE):
                self.loop.toggle_pause()
            elif key == pygame.K_r:
                self.loop.restart()
        elif state == STATE_OVER:
            if key in (pygame.K_r, pygame.K_SPACE, pygame.K_RETURN):
                self.loop.restart()

    # ── Pointer drag (mouse or one finger) ───────────────────────
    def _handle_pointer(self, event) -> None:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.model.state in (STATE_IDLE, STATE_OVER):
                self.loop.restart()
            self.controls.pointer_down(_MOUSE, *self._arena_pos(event.pos))
        elif event.type == pygame.MOUSEMOTION:
            self.controls.pointer_move(_MOUSE, *self._arena_pos(event.pos))
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.controls.pointer_up(_MOUSE)
        elif event.type == pygame.FINGERDOWN:
            if self.model.state in (STATE_IDLE, STATE_OVER):
                self.loop.restart()
            self.controls.pointer_down(event.finger_id, *self._finger_pos(event))
        elif event.type == pygame.FINGERMOTION:
            self.controls.pointer_move(event.finger_id, *self._finger_pos(event))
        elif event.type == pygame.FINGERUP:
            self.controls.pointer_up(event.finger_id)

    @staticmethod
    def _arena_pos(pos: tuple) -> tuple:
        return pos[0] - OFFSET_X, pos[1] - OFFSET_Y

    @staticmethod
    def _finger_pos(event) -> tuple:
        # Touch coordinates arrive normalised to [0, 1]
        return event.x * WIDTH - OFFSET_X, event.y * HEIGHT - OFFSET_Y

    # ── Utilities ─────────────────────────────────────────────────
    def _quit(self) -> None:
        if self.model.running:
            self.model.store.save(self.model.best)
        logger.info("Quitting (best %d)", self.model.best)
        pygame.quit()
        sys.exit()
