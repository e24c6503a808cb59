
"""
Game engine: owns the grid, the falling piece and the per-tick state machine.

Every action channel (gravity, lateral move, rotation, row fading, fast drop)
has its own tick counter. A channel fires when its counter reaches the
matching threshold in CONFIG and is then reset, so holding a key repeats the
action at a fixed cadence.

Note that the completed-row scan runs on every gravity step *before* the
piece settled by that step is merged, so a row completed by a piece is only
picked up on the following gravity step.
"""
import logging
from enum import Enum
from typing import List, Optional

import pygame

from tetris_config import CONFIG, SCORE_TABLE
from tetris_grid import Grid
from tetris_input import KeyState
from tetris_piece import Piece
from tetris_rng import UniformRandom


class Phase(Enum):
    PLAYING = "playing"
    FADING = "fading"
    GAME_OVER = "game_over"


class Tetris:
    def __init__(self, cols: int = CONFIG["COLS"], rows: int = CONFIG["ROWS"], rng=None):
        self.cols, self.rows = cols, rows
        self.rng = rng if rng is not None else UniformRandom(CONFIG["RNG_SEED"])
        self.keys = KeyState()
        self.grid = Grid(cols, rows)
        self.current: Optional[Piece] = None
        self.next_piece: Optional[Piece] = None
        self.rows_to_delete: List[int] = []
        self.initialize()

    @property
    def phase(self) -> Phase:
        if self.game_over: return Phase.GAME_OVER
        if self.rows_to_delete: return Phase.FADING
        return Phase.PLAYING

    def initialize(self):
        self.grid.reset(full_clean=True)
        self.rows_to_delete = []
        self.spawn_next()
        self.score = 0
        self.game_over = False
        self.gravity_counter = 0
        self.lateral_counter = 0
        self.rotate_counter = 0
        self.fade_counter = 0
        self.fast_drop_counter = 0
        logging.info("New game started.")

    def spawn_next(self):
        if self.next_piece is None:
            self.current = Piece.create(self.rng.next_piece())
        else:
            self.current = self.next_piece
        self.current.set_position(self.cols // 2 - 2, 0)
        self.next_piece = Piece.create(self.rng.next_piece())
        self.fast_drop_counter = 0

    def handle_input(self, event):
        self.keys.handle(event)

    # ---------- per-tick update ----------
    def update(self):
        if self.game_over:
            if not self.keys.is_pressed(pygame.K_RETURN): return
            self.initialize()

        if self.rows_to_delete:
            self._fade_tick()
            return

        if self.current is None:
            self.spawn_next()

        self.gravity_counter += 1
        self.fast_drop_counter += 1
        settled = False

        if self.keys.is_pressed(pygame.K_LEFT) or self.keys.is_pressed(pygame.K_RIGHT):
            self.lateral_counter += 1
        if self.keys.is_pressed(pygame.K_UP):
            self.rotate_counter += 1
        if self.keys.is_pressed(pygame.K_DOWN) and self.fast_drop_counter >= CONFIG["SPEEDY_GRAVITY_DELAY"]:
            self.gravity_counter += CONFIG["GRAVITY_SPEED"]

        if self.gravity_counter >= CONFIG["GRAVITY_SPEED"]:
            settled = self._step_down()
            self._check_completed_rows()
            self.gravity_counter = 0

        if self.lateral_counter >= CONFIG["LATERAL_SPEED"]:
            self._step_sideways()
            self.lateral_counter = 0

        if self.rotate_counter >= CONFIG["ROTATING_SPEED"]:
            self._try_rotate()
            self.rotate_counter = 0

        self.grid.reset()
        self.grid.overlay_piece(self.current, settled)
        if settled:
            self.current = None

        if self.grid.has_top_collision():
            self.game_over = True
            logging.info(f"Game over. Final score: {self.score}")

    def _fade_tick(self):
        self.fade_counter += 1
        if self.fade_counter >= CONFIG["FADING_TIME"]:
            self.grid.remove_rows(self.rows_to_delete)
            self.rows_to_delete = []
            self.fade_counter = 0

    def _step_down(self) -> bool:
        p = self.current
        if self.grid.collides(p.shape, p.x, p.y + 1): return True
        p.move_down()
        return False

    def _step_sideways(self):
        p = self.current
        if self.keys.is_pressed(pygame.K_LEFT):
            if not self.grid.collides(p.shape, p.x - 1, p.y): p.move_left()
        elif self.keys.is_pressed(pygame.K_RIGHT):
            if not self.grid.collides(p.shape, p.x + 1, p.y): p.move_right()

    def _try_rotate(self):
        p = self.current
        if not self.grid.collides(p.rotation_preview(), p.x, p.y):
            p.rotate()

    def _check_completed_rows(self):
        completed = self.grid.scan_completed_rows()
        if completed:
            self.rows_to_delete.extend(completed)
            # more than four rows at once scores nothing extra
            self.score += SCORE_TABLE.get(len(self.rows_to_delete), 0)
            logging.debug(f"Rows {completed} completed, score {self.score}")
