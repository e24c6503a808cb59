
"""
Rendering helpers for the Tetris project.

- Pre-render one cell Surface per cell state and blit them.
- Cache HUD text surfaces; re-render only when values change.
- The engine is only read here, never mutated.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional, Tuple
from tetris_grid import CellState
from tetris_layout import Dims

BG = (255,255,255)
TEXT = (0,0,0)
EMPTY_OUTLINE = (245,245,245)

# Fill color per non-empty cell state
COLORS: Dict[CellState, Tuple[int,int,int]] = {
    CellState.MOVING: (150,150,150),
    CellState.SETTLED: (150,150,150),
    CellState.WALL: (200,200,200),
    CellState.FADING: (0,150,0),
}


class FontLoadError(RuntimeError):
    pass


def load_fonts(path: Optional[str], big_size: int = 24, small_size: int = 12):
    """Returns (big, small) fonts. None picks pygame's bundled default font."""
    try:
        return pygame.font.Font(path, big_size), pygame.font.Font(path, small_size)
    except (OSError, pygame.error) as e:
        raise FontLoadError(f"Failed to load font {path!r}: {e}") from e


@dataclass
class HudCache:
    score: int = -1
    score_s: Optional[pygame.Surface] = None
    next_title: Optional[pygame.Surface] = None
    game_over: Optional[pygame.Surface] = None
    final_score: int = -1
    final_score_s: Optional[pygame.Surface] = None


class RenderAssets:
    """Holds pre-rendered assets and draws engine state onto a surface."""
    def __init__(self, dims: Dims, big_font, font):
        self.dims = dims
        self.big_font = big_font
        self.font = font
        self._make_cells()
        self.hud = HudCache()

    def _make_cells(self):
        self.cell_surf: Dict[CellState, pygame.Surface] = {}
        c = self.dims.cell
        for state, col in COLORS.items():
            s = pygame.Surface((c, c))
            s.fill(col)
            self.cell_surf[state] = s
        e = pygame.Surface((c, c))
        e.fill(BG)
        pygame.draw.rect(e, EMPTY_OUTLINE, (0, 0, c, c), 1)
        self.cell_surf[CellState.EMPTY] = e

    def cell_pos(self, row: int, col: int) -> Tuple[int, int]:
        return self.dims.grid_x + col*self.dims.cell, self.dims.grid_y + row*self.dims.cell

    def draw(self, screen: pygame.Surface, game):
        screen.fill(BG)
        if game.game_over:
            self.draw_game_over(screen, game.score)
            return
        self.draw_grid(screen, game.grid)
        self.draw_panel(screen, game.next_piece, game.score)

    def draw_grid(self, screen: pygame.Surface, grid):
        for i, row in enumerate(grid.cells):
            for j, v in enumerate(row):
                screen.blit(self.cell_surf[v], self.cell_pos(i, j))

    def draw_panel(self, screen: pygame.Surface, next_piece, score: int):
        d = self.dims
        if self.hud.next_title is None:
            self.hud.next_title = self.font.render("NEXT BLOCK", False, TEXT)
        screen.blit(self.hud.next_title, (d.panel_x, d.grid_y))
        for i, row in enumerate(next_piece.shape):
            for j, v in enumerate(row):
                s = self.cell_surf[CellState.SETTLED if v else CellState.EMPTY]
                screen.blit(s, (d.panel_x + j*d.cell, d.preview_y + i*d.cell))
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = self.font.render(f"SCORE: {score}", False, TEXT)
        screen.blit(self.hud.score_s, (d.panel_x, d.score_y))

    def draw_game_over(self, screen: pygame.Surface, score: int):
        if self.hud.game_over is None:
            self.hud.game_over = self.big_font.render("Press [enter] to play again", False, TEXT)
        if score != self.hud.final_score:
            self.hud.final_score = score
            self.hud.final_score_s = self.font.render(f"SCORE: {score}", False, TEXT)
        screen.blit(self.hud.game_over, (100, 100))
        screen.blit(self.hud.final_score_s, (250, 150))
