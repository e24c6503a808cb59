
"""Walled grid: overlay, collide, row scan and removal"""
from enum import IntEnum
from typing import List
from tetris_piece import Piece, Shape


class CellState(IntEnum):
    EMPTY = 0
    MOVING = 1
    SETTLED = 2
    WALL = 3
    FADING = 4

BLOCKING = (CellState.SETTLED, CellState.WALL)


class Grid:
    """(rows+1) x (cols+2) cells: the extra row is the floor, the extra
    columns are the side walls. Interior rows are 0..rows-1, interior
    columns 1..cols."""

    def __init__(self, cols: int, rows: int):
        self.cols, self.rows = cols, rows
        self.cells: List[List[CellState]] = [[CellState.EMPTY] * (cols + 2) for _ in range(rows + 1)]
        self.reset(full_clean=True)

    def __getitem__(self, i): return self.cells[i]
    def __len__(self): return len(self.cells)

    def _empty_row(self) -> List[CellState]:
        row = [CellState.EMPTY] * (self.cols + 2)
        row[0] = row[self.cols + 1] = CellState.WALL
        return row

    def reset(self, full_clean: bool = False):
        for row in self.cells:
            for j, v in enumerate(row):
                if full_clean or v == CellState.MOVING:
                    row[j] = CellState.EMPTY
            row[0] = row[self.cols + 1] = CellState.WALL
        floor = self.cells[self.rows]
        for j in range(1, self.cols + 1):
            floor[j] = CellState.WALL

    def overlay_piece(self, piece: Piece, settle: bool):
        for by, bx in piece.cells():
            # piece may hang below the last row while entering the board
            if by >= len(self.cells): return
            if by < 0 or not 0 <= bx < self.cols + 2: continue
            if settle:
                self.cells[by][bx] = CellState.SETTLED
            # the moving overlay never hides settled, wall or fading cells
            elif self.cells[by][bx] == CellState.EMPTY:
                self.cells[by][bx] = CellState.MOVING

    def collides(self, shape: Shape, x: int, y: int) -> bool:
        for i, r in enumerate(shape):
            for j, v in enumerate(r):
                if not v: continue
                by, bx = y + i, x + j
                if by < 0 or by >= len(self.cells) or bx < 0 or bx >= self.cols + 2: return True
                if self.cells[by][bx] in BLOCKING: return True
        return False

    def scan_completed_rows(self) -> List[int]:
        completed = []
        for i in range(self.rows):
            row = self.cells[i]
            if sum(1 for j in range(1, self.cols + 1) if row[j] == CellState.SETTLED) == self.cols:
                completed.append(i)
                for j in range(1, self.cols + 1):
                    row[j] = CellState.FADING
        return completed

    def remove_rows(self, indices: List[int]):
        # Each index shifts everything above it independently, in the given order
        for idx in indices:
            for k in range(idx, 0, -1):
                self.cells[k] = self.cells[k - 1]
            self.cells[0] = self._empty_row()

    def has_top_collision(self) -> bool:
        return any(self.cells[i][j] == CellState.SETTLED
                   for i in range(min(2, self.rows)) for j in range(1, self.cols + 1))
