
"""Piece model, 4x4 shapes, rotation"""
from dataclasses import dataclass
from typing import Iterator, List, Tuple

PIECES = ["I", "O", "T", "S", "Z", "J", "L"]

SHAPES = {
    "I": [[0,0,0,0],[1,1,1,1],[0,0,0,0],[0,0,0,0]],
    "O": [[0,0,0,0],[0,1,1,0],[0,1,1,0],[0,0,0,0]],
    "T": [[0,0,0,0],[0,1,1,1],[0,0,1,0],[0,0,0,0]],
    "S": [[0,0,0,0],[0,0,1,1],[0,1,1,0],[0,0,0,0]],
    "Z": [[0,0,0,0],[0,1,1,0],[0,0,1,1],[0,0,0,0]],
    "J": [[0,0,0,0],[0,1,1,1],[0,1,0,0],[0,0,0,0]],
    "L": [[0,0,0,0],[0,1,1,1],[0,0,0,1],[0,0,0,0]],
}

Shape = List[List[int]]

def rotate_cw(m): return [list(r) for r in zip(*m[::-1])]

@dataclass
class Piece:
    t: str
    shape: Shape
    x: int = 0
    y: int = 0

    @staticmethod
    def create(t: str) -> "Piece":
        return Piece(t, [r[:] for r in SHAPES[t]])

    def set_position(self, x: int, y: int):
        self.x, self.y = x, y

    def move_left(self): self.x -= 1
    def move_right(self): self.x += 1
    def move_down(self): self.y += 1

    def rotation_preview(self) -> Shape:
        # O looks the same in every orientation
        if self.t == "O": return [r[:] for r in self.shape]
        return rotate_cw(self.shape)

    def rotate(self):
        self.shape = self.rotation_preview()

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Yields (row, col) grid coordinates of the occupied cells."""
        for r, row in enumerate(self.shape):
            for c, v in enumerate(row):
                if v: yield self.y + r, self.x + c
