
"""Uniform piece randomizer module"""
import random
from typing import Optional
from tetris_piece import PIECES

class UniformRandom:
    PIECES = PIECES
    def __init__(self, seed: Optional[int] = None):
        # None seeds from the OS entropy source
        self._rng = random.Random(seed)

    def next_piece(self) -> str:
        return self.PIECES[self._rng.randint(0, len(self.PIECES) - 1)]
