import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from tetris_engine import Tetris


class ScriptedRandom:
    """Hands out pieces from a fixed list, repeating the last one."""
    def __init__(self, kinds):
        self.kinds = list(kinds)
    def next_piece(self):
        return self.kinds.pop(0) if len(self.kinds) > 1 else self.kinds[0]


def press(game, key):
    game.handle_input(pygame.event.Event(pygame.KEYDOWN, key=key))

def release(game, key):
    game.handle_input(pygame.event.Event(pygame.KEYUP, key=key))

def tick(game, n=1):
    for _ in range(n):
        game.update()


@pytest.fixture
def make_game():
    def _make(*kinds, cols=10, rows=20):
        return Tetris(cols, rows, rng=ScriptedRandom(kinds or ["T"]))
    return _make
