import pygame
import pytest

from conftest import tick
from tetris_config import CONFIG
from tetris_grid import CellState
from tetris_layout import compute_dims
from tetris_render import BG, COLORS, FontLoadError, RenderAssets, load_fonts


class FakeFont:
    def __init__(self):
        self.rendered = []
    def render(self, text, antialias, color):
        self.rendered.append(text)
        return pygame.Surface((len(text) * 6, 12))


@pytest.fixture
def screen():
    return pygame.Surface((CONFIG["SCREEN_W"], CONFIG["SCREEN_H"]))


@pytest.fixture
def assets():
    return RenderAssets(compute_dims(), FakeFont(), FakeFont())


def center(assets, row, col):
    x, y = assets.cell_pos(row, col)
    half = assets.dims.cell // 2
    return x + half, y + half


def color(screen, pos):
    return tuple(screen.get_at(pos))[:3]


def test_layout_matches_window():
    d = compute_dims()
    assert (d.total_w, d.total_h) == (600, 480)
    assert d.grid_w == 12 * 20 and d.grid_h == 21 * 20
    assert d.panel_x == 120 + 240 + 50
    assert d.score_y == 30 + 30 + 80 + 30


def test_grid_cells_colored_by_state(screen, assets, make_game):
    game = make_game("O")
    game.grid[19][2] = CellState.SETTLED
    game.grid[18][3] = CellState.FADING
    assets.draw(screen, game)

    assert color(screen, center(assets, 5, 0)) == COLORS[CellState.WALL]
    assert color(screen, center(assets, 20, 5)) == COLORS[CellState.WALL]
    assert color(screen, center(assets, 19, 2)) == COLORS[CellState.SETTLED]
    assert color(screen, center(assets, 18, 3)) == COLORS[CellState.FADING]
    assert color(screen, center(assets, 10, 5)) == BG


def test_moving_piece_and_panel(screen, assets, make_game):
    game = make_game("O", "I")
    tick(game)
    assets.draw(screen, game)
    assert color(screen, center(assets, 1, 4)) == COLORS[CellState.MOVING]

    d = assets.dims
    half = d.cell // 2
    # I preview fills the second row of the 4x4 panel
    assert color(screen, (d.panel_x + half, d.preview_y + d.cell + half)) == COLORS[CellState.SETTLED]
    assert color(screen, (d.panel_x + half, d.preview_y + half)) == BG
    assert "NEXT BLOCK" in assets.font.rendered
    assert "SCORE: 0" in assets.font.rendered


def test_score_text_cached(screen, assets, make_game):
    game = make_game("O")
    assets.draw(screen, game)
    assets.draw(screen, game)
    assert assets.font.rendered.count("SCORE: 0") == 1
    game.score = 40
    assets.draw(screen, game)
    assert "SCORE: 40" in assets.font.rendered


def test_game_over_shows_only_prompt_and_score(screen, assets, make_game):
    game = make_game("O")
    game.game_over = True
    game.score = 300
    assets.draw(screen, game)
    assert color(screen, center(assets, 5, 0)) == BG
    assert "Press [enter] to play again" in assets.big_font.rendered
    assert "SCORE: 300" in assets.font.rendered


def test_missing_font_file_is_fatal(tmp_path):
    pygame.font.init()
    with pytest.raises(FontLoadError):
        load_fonts(str(tmp_path / "missing.ttf"))


def test_default_font_loads():
    pygame.font.init()
    big, small = load_fonts(None)
    assert big.get_height() > small.get_height()
