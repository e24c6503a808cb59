# tetris_layout.py
from dataclasses import dataclass
from tetris_config import CONFIG

@dataclass
class Dims:
    cell: int
    grid_x: int
    grid_y: int
    grid_w: int
    grid_h: int
    panel_x: int
    preview_y: int
    score_y: int
    total_w: int
    total_h: int

def compute_dims(cols: int = CONFIG["COLS"], rows: int = CONFIG["ROWS"]) -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    grid_x = CONFIG["GRID_X"]
    grid_y = CONFIG["GRID_Y"]

    # walls included: one column each side, one floor row
    grid_w = (cols + 2) * cell
    grid_h = (rows + 1) * cell

    panel_x = grid_x + grid_w + CONFIG["PREVIEW_DISTANCE"]
    preview_y = grid_y + 30
    score_y = preview_y + 4 * cell + 30

    return Dims(
        cell=cell, grid_x=grid_x, grid_y=grid_y,
        grid_w=grid_w, grid_h=grid_h,
        panel_x=panel_x, preview_y=preview_y, score_y=score_y,
        total_w=CONFIG["SCREEN_W"], total_h=CONFIG["SCREEN_H"]
    )
