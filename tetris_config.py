
CONFIG = {
    "COLS": 10,
    "ROWS": 20,
    "CELL_SIZE": 20,
    "SCREEN_W": 600,
    "SCREEN_H": 480,
    "GRID_X": 120,
    "GRID_Y": 30,
    "PREVIEW_DISTANCE": 50,
    # Tick thresholds (lower is faster)
    "GRAVITY_SPEED": 30,
    "LATERAL_SPEED": 8,
    "ROTATING_SPEED": 8,
    "FADING_TIME": 50,
    "SPEEDY_GRAVITY_DELAY": 40,
    "TICK_DELAY_MS": 10,
    "FONT_PATH": None,
    "RNG_SEED": None,
}

SCORE_TABLE = {1: 40, 2: 100, 3: 300, 4: 1200}
