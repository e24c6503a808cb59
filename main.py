
import logging
import pygame, sys
from tetris_config import CONFIG
from tetris_engine import Tetris
from tetris_layout import compute_dims
from tetris_render import RenderAssets, FontLoadError, load_fonts


def main():
    logging.basicConfig(level=logging.INFO, format='[TETRIS] %(asctime)s - %(message)s')
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])

    dims = compute_dims()
    screen = pygame.display.set_mode((dims.total_w, dims.total_h))
    pygame.display.set_caption("Tetris")

    try:
        big_font, font = load_fonts(CONFIG["FONT_PATH"])
    except FontLoadError as e:
        logging.critical(str(e))
        pygame.quit()
        sys.exit(1)

    render = RenderAssets(dims, big_font, font)
    game = Tetris(CONFIG["COLS"], CONFIG["ROWS"])

    try:
        while True:
            for e in pygame.event.get():
                if e.type == pygame.QUIT:
                    logging.info("Quit requested.")
                    return
                game.handle_input(e)

            game.update()
            render.draw(screen, game)
            pygame.display.flip()

            pygame.time.delay(CONFIG["TICK_DELAY_MS"])
    finally:
        pygame.quit()


if __name__ == '__main__':
    main()
