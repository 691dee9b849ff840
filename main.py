import logging
import pygame, sys
from typetris_config import CONFIG, settings_from_config
from typetris_game import Game, NewGame, Tick
from typetris_input import ShiftRepeat, translate_key
from typetris_layout import compute_dims
from typetris_overlay import Overlay
from typetris_render import RenderAssets

logger = logging.getLogger(__name__)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"], format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])

    game = Game(settings_from_config(starts_with_splash=True))
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)
    clock = pygame.time.Clock()

    def build_view():
        dims = compute_dims(game.board.width, game.board.height)
        screen = recreate_window(dims)
        return dims, screen, RenderAssets(dims, game.board.width, game.board.height, font, big_font)

    dims, screen, render = build_view()
    logger.info("starting on a %dx%d board", game.board.width, game.board.height)
    pygame.display.set_caption("Typetris")

    shift = ShiftRepeat()
    overlay = Overlay()
    need_redraw = True

    while True:
        dt = clock.tick_busy_loop(60)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type != pygame.KEYDOWN:
                continue
            if e.key == pygame.K_F1:
                overlay.toggle(); need_redraw = True; continue
            if overlay.active:
                overlay.handle(e); need_redraw = True; continue
            event = translate_key(e, accepting_new_game=not game.is_playing())
            if event is None:
                continue
            if isinstance(event, NewGame):
                # Board size or timing may have been edited in the overlay.
                game.settings = settings_from_config()
                game.handle_event(event)
                if (game.board.width, game.board.height) != (render.cols, render.rows) \
                        or int(CONFIG["CELL_SIZE"]) != dims.cell:
                    dims, screen, render = build_view()
                need_redraw = True
                continue
            need_redraw |= game.handle_event(event)

        if not overlay.active:
            keys = pygame.key.get_pressed()
            move = shift.update(dt, keys[pygame.K_LEFT], keys[pygame.K_RIGHT])
            if move is not None:
                need_redraw |= game.handle_event(move)
            need_redraw |= game.handle_event(Tick(dt / 1000.0))

        if not need_redraw:
            continue
        render.draw_board(screen, game)
        render.draw_panel_hud(screen, game)
        overlay.draw(screen, font, dims.total_w, dims.total_h)
        pygame.display.flip()
        need_redraw = False


if __name__ == '__main__':
    main()
