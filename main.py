import pygame, sys
from linegame_config import CONFIG
from linegame_logging import setup_logging
from linegame_game import new_game
from linegame_input import DragInput
from linegame_layout import compute_dims
from linegame_render import RenderAssets


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    setup_logging(CONFIG["LOG_LEVEL"])
    pygame.init()

    state = new_game()
    dims = compute_dims(state.size)
    screen = recreate_window(dims)
    pygame.display.set_caption("Line Game")
    font = pygame.font.SysFont(None, 26)
    big_font = pygame.font.SysFont(None, 42)

    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()
    drag = DragInput()

    def restart():
        drag.reset()
        new_game(state)

    while True:
        clock.tick(CONFIG["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                if e.key == pygame.K_ESCAPE:
                    pygame.quit(); sys.exit()
                if e.key == pygame.K_r:
                    restart(); continue
            if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                if dims.new_game_rect.collidepoint(e.pos):
                    restart(); continue
                if state.game_over and dims.play_again_rect.collidepoint(e.pos):
                    restart(); continue
            drag.handle(e, dims, state)

        render.redraw_static(screen)
        render.draw_grid(screen, state.grid)
        render.draw_hud(screen, state.target_sum, state.current_sum, state.score)
        render.draw_button(screen, dims.new_game_rect, "New Game")
        if state.game_over:
            render.draw_game_over(screen, state.score)
        pygame.display.flip()


if __name__ == '__main__':
    main()
