"""Play the game in a window with the keyboard."""

import logging
import sys

import pygame

from lane_train.config import DEFAULT_CONFIG
from lane_train.controller import InputHandler
from lane_train.render import Renderer

logger = logging.getLogger(__name__)


def main(config=DEFAULT_CONFIG, seed=None):
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        pygame.init()
        pygame.display.set_caption("Lane Train")
        screen = pygame.display.set_mode((config.width, config.height))
    except pygame.error as e:
        print(f"Pygame error (likely no display available): {e}")
        return 1

    handler = InputHandler(config, seed=seed)
    renderer = Renderer(config)
    clock = pygame.time.Clock()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    handler.handle_key(pygame.key.name(event.key))

        was_running = handler.running
        handler.frame()
        if was_running and not handler.running:
            print(f"Final Score: {handler.session.score}")

        renderer.draw(
            screen,
            handler.session,
            show_instructions=handler.show_instructions,
            show_game_over=handler.show_game_over,
        )
        pygame.display.flip()
        clock.tick(config.fps)

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
