import pygame

from lane_train.config import DEFAULT_CONFIG
from lane_train.drawing import fill_gradient
from lane_train.lanes import lane_center

# Colors
COLOR_GROUND_FAR = (139, 115, 85)
COLOR_GROUND_NEAR = (160, 82, 45)
COLOR_RAIL = (80, 80, 80)
COLOR_TIE = (139, 69, 19)
COLOR_TEXT = (255, 255, 255)
COLOR_TEXT_SHADOW = (50, 50, 50)
COLOR_GAME_OVER = (255, 60, 60)
COLOR_OVERLAY = (0, 0, 0, 150)

# Track geometry
RAIL_WIDTH = 4
TIE_WIDTH = 15
TIE_HEIGHT = 6
TIE_SPACING = 40


class Renderer:
    def __init__(self, config=DEFAULT_CONFIG):
        self.config = config
        pygame.font.init()
        self.font_small = pygame.font.Font(None, 28)
        self.font_large = pygame.font.Font(None, 72)

        # Ground never changes, so draw it once
        self.background = pygame.Surface((config.width, config.height))
        fill_gradient(self.background, self.background.get_rect(), COLOR_GROUND_FAR, COLOR_GROUND_NEAR)

    def draw(self, surface, session, show_instructions=False, show_game_over=False):
        self.draw_track(surface, session.world_offset)
        for obstacle in session.obstacles:
            obstacle.draw(surface)
        session.train.draw(surface)
        self.draw_ui(surface, session.score, show_instructions, show_game_over)

    def draw_track(self, surface, world_offset):
        surface.blit(self.background, (0, 0))
        width = self.config.width
        rail_spacing = self.config.train_height * 0.5

        start_x = world_offset % TIE_SPACING
        if start_x > 0:
            start_x -= TIE_SPACING

        for lane in range(self.config.num_lanes):
            center_y = lane_center(lane, self.config)
            x = start_x
            while x < width:
                pygame.draw.rect(surface, COLOR_TIE, (x - TIE_WIDTH / 2, center_y - TIE_HEIGHT / 2, TIE_WIDTH, TIE_HEIGHT))
                x += TIE_SPACING
            # Rails go over the ties
            for rail_y in (center_y - rail_spacing / 2, center_y + rail_spacing / 2):
                pygame.draw.line(surface, COLOR_RAIL, (0, rail_y), (width, rail_y), RAIL_WIDTH)

    def draw_ui(self, surface, score, show_instructions=False, show_game_over=False):
        self._draw_text(surface, f"Score: {score}", self.font_small, COLOR_TEXT, (10, 10))

        center_x = self.config.width // 2
        center_y = self.config.height // 2
        if show_game_over:
            self._draw_overlay(surface)
            self._draw_text(surface, "GAME OVER", self.font_large, COLOR_GAME_OVER, (center_x, center_y - 20), center=True)
            self._draw_text(surface, "Press Enter to restart", self.font_small, COLOR_TEXT, (center_x, center_y + 30), center=True)
        elif show_instructions:
            self._draw_overlay(surface)
            self._draw_text(surface, "Up/Down or W/S to switch tracks", self.font_small, COLOR_TEXT, (center_x, center_y - 15), center=True)
            self._draw_text(surface, "Press Enter or a direction to start", self.font_small, COLOR_TEXT, (center_x, center_y + 15), center=True)

    def _draw_overlay(self, surface):
        overlay = pygame.Surface((self.config.width, self.config.height), pygame.SRCALPHA)
        overlay.fill(COLOR_OVERLAY)
        surface.blit(overlay, (0, 0))

    def _draw_text(self, surface, text, font, color, pos, center=False):
        shadow = font.render(text, True, COLOR_TEXT_SHADOW)
        main = font.render(text, True, color)
        shadow_pos = shadow.get_rect()
        main_pos = main.get_rect()
        if center:
            shadow_pos.center = (pos[0] + 2, pos[1] + 2)
            main_pos.center = pos
        else:
            shadow_pos.topleft = (pos[0] + 1, pos[1] + 1)
            main_pos.topleft = pos
        surface.blit(shadow, shadow_pos)
        surface.blit(main, main_pos)
