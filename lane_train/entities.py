import math
from collections import namedtuple

import pygame
import pygame.gfxdraw

from lane_train.config import DEFAULT_CONFIG
from lane_train.drawing import fill_gradient, shade_color
from lane_train.lanes import clamp_lane, lane_top

Box = namedtuple("Box", ["x", "y", "width", "height"])

# Colors
COLOR_ROCKS = ("#8b8989", "#696969", "#5a5a5a")
COLOR_ROCK_OUTLINE = (68, 68, 68)
COLOR_TRAIN_BODY = "#b22222"
COLOR_TRAIN_BODY_DARK = "#8b0000"
COLOR_TRAIN_ROOF = (74, 74, 74)
COLOR_TRAIN_UNDER = (51, 51, 51)
COLOR_TRAIN_WINDOW = (173, 216, 230)
COLOR_WINDOW_FRAME = (34, 34, 34)
COLOR_HEADLIGHT = (255, 255, 224)
COLOR_HEADLIGHT_GLOW = (255, 255, 224, 77)


def shrink(box, inset):
    return Box(box.x + inset, box.y + inset, box.width - 2 * inset, box.height - 2 * inset)


class Train:
    def __init__(self, config=DEFAULT_CONFIG):
        self.config = config
        self.width = config.train_width
        self.height = config.train_height
        self.x = config.train_x
        self.current_lane = config.start_lane
        self.target_lane = config.start_lane
        self.move_speed = config.train_move_speed
        self.y = self.lane_y(self.current_lane)

    def lane_y(self, lane):
        return lane_top(lane, self.height, self.config)

    def change_lane(self, direction):
        self.target_lane = clamp_lane(self.target_lane + direction, self.config)

    def update(self):
        target_y = self.lane_y(self.target_lane)
        if abs(self.y - target_y) > self.move_speed / 2:
            if self.y < target_y:
                self.y += self.move_speed
            else:
                self.y -= self.move_speed
        else:
            self.y = target_y
            self.current_lane = self.target_lane
        self.y = max(0, min(self.config.height - self.height, self.y))

    @property
    def rect(self):
        return Box(self.x, self.y, self.width, self.height)

    def hitbox(self, inset=None):
        if inset is None:
            inset = self.config.hitbox_inset
        return shrink(self.rect, inset)

    def draw(self, surface):
        x, y, w, h = self.x, self.y, self.width, self.height
        body_h = h * 0.6
        roof_h = h * 0.2
        under_h = h * 0.2

        pygame.draw.rect(surface, COLOR_TRAIN_UNDER, (x, y + body_h + roof_h, w, under_h))
        fill_gradient(surface, (x, y + roof_h, w, body_h), COLOR_TRAIN_BODY, COLOR_TRAIN_BODY_DARK)
        pygame.draw.rect(surface, COLOR_TRAIN_ROOF, (x, y, w, roof_h))

        window = pygame.Rect(x + w * 0.6, y + roof_h + body_h * 0.15, w * 0.25, body_h * 0.5)
        pygame.draw.rect(surface, COLOR_TRAIN_WINDOW, window)
        pygame.draw.rect(surface, COLOR_WINDOW_FRAME, window, 1)

        # Headlight with a soft glow
        light = (int(x + w - 6), int(y + h / 2))
        pygame.gfxdraw.filled_circle(surface, light[0], light[1], 7, COLOR_HEADLIGHT_GLOW)
        pygame.draw.circle(surface, COLOR_HEADLIGHT, light, 4)

        # Coupling
        pygame.draw.rect(surface, COLOR_TRAIN_UNDER, (x + w, y + h * 0.6, 5, h * 0.3))


class Obstacle:
    def __init__(self, lane, rng, config=DEFAULT_CONFIG):
        self.width = config.obstacle_min_width + rng.random() * (config.obstacle_max_width - config.obstacle_min_width)
        self.height = config.obstacle_min_height + rng.random() * (config.obstacle_max_height - config.obstacle_min_height)
        self.x = float(config.width)
        self.lane = lane
        self.y = lane_top(lane, self.height, config)
        self.color = COLOR_ROCKS[int(rng.integers(0, len(COLOR_ROCKS)))]
        self.darker_color = shade_color(self.color, -30)

    def update(self, speed):
        self.x -= speed

    def is_off_screen(self):
        return self.x + self.width < 0

    @property
    def rect(self):
        return Box(self.x, self.y, self.width, self.height)

    def draw(self, surface):
        x, y, w, h = self.x, self.y, self.width, self.height
        # Skewed quad reads as a rock
        points = [
            (x, y + h * 0.1),
            (x + w * 0.9, y),
            (x + w, y + h * 0.9),
            (x + w * 0.1, y + h),
        ]
        bounds = pygame.Rect(math.floor(x), math.floor(y), math.ceil(w) + 1, math.ceil(h) + 1)
        rock = pygame.Surface(bounds.size, pygame.SRCALPHA)
        fill_gradient(rock, rock.get_rect(), self.color, self.darker_color)
        mask = pygame.Surface(bounds.size, pygame.SRCALPHA)
        local = [(px - bounds.x, py - bounds.y) for px, py in points]
        pygame.draw.polygon(mask, (255, 255, 255, 255), local)
        rock.blit(mask, (0, 0), special_flags=pygame.BLEND_RGBA_MIN)
        surface.blit(rock, bounds.topleft)
        pygame.draw.polygon(surface, COLOR_ROCK_OUTLINE, points, 1)
