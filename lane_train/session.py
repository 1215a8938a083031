"""Per-frame game rules.

A ``Session`` holds everything one run of the game mutates. The update
functions below each take the session explicitly, and ``tick`` runs them in
frame order. Nothing here touches a display, so a session can be stepped
from tests, an agent environment or the interactive loop alike.
"""

import logging
import math

import numpy as np

from lane_train.config import DEFAULT_CONFIG
from lane_train.entities import Obstacle, Train

logger = logging.getLogger(__name__)


class Session:
    def __init__(self, config=DEFAULT_CONFIG, rng=None, seed=None):
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng(seed)

        self.train = Train(config)
        self.obstacles = []
        self.score = 0
        self.speed = config.initial_speed
        self.spawn_timer = config.base_spawn_rate
        self.game_over = False
        self.world_offset = 0.0
        self.frames = 0


def next_spawn_interval(session):
    config = session.config
    decrease = math.floor(session.score / config.spawn_score_divisor)
    jitter = (session.rng.random() - 0.5) * config.spawn_jitter
    return max(config.min_spawn_interval, config.base_spawn_rate - decrease + jitter)


def lane_is_blocked(session, lane):
    # Only the spawn edge matters; a rock further left never blocks
    edge = session.config.width
    for obstacle in session.obstacles:
        if obstacle.lane == lane and obstacle.x > edge - obstacle.width * session.config.too_close_factor:
            return True
    return False


def spawn_obstacle(session):
    session.spawn_timer -= 1
    if session.spawn_timer > 0:
        return None

    lane = int(session.rng.integers(0, session.config.num_lanes))
    spawned = None
    if lane_is_blocked(session, lane):
        logger.debug("Skipped spawn in lane %d, too close to the last rock", lane)
    else:
        spawned = Obstacle(lane, session.rng, session.config)
        session.obstacles.append(spawned)
        logger.debug("Spawned rock in lane %d (%.1fx%.1f)", lane, spawned.width, spawned.height)

    session.spawn_timer = next_spawn_interval(session)
    return spawned


def update_obstacles(session):
    """Move every rock left and bank the ones that made it off screen.

    Returns the number of rocks passed this frame.
    """
    passed = 0
    for obstacle in session.obstacles:
        obstacle.update(session.speed)
    remaining = []
    for obstacle in session.obstacles:
        if obstacle.is_off_screen():
            passed += 1
        else:
            remaining.append(obstacle)
    session.obstacles = remaining
    session.score += passed * session.config.score_per_obstacle
    return passed


def increase_difficulty(session):
    session.speed += session.config.speed_increment


def boxes_overlap(a, b):
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )


def check_collisions(session):
    hitbox = session.train.hitbox()
    for obstacle in session.obstacles:
        if boxes_overlap(hitbox, obstacle.rect):
            session.game_over = True
            logger.debug("Crashed into a rock in lane %d", obstacle.lane)
            return obstacle
    return None


def tick(session):
    """Advance `session` by one frame. A finished session is left untouched."""
    if session.game_over:
        return session

    session.world_offset -= session.speed
    session.train.update()
    spawn_obstacle(session)
    update_obstacles(session)
    increase_difficulty(session)
    check_collisions(session)
    session.frames += 1
    return session
