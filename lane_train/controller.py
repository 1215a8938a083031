import logging

import numpy as np

from lane_train.config import DEFAULT_CONFIG
from lane_train.session import Session, tick

logger = logging.getLogger(__name__)

CONFIRM_KEYS = frozenset({"return", "enter", "kp enter"})
UP_KEYS = frozenset({"up", "arrowup", "w"})
DOWN_KEYS = frozenset({"down", "arrowdown", "s"})


def key_direction(name):
    name = name.lower()
    if name in UP_KEYS:
        return -1
    if name in DOWN_KEYS:
        return 1
    return 0


def is_confirm(name):
    return name.lower() in CONFIRM_KEYS


class InputHandler:
    """Keyboard-driven lifecycle around a `Session`.

    ``running`` stands in for a scheduled frame callback: ``frame()`` only
    advances the game while it is set. A fresh handler waits for the first
    direction or confirm key before running, and after a crash only the
    confirm key is honoured, which resets the game without starting it.
    """

    def __init__(self, config=DEFAULT_CONFIG, seed=None):
        self.config = config
        self._seeds = np.random.default_rng(seed)
        self.session = None
        self.running = False
        self.show_instructions = True
        self.show_game_over = False
        self.reset()

    def reset(self):
        self.session = Session(self.config, seed=int(self._seeds.integers(0, 2**31 - 1)))
        self.running = False
        self.show_instructions = True
        self.show_game_over = False
        logger.info("New session ready")

    def start(self):
        self.running = True
        self.show_instructions = False
        logger.info("Session started")

    def stop(self):
        self.running = False
        self.show_game_over = True
        self.show_instructions = False
        logger.info("Game over, score %d", self.session.score)

    def handle_key(self, name):
        """Apply a key press by name. Returns True when the key was used."""
        direction = key_direction(name)
        confirm = is_confirm(name)

        if self.session.game_over:
            if confirm:
                self.reset()
                return True
            return False

        if not self.running:
            if not (confirm or direction):
                return False
            self.start()
            if direction:
                self.session.train.change_lane(direction)
            return True

        if direction:
            self.session.train.change_lane(direction)
            return True
        return False

    def frame(self):
        if not self.running:
            return False
        tick(self.session)
        if self.session.game_over:
            self.stop()
        return self.running

    @property
    def score_text(self):
        return f"Score: {self.session.score}"
