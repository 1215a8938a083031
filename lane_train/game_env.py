import os

# Render off-screen unless a caller already picked a video driver.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import gymnasium as gym
import numpy as np
import pygame
from gymnasium.spaces import MultiDiscrete

from lane_train.config import DEFAULT_CONFIG
from lane_train.render import Renderer
from lane_train.session import Session, tick


class GameEnv(gym.Env):
    metadata = {"render_modes": ["rgb_array"], "render_fps": DEFAULT_CONFIG.fps}

    # Must be a short, user-facing control string:
    user_guide = (
        "Controls: Use ↑ and ↓ to switch the train between its three tracks."
    )

    # Must be a short, user-facing description of the game:
    game_description = (
        "Steer a train across three tracks to dodge the rocks rolling in. Every rock you pass scores 10 points."
    )

    # Should frames auto-advance or wait for user input?
    auto_advance = True

    MAX_STEPS = 5000

    def __init__(self, render_mode="rgb_array", config=DEFAULT_CONFIG):
        super().__init__()
        self.render_mode = render_mode
        self.config = config

        self.observation_space = gym.spaces.Box(
            low=0, high=255, shape=(config.height, config.width, 3), dtype=np.uint8
        )
        # [movement, space, shift]; only up (1) and down (2) do anything
        self.action_space = MultiDiscrete([5, 2, 2])

        pygame.init()
        self.screen = pygame.Surface((config.width, config.height))
        self.renderer = Renderer(config)

        # State variables are initialized in reset()
        self.session = None
        self.steps = 0

        self.reset()

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)

        self.session = Session(self.config, rng=self.np_random)
        self.steps = 0

        return self._get_observation(), self._get_info()

    def step(self, action):
        if self.session.game_over:
            # Frozen until reset
            return self._get_observation(), 0.0, True, False, self._get_info()

        movement = action[0]
        if movement == 1:  # Up
            self.session.train.change_lane(-1)
        elif movement == 2:  # Down
            self.session.train.change_lane(1)

        score_before = self.session.score
        tick(self.session)
        self.steps += 1

        passed = (self.session.score - score_before) // self.config.score_per_obstacle
        reward = 0.01 + passed  # small reward for surviving
        if self.session.game_over:
            reward = -10.0
            # sfx: crash

        terminated = self.session.game_over
        truncated = self.steps >= self.MAX_STEPS and not terminated

        return (
            self._get_observation(),
            float(reward),
            terminated,
            truncated,
            self._get_info()
        )

    def _get_observation(self):
        self.renderer.draw(self.screen, self.session, show_game_over=self.session.game_over)
        arr = pygame.surfarray.array3d(self.screen)
        # Pygame array is (width, height, channels). Obs space is (height, width, channels).
        return np.transpose(arr, (1, 0, 2)).astype(np.uint8)

    def _get_info(self):
        return {
            "score": self.session.score,
            "steps": self.steps,
            "speed": self.session.speed,
            "lane": self.session.train.current_lane,
            "obstacles": len(self.session.obstacles),
        }

    def render(self):
        return self._get_observation()

    def close(self):
        pygame.quit()

    def validate_implementation(self):
        '''
        Checks the spaces and the reset/step contract.
        '''
        assert self.action_space.shape == (3,)
        assert self.action_space.nvec.tolist() == [5, 2, 2]

        test_obs = self._get_observation()
        assert test_obs.shape == (self.config.height, self.config.width, 3)
        assert test_obs.dtype == np.uint8

        obs, info = self.reset()
        assert obs.shape == (self.config.height, self.config.width, 3)
        assert isinstance(info, dict)

        test_action = self.action_space.sample()
        obs, reward, term, trunc, info = self.step(test_action)
        assert obs.shape == (self.config.height, self.config.width, 3)
        assert isinstance(reward, (int, float))
        assert isinstance(term, bool)
        assert not trunc
        assert isinstance(info, dict)
