import numpy as np

from lane_train.entities import Obstacle
from lane_train.game_env import GameEnv
from lane_train.policy import policy


class FakeEnv:
    def __init__(self, session):
        self.session = session


def rock_at(lane, x):
    rock = Obstacle(lane, np.random.default_rng(0))
    rock.x = x
    return rock


class TestPolicy:
    def test_holds_with_clear_track(self, quiet_session):
        assert policy(FakeEnv(quiet_session)) == [0, 0, 0]

    def test_dodges_rock_ahead(self, quiet_session):
        quiet_session.obstacles = [rock_at(1, 300)]
        assert policy(FakeEnv(quiet_session)) == [1, 0, 0]

    def test_prefers_the_clearer_neighbour(self, quiet_session):
        quiet_session.obstacles = [rock_at(1, 300), rock_at(0, 350)]
        assert policy(FakeEnv(quiet_session)) == [2, 0, 0]

    def test_ignores_rocks_behind(self, quiet_session):
        quiet_session.obstacles = [rock_at(1, -100)]
        assert policy(FakeEnv(quiet_session)) == [0, 0, 0]

    def test_steers_around_incoming_rock(self):
        env = GameEnv()
        env.reset(seed=8)
        env.session.spawn_timer = 10**9
        env.session.obstacles.append(rock_at(1, 400))
        for _ in range(150):
            _, _, terminated, _, info = env.step(policy(env))
            assert not terminated
        assert info["score"] == 10
        assert info["lane"] == 0
        env.close()
