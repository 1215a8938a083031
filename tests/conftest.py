import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import numpy as np
import pytest

from lane_train.session import Session


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def quiet_session():
    """A session whose spawner will not fire during a test."""
    session = Session(seed=0)
    session.spawn_timer = 10**9
    return session
