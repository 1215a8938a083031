from lane_train.config import DEFAULT_CONFIG, GameConfig
from lane_train.session import Session, tick

__all__ = ["DEFAULT_CONFIG", "GameConfig", "Session", "tick"]
