from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    # Play area
    width: int = 640
    height: int = 400
    num_lanes: int = 3
    fps: int = 60

    # Train
    train_x: float = 50
    train_width: float = 60
    train_height: float = 35
    train_move_speed: float = 9
    start_lane: int = 1
    hitbox_inset: float = 5

    # Rocks
    obstacle_min_width: float = 25
    obstacle_max_width: float = 45
    obstacle_min_height: float = 25
    obstacle_max_height: float = 40
    too_close_factor: float = 3
    score_per_obstacle: int = 10

    # Pace
    initial_speed: float = 4.0
    speed_increment: float = 0.0015
    base_spawn_rate: float = 90
    min_spawn_interval: float = 25
    spawn_jitter: float = 20  # +/- 10 frames
    spawn_score_divisor: int = 150

    def __post_init__(self):
        if self.num_lanes < 1:
            raise ValueError("At least one lane is required.")
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Play area must have a positive size.")
        if self.train_width <= 0 or self.train_height <= 0:
            raise ValueError("Train must have a positive size.")
        if self.train_move_speed <= 0:
            raise ValueError("Train move speed must be positive.")
        if not 0 <= self.start_lane < self.num_lanes:
            raise ValueError(f"Start lane {self.start_lane} is outside 0..{self.num_lanes - 1}.")
        if not 0 < self.obstacle_min_width <= self.obstacle_max_width:
            raise ValueError("Obstacle width range is invalid.")
        if not 0 < self.obstacle_min_height <= self.obstacle_max_height:
            raise ValueError("Obstacle height range is invalid.")
        lane_h = self.height / self.num_lanes
        if self.train_height > lane_h:
            raise ValueError(f"Train height {self.train_height} does not fit a {lane_h:g} lane.")
        if self.obstacle_max_height > lane_h:
            raise ValueError(f"Obstacle height {self.obstacle_max_height} does not fit a {lane_h:g} lane.")
        if self.min_spawn_interval <= 0:
            raise ValueError("Minimum spawn interval must be positive.")
        if self.spawn_score_divisor <= 0:
            raise ValueError("Spawn score divisor must be positive.")


DEFAULT_CONFIG = GameConfig()
