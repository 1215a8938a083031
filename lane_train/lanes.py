from lane_train.config import DEFAULT_CONFIG


def lane_height(config=DEFAULT_CONFIG):
    return config.height / config.num_lanes


def lane_center(lane, config=DEFAULT_CONFIG):
    h = lane_height(config)
    return lane * h + h / 2


def lane_top(lane, item_height, config=DEFAULT_CONFIG):
    """Top y that vertically centres an item of `item_height` in `lane`."""
    return lane_center(lane, config) - item_height / 2


def clamp_lane(lane, config=DEFAULT_CONFIG):
    return max(0, min(config.num_lanes - 1, lane))
