def policy(env):
    # Strategy: for each lane find the gap to the nearest rock still ahead of the
    # train. Stay put if the current lane's gap is the widest reachable one,
    # otherwise step one track toward the widest gap among the neighbouring lanes.
    session = env.session
    train = session.train
    num_lanes = session.config.num_lanes

    gaps = [float("inf")] * num_lanes
    for obstacle in session.obstacles:
        if obstacle.x + obstacle.width < train.x:
            continue  # already behind the train
        gaps[obstacle.lane] = min(gaps[obstacle.lane], obstacle.x - train.x)

    lane = train.target_lane
    candidates = [c for c in (lane, lane - 1, lane + 1) if 0 <= c < num_lanes]
    best = max(candidates, key=lambda c: gaps[c])

    if gaps[best] == gaps[lane]:
        return [0, 0, 0]  # no better lane, hold
    if best < lane:
        return [1, 0, 0]  # Move up
    return [2, 0, 0]  # Move down
