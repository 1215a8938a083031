from lane_train.entities import Obstacle
from lane_train.session import Session, tick


def snapshot(session):
    return (
        session.score,
        session.speed,
        session.world_offset,
        session.frames,
        session.train.y,
        [(o.lane, o.x) for o in session.obstacles],
    )


class TestTick:
    def test_quiet_run_scores_nothing(self, quiet_session):
        for _ in range(500):
            tick(quiet_session)
        assert quiet_session.score == 0
        assert not quiet_session.game_over
        assert quiet_session.frames == 500

    def test_speed_never_decreases(self, quiet_session):
        last = quiet_session.speed
        for _ in range(300):
            tick(quiet_session)
            assert quiet_session.speed >= last
            last = quiet_session.speed

    def test_world_scrolls_by_speed(self, quiet_session):
        tick(quiet_session)
        assert quiet_session.world_offset == -4.0

    def test_rock_on_train_ends_game(self, quiet_session, rng):
        train = quiet_session.train
        rock = Obstacle(train.current_lane, rng)
        rock.x = train.x
        quiet_session.obstacles.append(rock)
        tick(quiet_session)
        assert quiet_session.game_over

    def test_finished_session_is_frozen(self, quiet_session, rng):
        rock = Obstacle(quiet_session.train.current_lane, rng)
        rock.x = quiet_session.train.x
        quiet_session.obstacles.append(rock)
        tick(quiet_session)
        before = snapshot(quiet_session)
        quiet_session.train.change_lane(1)
        for _ in range(10):
            assert tick(quiet_session) is quiet_session
        assert snapshot(quiet_session) == before

    def test_train_moves_during_tick(self, quiet_session):
        quiet_session.train.change_lane(-1)
        y = quiet_session.train.y
        tick(quiet_session)
        assert quiet_session.train.y == y - 9

    def test_unattended_train_eventually_crashes_and_scores(self):
        # Rocks keep coming; sitting still in the middle lane is fatal sooner or later
        session = Session(seed=2024)
        for _ in range(20000):
            tick(session)
            if session.game_over:
                break
        assert session.game_over
        assert session.score % 10 == 0

    def test_sessions_are_independent(self):
        a = Session(seed=5)
        b = Session(seed=5)
        for _ in range(400):
            tick(a)
        assert b.frames == 0
        assert b.obstacles == []
        for _ in range(400):
            tick(b)
        assert snapshot(a) == snapshot(b)
