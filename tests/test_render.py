import pygame

from lane_train.config import DEFAULT_CONFIG
from lane_train.render import Renderer
from lane_train.session import Session, tick


def make_surface():
    return pygame.Surface((DEFAULT_CONFIG.width, DEFAULT_CONFIG.height))


class TestRenderer:
    def test_draws_session(self):
        session = Session(seed=4)
        for _ in range(200):
            tick(session)
        surface = make_surface()
        Renderer().draw(surface, session)
        train = session.train
        pixel = surface.get_at((int(train.x) + 2, int(train.y) + 3))
        assert tuple(pixel)[:3] == (74, 74, 74)

    def test_banners_darken_the_scene(self):
        renderer = Renderer()
        session = Session(seed=4)
        plain = make_surface()
        banner = make_surface()
        renderer.draw(plain, session)
        renderer.draw(banner, session, show_instructions=True)
        corner = (DEFAULT_CONFIG.width - 5, DEFAULT_CONFIG.height - 5)
        assert sum(tuple(banner.get_at(corner))[:3]) < sum(tuple(plain.get_at(corner))[:3])

    def test_ties_scroll_with_world_offset(self):
        renderer = Renderer()
        a = make_surface()
        b = make_surface()
        renderer.draw_track(a, 0)
        renderer.draw_track(b, -20)
        assert pygame.image.tostring(a, "RGB") != pygame.image.tostring(b, "RGB")

    def test_offset_wraps_on_tie_spacing(self):
        renderer = Renderer()
        a = make_surface()
        b = make_surface()
        renderer.draw_track(a, -15)
        renderer.draw_track(b, -55)
        assert pygame.image.tostring(a, "RGB") == pygame.image.tostring(b, "RGB")

    def test_ground_fills_whole_canvas(self):
        renderer = Renderer()
        top = tuple(renderer.background.get_at((5, 0)))[:3]
        bottom = tuple(renderer.background.get_at((5, DEFAULT_CONFIG.height - 1)))[:3]
        assert top == (139, 115, 85)
        assert bottom != top
