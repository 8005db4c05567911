import math

import pytest

from raycasting import Emitter, Segment
from raycasting.helpers import distance


@pytest.fixture
def emitter():
    return Emitter()


def test_new_emitter_has_one_ray_per_degree_at_origin(emitter):
    assert len(emitter.rays) == 360
    assert emitter.pos == (0, 0)
    assert all(ray.pos == (0, 0) for ray in emitter.rays)


def test_rays_cover_every_degree_once(emitter):
    angles = [round(math.degrees(math.atan2(ray.dir.y, ray.dir.x))) % 360 for ray in emitter.rays]
    assert angles == list(range(360))


def test_update_moves_every_ray(emitter):
    emitter.update(12.5, -7.25)
    assert emitter.pos == (12.5, -7.25)
    for ray in emitter.rays:
        assert ray.pos.x == 12.5
        assert ray.pos.y == -7.25


def test_update_keeps_rays_independent_of_callers_vectors(emitter):
    emitter.update(1, 2)
    origin, _ = emitter.show()[0]
    origin.x = 99
    assert emitter.rays[0].pos == (1, 2)
    assert emitter.pos == (1, 2)


def test_wall_to_the_right(emitter):
    hits = emitter.closest_hits([Segment((10, -10), (10, 10))])
    assert hits[0] == (10, 0)
    # 90 degrees points up, along the wall; 180 points away from it
    assert hits[90] is None
    assert hits[180] is None


def test_nearest_wall_wins(emitter):
    near = Segment((10, -10), (10, 10))
    far = Segment((20, -10), (20, 10))
    ray = emitter.rays[0]
    candidates = [ray.cast(far), ray.cast(near)]
    assert all(c is not None for c in candidates)

    hit = emitter.closest_hits([far, near])[0]
    assert hit == min(candidates, key=lambda p: distance(emitter.pos, p))
    assert hit == (10, 0)


def test_first_wall_wins_on_ties(emitter):
    # both walls cross ray 0 at (10, 0)
    first = Segment((10, -10), (10, 10))
    second = Segment((5, -5), (15, 5))
    hit = emitter.closest_hits([first, second])[0]
    assert hit == (10, 0)


def test_look_skips_rays_without_hit(emitter):
    walls = [Segment((10, -10), (10, 10))]
    hits = emitter.closest_hits(walls)
    # the wall spans -45..45 degrees, the exact corners are rounding dependent
    hit_degrees = {a for a, hit in enumerate(hits) if hit is not None}
    assert set(range(0, 45)) | set(range(316, 360)) <= hit_degrees
    assert not hit_degrees & set(range(46, 315))

    pairs = emitter.look(walls)
    assert len(pairs) == len(hit_degrees)
    for origin, hit in pairs:
        assert origin == (0, 0)
        assert hit.x == pytest.approx(10)
        assert -10 < hit.y < 10


def test_look_without_walls(emitter):
    assert emitter.look([]) == []


def test_look_is_recomputed_after_a_move(emitter):
    walls = [Segment((10, -10), (10, 10))]
    emitter.update(20, 0)
    hits = emitter.closest_hits(walls)
    assert hits[0] is None
    assert hits[180].x == pytest.approx(10)
    assert hits[180].y == pytest.approx(0)


def test_show_returns_short_stub_per_ray(emitter):
    emitter.update(5, 5)
    stubs = emitter.show()
    assert len(stubs) == 360
    start, end = stubs[0]
    assert start == (5, 5)
    assert end == (15, 5)
    for start, end in stubs:
        assert start.distance_to(end) == pytest.approx(10)
