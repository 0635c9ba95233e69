import math

import pytest

from cubraycaster.raycast import sign, trace_ray

ROOM = (
    "XXXXXXX",
    "X11111X",
    "X10001X",
    "X10001X",
    "X10001X",
    "X11111X",
    "XXXXXXX",
)


@pytest.mark.parametrize(
    "value, expected",
    [(2.5, 1), (-0.1, -1), (0.0, 0), (-0.0, 0)],
)
def test_sign(value, expected):
    assert sign(value) == expected


@pytest.mark.parametrize(
    "angle, texture",
    [(0.0, 2), (math.pi, 0), (math.pi / 2, 1), (3 * math.pi / 2, 3)],
)
def test_texture_index_follows_direction(angle, texture):
    hit = trace_ray(ROOM, 3.5, 3.5, angle)
    assert hit.texture == texture


def test_distances_symmetric_from_centre():
    distances = [
        trace_ray(ROOM, 3.5, 3.5, angle).distance
        for angle in (0.0, math.pi / 2, math.pi, 3 * math.pi / 2)
    ]
    for distance in distances[1:]:
        assert distance == pytest.approx(distances[0])


def test_moving_towards_wall_shortens_distance_by_step():
    far = trace_ray(ROOM, 2.5, 3.5, 0.0).distance
    near = trace_ray(ROOM, 3.5, 3.5, 0.0).distance
    assert far - near == pytest.approx(1.0)


def test_mirror_angles_give_equal_distances():
    up = trace_ray(ROOM, 3.5, 3.5, 0.3)
    down = trace_ray(ROOM, 3.5, 3.5, -0.3)
    assert up.distance == pytest.approx(down.distance)
    assert up.texture == down.texture


def test_oblique_ray_projects_onto_perpendicular_distance():
    straight = trace_ray(ROOM, 3.5, 3.5, 0.0)
    oblique = trace_ray(ROOM, 3.5, 3.5, 0.3)
    assert oblique.distance > straight.distance
    assert oblique.distance * math.cos(0.3) == pytest.approx(straight.distance)


def test_shift_is_within_unit_interval():
    for step in range(16):
        hit = trace_ray(ROOM, 3.2, 2.7, step * math.pi / 8 + 0.05)
        assert 0.0 <= hit.shift <= 1.0


def test_hit_values_and_frozen_record():
    hit = trace_ray(ROOM, 3.5, 3.5, 0.0)
    assert hit.texture == 2
    assert (hit.distance, hit.shift) == pytest.approx((1.5, 0.5))
    with pytest.raises(AttributeError):
        hit.distance = 0.0


@pytest.mark.parametrize("angle", [0.0, math.pi])
def test_open_map_raises(angle):
    grid = ("000", "000", "000")
    with pytest.raises(ValueError):
        trace_ray(grid, 1.5, 1.5, angle)