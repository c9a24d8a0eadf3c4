import math

import pytest

from raycaster.world import (
    DEFAULT_ROWS,
    DEPTH,
    FOV,
    RayHit,
    WorldMap,
    base_angles,
    floor_row,
    sky_offset,
    wall_slice,
)


def test_at_inside_and_outside():
    world = WorldMap()
    assert world.at(1, 1) == "."
    assert world.at(8, 2) == "#"
    assert world.at(-1, 3) == "#"
    assert world.at(3, 16) == "#"
    assert world.width == 16 and world.height == 16


def test_is_wall_matches_rows():
    world = WorldMap()
    for y, row in enumerate(DEFAULT_ROWS):
        for x, cell in enumerate(row):
            assert world.is_wall(x, y) == (cell == "#")


def test_invalid_maps_rejected():
    with pytest.raises(ValueError):
        WorldMap(())
    with pytest.raises(ValueError):
        WorldMap(("...", ".."))


def test_cast_ray_hits_wall():
    world = WorldMap()
    hit = world.cast_ray(14.7, 5.09, 0.0)
    assert int(hit.y) == 15
    assert world.is_wall(int(hit.x), int(hit.y))
    assert hit.crossed_x is False
    assert hit.x == pytest.approx(14.7)
    assert hit.sample == pytest.approx(0.7, abs=1e-6)
    assert 0 < hit.distance < DEPTH


def test_cast_ray_leaving_open_map_reports_depth():
    world = WorldMap(("...", "...", "..."))
    hit = world.cast_ray(1.5, 1.5, 0.0)
    assert hit.distance == DEPTH


def test_cast_ray_crossing_vertical_line():
    world = WorldMap()
    hit = world.cast_ray(5.5, 1.5, math.pi / 2)
    assert hit.crossed_x is True
    assert int(hit.x) == 15
    assert hit.sample == pytest.approx(0.5, abs=1e-6)


def test_base_angles_span_fov():
    angles = base_angles(100)
    assert len(angles) == 100
    assert angles[0] == pytest.approx(-FOV / 2)
    assert all(a < b for a, b in zip(angles, angles[1:]))
    assert angles[-1] < FOV / 2


def test_wall_slice_symmetric_about_middle():
    hit = RayHit(distance=2.0, x=3.25, y=5.0, crossed_x=False)
    piece = wall_slice(hit, 100, 64)
    assert piece.ceiling + piece.floor == pytest.approx(100)
    assert piece.ceiling == pytest.approx(0.0)
    assert piece.tex_left == 16
    assert piece.tex_right == piece.tex_left + 1


def test_wall_slice_texture_column_in_range():
    world = WorldMap()
    for angle in base_angles(32):
        piece = wall_slice(world.cast_ray(7.5, 7.5, angle), 240, 64)
        assert 0 <= piece.tex_left < 64


def test_sky_offset_wraps():
    assert sky_offset(0.0, 400) == 0
    assert sky_offset(-math.pi / 2, 400) == 300
    assert sky_offset(1.0, 400) == sky_offset(1.0 + 2 * math.pi, 400)


def test_floor_row_shape_and_direction():
    xs, ys = floor_row(230, 64, 240, 7.5, 7.5, 0.0)
    assert len(xs) == 64 and len(ys) == 64
    assert xs[0] < 7.5 < xs[-1]
    assert (ys > 7.5).all()


def test_floor_row_nearer_rows_closer_to_player():
    far_x, far_y = floor_row(130, 8, 240, 7.5, 7.5, 0.0)
    near_x, near_y = floor_row(239, 8, 240, 7.5, 7.5, 0.0)
    assert far_y[0] - 7.5 > near_y[0] - 7.5


def test_floor_row_rejects_horizon():
    with pytest.raises(ValueError):
        floor_row(120, 8, 240, 7.5, 7.5, 0.0)