import math

import pytest

from raycaster.player import Player
from raycaster.world import WorldMap


@pytest.fixture
def world():
    return WorldMap()


def test_default_position():
    player = Player()
    assert (player.x, player.y, player.angle) == (14.7, 5.09, 0.0)


def test_move_into_open_cell(world):
    player = Player(x=2.5, y=2.5)
    assert player.move(0.5, 0.25, world) is True
    assert (player.x, player.y) == pytest.approx((3.0, 2.75))


def test_move_into_wall_is_blocked(world):
    player = Player(x=1.5, y=1.5)
    assert player.move(-1.0, 0.0, world) is False
    assert (player.x, player.y) == (1.5, 1.5)


def test_turn_scales_by_sensitivity():
    player = Player()
    player.turn(400)
    assert player.angle == pytest.approx(1.0)


def test_turn_wraps_negative():
    player = Player()
    player.turn(-1)
    assert 0 < player.angle < 2 * math.pi


def test_turn_wraps_past_full_circle():
    player = Player(angle=2 * math.pi - 0.01)
    player.turn(1, sensitivity=0.02)
    assert 0 <= player.angle <= 2 * math.pi
    assert player.angle == pytest.approx(0.01)


def test_walk_forward_and_back(world):
    player = Player(x=7.5, y=7.5)
    player.walk(1, 0, 0.1, world)
    assert player.x == pytest.approx(7.5)
    assert player.y == pytest.approx(8.0)
    player.walk(-1, 0, 0.1, world)
    assert player.y == pytest.approx(7.5)


def test_walk_strafe(world):
    player = Player(x=7.5, y=7.5)
    player.walk(0, 1, 0.1, world)
    assert player.x == pytest.approx(8.0)
    assert player.y == pytest.approx(7.5)


def test_walk_blocked_by_wall(world):
    player = Player(x=14.5, y=14.9)
    player.walk(1, 0, 0.1, world)
    assert (player.x, player.y) == (14.5, 14.9)