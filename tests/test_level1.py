import pytest

from xjtuer.leaf import Leaf, LeafCounter
from xjtuer.level1 import FestivalLevel1
from xjtuer.state import AudioPlayer, Music, NeedReload
from xjtuer.world import Collider, CollisionStarted, Kid, Move, Transform, Warp, World


@pytest.fixture
def room():
    world = World()
    level = FestivalLevel1()
    level.spawn_once(world)
    level.spawn_reload(world)
    kid = world.spawn(Kid())
    return world, level, kid


def _sounds(world, music):
    return [
        e for e in world.query(AudioPlayer) if world.get(e, AudioPlayer).sound is music
    ]


def test_trig1_sits_on_a_warp(room):
    world, level, _ = room
    trig_pos = world.get(level.trig1, Transform).position
    warp_positions = [world.get(e, Transform).position for e in world.query(Warp)]
    assert trig_pos in warp_positions
    assert world.get(level.trig1, Collider).is_sensor


def test_exit_warp_carries_negative_leaf(room):
    world, level, _ = room
    assert world.get(level.exit_warp, Leaf).score == -2
    assert world.get(level.exit_warp, Warp).target == (-384.0, 960.0)


def test_reload_spawns_three_scoring_leaves(room):
    world, _, _ = room
    scores = sorted(world.get(e, Leaf).score for e in world.query(Leaf))
    assert scores == [-2, 1, 1, 1]


def test_reloaded_traps_are_reloadable(room):
    world, level, _ = room
    for entity in [level.trap1, level.trap3, *level.walls]:
        assert world.has(entity, NeedReload)
    assert len(level.walls) == 6


def test_trig1_removes_trap1(room):
    world, level, kid = room
    level.update(world, [CollisionStarted(kid, level.trig1)], LeafCounter())
    assert level.trap1 not in world
    before = len(world)
    level.update(world, [CollisionStarted(level.trig1, kid)], LeafCounter())
    assert len(world) == before


def test_trig2_reveals_blocks_once(room):
    world, level, kid = room
    before = len(world)
    level.update(world, [CollisionStarted(level.trig2, kid)], LeafCounter())
    assert len(world) == before + 2
    level.update(world, [CollisionStarted(kid, level.trig2)], LeafCounter())
    assert len(world) == before + 2


def test_trig3_with_one_leaf_drops_lantern(room):
    world, level, kid = room
    level.update(world, [CollisionStarted(kid, level.trig3)], LeafCounter(num=1))
    move = world.get(level.trap3, Move)
    assert move.linear_speed == 1000.0
    assert move.status == 0
    assert len(_sounds(world, Music.TRAP)) == 1


def test_trig3_with_two_leaves_opens_wall(room):
    world, level, kid = room
    level.update(world, [CollisionStarted(kid, level.trig3)], LeafCounter(num=2))
    assert all(wall not in world for wall in level.walls)
    assert world.get(level.trap3, Move) is None


def test_trig3_without_leaves_changes_nothing(room):
    world, level, kid = room
    before = len(world)
    level.update(world, [CollisionStarted(kid, level.trig3)], LeafCounter(num=0))
    assert len(world) == before
    assert all(wall in world for wall in level.walls)


def test_collision_without_kid_is_ignored(room):
    world, level, _ = room
    other = world.spawn()
    level.update(world, [CollisionStarted(other, level.trig1)], LeafCounter())
    assert level.trap1 in world