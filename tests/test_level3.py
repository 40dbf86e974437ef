import pytest

from xjtuer.leaf import LeafCounter
from xjtuer.level3 import FestivalLevel3
from xjtuer.state import AudioPlayer, Music
from xjtuer.world import Collider, CollisionStarted, Kid, Move, Sprite, World


@pytest.fixture
def setup():
    world = World()
    level = FestivalLevel3()
    level.spawn_once(world)
    level.spawn_reload(world)
    kid = world.spawn(Kid())
    return world, level, kid


def sounds(world, music):
    return sum(
        1 for e in world.query(AudioPlayer) if world.get(e, AudioPlayer).sound is music
    )


def images(world, name):
    return sum(1 for e in world.query(Sprite) if world.get(e, Sprite).image == name)


def touch(world, level, kid, entity, leaves=None):
    level.update(world, [CollisionStarted(kid, entity)], leaves or LeafCounter())


def test_trig1_starts_trap1_once(setup):
    world, level, kid = setup
    touch(world, level, kid, level.triggers["trig1"])
    move = world.get(level.parts["trap1"], Move)
    assert move.linear_speed == 500.0
    assert move.status == 1
    touch(world, level, kid, level.triggers["trig1"])
    assert sounds(world, Music.TRAP) == 1


def test_trig2_moves_real_leaf(setup):
    world, level, kid = setup
    level.update(
        world, [CollisionStarted(level.triggers["trig2"], kid)], LeafCounter()
    )
    assert world.get(level.parts["trap2"], Move).status == 1


def test_trig4_needs_trig3_first(setup):
    world, level, kid = setup
    touch(world, level, kid, level.triggers["trig4"])
    assert world.get(level.parts["trap3"], Move).status == 0
    touch(world, level, kid, level.triggers["trig3"])
    touch(world, level, kid, level.triggers["trig4"])
    move = world.get(level.parts["trap3"], Move)
    assert move.status == 2
    assert move.linear_speed == 500.0
    assert sounds(world, Music.TRAP) == 2


def test_trig5_reveals_two_blocks_once(setup):
    world, level, kid = setup
    before = images(world, "bg")
    touch(world, level, kid, level.parts["trig5"])
    touch(world, level, kid, level.parts["trig5"])
    assert images(world, "bg") - before == 2


def test_trig6_reveals_one_block(setup):
    world, level, kid = setup
    before = images(world, "bg")
    touch(world, level, kid, level.parts["trig6"])
    assert images(world, "bg") - before == 1


def test_trig7_sequence(setup):
    world, level, kid = setup
    trig7 = level.parts["trig7"]
    touch(world, level, kid, trig7)
    assert world.get(level.parts["trap5"], Move).linear_speed == 1000.0
    assert world.get(level.parts["trap6"], Move).linear_speed == 0.0
    touch(world, level, kid, trig7)
    assert world.get(level.parts["trap6"], Move).linear_speed == 1000.0
    tree = level.parts["trap7"]
    assert not world.has(tree, Move)
    touch(world, level, kid, trig7)
    move = world.get(tree, Move)
    assert move.status == 1
    assert move.linear_speed == 200.0
    assert move.angle_speed == -5.0
    assert move.goal_angle == -180.0
    assert world.get(tree, Collider).half_width == 48.0
    assert sounds(world, Music.TRAP) == 3


def test_trig8_ignored_until_tree_moves(setup):
    world, level, kid = setup
    leaves = LeafCounter(3)
    touch(world, level, kid, level.triggers["trig8"], leaves)
    assert all(block in world for block in level.parts["trap9"])


def test_trig8_drops_tree_and_opens_shortcut(setup):
    world, level, kid = setup
    for _ in range(3):
        touch(world, level, kid, level.parts["trig7"])
    touch(world, level, kid, level.triggers["trig8"], LeafCounter(3))
    move = world.get(level.parts["trap7"], Move)
    assert move.status == 2
    assert move.linear_speed == 500.0
    assert not any(block in world for block in level.parts["trap9"])


def test_trig8_keeps_shortcut_without_leaves(setup):
    world, level, kid = setup
    for _ in range(3):
        touch(world, level, kid, level.parts["trig7"])
    touch(world, level, kid, level.triggers["trig8"], LeafCounter(2))
    assert all(block in world for block in level.parts["trap9"])


def test_trap8_fires_spikes_and_vanishes(setup):
    world, level, kid = setup
    decoy = level.parts["trap8"][1]
    touch(world, level, kid, decoy)
    assert decoy not in world
    assert all(
        world.get(spike, Move).linear_speed == 1000.0 for spike in level.parts["trap4"]
    )
    assert sounds(world, Music.COIN) == 1


def test_events_without_kid_are_ignored(setup):
    world, level, _ = setup
    other = world.spawn()
    level.update(
        world,
        [CollisionStarted(other, level.triggers["trig1"]), "noise"],
        LeafCounter(),
    )
    assert world.get(level.parts["trap1"], Move).status == 0
    assert sounds(world, Music.TRAP) == 0