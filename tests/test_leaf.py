from xjtuer.leaf import Leaf, LeafCounter, spawn_fake_leaf, spawn_single_leaf
from xjtuer.state import AudioPlayer, Music, NeedReload
from xjtuer.world import Body, Collider, CollisionStarted, Kid, Move, Transform, World


def test_leaf_placed_on_grid():
    world = World()
    at_origin = spawn_single_leaf(world, 0.0, 0.0, 800.0, 608.0, 1)
    t = world.get(at_origin, Transform)
    assert (t.x, t.y, t.z) == (800.0, 608.0, -0.2)
    moved = spawn_single_leaf(world, 1.0, -1.0, 800.0, 608.0, 1)
    m = world.get(moved, Transform)
    assert (m.x - t.x, t.y - m.y) == (32.0, 32.0)


def test_leaf_components():
    world = World()
    e = spawn_single_leaf(world, 0.0, 0.0, 0.0, 0.0, 3)
    assert world.get(e, Leaf).score == 3
    assert world.get(e, Collider).half_width == 10.0
    assert world.get(e, Collider).is_sensor
    assert world.get(e, Body).gravity_scale == 0.0
    assert world.has(e, NeedReload)


def test_fake_leaf_has_no_score():
    world = World()
    e = spawn_fake_leaf(world, 0.0, 0.0, 0.0, 0.0)
    assert not world.has(e, Leaf)
    assert world.has(e, NeedReload)


def test_collect_counts_and_removes():
    world = World()
    counter = LeafCounter()
    kid = world.spawn(Kid())
    leaf = spawn_single_leaf(world, 0.0, 0.0, 0.0, 0.0, 1)
    counter.collect(world, [CollisionStarted(leaf, kid)])
    assert counter.num == 1
    assert leaf not in world
    coins = [e for e in world.query(AudioPlayer) if world.get(e, AudioPlayer).sound is Music.COIN]
    assert len(coins) == 1 and world.has(coins[0], NeedReload)


def test_collect_kid_first_order():
    world = World()
    counter = LeafCounter()
    kid = world.spawn(Kid())
    leaf = spawn_single_leaf(world, 0.0, 0.0, 0.0, 0.0, 1)
    counter.collect(world, [CollisionStarted(kid, leaf)])
    assert counter.num == 1 and leaf not in world


def test_negative_score_keeps_entity():
    world = World()
    counter = LeafCounter()
    kid = world.spawn(Kid())
    warp = world.spawn(Leaf(-2))
    counter.collect(world, [CollisionStarted(kid, warp)])
    assert counter.num == -2
    assert warp in world
    assert list(world.query(AudioPlayer)) == []


def test_non_kid_collision_ignored_and_reset():
    world = World()
    counter = LeafCounter(num=2)
    other = world.spawn(Move())
    leaf = spawn_single_leaf(world, 0.0, 0.0, 0.0, 0.0, 1)
    counter.collect(world, [CollisionStarted(other, leaf)])
    assert counter.num == 2 and leaf in world
    counter.reset()
    assert counter.num == 0