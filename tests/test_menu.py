from xjtuer.menu import spawn_end_page, spawn_start_page
from xjtuer.state import BGMReload, music_for, Music
from xjtuer.world import Ground, Sprite, Transform, Warp, World


def _floor(world):
    return [
        world.get(e, Transform)
        for e in world.query(Sprite, Transform)
        if world.get(e, Sprite).image == "yellow"
    ]


def test_start_page_warp():
    world = World()
    warp = spawn_start_page(world)
    assert world.get(warp, Warp).target == (480.0, 416.0)
    assert world.get(warp, Transform).position == (256.0, -128.0)
    assert world.get(warp, BGMReload).id == 1
    assert music_for(world.get(warp, BGMReload).id) is Music.FESTIVAL


def test_start_page_floor_spans_room():
    world = World()
    spawn_start_page(world)
    tiles = _floor(world)
    xs = sorted(t.x for t in tiles)
    assert xs[0] == -384.0 and xs[-1] == 384.0
    assert all(b - a == 32.0 for a, b in zip(xs, xs[1:]))
    assert {t.y for t in tiles} == {-288.0}


def test_start_page_walls_and_sprites():
    world = World()
    spawn_start_page(world)
    assert len(list(world.query(Ground))) == 4
    images = {world.get(e, Sprite).image for e in world.query(Sprite)}
    assert {"gate", "title", "hint", "world", "warp"} <= images


def test_end_page_layout():
    world = World()
    spawn_end_page(world)
    boxes = [world.get(e, Ground) for e in world.query(Ground)]
    assert len(boxes) == 3
    assert all(g.origin == (-1600.0, 0.0) for g in boxes)
    thanks = [
        world.get(e, Transform)
        for e in world.query(Sprite)
        if world.get(e, Sprite).image == "thanks"
    ]
    assert [(t.x, t.y, t.z) for t in thanks] == [(-1600.0, 0.0, 0.0)]
    xs = sorted(t.x for t in _floor(world))
    assert xs[0] == -1600.0 - 384.0 and xs[-1] == -1600.0 + 384.0
    assert list(world.query(Warp)) == []