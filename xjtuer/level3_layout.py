"""Third festival room: the fixed layout and the parts rebuilt on reload."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from xjtuer.leaf import Leaf, spawn_fake_leaf, spawn_single_leaf
from xjtuer.state import BGMReload, NeedReload
from xjtuer.world import (
    TILE,
    Body,
    Collider,
    Entity,
    Move,
    Sprite,
    Transform,
    World,
    spawn_box,
    spawn_warp,
)

BASE = (-800.0, 608.0)
SAVE_ID = 3
EXIT_LEAF_SCORE = -3
EXIT_BGM_ID = 4
EXIT_TARGET = (-1600.0, -1216.0)
HIDDEN_ATLAS_INDEX = 53

_BOXES = (
    (-12.0, 0.0, 0.5, 9.5),
    (12.0, 0.0, 0.5, 9.5),
    (0.0, -9.0, 12.5, 0.5),
    (0.0, 9.0, 12.5, 0.5),
    (2.0, -6.0, 10.5, 0.5),
    (-6.0, -4.5, 2.5, 1.0),
    (4.0, -4.0, 6.5, 0.5),
    (8.5, -3.0, 2.0, 0.5),
    (9.0, -2.0, 1.5, 0.5),
    (-11.0, -2.0, 0.5, 0.5),
    (-3.5, 1.5, 8.0, 1.0),
    (8.0, 1.5, 1.5, 1.0),
    (10.5, 1.0, 1.0, 0.5),
    (9.0, 3.0, 0.5, 0.5),
    (9.5, 7.5, 2.0, 1.0),
)
_TREE_OFFSETS = (-224.0, -96.0)
_TREE_Y = 144.0
_UPPER_TRIGGERS = (("trig1", -272.0), ("trig2", -144.0), ("trig3", -16.0), ("trig4", 112.0))
_TOUCHERS = ((7, 10.0, 2.0), (7, 11.0, 2.0), (14, 10.0, 3.0), (14, 11.0, 3.0))
_LEAVES = ((11.0, 4.0, 1), (11.0, -5.0, 0), (-11.0, -1.0, 1))


@dataclass
class _Spike:
    angle: float


@dataclass
class _SavePoint:
    save_id: int


@dataclass
class _Toucher:
    pass


@dataclass
class _Hidden:
    pass


@dataclass
class _Trap:
    """Kills the kid on contact."""


@dataclass
class _Trig1:
    pass


@dataclass
class _Trig2:
    pass


@dataclass
class _Trig3:
    pass


@dataclass
class _Trig4:
    pass


@dataclass
class _Trig5:
    state: int = 0


@dataclass
class _Trig6:
    state: int = 0


@dataclass
class _Trig7:
    state: int = 0


@dataclass
class _Trig8:
    pass


@dataclass
class _Trap1:
    pass


@dataclass
class _Trap2:
    pass


@dataclass
class _Trap3:
    pass


@dataclass
class _Trap4:
    pass


@dataclass
class _Trap5:
    pass


@dataclass
class _Trap6:
    pass


@dataclass
class _Trap7:
    pass


@dataclass
class _Trap8:
    pass


@dataclass
class _Trap9:
    pass


_TRIGGER_KINDS = {"trig1": _Trig1, "trig2": _Trig2, "trig3": _Trig3, "trig4": _Trig4}


def _cell(x: float, y: float, z: float = 0.0) -> Transform:
    bx, by = BASE
    return Transform(bx + x * TILE, by + y * TILE, z)


def _spawn_hidden(world: World, x: float, y: float) -> Entity:
    """Place a hidden block at a grid cell of the room."""
    return world.spawn(
        Sprite("bg", HIDDEN_ATLAS_INDEX), _cell(x, y), _Hidden(), NeedReload()
    )


def _spawn_moving_fake_leaf(
    world: World, x: float, y: float, goal: tuple[float, float], *markers: object
) -> Entity:
    bx, by = BASE
    leaf = spawn_fake_leaf(world, x, y, bx, by)
    world.insert(leaf, *markers, Move(goal_pos=goal, linear_speed=0.0))
    return leaf


def _spawn_spike(world: World, x: float, y: float, angle: float, *extra: object) -> Entity:
    return world.spawn(Sprite("spike"), _cell(x, y), _Spike(angle), *extra, NeedReload())


def spawn_once(world: World) -> dict[str, Entity]:
    """Place the parts of the room that survive a reload; return its triggers and exit."""
    bx, by = BASE
    world.spawn(Sprite("street"), Transform(bx, by, -0.5))
    world.spawn(Sprite("festival3"), Transform(bx, by, -0.35))

    for x, y, hw, hh in _BOXES:
        spawn_box(world, x, y, bx, by, hw, hh)
    world.spawn(Sprite("spike"), _cell(9.0, 6.0), _Spike(180.0))

    world.spawn(Sprite("save", 0), _cell(-10.0, 3.0), _SavePoint(SAVE_ID))

    for dx in _TREE_OFFSETS:
        world.spawn(Sprite("tree"), Transform(bx + dx, by + _TREE_Y, -0.4))

    spawned: dict[str, Entity] = {}
    for name, dx in _UPPER_TRIGGERS:
        spawned[name] = world.spawn(
            Collider(16.0, 96.0),
            Transform(bx + dx, by + 176.0, 0.0),
            _TRIGGER_KINDS[name](),
        )
    spawned["trig8"] = world.spawn(
        Collider(16.0, 32.0), Transform(bx - 16.0, by - 240.0, 0.0), _Trig8()
    )

    exit_warp = spawn_warp(world, bx + 352.0, by - 224.0, *EXIT_TARGET)
    world.insert(exit_warp, Leaf(EXIT_LEAF_SCORE), BGMReload(EXIT_BGM_ID))
    spawned["exit_warp"] = exit_warp
    return spawned


def spawn_reload(world: World) -> dict[str, Any]:
    """Place the parts of the room rebuilt on every reload; return the named ones."""
    bx, by = BASE
    for index, x, y in _TOUCHERS:
        world.spawn(Sprite("yellow", index), _cell(x, y), _Toucher(), NeedReload())

    _spawn_hidden(world, 11.0, -4.0)
    trap9 = [_spawn_hidden(world, 8.0, y) for y in (-8.0, -7.0)]
    for block in trap9:
        world.insert(block, _Trap9())

    for x, y, score in _LEAVES:
        spawn_single_leaf(world, x, y, bx, by, score)

    trap1 = _spawn_moving_fake_leaf(
        world, -7.0, 6.0, (bx - 224.0, by + 96.0), _Trap1(), _Trap()
    )

    trap2 = spawn_single_leaf(world, -3.0, 6.0, bx, by, 1)
    world.insert(trap2, _Trap2(), Move(goal_pos=(bx - 96.0, by + 96.0), linear_speed=0.0))

    trap3 = _spawn_moving_fake_leaf(
        world, 1.0, 6.0, (bx + 32.0, by + 96.0), _Trap3(), _Trap8()
    )
    decoy = spawn_fake_leaf(world, 10.0, 2.0, bx, by)
    world.insert(decoy, _Trap8())

    trap5 = _spawn_moving_fake_leaf(
        world, 1.0, 6.0, (bx + 32.0, by - 416.0), _Trap5(), _Trap()
    )
    trap6 = _spawn_moving_fake_leaf(
        world, 1.0, 6.0, (bx + 32.0, by - 416.0), _Trap6(), _Trap()
    )

    trap4 = [
        _spawn_spike(
            world, 9.0, 6.0, 180.0, _Trap4(),
            Move(goal_pos=(bx + 288.0, by + goal_dy), linear_speed=0.0),
        )
        for goal_dy in (160.0, 128.0)
    ]

    trap7 = world.spawn(
        Sprite("tree"),
        Transform(bx + 32.0, by + 144.0, -0.4),
        NeedReload(),
        Body(dynamic=True, gravity_scale=0.0),
        _Trap7(),
    )

    trig5 = world.spawn(
        Collider(16.0, 32.0), Transform(bx + 320.0, by - 16.0, 0.0), _Trig5(), NeedReload()
    )
    trig6 = world.spawn(
        Collider(16.0, 16.0), Transform(bx - 96.0, by - 176.0, 0.0), _Trig6(), NeedReload()
    )
    trig7 = world.spawn(
        Collider(16.0, 64.0), Transform(bx + 64.0, by - 48.0, 0.0), _Trig7(), NeedReload()
    )

    return {
        "trap1": trap1,
        "trap2": trap2,
        "trap3": trap3,
        "trap4": trap4,
        "trap5": trap5,
        "trap6": trap6,
        "trap7": trap7,
        "trap8": [trap3, decoy],
        "trap9": trap9,
        "trig5": trig5,
        "trig6": trig6,
        "trig7": trig7,
    }