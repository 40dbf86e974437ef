"""First festival room: leaves, a hidden wall and a falling lantern."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from xjtuer.leaf import Leaf, LeafCounter, spawn_single_leaf
from xjtuer.state import AudioPlayer, Music, NeedReload
from xjtuer.world import (
    TILE,
    Body,
    Collider,
    CollisionStarted,
    Entity,
    Layer,
    Move,
    Sprite,
    Transform,
    World,
    spawn_box,
    spawn_warp,
)

BASE = (800.0, 608.0)
SAVE_ID = 1
EXIT_LEAF_SCORE = -2
EXIT_TARGET = (-384.0, 960.0)

_BOXES = (
    (0.0, -9.0, 12.5, 0.5),
    (-3.5, -8.0, 1.0, 0.5),
    (-2.5, -7.0, 1.0, 0.5),
    (0.0, -6.0, 2.5, 0.5),
    (2.5, -5.0, 3.0, 0.5),
    (8.0, -4.0, 4.5, 0.5),
    (8.5, -3.0, 4.0, 0.5),
    (-9.0, -5.0, 3.5, 0.5),
    (-8.5, -4.0, 4.0, 0.5),
    (-8.0, -3.0, 4.5, 0.5),
    (-6.5, -2.0, 6.0, 0.5),
    (-9.5, -0.5, 3.0, 1.0),
    (-1.5, -1.5, 3.0, 1.0),
    (-4.0, 0.0, 0.5, 0.5),
    (-12.0, 4.5, 0.5, 4.0),
    (-11.0, 7.5, 0.5, 2.0),
    (1.0, 6.5, 11.5, 3.0),
    (13.0, 0.0, 0.5, 9.5),
)
_SPIKES = ((-5.0, -1.0), (-6.0, -1.0), (-12.0, -8.0))
_TOUCHERS = (
    (6, -5.0, -1.0),
    (6, -6.0, -1.0),
    (6, -11.0, 5.0),
    (4, -11.0, 4.0),
    (14, -5.0, 0.0),
    (14, -6.0, 0.0),
)
_LEAVES = ((-10.0, 2.0), (3.0, -6.0), (-2.0, -8.0))
_WALL_X = 10.0
_WALL_ROWS = range(-2, 4)
_REVEALED_BLOCKS = ((3.0, -8.0), (3.0, -7.0))
_HIDDEN_ATLAS_INDEX = 53


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
    state: int = 0


@dataclass
class _Trig3:
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


def _cell(bx: float, by: float, x: float, y: float, z: float = 0.0) -> Transform:
    return Transform(bx + x * TILE, by + y * TILE, z)


def _only(world: World, kind: type) -> Entity | None:
    matches = list(world.query(kind))
    return matches[0] if len(matches) == 1 else None


def _spawn_hidden(world: World, x: float, y: float, bx: float, by: float) -> Entity:
    return world.spawn(
        Sprite("bg", _HIDDEN_ATLAS_INDEX), _cell(bx, by, x, y), _Hidden(), NeedReload()
    )


def _trap_sound(world: World) -> None:
    world.spawn(AudioPlayer(Music.TRAP), NeedReload())


class FestivalLevel1:
    """The festival room entered from the gate."""

    def __init__(self) -> None:
        self.base = BASE
        self.trig1: Entity | None = None
        self.trig2: Entity | None = None
        self.trig3: Entity | None = None
        self.exit_warp: Entity | None = None
        self.trap1: Entity | None = None
        self.trap3: Entity | None = None
        self.walls: list[Entity] = []

    def spawn_once(self, world: World) -> None:
        """Place the parts of the room that survive a reload."""
        bx, by = self.base
        world.spawn(Sprite("street"), Transform(bx, by, -0.5))
        world.spawn(Sprite("festival1"), Transform(bx, by, -0.3))

        for x, y, hw, hh in _BOXES:
            spawn_box(world, x, y, bx, by, hw, hh)
        for x, y in _SPIKES:
            world.spawn(Sprite("spike"), _cell(bx, by, x, y), _Spike(0.0))

        world.spawn(Sprite("save", 0), _cell(bx, by, -9.0, -8.0), _SavePoint(SAVE_ID))

        spawn_warp(world, bx - 352.0, by + 160.0, bx + 352.0, by - 224.0)
        spawn_warp(world, bx + 352.0, by - 160.0, bx - 352.0, by + 98.0)

        self.trig1 = world.spawn(
            Collider(16.0, 16.0), Transform(bx - 352.0, by + 160.0, 0.0), _Trig1()
        )
        self.trig2 = world.spawn(
            Collider(32.0, 32.0), Transform(bx + 16.0, by - 240.0, 0.0), _Trig2()
        )
        self.trig3 = world.spawn(
            Collider(16.0, 96.0), Transform(bx + 288.0, by + 16.0, 0.0), _Trig3()
        )

        self.exit_warp = spawn_warp(world, bx + 384.0, by + 32.0, *EXIT_TARGET)
        world.insert(self.exit_warp, Leaf(EXIT_LEAF_SCORE))

    def spawn_reload(self, world: World) -> None:
        """Place the parts of the room rebuilt on every reload."""
        bx, by = self.base
        for index, x, y in _TOUCHERS:
            world.spawn(
                Sprite("yellow", index), _cell(bx, by, x, y), _Toucher(), NeedReload()
            )

        self.walls = []
        for y in _WALL_ROWS:
            wall = _spawn_hidden(world, _WALL_X, float(y), bx, by)
            world.insert(wall, _Trap2())
            self.walls.append(wall)

        for x, y in _LEAVES:
            spawn_single_leaf(world, x, y, bx, by, 1)

        self.trap1 = world.spawn(
            Sprite("fest1_1"),
            Transform(bx + 160.0, by - 224.0, 0.0),
            _Trap1(),
            NeedReload(),
        )
        self.trap3 = world.spawn(
            Sprite("fest1_2"),
            Transform(bx + 278.0, by + 167.0, 0.0),
            Body(dynamic=True, gravity_scale=0.0),
            _Trap3(),
            _Trap(),
            Collider(
                72.0,
                16.0,
                member=Layer.GROUP_3,
                collides_with=Layer.GROUP_1 | Layer.GROUP_4,
                solid_with=Layer.GROUP_1,
            ),
            NeedReload(),
        )

    def update(
        self, world: World, events: Iterable[object], leaves: LeafCounter
    ) -> None:
        """React to the kid touching the room's triggers."""
        started = [e for e in events if isinstance(e, CollisionStarted)]
        self._trig1(world, started)
        self._trig2(world, started)
        self._trig3(world, started, leaves)

    def _trig1(self, world: World, events: list[CollisionStarted]) -> None:
        for event in events:
            trap1 = _only(world, _Trap1)
            if trap1 is None:
                continue
            if world.kid_touches(event, _Trig1) is not None:
                world.despawn(trap1)

    def _trig2(self, world: World, events: list[CollisionStarted]) -> None:
        bx, by = self.base
        for event in events:
            if world.kid_touches(event, _Trig2) is None:
                continue
            trig = _only(world, _Trig2)
            if trig is None:
                continue
            trig2 = world.get(trig, _Trig2)
            if trig2.state == 0:
                trig2.state = 1
                for x, y in _REVEALED_BLOCKS:
                    _spawn_hidden(world, x, y, bx, by)

    def _trig3(
        self, world: World, events: list[CollisionStarted], leaves: LeafCounter
    ) -> None:
        bx, by = self.base
        for event in events:
            trap3 = _only(world, _Trap3)
            if trap3 is None:
                continue
            if world.kid_touches(event, _Trig3) is None:
                continue
            if leaves.num == 1:
                world.insert(
                    trap3,
                    Move(goal_pos=(bx + 278.0, by - 64.0), linear_speed=1000.0, status=0),
                )
                _trap_sound(world)
            elif leaves.num == 2:
                for wall in list(world.query(_Trap2)):
                    world.despawn(wall)