"""Second festival room: a rising spike, a fast lift, a bike and a bell."""

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

BASE = (0.0, 608.0 * 2)
SAVE_ID = 2
EXIT_LEAF_SCORE = -3
EXIT_TARGET = (-1152.0, 704.0)
LEAVES_FOR_SPIKES = 3

_BOXES = (
    (4.0, -9.0, 8.5, 0.5),
    (-8.0, -8.5, 1.5, 1.0),
    (-11.5, -9.0, 1.0, 0.5),
    (-7.5, -7.0, 1.0, 0.5),
    (4.5, -7.0, 2.0, 0.5),
    (10.5, -7.0, 2.0, 0.5),
    (7.5, -8.0, 5.0, 0.5),
    (3.5, -6.0, 1.0, 0.5),
    (11.0, -6.0, 1.5, 0.5),
    (-1.5, -6.0, 3.0, 0.5),
    (12.0, -4.5, 0.5, 1.0),
    (-12.0, 2.0, 0.5, 7.5),
    (-10.5, -1.0, 1.0, 1.5),
    (-5.0, -1.0, 1.5, 1.5),
    (3.0, -1.0, 2.5, 1.5),
    (8.0, -1.5, 2.5, 1.0),
    (-1.0, -2.0, 11.0, 0.5),
    (1.0, 1.0, 0.5, 0.5),
    (1.5, 4.0, 11.0, 0.5),
    (2.5, 6.0, 3.0, 0.5),
    (0.0, 9.0, 12.5, 0.5),
    (-13.0, 0.0, 0.5, 9.5),
    (13.0, 0.0, 0.5, 9.5),
)
_SPIKES = (
    (-10.0, -9.0, 0.0),
    (-9.0, -7.0, 180.0),
    (-9.0, -6.0, 0.0),
    (-6.0, -9.0, 0.0),
    (-5.0, -9.0, 0.0),
    (8.0, -7.0, 0.0),
    (9.0, -6.0, 0.0),
    (10.0, -5.0, 0.0),
    (7.0, 0.0, 0.0),
    (8.0, 0.0, 0.0),
    (5.0, 1.0, 0.0),
    (-9.0, -1.0, 0.0),
    (-8.0, -1.0, 0.0),
    (-7.0, -1.0, 0.0),
    (-3.0, -1.0, 0.0),
    (-2.0, -1.0, 0.0),
    (-1.0, -1.0, 0.0),
    (0.0, -1.0, 0.0),
    (2.0, 8.0, 180.0),
)
_TOUCHER_COLUMNS = (-9.0, -8.0, -7.0, -3.0, -2.0, -1.0, 0.0)
_TOUCHER_ROWS = ((6, -1.0), (14, 0.0))
_HIDDEN_CELLS = ((-4.0, -8.0), (-4.0, -7.0))
_HIDDEN_ATLAS_INDEX = 10
_LEAVES = ((-1.0, -8.0), (0.0, 1.0), (4.0, 5.0))


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
class _Trap1:
    pass


@dataclass
class _Trap2:
    pass


@dataclass
class _Bike:
    pass


@dataclass
class _Trap4:
    pass


@dataclass
class _Trap5:
    pass


def _cell(bx: float, by: float, x: float, y: float, z: float = 0.0) -> Transform:
    return Transform(bx + x * TILE, by + y * TILE, z)


def _only(world: World, *kinds: type) -> Entity | None:
    matches = list(world.query(*kinds))
    return matches[0] if len(matches) == 1 else None


def _sound(world: World, music: Music) -> None:
    world.spawn(AudioPlayer(music), NeedReload())


def _moving_collider() -> Collider:
    return Collider(
        30.0,
        10.0,
        member=Layer.GROUP_3,
        collides_with=Layer.GROUP_1 | Layer.GROUP_4,
        solid_with=Layer.GROUP_1,
    )


class FestivalLevel2:
    """The festival room reached from the first festival room."""

    def __init__(self) -> None:
        self.base = BASE
        self.trig1: Entity | None = None
        self.trig2: Entity | None = None
        self.trig3: Entity | None = None
        self.trig4: Entity | None = None
        self.exit_warp: Entity | None = None
        self.trap1: Entity | None = None
        self.trap2: Entity | None = None
        self.bike: Entity | None = None
        self.timer: Entity | None = None
        self.trap5: list[Entity] = []

    def spawn_once(self, world: World) -> None:
        """Place the parts of the room that survive a reload."""
        bx, by = self.base
        world.spawn(Sprite("street"), Transform(bx, by, -0.5))
        world.spawn(Sprite("festival2"), Transform(bx, by, -0.35))

        for x, y, hw, hh in _BOXES:
            spawn_box(world, x, y, bx, by, hw, hh)
        for x, y, angle in _SPIKES:
            world.spawn(Sprite("spike"), _cell(bx, by, x, y), _Spike(angle))

        world.spawn(
            Sprite("save", 0), _cell(bx, by, -11.0, -8.0), _SavePoint(SAVE_ID)
        )

        self.trig1 = world.spawn(
            Collider(16.0, 96.0), Transform(bx + 64.0, by - 176.0, 0.0), _Trig1()
        )
        self.trig2 = world.spawn(
            Collider(16.0, 32.0), Transform(bx, by + 240.0, 0.0), _Trig2()
        )
        self.trig3 = world.spawn(
            Collider(16.0, 16.0), Transform(bx + 128.0, by + 160.0, 0.0), _Trig3()
        )
        self.trig4 = world.spawn(
            Collider(16.0, 64.0), Transform(bx - 256.0, by + 208.0, 0.0), _Trig4()
        )

        self.exit_warp = spawn_warp(world, bx + 96.0, by + 224.0, *EXIT_TARGET)
        world.insert(self.exit_warp, Leaf(EXIT_LEAF_SCORE))

    def _spawn_spike(
        self, world: World, x: float, y: float, angle: float, *extra: object
    ) -> Entity:
        bx, by = self.base
        return world.spawn(
            Sprite("spike"), _cell(bx, by, x, y), _Spike(angle), *extra, NeedReload()
        )

    def spawn_reload(self, world: World) -> None:
        """Place the parts of the room rebuilt on every reload."""
        bx, by = self.base
        for index, y in _TOUCHER_ROWS:
            for x in _TOUCHER_COLUMNS:
                world.spawn(
                    Sprite("yellow", index),
                    _cell(bx, by, x, y),
                    _Toucher(),
                    NeedReload(),
                )
        for x, y in _HIDDEN_CELLS:
            world.spawn(
                Sprite("yellow", _HIDDEN_ATLAS_INDEX),
                _cell(bx, by, x, y),
                _Hidden(),
                NeedReload(),
            )

        for x, y in _LEAVES:
            spawn_single_leaf(world, x, y, bx, by, 1)

        self.trap1 = self._spawn_spike(
            world,
            2.0,
            -6.0,
            0.0,
            _Trap1(),
            Move(goal_pos=(bx + 64.0, by - 192.0), linear_speed=0.0, status=0),
        )

        self.trap2 = world.spawn(
            Sprite("f2_up"),
            _Trap2(),
            _Trap(),
            Transform(bx + 16.0, by - 192.0, 0.1),
            Body(dynamic=True, gravity_scale=0.0),
            _moving_collider(),
            Move(goal_pos=(bx + 16.0, by + 224.0), linear_speed=0.0, status=0),
            NeedReload(),
        )

        self.bike = world.spawn(
            Sprite("bike"),
            _Bike(),
            _Trap(),
            Transform(bx + 304.0, by + 160.0, -0.4, 0.09, 0.09),
            Body(dynamic=True, gravity_scale=0.0),
            _moving_collider(),
            Move(goal_pos=(bx - 272.0, by + 160.0), linear_speed=0.0, status=0),
            NeedReload(),
        )

        self.timer = world.spawn(
            Sprite("f2_timer", 0),
            _Trap4(),
            _Trap(),
            Transform(bx + 375.0, by + 222.0, 0.1),
            NeedReload(),
        )

        self.trap5 = [
            self._spawn_spike(
                world,
                4.0,
                8.0,
                180.0,
                _Trap5(),
                Move(goal_pos=(bx + 256.0, by + 256.0), linear_speed=0.0, status=0),
            ),
            self._spawn_spike(
                world,
                4.0,
                7.0,
                0.0,
                _Trap5(),
                Move(goal_pos=(bx + 256.0, by + 224.0), linear_speed=0.0, status=0),
            ),
        ]

    def update(
        self, world: World, events: Iterable[object], leaves: LeafCounter
    ) -> None:
        """React to the kid touching the room's triggers."""
        started = [e for e in events if isinstance(e, CollisionStarted)]
        self._trig1(world, started)
        self._trig2(world, started)
        self._trig3(world, started, leaves)
        self._trig4(world, started)

    def _trig1(self, world: World, events: list[CollisionStarted]) -> None:
        bx, by = self.base
        for event in events:
            trap = _only(world, _Trap1, Move)
            if trap is None or world.kid_touches(event, _Trig1) is None:
                continue
            move = world.get(trap, Move)
            if move.status == 0:
                move.goal_pos = (bx + 64.0, by + 224.0)
                move.linear_speed = 500.0
                move.status = 1
                _sound(world, Music.TRAP)
            elif move.status == 1:
                move.goal_pos = (bx + 64.0, by - 192.0)
                move.linear_speed = 100.0
                move.status = 2
                _sound(world, Music.TRAP)

    def _trig2(self, world: World, events: list[CollisionStarted]) -> None:
        for event in events:
            trap = _only(world, _Trap2, Move)
            if trap is None or world.kid_touches(event, _Trig2) is None:
                continue
            world.get(trap, Move).linear_speed = 2000.0
            _sound(world, Music.TRAP)

    def _trig3(
        self, world: World, events: list[CollisionStarted], leaves: LeafCounter
    ) -> None:
        for event in events:
            bike = _only(world, _Bike, Move)
            if bike is None or world.kid_touches(event, _Trig3) is None:
                continue
            move = world.get(bike, Move)
            if move.linear_speed < 200.0:
                move.linear_speed = 200.0
                _sound(world, Music.BIKE1)
            if leaves.num == LEAVES_FOR_SPIKES:
                started = False
                for spike in list(world.query(_Trap5, Move)):
                    spike_move = world.get(spike, Move)
                    if spike_move.linear_speed < 100.0:
                        started = True
                    spike_move.linear_speed = 100.0
                if started:
                    _sound(world, Music.TRAP)

    def _trig4(self, world: World, events: list[CollisionStarted]) -> None:
        for event in events:
            timer = _only(world, _Trap4, Sprite)
            if timer is None or world.kid_touches(event, _Trig4) is None:
                continue
            sprite = world.get(timer, Sprite)
            if sprite.atlas_index == 0:
                sprite.atlas_index = 1
                _sound(world, Music.BELL)