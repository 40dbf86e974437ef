"""Third festival room: falling leaves, a toppling tree and moving spikes."""

from __future__ import annotations

from typing import Any, Iterable

from xjtuer import level3_layout as layout
from xjtuer.leaf import LeafCounter
from xjtuer.state import AudioPlayer, Music, NeedReload
from xjtuer.world import Collider, CollisionStarted, Entity, Move, World

LEAVES_FOR_SHORTCUT = 3
TRAP_SPEED = 500.0
FAST_SPEED = 1000.0

_TRIG5_CELLS = ((8.0, 0.0), (8.0, -1.0))
_TRIG6_CELLS = ((-3.0, -4.0),)


def _only(world: World, *kinds: type) -> Entity | None:
    matches = list(world.query(*kinds))
    return matches[0] if len(matches) == 1 else None


def _sound(world: World, music: Music) -> None:
    world.spawn(AudioPlayer(music), NeedReload())


class FestivalLevel3:
    """The festival room that leads on to the museum."""

    def __init__(self) -> None:
        self.base = layout.BASE
        self.triggers: dict[str, Entity] = {}
        self.parts: dict[str, Any] = {}

    def spawn_once(self, world: World) -> None:
        """Place the parts of the room that survive a reload."""
        self.triggers = layout.spawn_once(world)

    def spawn_reload(self, world: World) -> None:
        """Place the parts of the room rebuilt on every reload."""
        self.parts = layout.spawn_reload(world)

    def update(
        self, world: World, events: Iterable[object], leaves: LeafCounter
    ) -> None:
        """React to the kid touching the room's triggers."""
        bx, by = self.base
        started = [e for e in events if isinstance(e, CollisionStarted)]
        self._advance(world, started, layout._Trig1, layout._Trap1, 0)
        self._advance(world, started, layout._Trig2, layout._Trap2, 0)
        self._advance(world, started, layout._Trig3, layout._Trap3, 0)
        self._advance(
            world, started, layout._Trig4, layout._Trap3, 1, (bx + 352.0, by + 96.0)
        )
        self._reveal(world, started, layout._Trig5, _TRIG5_CELLS)
        self._reveal(world, started, layout._Trig6, _TRIG6_CELLS)
        self._trig7(world, started)
        self._trig8(world, started, leaves)
        self._trap8(world, started)

    def _advance(
        self,
        world: World,
        events: list[CollisionStarted],
        trigger: type,
        trap: type,
        status: int,
        goal: tuple[float, float] | None = None,
    ) -> None:
        for event in events:
            target = _only(world, trap, Move)
            if target is None or world.kid_touches(event, trigger) is None:
                continue
            move = world.get(target, Move)
            if move.status == status:
                if goal is not None:
                    move.goal_pos = goal
                move.linear_speed = TRAP_SPEED
                move.status = status + 1
                _sound(world, Music.TRAP)

    def _reveal(
        self,
        world: World,
        events: list[CollisionStarted],
        trigger: type,
        cells: tuple[tuple[float, float], ...],
    ) -> None:
        for event in events:
            if world.kid_touches(event, trigger) is None:
                continue
            entity = _only(world, trigger)
            if entity is None:
                continue
            trig = world.get(entity, trigger)
            if trig.state == 0:
                trig.state = 1
                for x, y in cells:
                    layout._spawn_hidden(world, x, y)

    def _trig7(self, world: World, events: list[CollisionStarted]) -> None:
        bx, by = self.base
        for event in events:
            entity = _only(world, layout._Trig7)
            if entity is None or world.kid_touches(event, layout._Trig7) is None:
                continue
            trig = world.get(entity, layout._Trig7)
            if trig.state in (0, 1):
                kind = layout._Trap5 if trig.state == 0 else layout._Trap6
                target = _only(world, kind, Move)
                if target is None:
                    continue
                world.get(target, Move).linear_speed = FAST_SPEED
                trig.state += 1
                _sound(world, Music.TRAP)
            elif trig.state == 2:
                tree = _only(world, layout._Trap7)
                if tree is None:
                    continue
                world.insert(
                    tree,
                    layout._Trap(),
                    Collider(48.0, 64.0),
                    Move(
                        goal_pos=(bx + 32.0, by - 48.0),
                        linear_speed=200.0,
                        goal_angle=-180.0,
                        angle_speed=-5.0,
                        status=1,
                    ),
                )
                trig.state = 3
                _sound(world, Music.TRAP)

    def _trig8(
        self, world: World, events: list[CollisionStarted], leaves: LeafCounter
    ) -> None:
        bx, by = self.base
        for event in events:
            tree = _only(world, layout._Trap7, Move)
            if tree is None or world.kid_touches(event, layout._Trig8) is None:
                continue
            move = world.get(tree, Move)
            if move.status != 2:
                move.goal_pos = (bx + 32.0, by - 416.0)
                move.linear_speed = TRAP_SPEED
                move.status = 2
                _sound(world, Music.TRAP)
            if leaves.num == LEAVES_FOR_SHORTCUT:
                for block in list(world.query(layout._Trap9)):
                    world.despawn(block)

    def _trap8(self, world: World, events: list[CollisionStarted]) -> None:
        for event in events:
            touched = world.kid_touches(event, layout._Trap8)
            if touched is None:
                continue
            for spike in list(world.query(layout._Trap4, Move)):
                world.get(spike, Move).linear_speed = FAST_SPEED
            world.despawn(touched)
            _sound(world, Music.COIN)