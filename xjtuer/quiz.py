"""Museum quiz rooms: pick the warp under the right answer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable

from xjtuer.state import AudioPlayer, Music, NeedReload
from xjtuer.world import (
    CollisionStarted,
    Entity,
    Sprite,
    Transform,
    World,
    spawn_box,
    spawn_warp,
)

_BOXES = (
    (0.0, -1.0, 2.5, 0.5),
    (0.0, -9.0, 12.5, 0.5),
    (-3.5, -7.5, 2.0, 1.0),
    (3.5, -7.5, 2.0, 1.0),
    (-10.5, -7.5, 2.0, 1.0),
    (10.5, -7.5, 2.0, 1.0),
    (-11.0, -6.0, 1.5, 0.5),
    (11.0, -6.0, 1.5, 0.5),
    (-3.0, -6.0, 1.5, 0.5),
    (3.0, -6.0, 1.5, 0.5),
    (-3.5, -5.0, 1.0, 0.5),
    (3.5, -5.0, 1.0, 0.5),
    (-4.0, -3.5, 0.5, 1.0),
    (4.0, -3.5, 0.5, 1.0),
    (-11.5, -1.5, 1.0, 4.0),
    (11.5, -1.5, 1.0, 4.0),
    (-12.0, 6.0, 0.5, 3.5),
    (12.0, 6.0, 0.5, 3.5),
    (-11.0, 8.0, 0.5, 1.5),
    (10.0, 8.0, 0.5, 0.5),
    (-10.0, 8.0, 0.5, 0.5),
    (0.0, 9.0, 12.5, 0.5),
)
_ANSWER_OFFSETS = (-224.0, 0.0, 224.0)
_ANSWER_Y = -128.0
_WARP_Y = -256.0
_QUESTION_OFFSET = (80.0, 160.0)

Target = tuple[float, float]


@dataclass(frozen=True)
class _Ques:
    room: int


@dataclass(frozen=True)
class _Wrong:
    room: int


@dataclass(frozen=True)
class _Accept:
    room: int


@dataclass(frozen=True)
class _SavePoint:
    save_id: int


@dataclass(frozen=True)
class QuizRoom:
    """A museum room with a question, three answers and a warp under each.

    A target of None marks a wrong answer: its warp leads nowhere and
    touching it swaps the question for a hint.
    """

    number: int
    base: Target
    save_id: int
    portrait: str
    portrait_scale: float
    targets: tuple[Target | None, Target | None, Target | None]
    hint_offset: Target = (80.0, 144.0)
    hint_extras: tuple[tuple[str, float, float, float], ...] = ()
    accept_markers: tuple[Callable[[], Any], ...] = ()
    scene_layers: tuple[float, ...] = (-0.3,)

    def _mine(self, world: World, entity: Entity | None, kind: type) -> bool:
        return entity is not None and world.get(entity, kind).room == self.number

    def spawn_once(self, world: World) -> list[Entity]:
        """Build the fixed parts of the room; return the warps, left to right."""
        bx, by = self.base
        world.spawn(Sprite("museum_background"), Transform(bx, by, -0.5))
        for z in self.scene_layers:
            world.spawn(Sprite("museum"), Transform(bx, by, z))

        for x, y, hw, hh in _BOXES:
            spawn_box(world, x, y, bx, by, hw, hh)

        world.spawn(Sprite("save", 0), Transform(bx, by, 0.0), _SavePoint(self.save_id))

        world.spawn(Sprite("quiz_title"), Transform(bx, by + 272.0, -0.2))
        scale = self.portrait_scale
        world.spawn(
            Sprite(self.portrait),
            Transform(bx - 272.0, by + 144.0, -0.1, scale, scale),
        )
        for letter, dx in zip("abc", _ANSWER_OFFSETS):
            world.spawn(
                Sprite(f"{letter}{self.number}"),
                Transform(bx + dx, by + _ANSWER_Y, -0.2),
            )

        warps = []
        for dx, target in zip(_ANSWER_OFFSETS, self.targets):
            x, y = bx + dx, by + _WARP_Y
            if target is None:
                warp = world.spawn(
                    Sprite("warp", 0), Transform(x, y, 0.0), _Wrong(self.number)
                )
            else:
                warp = spawn_warp(world, x, y, *target)
                world.insert(
                    warp,
                    _Accept(self.number),
                    *(make() for make in self.accept_markers),
                )
            warps.append(warp)
        return warps

    def spawn_reload(self, world: World) -> Entity:
        """Show the question again; return its sprite."""
        bx, by = self.base
        dx, dy = _QUESTION_OFFSET
        return world.spawn(
            Sprite(f"q{self.number}"),
            Transform(bx + dx, by + dy, -0.1),
            _Ques(self.number),
            NeedReload(),
        )

    def update(self, world: World, events: Iterable[object]) -> None:
        """Answer the kid's choice of warp."""
        started = [e for e in events if isinstance(e, CollisionStarted)]
        self._do_wrong(world, started)
        self._do_accept(world, started)

    def _do_wrong(self, world: World, events: list[CollisionStarted]) -> None:
        bx, by = self.base
        for event in events:
            if not self._mine(world, world.kid_touches(event, _Wrong), _Wrong):
                continue
            for question in list(world.query(_Ques)):
                if world.get(question, _Ques).room == self.number:
                    world.despawn(question)
            hx, hy = self.hint_offset
            world.spawn(
                Sprite(f"h{self.number}"),
                Transform(bx + hx, by + hy, -0.1),
                NeedReload(),
            )
            for image, dx, dy, scale in self.hint_extras:
                world.spawn(
                    Sprite(image),
                    Transform(bx + dx, by + dy, -0.1, scale, scale),
                    NeedReload(),
                )

    def _do_accept(self, world: World, events: list[CollisionStarted]) -> None:
        for event in events:
            if self._mine(world, world.kid_touches(event, _Accept), _Accept):
                world.spawn(AudioPlayer(Music.COIN), NeedReload())


def quiz_room_4() -> QuizRoom:
    """The fourth quiz, where every answer is accepted."""
    bx, by = 800.0, -608.0
    target = (bx + 800.0, by - 608.0)
    return QuizRoom(
        number=4,
        base=(bx, by),
        save_id=7,
        portrait="xjtu",
        portrait_scale=0.09,
        targets=(target, target, target),
    )