"""The whole game: every room, the state machine and the frame loop."""

from __future__ import annotations

import argparse
from typing import Iterable, Sequence

from xjtuer.leaf import LeafCounter
from xjtuer.level1 import FestivalLevel1
from xjtuer.level2 import FestivalLevel2
from xjtuer.level3 import FestivalLevel3
from xjtuer.menu import spawn_end_page, spawn_start_page
from xjtuer.museum1 import quiz_room_1
from xjtuer.museum2 import quiz_room_2
from xjtuer.museum_late import quiz_room_3, quiz_room_5
from xjtuer.quiz import QuizRoom, quiz_room_4
from xjtuer.state import GameState, KidSaver, StateMachine
from xjtuer.world import Entity, World

TITLE = "I Wanna Be XJTUer"
RESOLUTION = (800.0, 608.0)
CLEAR_COLOR = (1.0, 1.0, 1.0)
PIXELS_PER_METER = 100.0


class Game:
    """Holds the world and runs the game one frame at a time."""

    def __init__(self) -> None:
        self.world = World()
        self.machine = StateMachine()
        self.saver = KidSaver.at_start()
        self.leaves = LeafCounter()
        self.levels = [FestivalLevel1(), FestivalLevel2(), FestivalLevel3()]
        self.quizzes: list[QuizRoom] = [
            quiz_room_1(),
            quiz_room_2(),
            quiz_room_3(),
            quiz_room_4(),
            quiz_room_5(),
        ]
        self.start_warp: Entity | None = None
        self.quiz_warps: dict[int, list[Entity]] = {}

    def startup(self) -> None:
        """Build every part of every room that survives a reload."""
        self.start_warp = spawn_start_page(self.world)
        spawn_end_page(self.world)
        for level in self.levels:
            level.spawn_once(self.world)
        for room in self.quizzes:
            self.quiz_warps[room.number] = room.spawn_once(self.world)

    def leave_reload(self) -> None:
        """Rebuild the reloadable parts and start the music of the saved area."""
        self.leaves.reset()
        for level in self.levels:
            level.spawn_reload(self.world)
        for room in self.quizzes:
            room.spawn_reload(self.world)
        self.machine.play_bgm(self.world, self.saver)

    def step(
        self,
        events: Iterable[object] = (),
        reload_pressed: bool = False,
        reload_released: bool = False,
    ) -> tuple[GameState, GameState] | None:
        """Run one frame; return (left, entered) when the state changed."""
        events = list(events)
        if self.machine.in_game:
            for level in self.levels:
                level.update(self.world, events, self.leaves)
            for room in self.quizzes:
                room.update(self.world, events)
        self.machine.handle_reload_key(self.world, reload_pressed, reload_released)
        self.machine.reload_bgm(self.world, events)
        self.leaves.collect(self.world, events)

        transition = self.machine.apply_transition()
        if transition is not None and transition[0] is GameState.RELOAD:
            self.leave_reload()
        return transition


def main(argv: Sequence[str] | None = None) -> int:
    """Build the game, start it as the reload key would, and report its state."""
    parser = argparse.ArgumentParser(prog="xjtuer", description=TITLE)
    parser.add_argument(
        "--frames", type=int, default=1, help="idle frames to run after starting"
    )
    args = parser.parse_args(argv)
    if args.frames < 0:
        parser.error("--frames must not be negative")

    game = Game()
    game.startup()
    game.step(reload_pressed=True)
    game.step(reload_released=True)
    for _ in range(args.frames):
        game.step()
    print(f"{TITLE}: {len(game.world)} entities, state {game.machine.state.value}")
    return 0