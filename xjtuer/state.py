"""Game state, background music and the saved spawn point."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from xjtuer.world import CollisionStarted, Entity, Kid, World

BGM_VOLUME = 0.3
START_POSITION = (1600.0, 608.0 * 2 + 64.0)
START_SAVE = 9


class GameState(Enum):
    IN_GAME = "in_game"
    RELOAD = "reload"
    GAME_OVER = "game_over"
    RE_FOR_BUILDING = "re_for_building"


class Music(Enum):
    GATE = "gate"
    FESTIVAL = "festival"
    MUSEUM = "museum"
    BUILDING = "building"
    DEAD = "dead"
    COIN = "coin"
    TRAP = "trap"
    BIKE1 = "bike1"
    BELL = "bell"


@dataclass
class NeedReload:
    """Removed when the player restarts from the last save."""


@dataclass
class BGM:
    """Marks the background music player."""


@dataclass
class BGMReload:
    """Switches the background music when the kid touches it."""

    id: int


@dataclass
class AudioPlayer:
    sound: Music
    looping: bool = False
    volume: float = 1.0


@dataclass
class KidSaver:
    """Where the kid respawns and which save point it belongs to."""

    position: tuple[float, float] = (0.0, 0.0)
    save_id: int = 0

    @classmethod
    def at_start(cls) -> "KidSaver":
        return cls(START_POSITION, START_SAVE)


def music_for(save_id: int) -> Music:
    """Background music for an area id."""
    if save_id <= 0:
        return Music.GATE
    if save_id <= 3:
        return Music.FESTIVAL
    if save_id <= 8:
        return Music.MUSEUM
    if save_id <= 10:
        return Music.BUILDING
    return Music.DEAD


def warp_music_for(bgm_id: int) -> Music:
    """Music chosen when the kid is reported first in the collision."""
    return Music.FESTIVAL if 1 <= bgm_id <= 3 else Music.GATE


def _spawn_bgm(world: World, music: Music) -> Entity:
    return world.spawn(
        AudioPlayer(music, looping=True, volume=BGM_VOLUME), NeedReload(), BGM()
    )


@dataclass
class StateMachine:
    """Current game state with a pending transition."""

    state: GameState = GameState.RELOAD
    next_state: GameState | None = None

    @property
    def in_game(self) -> bool:
        return self.state is GameState.IN_GAME

    def handle_reload_key(
        self, world: World, pressed: bool, just_released: bool
    ) -> None:
        """Hold the reload key to restart; releasing it clears reloadable entities."""
        if pressed:
            self.next_state = GameState.RELOAD
        if just_released:
            for entity in world.query(NeedReload):
                world.despawn(entity)
            self.next_state = GameState.IN_GAME

    def enter_for_building(self) -> None:
        self.next_state = GameState.IN_GAME

    def apply_transition(self) -> tuple[GameState, GameState] | None:
        """Apply the pending state; return (left, entered) when it changed."""
        pending, self.next_state = self.next_state, None
        if pending is None or pending is self.state:
            return None
        previous, self.state = self.state, pending
        if pending is GameState.RE_FOR_BUILDING:
            self.enter_for_building()
        return previous, pending

    def play_bgm(self, world: World, saver: KidSaver) -> Entity:
        """Start the music of the saved area."""
        return _spawn_bgm(world, music_for(saver.save_id))

    def reload_bgm(self, world: World, events: Iterable[object]) -> None:
        """Swap the background music when the kid touches a music switch."""
        for event in events:
            if not isinstance(event, CollisionStarted):
                continue
            if world.has(event.b, Kid) and world.has(event.a, BGMReload):
                music = music_for(world.get(event.a, BGMReload).id)
            elif world.has(event.a, Kid) and world.has(event.b, BGMReload):
                music = warp_music_for(world.get(event.b, BGMReload).id)
            else:
                continue
            for entity in world.query(BGM):
                world.despawn(entity)
            _spawn_bgm(world, music)