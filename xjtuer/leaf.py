"""Collectible leaves and the running leaf count."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from xjtuer.state import AudioPlayer, Music, NeedReload
from xjtuer.world import (
    TILE,
    Body,
    Collider,
    CollisionStarted,
    Entity,
    Sprite,
    Transform,
    World,
)

LEAF_Z = -0.2
LEAF_HALF_SIZE = 10.0


@dataclass
class Leaf:
    """Adds its score to the leaf count when the kid touches it."""

    score: int


def _leaf_components(x: float, y: float, bx: float, by: float) -> tuple:
    return (
        Sprite("leaf"),
        Body(dynamic=True, gravity_scale=0.0, lock_rotation=True),
        Transform(bx + x * TILE, by + y * TILE, LEAF_Z),
        Collider(LEAF_HALF_SIZE, LEAF_HALF_SIZE),
        NeedReload(),
    )


def spawn_single_leaf(
    world: World, x: float, y: float, bx: float, by: float, score: int
) -> Entity:
    """Place a scoring leaf at a grid cell of a room."""
    return world.spawn(*_leaf_components(x, y, bx, by), Leaf(score))


def spawn_fake_leaf(world: World, x: float, y: float, bx: float, by: float) -> Entity:
    """Place a leaf that looks real but scores nothing."""
    return world.spawn(*_leaf_components(x, y, bx, by))


@dataclass
class LeafCounter:
    """Leaves collected since the last reload."""

    num: int = 0

    def reset(self) -> None:
        self.num = 0

    def collect(self, world: World, events: Iterable[object]) -> None:
        """Count touched leaves; take them away while the count is positive."""
        for event in events:
            if not isinstance(event, CollisionStarted):
                continue
            leaf = world.kid_touches(event, Leaf)
            if leaf is None:
                continue
            self.num += world.get(leaf, Leaf).score
            if self.num > 0:
                world.despawn(leaf)
                world.spawn(AudioPlayer(Music.COIN), NeedReload())