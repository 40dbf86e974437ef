"""The opening room and the closing room."""

from __future__ import annotations

from xjtuer.state import BGMReload
from xjtuer.world import Entity, Sprite, Transform, World, spawn_box, spawn_warp

START_BASE = (0.0, 0.0)
END_BASE = (-2 * 800.0, 0.0)
FLOOR_Y = -288.0
FLOOR_ATLAS_INDEX = 14


def _spawn_floor(world: World, bx: float, by: float) -> None:
    for x in range(-384, 385, 32):
        world.spawn(
            Sprite("yellow", FLOOR_ATLAS_INDEX),
            Transform(bx + float(x), by + FLOOR_Y, 0.0),
        )


def spawn_start_page(world: World) -> Entity:
    """Build the title room; return its warp into the game."""
    bx, by = START_BASE
    world.spawn(Sprite("gate"), Transform(bx, by, -0.5))
    world.spawn(Sprite("title"), Transform(bx, by + 192.0, -0.4))
    world.spawn(Sprite("hint"), Transform(bx, by, -0.4))
    world.spawn(Sprite("world"), Transform(bx, by + 608.0, -0.4))

    spawn_box(world, 0.0, 10.0, bx, by, 12.5, 0.5)
    spawn_box(world, 0.0, -9.0, bx, by, 12.5, 0.5)
    spawn_box(world, -13.0, 0.0, bx, by, 0.5, 9.5)
    spawn_box(world, 13.0, 0.0, bx, by, 0.5, 9.5)

    _spawn_floor(world, bx, by)

    warp = spawn_warp(world, bx + 256.0, by - 128.0, 480.0, 416.0)
    world.insert(warp, BGMReload(1))
    return warp


def spawn_end_page(world: World) -> None:
    """Build the closing room with its thanks banner."""
    bx, by = END_BASE
    world.spawn(Sprite("gate"), Transform(bx, by, -0.5))

    spawn_box(world, 0.0, -9.0, bx, by, 12.5, 0.5)
    spawn_box(world, -13.0, 0.0, bx, by, 0.5, 9.5)
    spawn_box(world, 13.0, 0.0, bx, by, 0.5, 9.5)

    _spawn_floor(world, bx, by)

    world.spawn(Sprite("thanks"), Transform(bx, by, 0.0))