"""Entity storage, the components shared by every room, and update ordering."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from enum import Enum, IntFlag
from typing import Any, Iterator

TILE = 32.0


class InGameSet(Enum):
    """Named stages of the per-frame update while the game is running."""

    USER_INPUT = "user_input"
    CALC_AUTO_MOVE = "calc_auto_move"
    ENTITY_UPDATES = "entity_updates"
    CAMERA_FOLLOWED = "camera_followed"
    SAVE_SPAWN_POINT = "save_spawn_point"
    EMPTY_STATE = "empty_state"


def system_order() -> tuple[InGameSet, ...]:
    """Return the stages in the order they run each frame."""
    return (
        InGameSet.EMPTY_STATE,
        InGameSet.USER_INPUT,
        InGameSet.CALC_AUTO_MOVE,
        InGameSet.ENTITY_UPDATES,
        InGameSet.CAMERA_FOLLOWED,
        InGameSet.SAVE_SPAWN_POINT,
    )


class Layer(IntFlag):
    """Collision groups."""

    NONE = 0
    GROUP_1 = 1
    GROUP_2 = 2
    GROUP_3 = 4
    GROUP_4 = 8


@dataclass(frozen=True, order=True)
class Entity:
    """Handle to something living in a world."""

    id: int


@dataclass(frozen=True)
class CollisionStarted:
    """Two colliders began touching."""

    a: Entity
    b: Entity


@dataclass
class Kid:
    """Marks the player character."""


@dataclass
class Move:
    """Drives an entity towards a goal position and angle."""

    goal_pos: tuple[float, float] = (0.0, 0.0)
    linear_speed: float = 0.0
    goal_angle: float = 0.0
    angle_speed: float = 0.0
    status: int = 0


@dataclass
class Transform:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    scale_x: float = 1.0
    scale_y: float = 1.0

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass
class Sprite:
    image: str
    atlas_index: int | None = None


@dataclass
class Body:
    dynamic: bool = True
    gravity_scale: float = 1.0
    lock_rotation: bool = False


@dataclass
class Collider:
    """Box collider given by half extents, with its collision groups."""

    half_width: float
    half_height: float
    member: Layer = Layer.GROUP_4
    collides_with: Layer = Layer.GROUP_1 | Layer.GROUP_4
    solid_with: Layer = Layer.NONE

    @property
    def is_sensor(self) -> bool:
        return self.solid_with == Layer.NONE


@dataclass
class Ground:
    """Solid block placed on the tile grid of a room."""

    cell: tuple[float, float]
    origin: tuple[float, float]
    half_extent: tuple[float, float]


@dataclass
class Warp:
    """Sends the kid to another place when touched."""

    target: tuple[float, float]


class World:
    """A set of entities, each holding at most one component of each type."""

    def __init__(self) -> None:
        self._entities: dict[Entity, dict[type, Any]] = {}
        self._ids = itertools.count()

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, entity: object) -> bool:
        return entity in self._entities

    def spawn(self, *args: Any) -> Entity:
        """Create an entity holding the given components."""
        entity = Entity(next(self._ids))
        self._entities[entity] = {}
        self.insert(entity, *args)
        return entity

    def despawn(self, entity: Entity) -> bool:
        """Remove an entity; return whether it was alive."""
        return self._entities.pop(entity, None) is not None

    def insert(self, entity: Entity, *args: Any) -> Entity:
        """Add or replace components on a living entity."""
        try:
            store = self._entities[entity]
        except KeyError:
            raise KeyError(f"{entity} is not alive") from None
        for component in args:
            if isinstance(component, type):
                component = component()
            store[type(component)] = component
        return entity

    def get(self, entity: Entity, kind: type) -> Any:
        """Return the component of a type, or None when absent."""
        return self._entities.get(entity, {}).get(kind)

    def has(self, entity: Entity, kind: type) -> bool:
        return kind in self._entities.get(entity, {})

    def query(self, *args: type) -> Iterator[Entity]:
        """Yield, in spawn order, the entities holding every given type."""
        for entity, store in list(self._entities.items()):
            if entity in self._entities and all(kind in store for kind in args):
                yield entity

    def single(self, kind: type) -> Entity:
        """Return the only entity holding a type."""
        matches = list(self.query(kind))
        if len(matches) != 1:
            raise LookupError(
                f"expected one entity with {kind.__name__}, found {len(matches)}"
            )
        return matches[0]

    def kid_touches(self, event: CollisionStarted, kind: type) -> Entity | None:
        """Return the entity of the given type that the kid touched, if any."""
        if self.has(event.b, Kid) and self.has(event.a, kind):
            return event.a
        if self.has(event.a, Kid) and self.has(event.b, kind):
            return event.b
        return None


def spawn_box(
    world: World,
    x: float,
    y: float,
    bx: float,
    by: float,
    half_width: float,
    half_height: float,
) -> Entity:
    """Place a solid block at a grid cell of a room."""
    return world.spawn(Ground((x, y), (bx, by), (half_width, half_height)))


def spawn_warp(
    world: World, x: float, y: float, target_x: float, target_y: float
) -> Entity:
    """Place a warp at a position that leads to a target position."""
    return world.spawn(
        Sprite("warp", 0),
        Transform(x, y, 0.0),
        Warp((target_x, target_y)),
    )