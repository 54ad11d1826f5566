"""
Map generation.

A map is produced by applying an ordered list of carve operations to a grid
that starts out filled with a single tile (walls, by default):

    layout = two_rooms_layout()
    game_map = DungeonGenerator.from_layout(80, 45, layout).generate()

Layouts are plain data. The hand-made presets and the seeded random
rooms-and-corridors builder all produce a `Layout` and go through the same
carving routine.

An operation that reaches outside the map is a configuration error and raises
`IndexError`; nothing is clipped or wrapped.
"""

from __future__ import annotations

import abc
import logging
import random
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field

import numpy as np

from delve.environment import tile_types
from delve.environment.map import GameMap
from delve.util.coordinates import Rect

logger = logging.getLogger(__name__)


# =============================================================================
# CARVE PRIMITIVES
# =============================================================================


def carve_room(game_map: GameMap, room: Rect) -> None:
    """Open up the interior of `room`, leaving its outer ring as wall."""
    game_map.fill_region(
        slice(room.x1 + 1, room.x2), slice(room.y1 + 1, room.y2), tile_types.EMPTY
    )


def carve_h_tunnel(game_map: GameMap, x1: int, x2: int, y: int) -> None:
    h_slice = slice(min(x1, x2), max(x1, x2) + 1)
    game_map.fill_region(h_slice, y, tile_types.EMPTY)


def carve_v_tunnel(game_map: GameMap, y1: int, y2: int, x: int) -> None:
    v_slice = slice(min(y1, y2), max(y1, y2) + 1)
    game_map.fill_region(x, v_slice, tile_types.EMPTY)


def place_wall(game_map: GameMap, x: int, y: int) -> None:
    game_map.set(x, y, tile_types.WALL)


# =============================================================================
# OPERATIONS
# =============================================================================


class CarveOperation(abc.ABC):
    """One step of a layout, applied to the map in sequence."""

    @abc.abstractmethod
    def apply(self, game_map: GameMap) -> None:
        raise NotImplementedError


@dataclass(frozen=True)
class Room(CarveOperation):
    rect: Rect

    def apply(self, game_map: GameMap) -> None:
        carve_room(game_map, self.rect)


@dataclass(frozen=True)
class HTunnel(CarveOperation):
    x1: int
    x2: int
    y: int

    def apply(self, game_map: GameMap) -> None:
        carve_h_tunnel(game_map, self.x1, self.x2, self.y)


@dataclass(frozen=True)
class VTunnel(CarveOperation):
    y1: int
    y2: int
    x: int

    def apply(self, game_map: GameMap) -> None:
        carve_v_tunnel(game_map, self.y1, self.y2, self.x)


@dataclass(frozen=True)
class PlaceWall(CarveOperation):
    """Put a single wall tile back. Used on maps that start out open."""

    x: int
    y: int

    def apply(self, game_map: GameMap) -> None:
        place_wall(game_map, self.x, self.y)


@dataclass
class Layout:
    """An ordered list of operations plus the tile the map starts filled with."""

    operations: list[CarveOperation]
    fill: np.ndarray = field(default_factory=lambda: tile_types.WALL)

    @property
    def rooms(self) -> list[Rect]:
        return [op.rect for op in self.operations if isinstance(op, Room)]


# =============================================================================
# GENERATORS
# =============================================================================


class BaseMapGenerator(abc.ABC):
    """Abstract base class for map generation algorithms."""

    def __init__(self, map_width: int, map_height: int) -> None:
        self.map_width = map_width
        self.map_height = map_height

    @abc.abstractmethod
    def generate(self) -> GameMap:
        """Generate the map layout."""
        raise NotImplementedError


class DungeonGenerator(BaseMapGenerator):
    """Applies a fixed sequence of carve operations to a freshly filled map."""

    def __init__(
        self,
        map_width: int,
        map_height: int,
        operations: Iterable[CarveOperation],
        fill: np.ndarray = tile_types.WALL,
    ) -> None:
        super().__init__(map_width, map_height)
        self.operations = list(operations)
        self.fill = fill

    @classmethod
    def from_layout(
        cls, map_width: int, map_height: int, layout: Layout
    ) -> DungeonGenerator:
        return cls(map_width, map_height, layout.operations, fill=layout.fill)

    def generate(self) -> GameMap:
        game_map = GameMap(self.map_width, self.map_height, fill=self.fill)
        self.apply(game_map, self.operations)
        logger.info(
            "Generated %dx%d map: %d operations, %d open tiles",
            self.map_width,
            self.map_height,
            len(self.operations),
            game_map.count_open_tiles(),
        )
        return game_map

    @staticmethod
    def apply(game_map: GameMap, operations: Sequence[CarveOperation]) -> None:
        for op in operations:
            logger.debug("Applying %r", op)
            op.apply(game_map)


# =============================================================================
# LAYOUTS
# =============================================================================


def two_rooms_layout() -> Layout:
    """Two 10x15 rooms side by side, joined by one horizontal tunnel."""
    return Layout(
        operations=[
            Room(Rect(20, 15, 10, 15)),
            Room(Rect(50, 15, 10, 15)),
            HTunnel(25, 55, 23),
        ]
    )


def open_field_layout() -> Layout:
    """An open map with two isolated wall tiles."""
    return Layout(
        operations=[PlaceWall(30, 22), PlaceWall(50, 22)],
        fill=tile_types.EMPTY,
    )


def random_rooms_layout(
    map_width: int,
    map_height: int,
    max_rooms: int,
    min_room_size: int,
    max_room_size: int,
    rng: random.Random | None = None,
) -> Layout:
    """Scatter non-overlapping rooms and join each one to the previous room.

    Rooms that would intersect an already placed room are discarded, so fewer
    than `max_rooms` rooms may come back.
    """
    if rng is None:
        rng = random.Random()

    rooms: list[Rect] = []
    operations: list[CarveOperation] = []

    for _ in range(max_rooms):
        w = rng.randint(min_room_size, max_room_size)
        h = rng.randint(min_room_size, max_room_size)

        x = rng.randint(0, map_width - w - 1)
        y = rng.randint(0, map_height - h - 1)

        new_room = Rect(x, y, w, h)

        # If it intersects with any of the rooms we've already made, toss it out.
        if any(new_room.intersects(other) for other in rooms):
            continue

        operations.append(Room(new_room))

        if rooms:
            # Connect it to the previous room with an L-shaped tunnel.
            prev_x, prev_y = rooms[-1].center()
            new_x, new_y = new_room.center()

            if bool(rng.getrandbits(1)):
                # First move horizontally, then vertically.
                operations.append(HTunnel(prev_x, new_x, prev_y))
                operations.append(VTunnel(prev_y, new_y, new_x))
            else:
                # First move vertically, then horizontally.
                operations.append(VTunnel(prev_y, new_y, prev_x))
                operations.append(HTunnel(prev_x, new_x, new_y))

        rooms.append(new_room)

    if not rooms:
        raise ValueError("Need to make at least one room.")

    return Layout(operations=operations)


LAYOUT_PRESETS: dict[str, Callable[[], Layout]] = {
    "two_rooms": two_rooms_layout,
    "open_field": open_field_layout,
}


def get_layout_preset(name: str) -> Layout:
    try:
        factory = LAYOUT_PRESETS[name]
    except KeyError:
        raise ValueError(
            f"Unknown map layout '{name}'. Known layouts: {sorted(LAYOUT_PRESETS)}"
        ) from None
    return factory()
