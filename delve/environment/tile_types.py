"""
Tile system for the game.

A tile is a numpy structured record rather than a Python object, so a whole map
is one contiguous array and bulk operations (carving a room, painting every
background cell) are single slice assignments.

Only two tile values are produced by the generator:
  - EMPTY: nothing blocks movement or sight.
  - WALL: blocks both movement and sight.

The dtype itself does not forbid other combinations; use `make_tile` for them.
"""

import numpy as np

# Tile data type definition.
#
# This is for *core properties* only. Only include properties that are checked
# on every movement or every render. Anything situational belongs elsewhere.
Tile = np.dtype(
    [
        # "blocked" - Does this tile stop entities from moving into it?
        ("blocked", bool),
        # "block_sight" - Is this tile opaque? Also selects the wall color when
        # rendering the background.
        ("block_sight", bool),
    ]
)


def make_tile(*, blocked: bool, block_sight: bool) -> np.ndarray:
    """
    Create a tile value with the given properties.

    Returns a 0-d numpy array with the `Tile` dtype, which can be assigned to
    single cells or whole slices: map.tiles[x, y] = WALL
    """
    return np.array((blocked, block_sight), dtype=Tile)


EMPTY = make_tile(blocked=False, block_sight=False)
WALL = make_tile(blocked=True, block_sight=True)


def get_blocked_map(tiles: np.ndarray) -> np.ndarray:
    """Boolean array with the shape of `tiles`, True where movement is blocked."""
    return tiles["blocked"]


def get_block_sight_map(tiles: np.ndarray) -> np.ndarray:
    """Boolean array with the shape of `tiles`, True where sight is blocked."""
    return tiles["block_sight"]
