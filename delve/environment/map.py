from __future__ import annotations

import numpy as np

from delve.environment import tile_types
from delve.types import TileCoord
from delve.util.coordinates import is_valid_world_tile_pos


class GameMap:
    """The game map.

    A fixed-size grid of tiles addressed by ``(x, y)``. The map is written to
    only while it is being generated; movement and rendering treat it as
    read-only.
    """

    def __init__(
        self,
        width: TileCoord,
        height: TileCoord,
        fill: np.ndarray = tile_types.WALL,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Map width and height must be positive.")

        self.width: TileCoord = width
        self.height: TileCoord = height

        # Every cell starts as `fill` (walls by default). We carve open space
        # out of it later.
        self.tiles = np.full(
            (width, height), fill_value=fill, dtype=tile_types.Tile, order="F"
        )

        # Cached property arrays, populated on demand.
        self._blocked_map_cache: np.ndarray | None = None
        self._block_sight_map_cache: np.ndarray | None = None

    def invalidate_property_caches(self) -> None:
        """Call this whenever `self.tiles` changes to clear cached property maps."""
        self._blocked_map_cache = None
        self._block_sight_map_cache = None

    @property
    def blocked(self) -> np.ndarray:
        """Boolean array of shape (width, height) where True means movement is
        blocked."""
        if self._blocked_map_cache is None:
            self._blocked_map_cache = tile_types.get_blocked_map(self.tiles)
        return self._blocked_map_cache

    @property
    def block_sight(self) -> np.ndarray:
        """Boolean array of shape (width, height) where True means the tile is
        opaque."""
        if self._block_sight_map_cache is None:
            self._block_sight_map_cache = tile_types.get_block_sight_map(self.tiles)
        return self._block_sight_map_cache

    def in_bounds(self, x: TileCoord, y: TileCoord) -> bool:
        return is_valid_world_tile_pos((x, y), self.width, self.height)

    def get(self, x: TileCoord, y: TileCoord) -> np.ndarray:
        """Return a copy of the tile at (x, y).

        Raises:
            IndexError: If (x, y) is outside the map. Negative coordinates are
                rejected instead of wrapping around like numpy indexing would.
        """
        if not self.in_bounds(x, y):
            raise IndexError(
                f"Tile ({x}, {y}) is outside the {self.width}x{self.height} map."
            )
        return self.tiles[x, y].copy()

    def is_blocked(self, x: TileCoord, y: TileCoord) -> bool:
        return bool(self.get(x, y)["blocked"])

    def set(self, x: TileCoord, y: TileCoord, tile: np.ndarray) -> None:
        """Replace the tile at (x, y). Generation-time only."""
        if not self.in_bounds(x, y):
            raise IndexError(
                f"Tile ({x}, {y}) is outside the {self.width}x{self.height} map."
            )
        self.tiles[x, y] = tile
        self.invalidate_property_caches()

    def fill_region(
        self, xs: slice | TileCoord, ys: slice | TileCoord, tile: np.ndarray
    ) -> None:
        """Assign `tile` to every cell in the given slices. Generation-time only.

        Raises:
            IndexError: If the region reaches outside the map. numpy would
                otherwise wrap negative indices and clip slices.
        """
        self._check_span(xs, self.width)
        self._check_span(ys, self.height)
        self.tiles[xs, ys] = tile
        self.invalidate_property_caches()

    def _check_span(self, span: slice | TileCoord, limit: TileCoord) -> None:
        if isinstance(span, slice):
            start = 0 if span.start is None else span.start
            stop = limit if span.stop is None else span.stop
            in_map = 0 <= start <= limit and 0 <= stop <= limit
        else:
            in_map = 0 <= span < limit
        if not in_map:
            raise IndexError(
                f"Region {span} is outside the {self.width}x{self.height} map."
            )

    def count_open_tiles(self) -> int:
        return int(np.count_nonzero(~self.blocked))
