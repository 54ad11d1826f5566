from __future__ import annotations

from typing import NewType

# =============================================================================
# TILE-BASED COORDINATE SYSTEMS (Always integers)
# =============================================================================

TileCoord = int  # Always integer tile position

# Game world coordinates - absolute positions on the game map
WorldTileCoord = TileCoord  # Example: x=5, y=3
WorldTilePos = tuple[
    WorldTileCoord, WorldTileCoord
]  # Example: (5, 3) = tile 5,3 on map

# Root console coordinates - where the map frame lands on screen
RootConsoleTileCoord = TileCoord
RootConsoleTilePos = tuple[RootConsoleTileCoord, RootConsoleTileCoord]

# =============================================================================
# RENDERING-RELATED TYPES
# =============================================================================

# Opacity used when transferring an off-screen frame onto the display.
# 0.0 is fully transparent, 1.0 fully opaque.
Opacity = NewType("Opacity", float)
