"""
Configuration constants.

Centralizes all magic numbers and configuration values used throughout the codebase.
Organized by functional area for easy maintenance.
"""

import logging
from pathlib import Path

from delve import colors
from delve.types import Opacity, RootConsoleTilePos, WorldTilePos

# =============================================================================
# GENERAL
# =============================================================================

PROJECT_ROOT_PATH = Path(__file__).resolve().parent.parent

# Only used by the "random" layout preset.
# RANDOM_SEED = None
RANDOM_SEED = "burrow1"

LOG_LEVEL = logging.INFO

# =============================================================================
# DISPLAY & RENDERING
# =============================================================================

# Main window
WINDOW_TITLE = "Delve"

# Screen dimensions
SCREEN_WIDTH = 80
SCREEN_HEIGHT = 50

# Where the map frame is placed on the root console.
SCREEN_ORIGIN: RootConsoleTilePos = (0, 0)

OPAQUE = Opacity(1.0)

VSYNC = True

# =============================================================================
# TILESET
# =============================================================================

ASSETS_BASE_DIR = PROJECT_ROOT_PATH / "assets"

# A 32x8 tcod-layout sheet. When the file is missing libtcod falls back to
# its built-in font.
TILESET_PATH = ASSETS_BASE_DIR / "arial10x10.png"
TILESET_COLUMNS = 32
TILESET_ROWS = 8

# =============================================================================
# MAP
# =============================================================================

MAP_WIDTH = 80
MAP_HEIGHT = 45

# "two_rooms", "open_field" (see generators.LAYOUT_PRESETS) or "random".
MAP_LAYOUT = "two_rooms"

# Only used by the "random" layout preset.
MAX_NUM_ROOMS = 6
MIN_ROOM_SIZE = 6
MAX_ROOM_SIZE = 12

# =============================================================================
# ENTITIES
# =============================================================================

PLAYER_GLYPH = "@"
PLAYER_START: WorldTilePos = (25, 23)

NPC_GLYPH = "@"
NPC_START: WorldTilePos = (SCREEN_WIDTH // 2 - 5, SCREEN_HEIGHT // 2)
NPC_COLOR = colors.NPC_COLOR
