from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np
from tcod.console import Console

from . import colors, config
from .game.entities import Entity
from .game.game import Game
from .types import Opacity, RootConsoleTilePos

logger = logging.getLogger(__name__)


class Renderer:
    """
    Composes one frame of the map view.

    The map and its entities are drawn into an off-screen console the size of
    the map, which is then copied onto the root console at `origin`. Nothing is
    carried over between frames; every call repaints the whole frame.
    """

    def __init__(
        self,
        map_width: int,
        map_height: int,
        origin: RootConsoleTilePos = config.SCREEN_ORIGIN,
        fg_alpha: Opacity = config.OPAQUE,
        bg_alpha: Opacity = config.OPAQUE,
    ) -> None:
        self.map_width = map_width
        self.map_height = map_height
        self.origin = origin
        self.fg_alpha = fg_alpha
        self.bg_alpha = bg_alpha

        self.game_map_console: Console = Console(map_width, map_height, order="F")

    def render_all(
        self, game: Game, entities: Sequence[Entity], root_console: Console
    ) -> None:
        self.game_map_console.clear()

        self._render_map(game)
        self._render_entities(entities)

        # Copy the finished frame onto the root console.
        dest_x, dest_y = self.origin
        self.game_map_console.blit(
            dest=root_console,
            dest_x=dest_x,
            dest_y=dest_y,
            width=self.map_width,
            height=self.map_height,
            fg_alpha=self.fg_alpha,
            bg_alpha=self.bg_alpha,
        )

    def _render_map(self, game: Game) -> None:
        """Paint every tile's background: wall color if opaque, ground otherwise.

        There is no lighting, so every tile is drawn as if fully lit.
        """
        block_sight = game.game_map.block_sight
        self.game_map_console.rgb["bg"] = np.where(
            block_sight[..., np.newaxis],
            np.array(colors.DARK_WALL, dtype=np.uint8),
            np.array(colors.DARK_GROUND, dtype=np.uint8),
        )

    def _render_entities(self, entities: Sequence[Entity]) -> None:
        # Later entities overwrite earlier ones on shared tiles.
        for entity in entities:
            entity.draw(self.game_map_console)
