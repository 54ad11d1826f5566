from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from delve import colors
from delve.types import WorldTilePos

if TYPE_CHECKING:
    from tcod.console import Console

    from delve.game.game import Game

logger = logging.getLogger(__name__)


@dataclass
class MoveResult:
    """Outcome of a single movement step.

    A refused move is not an error: the entity simply stays where it is.
    """

    succeeded: bool
    block_reason: str | None = None  # "wall" or "out_of_bounds"


class Entity:
    """A positioned, drawable thing on the map (the player, an NPC, ...)."""

    def __init__(
        self,
        x: int,
        y: int,
        ch: str,
        color: colors.Color,
        name: str = "<Unnamed Entity>",
    ) -> None:
        if len(ch) != 1:
            raise ValueError(f"Entity glyph must be a single character, got {ch!r}")
        self.x = x
        self.y = y
        self.ch = ch  # Character that represents the entity.
        self.color = color
        self.name = name

    @property
    def position(self) -> WorldTilePos:
        return (self.x, self.y)

    def move_by(self, dx: int, dy: int, game: Game) -> MoveResult:
        """Step by (dx, dy) unless the destination is off the map or blocked."""
        game_map = game.game_map
        new_x = self.x + dx
        new_y = self.y + dy

        # Check map boundaries first
        if not game_map.in_bounds(new_x, new_y):
            logger.debug("%s can't move to (%d, %d): off map", self.name, new_x, new_y)
            return MoveResult(succeeded=False, block_reason="out_of_bounds")

        if game_map.is_blocked(new_x, new_y):
            logger.debug("%s bumps into a wall at (%d, %d)", self.name, new_x, new_y)
            return MoveResult(succeeded=False, block_reason="wall")

        self.x = new_x
        self.y = new_y
        return MoveResult(succeeded=True)

    def draw(self, console: Console) -> None:
        """Write this entity's glyph in its color, keeping the cell background."""
        if not (0 <= self.x < console.width and 0 <= self.y < console.height):
            return
        console.rgb["ch"][self.x, self.y] = ord(self.ch)
        console.rgb["fg"][self.x, self.y] = self.color

    def __repr__(self) -> str:
        return f"Entity({self.name!r}, x={self.x}, y={self.y}, ch={self.ch!r})"
