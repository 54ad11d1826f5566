from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import tcod.event

from delve.environment import tile_types
from delve.environment.map import GameMap
from delve.game.game import Game


def make_game(
    width: int = 30, height: int = 30, fill: np.ndarray = tile_types.EMPTY
) -> Game:
    """A Game around a map filled with a single tile type."""
    return Game(GameMap(width, height, fill=fill))


def key_down(
    sym: tcod.event.KeySym, mod: tcod.event.Modifier = tcod.event.Modifier.NONE
) -> tcod.event.KeyDown:
    return tcod.event.KeyDown(scancode=0, sym=sym, mod=mod)


@dataclass
class DummyApp:
    """Records the calls an InputHandler makes on its app."""

    fullscreen_toggles: int = 0
    quit_requested: bool = False

    def toggle_fullscreen(self) -> None:
        self.fullscreen_toggles += 1

    def quit(self) -> None:
        self.quit_requested = True
