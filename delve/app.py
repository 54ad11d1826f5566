from __future__ import annotations

import logging
import random
from dataclasses import dataclass

import tcod.context
import tcod.event
import tcod.tileset
from tcod.console import Console

from delve import colors, config
from delve.environment.generators import (
    DungeonGenerator,
    Layout,
    get_layout_preset,
    random_rooms_layout,
)
from delve.game.entities import Entity
from delve.game.game import Game
from delve.input_handler import InputHandler
from delve.render import Renderer

logger = logging.getLogger(__name__)


@dataclass
class AppConfig:
    """Configuration for the application driver."""

    width: int
    height: int
    title: str
    vsync: bool


def build_layout(name: str = config.MAP_LAYOUT) -> Layout:
    """Resolve a layout name from the config into carve operations."""
    if name == "random":
        return random_rooms_layout(
            config.MAP_WIDTH,
            config.MAP_HEIGHT,
            max_rooms=config.MAX_NUM_ROOMS,
            min_room_size=config.MIN_ROOM_SIZE,
            max_room_size=config.MAX_ROOM_SIZE,
            rng=random.Random(config.RANDOM_SEED),
        )
    return get_layout_preset(name)


def new_game(layout: Layout) -> tuple[Game, list[Entity]]:
    """Generate the map and place the starting entities.

    The player is always the first entity in the returned list.
    """
    game_map = DungeonGenerator.from_layout(
        config.MAP_WIDTH, config.MAP_HEIGHT, layout
    ).generate()
    game = Game(game_map)

    player_x, player_y = config.PLAYER_START
    if layout.rooms and game_map.is_blocked(player_x, player_y):
        # Random layouts don't know about the fixed start tile.
        player_x, player_y = layout.rooms[0].center()

    player = Entity(
        player_x, player_y, config.PLAYER_GLYPH, colors.PLAYER_COLOR, name="Player"
    )
    npc_x, npc_y = config.NPC_START
    npc = Entity(npc_x, npc_y, config.NPC_GLYPH, config.NPC_COLOR, name="NPC")

    return game, [player, npc]


class App:
    """
    The TCOD application driver.

    Owns the window and the root console, and runs a turn-based loop: draw the
    current state, then block until the next input event.
    """

    def __init__(self, app_config: AppConfig, layout: Layout | None = None) -> None:
        self.app_config = app_config
        self.root_console = Console(app_config.width, app_config.height, order="F")
        self.context: tcod.context.Context | None = None
        self._running = False

        self.game, self.entities = new_game(layout or build_layout())
        self.renderer = Renderer(self.game.width, self.game.height)
        self.input_handler = InputHandler(self.entities[0], self.game, app=self)

    def run(self) -> None:
        """Starts the main application loop and runs the game."""
        tileset = load_tileset()
        with tcod.context.new(
            console=self.root_console,
            tileset=tileset,
            title=self.app_config.title,
            vsync=self.app_config.vsync,
        ) as context:
            self.context = context
            self._running = True
            logger.info("Starting %s", self.app_config.title)
            try:
                while self._running:
                    self.render_frame()
                    for event in tcod.event.wait():
                        if isinstance(event, tcod.event.Quit):
                            self.quit()
                            break
                        if self.input_handler.dispatch(event):
                            break
            except Exception:
                logger.exception("Unexpected error in the game loop")
                raise
            finally:
                self.context = None
        logger.info("Shut down cleanly")

    def render_frame(self) -> None:
        self.root_console.clear()
        self.renderer.render_all(self.game, self.entities, self.root_console)
        if self.context is not None:
            self.context.present(self.root_console, keep_aspect=True)

    def toggle_fullscreen(self) -> None:
        """Toggles the display between windowed and fullscreen mode."""
        if self.context is None or self.context.sdl_window is None:
            return
        window = self.context.sdl_window
        window.fullscreen = not window.fullscreen

    def quit(self) -> None:
        self._running = False


def load_tileset() -> tcod.tileset.Tileset | None:
    """Load the configured font sheet, or None to use libtcod's fallback font."""
    if not config.TILESET_PATH.exists():
        logger.warning(
            "Tileset %s not found, using the default font", config.TILESET_PATH
        )
        return None
    return tcod.tileset.load_tilesheet(
        config.TILESET_PATH,
        columns=config.TILESET_COLUMNS,
        rows=config.TILESET_ROWS,
        charmap=tcod.tileset.CHARMAP_TCOD,
    )
