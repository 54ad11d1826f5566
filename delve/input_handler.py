from __future__ import annotations

from typing import TYPE_CHECKING

import tcod.event

from delve.ui_commands import (
    MoveUICommand,
    QuitUICommand,
    ToggleFullscreenUICommand,
    UICommand,
)

if TYPE_CHECKING:
    from delve.app import App
    from delve.game.entities import Entity
    from delve.game.game import Game

# Arrow keys and the step each one takes.
MOVE_KEYS: dict[tcod.event.KeySym, tuple[int, int]] = {
    tcod.event.KeySym.UP: (0, -1),
    tcod.event.KeySym.DOWN: (0, 1),
    tcod.event.KeySym.LEFT: (-1, 0),
    tcod.event.KeySym.RIGHT: (1, 0),
}


class InputHandler:
    """Turns decoded key events into commands for the player entity."""

    def __init__(self, player: Entity, game: Game, app: App | None = None) -> None:
        self.player = player
        self.game = game
        self.app = app
        self.exit_requested = False

    def dispatch(self, event: tcod.event.Event) -> bool:
        """Execute whatever `event` maps to. Returns True once exit is requested."""
        command = self.handle_event(event)
        if command is not None:
            command.execute()
            if isinstance(command, QuitUICommand):
                self.exit_requested = True
        return self.exit_requested

    def handle_event(self, event: tcod.event.Event) -> UICommand | None:
        match event:
            case tcod.event.KeyDown(sym=tcod.event.KeySym.RETURN, mod=key_mod) if (
                key_mod & tcod.event.Modifier.ALT
            ):
                return ToggleFullscreenUICommand(self.app)

            case tcod.event.KeyDown(sym=tcod.event.KeySym.ESCAPE):
                return QuitUICommand(self.app)

            case tcod.event.KeyDown(sym=key_sym) if key_sym in MOVE_KEYS:
                dx, dy = MOVE_KEYS[key_sym]
                return MoveUICommand(self.player, dx, dy, self.game)

        return None
