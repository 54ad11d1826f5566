"""
User interface commands that control application behavior.

Each input event resolves to at most one command. Commands are executed
immediately by the input handler.

Examples:
    - QuitUICommand: Exit the application
    - ToggleFullscreenUICommand: Change display mode
    - MoveUICommand: Step the player one tile
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from delve.app import App
    from delve.game.entities import Entity, MoveResult
    from delve.game.game import Game


class UICommand(abc.ABC):
    """Commands that affect the UI/application."""

    @abc.abstractmethod
    def execute(self) -> None:
        pass


class ToggleFullscreenUICommand(UICommand):
    """Command for toggling fullscreen mode."""

    def __init__(self, app: App | None) -> None:
        self.app = app

    def execute(self) -> None:
        if self.app is not None:
            self.app.toggle_fullscreen()


class QuitUICommand(UICommand):
    """Command for quitting the game."""

    def __init__(self, app: App | None) -> None:
        self.app = app

    def execute(self) -> None:
        if self.app is not None:
            self.app.quit()


class MoveUICommand(UICommand):
    """Command for moving the controlled entity by one step."""

    def __init__(self, entity: Entity, dx: int, dy: int, game: Game) -> None:
        self.entity = entity
        self.dx = dx
        self.dy = dy
        self.game = game
        self.result: MoveResult | None = None

    def execute(self) -> None:
        self.result = self.entity.move_by(self.dx, self.dy, self.game)
