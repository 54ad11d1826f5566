from __future__ import annotations

import pytest
import tcod.event

from delve import colors
from delve.environment import tile_types
from delve.game.entities import Entity
from delve.game.game import Game
from delve.input_handler import InputHandler
from delve.ui_commands import (
    MoveUICommand,
    QuitUICommand,
    ToggleFullscreenUICommand,
)
from tests.helpers import DummyApp, key_down, make_game


def make_input_handler(
    game: Game | None = None,
) -> tuple[InputHandler, Entity, DummyApp]:
    game = game or make_game(10, 10)
    player = Entity(5, 5, "@", colors.WHITE, name="Player")
    app = DummyApp()
    return InputHandler(player, game, app=app), player, app  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "sym, delta",
    [
        (tcod.event.KeySym.UP, (0, -1)),
        (tcod.event.KeySym.DOWN, (0, 1)),
        (tcod.event.KeySym.LEFT, (-1, 0)),
        (tcod.event.KeySym.RIGHT, (1, 0)),
    ],
)
def test_arrow_keys_move_the_player(
    sym: tcod.event.KeySym, delta: tuple[int, int]
) -> None:
    handler, player, _ = make_input_handler()

    command = handler.handle_event(key_down(sym))
    assert isinstance(command, MoveUICommand)
    assert (command.dx, command.dy) == delta

    assert handler.dispatch(key_down(sym)) is False
    assert player.position == (5 + delta[0], 5 + delta[1])


def test_arrow_key_into_wall_leaves_player_in_place() -> None:
    game = make_game(10, 10)
    game.game_map.set(5, 4, tile_types.WALL)
    handler, player, _ = make_input_handler(game)

    command = handler.handle_event(key_down(tcod.event.KeySym.UP))
    assert command is not None
    command.execute()

    assert isinstance(command, MoveUICommand)
    assert command.result is not None
    assert command.result.block_reason == "wall"
    assert player.position == (5, 5)


def test_escape_requests_exit() -> None:
    handler, player, app = make_input_handler()

    command = handler.handle_event(key_down(tcod.event.KeySym.ESCAPE))
    assert isinstance(command, QuitUICommand)

    assert handler.dispatch(key_down(tcod.event.KeySym.ESCAPE)) is True
    assert app.quit_requested
    assert player.position == (5, 5)


def test_alt_enter_toggles_fullscreen() -> None:
    handler, player, app = make_input_handler()
    event = key_down(tcod.event.KeySym.RETURN, tcod.event.Modifier.LALT)

    assert isinstance(handler.handle_event(event), ToggleFullscreenUICommand)
    assert handler.dispatch(event) is False
    assert app.fullscreen_toggles == 1
    assert player.position == (5, 5)


def test_plain_enter_does_nothing() -> None:
    handler, _, app = make_input_handler()
    assert handler.handle_event(key_down(tcod.event.KeySym.RETURN)) is None
    handler.dispatch(key_down(tcod.event.KeySym.RETURN))
    assert app.fullscreen_toggles == 0


@pytest.mark.parametrize(
    "event",
    [
        key_down(tcod.event.KeySym.TAB),
        key_down(tcod.event.KeySym.SPACE),
        tcod.event.KeyUp(
            scancode=0, sym=tcod.event.KeySym.UP, mod=tcod.event.Modifier.NONE
        ),
    ],
)
def test_other_events_are_ignored(event: tcod.event.Event) -> None:
    handler, player, app = make_input_handler()

    assert handler.handle_event(event) is None
    assert handler.dispatch(event) is False
    assert player.position == (5, 5)
    assert not app.quit_requested
    assert app.fullscreen_toggles == 0
