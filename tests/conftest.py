from __future__ import annotations

import pytest

from delve.environment.map import GameMap
from delve.game.game import Game
from tests.helpers import make_game


@pytest.fixture
def open_game() -> Game:
    """A small map with every tile open."""
    return make_game(10, 10)


@pytest.fixture
def walled_map() -> GameMap:
    return GameMap(80, 45)
