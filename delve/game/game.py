from __future__ import annotations

from delve.environment.map import GameMap


class Game:
    """
    Session state shared by movement and rendering.

    Owns the single map for the session. Entities are kept by the caller and
    passed in next to the Game, so the map can be checked for collisions
    without the Game knowing who is moving.
    """

    def __init__(self, game_map: GameMap) -> None:
        self.game_map = game_map

    @property
    def width(self) -> int:
        return self.game_map.width

    @property
    def height(self) -> int:
        return self.game_map.height
