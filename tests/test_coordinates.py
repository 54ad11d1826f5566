from delve.util.coordinates import Rect, is_valid_world_tile_pos


def test_rect_from_origin_and_size() -> None:
    room = Rect(20, 15, 10, 15)
    assert (room.x1, room.y1, room.x2, room.y2) == (20, 15, 30, 30)
    assert room.width == 10
    assert room.height == 15


def test_rect_from_bounds_matches_constructor() -> None:
    assert Rect.from_bounds(2, 3, 7, 9) == Rect(2, 3, 5, 6)


def test_rect_center() -> None:
    assert Rect(20, 15, 10, 15).center() == (25, 22)


def test_rect_intersects() -> None:
    a = Rect(0, 0, 5, 5)
    assert a.intersects(Rect(5, 5, 3, 3))  # Shared corner counts.
    assert not a.intersects(Rect(6, 0, 3, 3))


def test_is_valid_world_tile_pos() -> None:
    assert is_valid_world_tile_pos((0, 0), 80, 45)
    assert is_valid_world_tile_pos((79, 44), 80, 45)
    assert not is_valid_world_tile_pos((80, 0), 80, 45)
    assert not is_valid_world_tile_pos((0, -1), 80, 45)
