"""
Unit tests for the game map.
"""

import pytest

from engine.error_handler import ValidationError
from world.game_map import GameMap
from world.tiles import WALL_TILE, TileType


class TestFromAscii:
    """Tests for GameMap.from_ascii."""

    def test_dimensions(self, make_map):
        game_map = make_map(("....", "#..#", "...."))
        assert (game_map.width, game_map.height) == (4, 3)

    def test_tile_kinds(self, make_map):
        game_map = make_map((".#+", "<>~"))
        assert game_map.tile_type(0, 0) is TileType.FLOOR
        assert game_map.tile_type(1, 0) is TileType.WALL
        assert game_map.tile_type(2, 0) is TileType.DOOR
        assert game_map.tile_type(2, 1) is TileType.WATER

    def test_empty_rows_rejected(self):
        with pytest.raises(ValidationError):
            GameMap.from_ascii([])

    def test_ragged_rows_rejected(self):
        with pytest.raises(ValidationError, match="row 1"):
            GameMap.from_ascii(["...", ".."])

    def test_unknown_character_rejected(self):
        with pytest.raises(ValidationError):
            GameMap.from_ascii(["..@.."])


class TestQueries:
    """Tests for bounds and walkability queries."""

    def test_in_bounds(self):
        game_map = GameMap.filled(3, 2)
        assert game_map.in_bounds(0, 0)
        assert game_map.in_bounds(2, 1)
        assert not game_map.in_bounds(3, 0)
        assert not game_map.in_bounds(0, -1)

    def test_outside_is_not_walkable(self):
        game_map = GameMap.filled(3, 3)
        assert game_map.is_walkable(1, 1) is True
        assert game_map.is_walkable(-1, 1) is False
        assert game_map.tile_type(5, 5) is TileType.UNKNOWN

    @pytest.mark.parametrize("row,walkable", [
        (".", True),
        ("#", False),
        ("=", False),
        ("w", False),
        (" ", False),
        ("~", True),
    ])
    def test_walkability_by_tile(self, make_map, row, walkable):
        assert make_map((row,)).is_walkable(0, 0) is walkable

    def test_set_tile_and_walkable_cells(self):
        game_map = GameMap.filled(2, 2)
        game_map.set_tile(1, 0, WALL_TILE)
        game_map.set_tile(9, 9, WALL_TILE)
        assert game_map.walkable_cells() == [(0, 0), (0, 1), (1, 1)]
