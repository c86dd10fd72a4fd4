# world/game_map.py

from typing import Dict, List, Sequence, Tuple

from engine.error_handler import ValidationError
from world.tiles import ASCII_TILES, FLOOR_TILE, Tile, TileType


class GameMap:
    """
    Represents a single dungeon floor as seen by the enemy AI.
    Holds tiles and answers bounds, walkability and tile-kind queries.
    """

    def __init__(self, tiles: List[List[Tile]]) -> None:
        self.tiles: List[List[Tile]] = tiles
        self.height: int = len(tiles)
        self.width: int = len(tiles[0]) if self.height > 0 else 0

    @classmethod
    def filled(cls, width: int, height: int, tile: Tile = FLOOR_TILE) -> "GameMap":
        """Build a width x height map made entirely of one tile."""
        return cls([[tile for _ in range(width)] for _ in range(height)])

    @classmethod
    def from_ascii(
        cls,
        rows: Sequence[str],
        legend: Dict[str, Tile] = ASCII_TILES,
    ) -> "GameMap":
        """
        Build a map from rows of ASCII characters (see world.tiles.ASCII_TILES).

        Row index is y, column index is x. Rows must all have the same length.
        """
        if not rows:
            raise ValidationError("ASCII map has no rows")
        width = len(rows[0])
        tiles: List[List[Tile]] = []
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValidationError(
                    f"ASCII map row {y} has length {len(row)}, expected {width}"
                )
            try:
                tiles.append([legend[ch] for ch in row])
            except KeyError as exc:
                raise ValidationError(
                    f"Unknown tile character {exc.args[0]!r} in row {y}"
                ) from exc
        return cls(tiles)

    # ------------------------------------------------------------------
    # Tile helpers
    # ------------------------------------------------------------------

    def in_bounds(self, tile_x: int, tile_y: int) -> bool:
        """Return True if the tile coordinate is inside the map."""
        return 0 <= tile_x < self.width and 0 <= tile_y < self.height

    def is_walkable(self, tile_x: int, tile_y: int) -> bool:
        """Check if a tile is walkable. Outside the map = not walkable."""
        if not self.in_bounds(tile_x, tile_y):
            return False
        return self.tiles[tile_y][tile_x].walkable

    def tile_type(self, tile_x: int, tile_y: int) -> TileType:
        """Tile kind at a coordinate; UNKNOWN outside the map."""
        if not self.in_bounds(tile_x, tile_y):
            return TileType.UNKNOWN
        return self.tiles[tile_y][tile_x].tile_type

    def set_tile(self, tile_x: int, tile_y: int, tile: Tile) -> None:
        if self.in_bounds(tile_x, tile_y):
            self.tiles[tile_y][tile_x] = tile

    def walkable_cells(self) -> List[Tuple[int, int]]:
        return [
            (x, y)
            for y in range(self.height)
            for x in range(self.width)
            if self.tiles[y][x].walkable
        ]
