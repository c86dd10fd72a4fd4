# world/tiles.py

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class TileType(Enum):
    WALL = "wall"
    FLOOR = "floor"
    DOOR = "door"
    STAIRS_UP = "stairs_up"
    STAIRS_DOWN = "stairs_down"
    TRAP = "trap"
    SHRINE = "shrine"
    WATER = "water"            # walkable, slows
    LAVA = "lava"
    CHASM = "chasm"
    DEEP_WATER = "deep_water"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Tile:
    """Basic tile definition."""
    tile_type: TileType
    walkable: bool
    blocks_sight: bool
    color: Tuple[int, int, int]


FLOOR_TILE = Tile(TileType.FLOOR, walkable=True, blocks_sight=False, color=(40, 40, 60))
WALL_TILE = Tile(TileType.WALL, walkable=False, blocks_sight=True, color=(90, 90, 120))
DOOR_TILE = Tile(TileType.DOOR, walkable=True, blocks_sight=False, color=(150, 110, 60))
UP_STAIRS_TILE = Tile(TileType.STAIRS_UP, walkable=True, blocks_sight=False, color=(120, 200, 255))
DOWN_STAIRS_TILE = Tile(TileType.STAIRS_DOWN, walkable=True, blocks_sight=False, color=(255, 200, 120))
TRAP_TILE = Tile(TileType.TRAP, walkable=True, blocks_sight=False, color=(200, 40, 40))
SHRINE_TILE = Tile(TileType.SHRINE, walkable=True, blocks_sight=False, color=(80, 230, 230))
WATER_TILE = Tile(TileType.WATER, walkable=True, blocks_sight=False, color=(40, 120, 220))
LAVA_TILE = Tile(TileType.LAVA, walkable=False, blocks_sight=False, color=(240, 90, 20))
CHASM_TILE = Tile(TileType.CHASM, walkable=False, blocks_sight=False, color=(8, 8, 8))
DEEP_WATER_TILE = Tile(TileType.DEEP_WATER, walkable=False, blocks_sight=False, color=(10, 30, 160))

# ASCII legend used by GameMap.from_ascii and the simulation CLI
ASCII_TILES: Dict[str, Tile] = {
    ".": FLOOR_TILE,
    "#": WALL_TILE,
    "+": DOOR_TILE,
    "<": UP_STAIRS_TILE,
    ">": DOWN_STAIRS_TILE,
    "^": TRAP_TILE,
    "_": SHRINE_TILE,
    "~": WATER_TILE,
    "=": LAVA_TILE,
    " ": CHASM_TILE,
    "w": DEEP_WATER_TILE,
}
