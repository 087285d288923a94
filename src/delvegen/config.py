# src/delvegen/config.py
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class GenerationSettings:
    # Default map sizes (width, height)
    room_dimensions: Tuple[int, int] = (96, 48)
    cave_dimensions: Tuple[int, int] = (64, 32)
    maze_dimensions: Tuple[int, int] = (64, 32)
    overworld_dimensions: Tuple[int, int] = (64, 32)

    # Rooms
    room_iterations: int = 40
    room_short_side: Tuple[int, int] = (4, 16)
    room_long_side: Tuple[int, int] = (8, 24)
    room_solid_one_in: int = 3
    room_doors: Tuple[int, int] = (1, 3)

    # Cave
    cave_max_iterations: int = 10000
    cave_wall_probability: float = 0.5
    cave_feature_count: int = 12
    cave_chasms: Tuple[int, int] = (3, 7)
    chasm_size: int = 20
    chasm_iterations: int = 15

    # Maze
    maze_door_one_in: int = 25

    # Overworld
    overworld_wall_one_in: int = 4
    lake_size: int = 500
    pond_size: int = 20
    lava_pool_size: int = 5
    mist_size: int = 30
    overworld_feature_iterations: int = 10

    # Mossy floor smoothing, shared by every generator
    mossy_attempts: Tuple[int, int] = (1, 100)
    mossy_patch_size: Tuple[int, int] = (3, 10)
    mossy_iterations: int = 5

    # Dark levels (never level 0)
    dark_level_one_in: int = 10


# Immutable defaults; derive variants with dataclasses.replace(DEFAULTS, ...)
DEFAULTS = GenerationSettings()
