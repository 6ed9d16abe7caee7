from .cave_generator import CaveGenerator, count_wall_neighbors, smooth_cave
from .water_cluster_generator import (
    apply_water_overlay, count_water_neighbors, WaterClusterGenerator, WaterMask
)

__all__ = [
    "CaveGenerator",
    "count_wall_neighbors",
    "smooth_cave",
    "apply_water_overlay",
    "count_water_neighbors",
    "WaterClusterGenerator",
    "WaterMask",
]
