"""
清理层 - Clearing Layer
"""
from .clear_costmap_service import ClearCostmapService
from .layer_filter import LayerFilter, get_layer_name
from .messages import (
    ClearExceptRegionRequest,
    ClearAroundRobotRequest,
    ClearEntireCostmapRequest,
    ClearCostmapResponse,
)
from .region_builder import (
    build_window_polygon,
    build_local_rectangle,
    build_oriented_rectangle,
    except_region_extents,
)

__all__ = [
    "ClearCostmapService",
    "LayerFilter",
    "get_layer_name",
    "ClearExceptRegionRequest",
    "ClearAroundRobotRequest",
    "ClearEntireCostmapRequest",
    "ClearCostmapResponse",
    "build_window_polygon",
    "build_local_rectangle",
    "build_oriented_rectangle",
    "except_region_extents",
]
