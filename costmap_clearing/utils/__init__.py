"""
工具模块

提供坐标变换和栅格化函数
"""

from costmap_clearing.utils.coordinates import (
    rotate_point,
    quaternion_to_yaw,
    yaw_to_quaternion,
    transform_local_to_world,
    normalize_angle
)

from costmap_clearing.utils.rasterization import (
    bresenham_line,
    polygon_outline_cells,
    convex_fill_cells
)

__all__ = [
    # 坐标变换
    "rotate_point",
    "quaternion_to_yaw",
    "yaw_to_quaternion",
    "transform_local_to_world",
    "normalize_angle",
    # 栅格化
    "bresenham_line",
    "polygon_outline_cells",
    "convex_fill_cells",
]
