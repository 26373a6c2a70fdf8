"""
清理区域构建

所有函数返回世界坐标系下按顺序排列的矩形顶点。
"""

import math
from typing import Optional

from costmap_clearing.core.types import Point, Pose2D, Region, RegionExtents
from costmap_clearing.utils.coordinates import rotate_point


def build_window_polygon(pose: Pose2D, window_size_x: float, window_size_y: float) -> Region:
    """
    以位姿为中心的轴对齐窗口

    顶点顺序：左下、右下、右上、左上。窗口不随机器人朝向旋转。
    """
    half_x = window_size_x / 2
    half_y = window_size_y / 2

    return [
        Point(pose.x - half_x, pose.y - half_y),
        Point(pose.x + half_x, pose.y - half_y),
        Point(pose.x + half_x, pose.y + half_y),
        Point(pose.x - half_x, pose.y + half_y),
    ]


def _cap_extent(value: float, max_extent: Optional[float]) -> float:
    # NaN 视为零长度
    if math.isnan(value):
        return 0.0
    if max_extent is None:
        return value
    return min(value, max_extent)


def except_region_extents(
    reset_distance: float,
    forward_extent: Optional[float] = None,
    max_extent: Optional[float] = None
) -> RegionExtents:
    """
    保留区域的半尺寸

    Args:
        reset_distance: 保留区域边长
        forward_extent: 固定的前向距离，None 时与其他方向一致（reset_distance / 2）
        max_extent: 各方向距离的上限，超过该值（包括 inf）时取上限
    """
    extents = RegionExtents.symmetric(reset_distance)
    forward = extents.forward if forward_extent is None else forward_extent
    return RegionExtents(
        forward=_cap_extent(forward, max_extent),
        backward=_cap_extent(extents.backward, max_extent),
        lateral=_cap_extent(extents.lateral, max_extent)
    )


def build_local_rectangle(pose: Pose2D, extents: RegionExtents) -> Region:
    """旋转前的矩形，x 轴沿机器人朝向"""
    return [
        Point(pose.x - extents.backward, pose.y - extents.lateral),
        Point(pose.x + extents.forward, pose.y - extents.lateral),
        Point(pose.x + extents.forward, pose.y + extents.lateral),
        Point(pose.x - extents.backward, pose.y + extents.lateral),
    ]


def build_oriented_rectangle(pose: Pose2D, extents: RegionExtents) -> Region:
    """
    按机器人朝向旋转的矩形

    Args:
        pose: 机器人位姿，矩形绕 (pose.x, pose.y) 旋转 pose.yaw
        extents: 局部坐标系下的半尺寸

    Returns:
        Region: 世界坐标顶点
    """
    return [
        rotate_point(pose.x, pose.y, pose.yaw, corner)
        for corner in build_local_rectangle(pose, extents)
    ]
