"""
坐标变换工具

提供统一的坐标变换函数，包括：
- 绕任意点的二维旋转
- 四元数到偏航角转换
- 局部坐标与世界坐标转换
- 角度归一化
"""

import math
from typing import Tuple

from costmap_clearing.core.types import Point


def rotate_point(pivot_x: float, pivot_y: float, yaw: float, point: Point) -> Point:
    """
    将点绕 (pivot_x, pivot_y) 旋转 yaw 弧度

    Args:
        pivot_x: 旋转中心x
        pivot_y: 旋转中心y
        yaw: 旋转角（弧度，逆时针为正）
        point: 待旋转的点

    Returns:
        Point: 旋转后的点
    """
    cos_yaw = math.cos(yaw)
    sin_yaw = math.sin(yaw)
    dx = point.x - pivot_x
    dy = point.y - pivot_y

    return Point(
        pivot_x + dx * cos_yaw - dy * sin_yaw,
        pivot_y + dx * sin_yaw + dy * cos_yaw
    )


def quaternion_to_yaw(q: Tuple[float, float, float, float]) -> float:
    """
    四元数转偏航角（ZYX顺序）

    Args:
        q: 四元数 (x, y, z, w)

    Returns:
        float: yaw 单位：弧度
    """
    x, y, z, w = q
    siny_cosp = 2 * (w * z + x * y)
    cosy_cosp = 1 - 2 * (y * y + z * z)
    return math.atan2(siny_cosp, cosy_cosp)


def yaw_to_quaternion(yaw: float) -> Tuple[float, float, float, float]:
    """偏航角转四元数 (x, y, z, w)"""
    return (0.0, 0.0, math.sin(yaw * 0.5), math.cos(yaw * 0.5))


def transform_local_to_world(
    local_x: float,
    local_y: float,
    world_x: float,
    world_y: float,
    yaw: float
) -> Tuple[float, float]:
    """
    将局部坐标转换为世界坐标

    Args:
        local_x: 局部x坐标
        local_y: 局部y坐标
        world_x: 局部坐标系原点x（世界坐标）
        world_y: 局部坐标系原点y（世界坐标）
        yaw: 局部坐标系朝向（弧度）

    Returns:
        Tuple[float, float]: 世界坐标 (x, y)
    """
    rotated = rotate_point(0.0, 0.0, yaw, Point(local_x, local_y))
    return (world_x + rotated.x, world_y + rotated.y)


def normalize_angle(angle: float) -> float:
    """
    归一化角度到 [-pi, pi] 范围
    """
    return math.atan2(math.sin(angle), math.cos(angle))
