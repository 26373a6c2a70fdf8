"""
清理服务核心数据类型

Point / Pose2D / Region 均为单次请求内的临时值，不缓存、不跨请求共享。
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple
import math


@dataclass(frozen=True)
class Point:
    """二维点（世界坐标或栅格坐标，由上下文决定）"""
    x: float = 0.0
    y: float = 0.0

    def distance_to(self, other: 'Point') -> float:
        """计算到另一点的距离"""
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class Pose2D:
    """机器人二维位姿（世界坐标系）"""
    x: float = 0.0
    y: float = 0.0
    yaw: float = 0.0  # 弧度

    def position(self) -> Point:
        return Point(self.x, self.y)

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "yaw": self.yaw}

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.yaw)


@dataclass
class Bounds:
    """
    世界坐标系下的脏区域

    初始为空（min=+inf, max=-inf），通过 expand 逐步扩展。
    """
    min_x: float = math.inf
    min_y: float = math.inf
    max_x: float = -math.inf
    max_y: float = -math.inf

    def expand(self, min_x: float, min_y: float, max_x: float, max_y: float):
        """扩展到覆盖给定矩形"""
        self.min_x = min(self.min_x, min_x)
        self.min_y = min(self.min_y, min_y)
        self.max_x = max(self.max_x, max_x)
        self.max_y = max(self.max_y, max_y)

    def merge(self, other: 'Bounds'):
        if not other.is_empty():
            self.expand(other.min_x, other.min_y, other.max_x, other.max_y)

    def is_empty(self) -> bool:
        return self.min_x > self.max_x or self.min_y > self.max_y

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)


@dataclass(frozen=True)
class RegionExtents:
    """
    机器人局部坐标系下矩形区域的半尺寸

    forward: 沿朝向向前的距离
    backward: 沿朝向向后的距离
    lateral: 左右两侧各自的距离
    """
    forward: float
    backward: float
    lateral: float

    @classmethod
    def symmetric(cls, reset_distance: float) -> 'RegionExtents':
        half_dist = reset_distance / 2.0
        return cls(forward=half_dist, backward=half_dist, lateral=half_dist)

    def is_degenerate(self) -> bool:
        """面积为零（点或线段）"""
        return self.lateral <= 0 or self.forward + self.backward <= 0


# 多边形：按顺序排列的顶点（>=3个）
Region = List[Point]
