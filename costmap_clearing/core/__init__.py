"""
清理服务核心模块

提供统一的数据类型、枚举和异常定义。
"""

from costmap_clearing.core.types import (
    Point,
    Pose2D,
    Bounds,
    RegionExtents,
    Region
)

from costmap_clearing.core.enums import (
    CostValue,
    CombinationMethod
)

from costmap_clearing.core.exceptions import (
    CostmapClearingError,
    PoseUnavailableError,
    ConfigurationError,
    UnknownServiceError
)

__all__ = [
    # 类型
    "Point",
    "Pose2D",
    "Bounds",
    "RegionExtents",
    "Region",
    # 枚举
    "CostValue",
    "CombinationMethod",
    # 异常
    "CostmapClearingError",
    "PoseUnavailableError",
    "ConfigurationError",
    "UnknownServiceError",
]
