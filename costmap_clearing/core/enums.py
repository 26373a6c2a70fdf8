"""
代价值定义
"""

from enum import IntEnum


class CostValue(IntEnum):
    """栅格代价值（uint8）"""
    FREE_SPACE = 0
    INSCRIBED_INFLATED_OBSTACLE = 253
    LETHAL_OBSTACLE = 254
    NO_INFORMATION = 255  # 未知/未观测


class CombinationMethod(IntEnum):
    """图层写入主地图的方式"""
    OVERWRITE = 0
    MAX = 1
