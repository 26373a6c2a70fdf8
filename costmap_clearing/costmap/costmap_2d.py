"""
二维代价地图 - Costmap2D

负责:
- 维护 uint8 代价栅格
- 世界坐标与栅格坐标转换（可选越界钳位）
- 多边形区域代价写入
- 提供地图级互斥锁
"""

import math
import threading
from typing import List, Optional, Sequence, Tuple

import numpy as np
from loguru import logger

from costmap_clearing.core.enums import CostValue
from costmap_clearing.core.types import Point
from costmap_clearing.utils.rasterization import convex_fill_cells


class Costmap2D:
    """
    二维代价地图

    data[my, mx] 保存栅格 (mx, my) 的代价。所有读写应在 get_mutex() 返回的锁内进行。
    """

    def __init__(
        self,
        size_x: int,
        size_y: int,
        resolution: float,
        origin_x: float = 0.0,
        origin_y: float = 0.0,
        default_value: int = CostValue.NO_INFORMATION
    ):
        if size_x <= 0 or size_y <= 0:
            raise ValueError(f"地图尺寸必须为正: {size_x}x{size_y}")
        if resolution <= 0:
            raise ValueError(f"分辨率必须为正: {resolution}")

        self.size_x = size_x
        self.size_y = size_y
        self.resolution = resolution
        self.origin_x = origin_x
        self.origin_y = origin_y
        self.default_value = int(default_value)

        self._mutex = threading.RLock()
        self.data = np.full((size_y, size_x), self.default_value, dtype=np.uint8)

    def get_mutex(self) -> threading.RLock:
        """获取地图互斥锁"""
        return self._mutex

    def get_default_value(self) -> int:
        return self.default_value

    def get_origin_x(self) -> float:
        return self.origin_x

    def get_origin_y(self) -> float:
        return self.origin_y

    def get_size_in_cells_x(self) -> int:
        return self.size_x

    def get_size_in_cells_y(self) -> int:
        return self.size_y

    def get_size_in_meters_x(self) -> float:
        return self.size_x * self.resolution

    def get_size_in_meters_y(self) -> float:
        return self.size_y * self.resolution

    def get_char_map(self) -> np.ndarray:
        """返回底层栅格数组（非拷贝）"""
        return self.data

    def snapshot(self) -> np.ndarray:
        """在锁内拷贝栅格"""
        with self._mutex:
            return self.data.copy()

    # ==================== 坐标转换 ====================

    def map_to_world(self, mx: int, my: int) -> Tuple[float, float]:
        """栅格坐标转世界坐标（栅格中心）"""
        wx = self.origin_x + (mx + 0.5) * self.resolution
        wy = self.origin_y + (my + 0.5) * self.resolution
        return wx, wy

    def world_to_map(self, wx: float, wy: float) -> Optional[Tuple[int, int]]:
        """
        世界坐标转栅格坐标

        Returns:
            (mx, my)，若点不在地图内则返回 None
        """
        if not (math.isfinite(wx) and math.isfinite(wy)):
            return None
        if wx < self.origin_x or wy < self.origin_y:
            return None

        mx = int((wx - self.origin_x) / self.resolution)
        my = int((wy - self.origin_y) / self.resolution)

        if mx < self.size_x and my < self.size_y:
            return mx, my
        return None

    def world_to_map_enforce_bounds(self, wx: float, wy: float) -> Tuple[int, int]:
        """
        世界坐标转栅格坐标，超出地图的点钳位到最近的有效栅格

        不会抛出异常，返回值始终满足 0 <= mx < size_x, 0 <= my < size_y。
        NaN 坐标按低于原点处理。
        """
        if math.isnan(wx) or wx < self.origin_x:
            mx = 0
        elif wx >= self.get_size_in_meters_x() + self.origin_x:
            mx = self.size_x - 1
        else:
            mx = min(int((wx - self.origin_x) / self.resolution), self.size_x - 1)

        if math.isnan(wy) or wy < self.origin_y:
            my = 0
        elif wy >= self.get_size_in_meters_y() + self.origin_y:
            my = self.size_y - 1
        else:
            my = min(int((wy - self.origin_y) / self.resolution), self.size_y - 1)

        return mx, my

    def is_valid(self, mx: int, my: int) -> bool:
        """检查栅格坐标是否有效"""
        return 0 <= mx < self.size_x and 0 <= my < self.size_y

    # ==================== 栅格读写 ====================

    def get_cost(self, mx: int, my: int) -> int:
        return int(self.data[my, mx])

    def set_cost(self, mx: int, my: int, cost: int):
        self.data[my, mx] = cost

    def reset_map(self, x0: int, y0: int, xn: int, yn: int):
        """将 [x0, xn) x [y0, yn) 窗口重置为默认值"""
        with self._mutex:
            self.data[y0:yn, x0:xn] = self.default_value

    def reset_all(self):
        """整张地图重置为默认值"""
        with self._mutex:
            self.data.fill(self.default_value)

    def convex_fill_cells(self, polygon: Sequence[Point]) -> List[Tuple[int, int]]:
        """
        栅格坐标多边形覆盖的栅格，超出地图的部分被丢弃
        """
        return [
            (mx, my) for mx, my in convex_fill_cells(polygon)
            if self.is_valid(mx, my)
        ]

    def polygon_mask(self, polygon: Sequence[Point]) -> np.ndarray:
        """返回多边形内部栅格为 True 的布尔掩码，形状与 data 相同"""
        mask = np.zeros((self.size_y, self.size_x), dtype=bool)
        cells = self.convex_fill_cells(polygon)
        if cells:
            xs, ys = zip(*cells)
            mask[list(ys), list(xs)] = True
        return mask

    def set_convex_polygon_cost(self, polygon: Sequence[Point], cost: int) -> bool:
        """
        将世界坐标凸多边形内的栅格设置为 cost

        任一顶点不在地图内时不做任何修改并返回 False。顶点不会被钳位到地图边界，
        因此靠近地图边缘、窗口部分越界的调用整体失败；需要钳位语义时使用
        world_to_map_enforce_bounds 自行转换顶点。

        Args:
            polygon: 世界坐标顶点
            cost: 要写入的代价

        Returns:
            bool: 是否写入成功
        """
        map_polygon = []
        for vertex in polygon:
            cell = self.world_to_map(vertex.x, vertex.y)
            if cell is None:
                logger.warning(
                    f"多边形顶点 ({vertex.x:.2f}, {vertex.y:.2f}) 超出地图范围，未修改地图"
                )
                return False
            map_polygon.append(Point(float(cell[0]), float(cell[1])))

        with self._mutex:
            mask = self.polygon_mask(map_polygon)
            self.data[mask] = cost
        return True
