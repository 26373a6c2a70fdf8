"""
代价地图图层 - Costmap Layers

Layer 定义清理服务依赖的能力：名称、互斥锁、区域清理、坐标转换、范围。
CostmapLayer 是持有独立栅格的图层实现（障碍物层、静态层等的公共基类）。
"""

from abc import ABC, abstractmethod
import threading
from typing import Sequence, Tuple

from loguru import logger

from costmap_clearing.core.enums import CombinationMethod, CostValue
from costmap_clearing.core.types import Bounds, Point
from costmap_clearing.costmap.costmap_2d import Costmap2D


class Layer(ABC):
    """图层接口"""

    def __init__(self, name: str):
        # 名称可能带命名空间，如 "local_costmap/obstacle_layer"
        self.name = name
        self.current = True

    def get_name(self) -> str:
        return self.name

    @abstractmethod
    def get_mutex(self) -> threading.RLock:
        """图层互斥锁，与传感器更新流程共用"""

    @abstractmethod
    def world_to_map_enforce_bounds(self, wx: float, wy: float) -> Tuple[int, int]:
        """世界坐标转栅格坐标（越界钳位）"""

    @abstractmethod
    def clear_area(self, polygon: Sequence[Point]):
        """将多边形（栅格坐标）之外的栅格重置为默认值"""

    @abstractmethod
    def get_origin_x(self) -> float:
        ...

    @abstractmethod
    def get_origin_y(self) -> float:
        ...

    @abstractmethod
    def get_size_in_meters_x(self) -> float:
        ...

    @abstractmethod
    def get_size_in_meters_y(self) -> float:
        ...

    @abstractmethod
    def add_extra_bounds(self, min_x: float, min_y: float, max_x: float, max_y: float):
        """追加下一次更新时需要重算的区域"""

    @abstractmethod
    def reset(self):
        """重置为未知状态"""

    def update_bounds(self, bounds: Bounds):
        """扩展 bounds 以覆盖本图层自上次更新以来修改的区域"""

    def update_costs(self, master: Costmap2D, bounds: Bounds):
        """将本图层代价写入主地图的 bounds 区域"""


class CostmapLayer(Costmap2D, Layer):
    """
    持有独立栅格的图层

    传感器流程应在 get_mutex() 内调用 mark / touch 修改栅格，
    清理服务在同一把锁内调用 clear_area。
    """

    def __init__(
        self,
        name: str,
        size_x: int,
        size_y: int,
        resolution: float,
        origin_x: float = 0.0,
        origin_y: float = 0.0,
        default_value: int = CostValue.NO_INFORMATION,
        combination_method: CombinationMethod = CombinationMethod.MAX
    ):
        Layer.__init__(self, name)
        Costmap2D.__init__(
            self, size_x, size_y, resolution, origin_x, origin_y, default_value
        )
        self.combination_method = combination_method
        self._extra_bounds = Bounds()
        self._has_extra_bounds = False

    # ==================== 脏区域 ====================

    def add_extra_bounds(self, min_x: float, min_y: float, max_x: float, max_y: float):
        with self._mutex:
            self._extra_bounds.expand(min_x, min_y, max_x, max_y)
            self._has_extra_bounds = True

    def use_extra_bounds(self, bounds: Bounds):
        """将待处理的额外区域并入 bounds，并清空

        读取与清空在图层锁内完成，与清理操作中的 add_extra_bounds 互斥。
        """
        with self._mutex:
            if not self._has_extra_bounds:
                return
            bounds.merge(self._extra_bounds)
            self._extra_bounds = Bounds()
            self._has_extra_bounds = False

    def has_extra_bounds(self) -> bool:
        return self._has_extra_bounds

    def update_bounds(self, bounds: Bounds):
        self.use_extra_bounds(bounds)

    # ==================== 栅格修改 ====================

    def mark(self, wx: float, wy: float, cost: int) -> bool:
        """
        在世界坐标处写入代价，并记录为脏区域

        Returns:
            bool: 点是否在图层内
        """
        cell = self.world_to_map(wx, wy)
        if cell is None:
            return False
        with self.get_mutex():
            self.set_cost(cell[0], cell[1], cost)
            self.add_extra_bounds(wx, wy, wx, wy)
        return True

    def clear_area(self, polygon: Sequence[Point]):
        """
        保留多边形内的栅格，其余栅格重置为默认值

        调用方负责持有图层锁。顶点少于3个时整层被清空。

        Args:
            polygon: 栅格坐标顶点
        """
        keep = self.polygon_mask(polygon)
        self.data[~keep] = self.default_value
        logger.debug(
            f"图层 {self.name} 区域外清理完成: 保留 {int(keep.sum())} 个栅格"
        )

    def reset(self):
        with self.get_mutex():
            self.data.fill(self.default_value)
            self._extra_bounds = Bounds()
            self._has_extra_bounds = False
        self.current = False

    def update_costs(self, master: Costmap2D, bounds: Bounds):
        if bounds.is_empty():
            return

        x0, y0 = master.world_to_map_enforce_bounds(bounds.min_x, bounds.min_y)
        xn, yn = master.world_to_map_enforce_bounds(bounds.max_x, bounds.max_y)

        with self.get_mutex():
            # 主地图与图层共享同一几何参数
            window = self.data[y0:yn + 1, x0:xn + 1]
            target = master.data[y0:yn + 1, x0:xn + 1]
            known = window != CostValue.NO_INFORMATION

            if self.combination_method == CombinationMethod.OVERWRITE:
                target[known] = window[known]
            else:
                replace = known & (
                    (target == CostValue.NO_INFORMATION) | (window > target)
                )
                target[replace] = window[replace]

        self.current = True
