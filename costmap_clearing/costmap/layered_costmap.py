"""
分层代价地图 - Layered Costmap

负责:
- 按注册顺序维护图层
- 合成主地图
- 整体重置
"""

import threading
from typing import List, Tuple

from loguru import logger

from costmap_clearing.core.enums import CostValue
from costmap_clearing.core.types import Bounds
from costmap_clearing.costmap.costmap_2d import Costmap2D
from costmap_clearing.costmap.costmap_layer import Layer


class LayeredCostmap:
    """
    分层代价地图

    图层列表可能在其他线程中增删；get_plugins() 返回注册表锁内拍下的快照，
    遍历快照不受后续增删影响。
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
        self.costmap = Costmap2D(
            size_x, size_y, resolution, origin_x, origin_y, default_value
        )
        self._plugins: List[Layer] = []
        self._registry_lock = threading.Lock()

        logger.info(
            f"LayeredCostmap 初始化: {size_x}x{size_y} 栅格, 分辨率={resolution}m, "
            f"原点=({origin_x}, {origin_y})"
        )

    def get_costmap(self) -> Costmap2D:
        """获取主地图"""
        return self.costmap

    def get_default_value(self) -> int:
        return self.costmap.get_default_value()

    def add_plugin(self, layer: Layer):
        with self._registry_lock:
            self._plugins.append(layer)
        logger.debug(f"注册图层: {layer.get_name()}")

    def remove_plugin(self, layer: Layer) -> bool:
        with self._registry_lock:
            if layer in self._plugins:
                self._plugins.remove(layer)
                return True
            return False

    def get_plugins(self) -> Tuple[Layer, ...]:
        """按注册顺序返回图层快照"""
        with self._registry_lock:
            return tuple(self._plugins)

    def reset_layers(self):
        """主地图和所有图层重置为默认值"""
        self.costmap.reset_all()
        for layer in self.get_plugins():
            layer.reset()
        logger.info("分层代价地图已全部重置")

    def update_map(self) -> Bounds:
        """
        根据各图层的脏区域重新合成主地图

        Returns:
            Bounds: 本次重算的世界坐标区域（为空表示无变化）
        """
        plugins = self.get_plugins()
        bounds = Bounds()
        for layer in plugins:
            layer.update_bounds(bounds)

        if bounds.is_empty():
            return bounds

        master = self.costmap
        x0, y0 = master.world_to_map_enforce_bounds(bounds.min_x, bounds.min_y)
        xn, yn = master.world_to_map_enforce_bounds(bounds.max_x, bounds.max_y)

        with master.get_mutex():
            master.reset_map(x0, y0, xn + 1, yn + 1)
            for layer in plugins:
                layer.update_costs(master, bounds)

        logger.debug(f"主地图更新区域: {bounds.to_tuple()}")
        return bounds
