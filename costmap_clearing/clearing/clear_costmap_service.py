"""
代价地图清理服务 - Clear Costmap Service

提供三种清理操作：
- clear_except_region: 白名单图层中，清除机器人朝向矩形之外的所有栅格
- clear_around_robot: 将机器人周围的轴对齐窗口写为默认值（作用于主地图）
- clear_entirely: 重置主地图和所有图层

所有操作在调用线程上同步执行，返回 True/False，不向调用方抛出清理失败。
"""

from typing import Any, Callable, Dict, Optional, Tuple

from loguru import logger

from costmap_clearing.clearing.layer_filter import LayerFilter, get_layer_name
from costmap_clearing.clearing.messages import (
    ClearAroundRobotRequest,
    ClearCostmapResponse,
    ClearEntireCostmapRequest,
    ClearExceptRegionRequest,
)
from costmap_clearing.clearing.region_builder import (
    build_oriented_rectangle,
    build_window_polygon,
    except_region_extents,
)
from costmap_clearing.common.config import ClearingConfig
from costmap_clearing.core.exceptions import PoseUnavailableError, UnknownServiceError
from costmap_clearing.core.types import Point, Pose2D
from costmap_clearing.costmap.costmap_layer import Layer
from costmap_clearing.costmap.layered_costmap import LayeredCostmap
from costmap_clearing.costmap.pose_provider import PoseProvider


class ClearCostmapService:
    """
    代价地图清理服务

    锁的范围:
    - 整体清除: 主地图锁，覆盖整个 reset_layers 调用
    - 区域外清除: 每个图层各自的锁，同一时刻最多持有一把图层锁
    - 窗口清除: 由主地图的 set_convex_polygon_cost 自行加锁
    """

    def __init__(
        self,
        name: str,
        layered_costmap: LayeredCostmap,
        pose_provider: PoseProvider,
        config: Optional[ClearingConfig] = None
    ):
        self.name = name
        self.layered_costmap = layered_costmap
        self.pose_provider = pose_provider
        self.config = config or ClearingConfig()

        self.reset_value = layered_costmap.get_default_value()
        self.layer_filter = LayerFilter(self.config.clearable_layers)

        self._services: Dict[str, Tuple[type, Callable[[Any], bool]]] = {
            f"clear_except_{name}": (
                ClearExceptRegionRequest,
                lambda request: self.clear_except_region(request.reset_distance)
            ),
            f"clear_around_{name}": (
                ClearAroundRobotRequest,
                lambda request: self.clear_around_robot(
                    request.window_size_x, request.window_size_y
                )
            ),
            f"clear_entirely_{name}": (
                ClearEntireCostmapRequest,
                lambda request: self.clear_entirely()
            ),
        }

        logger.info(
            f"ClearCostmapService 初始化: {name}, 可清理图层={list(self.layer_filter.clearable_layers)}, "
            f"重置值={self.reset_value}"
        )

    # ==================== 请求分发 ====================

    @property
    def service_names(self) -> Tuple[str, ...]:
        return tuple(self._services)

    def handle_request(self, service_name: str, request: Any) -> ClearCostmapResponse:
        """
        将请求分发到对应的清理操作

        Raises:
            UnknownServiceError: 服务名不存在或请求类型不匹配
        """
        entry = self._services.get(service_name)
        if entry is None:
            raise UnknownServiceError(
                f"未知服务: {service_name}", service_name=service_name,
                context={"available": list(self._services)}
            )

        request_type, handler = entry
        if not isinstance(request, request_type):
            raise UnknownServiceError(
                f"服务 {service_name} 需要 {request_type.__name__}，收到 {type(request).__name__}",
                service_name=service_name
            )

        logger.debug(f"收到清理请求 {service_name}: {request}")
        success = handler(request)
        message = "" if success else f"{service_name} 未完成"
        return ClearCostmapResponse(success=success, message=message)

    # ==================== 清理操作 ====================

    def clear_except_region(self, reset_distance: float) -> bool:
        """
        清除白名单图层中机器人周围区域以外的栅格

        Args:
            reset_distance: 保留区域的边长（米）

        Returns:
            bool: 所有目标图层均已清理时为 True
        """
        if self._get_pose() is None:
            logger.error("Cannot clear map because robot pose cannot be retrieved.")
            return False

        layers = self.layer_filter.select(self.layered_costmap.get_plugins())
        logger.debug(f"区域外清理目标图层: {[get_layer_name(layer) for layer in layers]}")

        success = True
        for layer in layers:
            try:
                cleared = self.clear_layer_except_region(layer, reset_distance)
            except Exception as e:
                logger.exception(f"清理图层 {layer.get_name()} 失败: {e}")
                cleared = False
            success = success and cleared

        return success

    def clear_around_robot(self, window_size_x: float, window_size_y: float) -> bool:
        """
        将机器人周围 window_size_x x window_size_y 的窗口写为重置值

        任一边长为0时等同于 clear_entirely()。窗口任一顶点超出主地图时不做修改并返回 False。
        """
        if window_size_x == 0 or window_size_y == 0:
            return self.clear_entirely()

        pose = self._get_pose()
        if pose is None:
            logger.error("Cannot clear map because robot pose cannot be retrieved.")
            return False

        clear_poly = build_window_polygon(pose, window_size_x, window_size_y)
        try:
            success = self.layered_costmap.get_costmap().set_convex_polygon_cost(
                clear_poly, self.reset_value
            )
        except Exception as e:
            logger.exception(f"{self.name}: 窗口清除失败: {e}")
            return False
        if success:
            logger.info(
                f"{self.name}: 已清除机器人 ({pose.x:.2f}, {pose.y:.2f}) 周围 "
                f"{window_size_x}x{window_size_y}m 窗口"
            )
        return success

    def clear_entirely(self) -> bool:
        """重置主地图和所有图层"""
        try:
            with self.layered_costmap.get_costmap().get_mutex():
                self.layered_costmap.reset_layers()
        except Exception as e:
            logger.exception(f"{self.name}: 整体清除失败: {e}")
            return False
        logger.info(f"{self.name}: 已整体清除")
        return True

    def clear_layer_except_region(self, layer: Layer, reset_distance: float) -> bool:
        """
        清除单个图层中机器人朝向矩形之外的栅格

        位姿在图层锁内重新获取；获取失败时该图层不做任何修改。
        """
        with layer.get_mutex():
            pose = self._get_pose()
            if pose is None:
                logger.warning(f"位姿不可用，跳过图层 {layer.get_name()}")
                return False

            ox, oy = layer.get_origin_x(), layer.get_origin_y()
            width, height = layer.get_size_in_meters_x(), layer.get_size_in_meters_y()
            # 超过该距离的矩形在任意朝向下都覆盖整个图层
            reach = width + height + abs(pose.x - ox) + abs(pose.y - oy)

            extents = except_region_extents(
                reset_distance, self.config.except_region_forward_extent, max_extent=reach
            )
            # 零面积区域不保留任何栅格
            map_corners = []
            if not extents.is_degenerate():
                for corner in build_oriented_rectangle(pose, extents):
                    map_x, map_y = layer.world_to_map_enforce_bounds(corner.x, corner.y)
                    map_corners.append(Point(float(map_x), float(map_y)))

            layer.clear_area(map_corners)
            layer.add_extra_bounds(ox, oy, ox + width, oy + height)

        logger.info(
            f"{self.name}: 图层 {layer.get_name()} 已清除 "
            f"({pose.x:.2f}, {pose.y:.2f}, yaw={pose.yaw:.2f}) 周围 {reset_distance}m 以外区域"
        )
        return True

    def _get_pose(self) -> Optional[Pose2D]:
        try:
            return self.pose_provider.get_robot_pose()
        except PoseUnavailableError as e:
            logger.debug(f"获取位姿失败: {e}")
            return None
        except Exception as e:
            # 位姿来源的其他异常同样视为位姿不可用
            logger.exception(f"位姿来源异常: {e}")
            return None
