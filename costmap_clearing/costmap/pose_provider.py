"""
机器人位姿来源

PoseProvider.get_robot_pose() 在无法提供当前位姿时抛出 PoseUnavailableError。
"""

from abc import ABC, abstractmethod
import threading
import time
from typing import Callable, Optional, Tuple

from costmap_clearing.core.exceptions import PoseUnavailableError
from costmap_clearing.core.types import Pose2D
from costmap_clearing.utils.coordinates import quaternion_to_yaw


class PoseProvider(ABC):
    """位姿提供者接口"""

    @abstractmethod
    def get_robot_pose(self) -> Pose2D:
        """返回当前位姿，失败时抛出 PoseUnavailableError"""


class PoseCache(PoseProvider):
    """
    最新位姿缓存

    由定位模块写入，清理服务读取。若 transform_tolerance 不为 None，
    超过该时长未更新的位姿视为不可用。
    """

    def __init__(
        self,
        transform_tolerance: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic
    ):
        self.transform_tolerance = transform_tolerance
        self._clock = clock
        self._lock = threading.Lock()
        self._pose: Optional[Pose2D] = None
        self._stamp = 0.0

    def update(self, x: float, y: float, yaw: float):
        with self._lock:
            self._pose = Pose2D(x, y, yaw)
            self._stamp = self._clock()

    def update_from_quaternion(
        self,
        x: float,
        y: float,
        orientation: Tuple[float, float, float, float]
    ):
        """使用四元数 (x, y, z, w) 朝向更新位姿"""
        self.update(x, y, quaternion_to_yaw(orientation))

    def invalidate(self):
        with self._lock:
            self._pose = None

    def get_robot_pose(self) -> Pose2D:
        with self._lock:
            pose = self._pose
            stamp = self._stamp

        if pose is None:
            raise PoseUnavailableError("尚未收到机器人位姿", source="pose_cache")

        if self.transform_tolerance is not None:
            age = self._clock() - stamp
            if age > self.transform_tolerance:
                raise PoseUnavailableError(
                    f"机器人位姿已过期 {age:.3f}s (容差 {self.transform_tolerance:.3f}s)",
                    source="pose_cache",
                    context={"age": age, "transform_tolerance": self.transform_tolerance}
                )

        return pose
