"""
位姿缓存单元测试
"""

import math

import pytest

from costmap_clearing.core.exceptions import PoseUnavailableError
from costmap_clearing.core.types import Pose2D
from costmap_clearing.costmap.pose_provider import PoseCache
from costmap_clearing.utils.coordinates import yaw_to_quaternion


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


class TestPoseCache:

    def test_no_pose_yet(self):
        with pytest.raises(PoseUnavailableError) as exc_info:
            PoseCache().get_robot_pose()
        assert exc_info.value.component == "pose"
        assert exc_info.value.source == "pose_cache"

    def test_update(self):
        cache = PoseCache()
        cache.update(1.0, 2.0, 0.5)
        assert cache.get_robot_pose() == Pose2D(1.0, 2.0, 0.5)

    def test_update_from_quaternion(self):
        cache = PoseCache()
        cache.update_from_quaternion(1.0, 2.0, yaw_to_quaternion(math.pi / 4))
        pose = cache.get_robot_pose()
        assert pose.yaw == pytest.approx(math.pi / 4)

    def test_invalidate(self):
        cache = PoseCache()
        cache.update(1.0, 2.0, 0.5)
        cache.invalidate()
        with pytest.raises(PoseUnavailableError):
            cache.get_robot_pose()

    def test_transform_tolerance(self):
        clock = FakeClock()
        cache = PoseCache(transform_tolerance=0.5, clock=clock)
        cache.update(1.0, 2.0, 0.0)

        clock.now += 0.4
        assert cache.get_robot_pose() == Pose2D(1.0, 2.0, 0.0)

        clock.now += 0.2
        with pytest.raises(PoseUnavailableError) as exc_info:
            cache.get_robot_pose()
        assert exc_info.value.context["transform_tolerance"] == 0.5
        assert exc_info.value.to_dict()["error_type"] == "PoseUnavailableError"
