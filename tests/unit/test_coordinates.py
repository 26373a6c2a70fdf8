"""
坐标变换单元测试
"""

import math

import pytest

from costmap_clearing.core.types import Point
from costmap_clearing.utils.coordinates import (
    normalize_angle,
    quaternion_to_yaw,
    rotate_point,
    transform_local_to_world,
    yaw_to_quaternion,
)


class TestRotatePoint:
    """测试绕点旋转"""

    def test_zero_yaw_is_identity(self):
        rotated = rotate_point(5.0, 5.0, 0.0, Point(6.0, 4.0))
        assert rotated == Point(6.0, 4.0)

    def test_quarter_turn(self):
        """逆时针旋转90度"""
        rotated = rotate_point(1.0, 1.0, math.pi / 2, Point(2.0, 1.0))
        assert rotated.x == pytest.approx(1.0)
        assert rotated.y == pytest.approx(2.0)

    def test_pivot_is_fixed(self):
        rotated = rotate_point(3.0, -2.0, 1.234, Point(3.0, -2.0))
        assert rotated.x == pytest.approx(3.0)
        assert rotated.y == pytest.approx(-2.0)

    @pytest.mark.parametrize("yaw", [0.3, -1.1, math.pi, 2.5])
    def test_roundtrip(self, yaw):
        """旋转 yaw 再旋转 -yaw 回到原位"""
        corners = [Point(4.0, 4.0), Point(6.259, 4.0), Point(6.259, 6.0), Point(4.0, 6.0)]
        for corner in corners:
            back = rotate_point(5.0, 5.0, -yaw, rotate_point(5.0, 5.0, yaw, corner))
            assert back.x == pytest.approx(corner.x, abs=1e-9)
            assert back.y == pytest.approx(corner.y, abs=1e-9)

    def test_preserves_distance_to_pivot(self):
        pivot = Point(1.0, 2.0)
        point = Point(4.0, 6.0)
        rotated = rotate_point(pivot.x, pivot.y, 0.7, point)
        assert rotated.distance_to(pivot) == pytest.approx(point.distance_to(pivot))


class TestQuaternion:
    """测试四元数与偏航角转换"""

    @pytest.mark.parametrize("yaw", [0.0, 0.5, -2.0, math.pi / 2])
    def test_yaw_roundtrip(self, yaw):
        assert quaternion_to_yaw(yaw_to_quaternion(yaw)) == pytest.approx(yaw)

    def test_identity_quaternion(self):
        assert quaternion_to_yaw((0.0, 0.0, 0.0, 1.0)) == 0.0


class TestTransforms:

    def test_local_to_world(self):
        wx, wy = transform_local_to_world(1.0, 0.0, 2.0, 3.0, math.pi / 2)
        assert wx == pytest.approx(2.0)
        assert wy == pytest.approx(4.0)

    def test_normalize_angle(self):
        assert normalize_angle(3 * math.pi) == pytest.approx(math.pi)
        assert normalize_angle(-math.pi / 2) == pytest.approx(-math.pi / 2)
        assert normalize_angle(2 * math.pi) == pytest.approx(0.0, abs=1e-12)
