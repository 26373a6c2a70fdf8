# -*- coding: utf-8 -*-
"""
Shared pytest fixtures for costmap clearing tests

使用真实的地图和图层数据结构，只模拟外部位姿来源。
"""

import os
import sys

import pytest
from unittest.mock import Mock

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from costmap_clearing.clearing.clear_costmap_service import ClearCostmapService
from costmap_clearing.common.config import ClearingConfig
from costmap_clearing.core.exceptions import PoseUnavailableError
from costmap_clearing.core.types import Pose2D
from costmap_clearing.costmap.costmap_layer import CostmapLayer
from costmap_clearing.costmap.layered_costmap import LayeredCostmap
from costmap_clearing.costmap.pose_provider import PoseProvider


FILLED_COST = 100


def make_layer(name, fill=FILLED_COST, size=10, resolution=1.0, origin=(0.0, 0.0)):
    """创建填满指定代价的图层"""
    layer = CostmapLayer(
        name, size, size, resolution, origin_x=origin[0], origin_y=origin[1]
    )
    layer.data.fill(fill)
    return layer


def make_costmap(*names, origin=(0.0, 0.0)):
    """所有栅格（含主地图）填满 FILLED_COST 的 10x10 分层地图"""
    costmap = LayeredCostmap(10, 10, 1.0, origin_x=origin[0], origin_y=origin[1])
    for name in names:
        costmap.add_plugin(make_layer(name, origin=origin))
    costmap.get_costmap().data.fill(FILLED_COST)
    return costmap


def make_pose_provider(pose=None):
    """创建位姿来源 mock，pose 为 None 时始终失败"""
    provider = Mock(spec=PoseProvider)
    if pose is None:
        provider.get_robot_pose.side_effect = PoseUnavailableError("no transform")
    else:
        provider.get_robot_pose.return_value = pose
    return provider


@pytest.fixture
def layered_costmap():
    """10x10 栅格、分辨率 1m、原点 (0, 0) 的分层地图，含障碍物层和膨胀层"""
    return make_costmap("obstacle_layer", "inflation_layer")


@pytest.fixture
def pose_provider():
    return make_pose_provider(Pose2D(5.0, 5.0, 0.0))


@pytest.fixture
def config():
    return ClearingConfig(clearable_layers=("obstacle_layer",))


@pytest.fixture
def service(layered_costmap, pose_provider, config):
    return ClearCostmapService("local_costmap", layered_costmap, pose_provider, config)
