"""
代价地图层 - Costmap Layer
"""
from .costmap_2d import Costmap2D
from .costmap_layer import Layer, CostmapLayer
from .layered_costmap import LayeredCostmap
from .pose_provider import PoseProvider, PoseCache
__all__ = ["Costmap2D", "Layer", "CostmapLayer", "LayeredCostmap", "PoseProvider", "PoseCache"]
