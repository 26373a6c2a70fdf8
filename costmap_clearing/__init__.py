# -*- coding: utf-8 -*-
"""costmap_clearing 主包"""
from costmap_clearing.clearing.clear_costmap_service import ClearCostmapService
from costmap_clearing.common.config import ClearingConfig, load_clearing_config
from costmap_clearing.costmap.layered_costmap import LayeredCostmap

__all__ = ["ClearCostmapService", "ClearingConfig", "load_clearing_config", "LayeredCostmap"]
