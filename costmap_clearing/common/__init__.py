"""
Common configuration for costmap clearing
"""
from costmap_clearing.common.config import ClearingConfig, load_clearing_config

__all__ = ["ClearingConfig", "load_clearing_config"]
