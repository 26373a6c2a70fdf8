"""
Configuration Module for costmap clearing
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml
from loguru import logger

from costmap_clearing.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class ClearingConfig:
    """
    Immutable clearing configuration, fixed at service construction.

    Attributes:
        clearable_layers: leaf layer names eligible for selective clearing
        except_region_forward_extent: fixed forward half-extent (meters) of the
            preserved region; None keeps it symmetric (reset_distance / 2)
    """
    clearable_layers: Tuple[str, ...] = field(default_factory=tuple)
    except_region_forward_extent: Optional[float] = None

    def __post_init__(self):
        # lists from YAML are frozen into tuples
        object.__setattr__(self, "clearable_layers", tuple(self.clearable_layers))
        if (self.except_region_forward_extent is not None
                and self.except_region_forward_extent < 0):
            raise ConfigurationError(
                "except_region_forward_extent must be non-negative",
                context={"except_region_forward_extent": self.except_region_forward_extent}
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ClearingConfig':
        layers = data.get("clearable_layers", ())
        if isinstance(layers, str) or not isinstance(layers, (list, tuple)):
            raise ConfigurationError(
                "clearable_layers must be a list of layer names",
                context={"clearable_layers": layers}
            )
        return cls(
            clearable_layers=tuple(str(name) for name in layers),
            except_region_forward_extent=data.get("except_region_forward_extent")
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "clearable_layers": list(self.clearable_layers),
            "except_region_forward_extent": self.except_region_forward_extent
        }


def load_clearing_config(config_path: str, section: Optional[str] = None) -> ClearingConfig:
    """
    Load clearing configuration from a YAML or JSON file.

    Args:
        config_path: path to the file
        section: dotted key of the nested section holding the clearing
            parameters, e.g. "local_costmap.ros__parameters"

    Returns:
        ClearingConfig, defaults when the file does not exist
    """
    path = Path(config_path)

    if not path.exists():
        logger.warning(f"Config file {config_path} not found, using defaults")
        return ClearingConfig()

    try:
        if path.suffix.lower() == '.json':
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        elif path.suffix.lower() in ['.yaml', '.yml']:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        else:
            raise ConfigurationError(
                f"Unsupported config format: {path.suffix}", config_path=config_path
            )
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(
            f"Error loading config: {e}", config_path=config_path
        ) from e

    data = data or {}
    if section:
        for key in section.split('.'):
            if not isinstance(data, dict) or key not in data:
                raise ConfigurationError(
                    f"Section '{section}' not found", config_path=config_path
                )
            data = data[key]

    if not isinstance(data, dict):
        raise ConfigurationError(
            "Clearing configuration must be a mapping", config_path=config_path
        )

    config = ClearingConfig.from_dict(data)
    logger.info(f"Loaded clearing config from {config_path}: {config.to_dict()}")
    return config
