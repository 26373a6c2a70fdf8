"""
配置加载单元测试
"""

import dataclasses
import json
from pathlib import Path

import pytest

from costmap_clearing.common.config import ClearingConfig, load_clearing_config
from costmap_clearing.core.exceptions import ConfigurationError


class TestClearingConfig:

    def test_defaults(self):
        config = ClearingConfig()
        assert config.clearable_layers == ()
        assert config.except_region_forward_extent is None

    def test_list_is_frozen_to_tuple(self):
        config = ClearingConfig(clearable_layers=["obstacle_layer"])
        assert config.clearable_layers == ("obstacle_layer",)

    def test_immutable(self):
        config = ClearingConfig(clearable_layers=("obstacle_layer",))
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.clearable_layers = ("inflation_layer",)

    def test_negative_forward_extent(self):
        with pytest.raises(ConfigurationError):
            ClearingConfig(except_region_forward_extent=-0.1)

    def test_from_dict_rejects_string(self):
        with pytest.raises(ConfigurationError):
            ClearingConfig.from_dict({"clearable_layers": "obstacle_layer"})

    def test_to_dict_roundtrip(self):
        config = ClearingConfig(("obstacle_layer",), except_region_forward_extent=0.259)
        assert ClearingConfig.from_dict(config.to_dict()) == config


class TestLoadClearingConfig:

    def test_yaml_section(self, tmp_path):
        path = tmp_path / "costmap.yaml"
        path.write_text(
            "local_costmap:\n"
            "  ros__parameters:\n"
            "    clearable_layers: [obstacle_layer, voxel_layer]\n"
            "    except_region_forward_extent: 0.259\n",
            encoding="utf-8"
        )

        config = load_clearing_config(str(path), section="local_costmap.ros__parameters")

        assert config.clearable_layers == ("obstacle_layer", "voxel_layer")
        assert config.except_region_forward_extent == 0.259

    def test_json(self, tmp_path):
        path = tmp_path / "costmap.json"
        path.write_text(json.dumps({"clearable_layers": ["obstacle_layer"]}), encoding="utf-8")
        assert load_clearing_config(str(path)).clearable_layers == ("obstacle_layer",)

    def test_missing_file_uses_defaults(self, tmp_path):
        assert load_clearing_config(str(tmp_path / "missing.yaml")) == ClearingConfig()

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_clearing_config(str(path)) == ClearingConfig()

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "costmap.ini"
        path.write_text("[costmap]", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_clearing_config(str(path))

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("clearable_layers: [obstacle_layer\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_clearing_config(str(path))

    def test_missing_section(self, tmp_path):
        path = tmp_path / "costmap.yaml"
        path.write_text("global_costmap: {}\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_clearing_config(str(path), section="local_costmap.ros__parameters")

    def test_bundled_config(self):
        path = Path(__file__).resolve().parents[2] / "config" / "costmap_clearing.yaml"
        config = load_clearing_config(str(path), section="local_costmap.ros__parameters")
        assert "obstacle_layer" in config.clearable_layers
        assert config.except_region_forward_extent is None
