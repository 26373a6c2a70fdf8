"""
图层过滤

判断哪些图层参与选择性清理。
"""

from typing import Iterable, List, Sequence, Tuple

from costmap_clearing.costmap.costmap_layer import Layer


def get_layer_name(layer: Layer) -> str:
    """取图层名最后一个 '/' 之后的部分"""
    name = layer.get_name()
    return name[name.rfind('/') + 1:]


class LayerFilter:
    """可清理图层白名单（启动时确定，之后不变）"""

    def __init__(self, clearable_layers: Iterable[str]):
        self._clearable_layers: Tuple[str, ...] = tuple(clearable_layers)

    @property
    def clearable_layers(self) -> Tuple[str, ...]:
        return self._clearable_layers

    def is_clearable(self, layer_name: str) -> bool:
        return layer_name in self._clearable_layers

    def select(self, layers: Sequence[Layer]) -> List[Layer]:
        """按原顺序返回白名单内的图层"""
        return [layer for layer in layers if self.is_clearable(get_layer_name(layer))]
