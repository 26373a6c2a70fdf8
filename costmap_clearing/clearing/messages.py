"""
清理服务消息类型

三种请求分别对应一个清理操作，响应只携带成功与否。
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict
import json


@dataclass
class ClearExceptRegionRequest:
    """清除保留区域以外的所有栅格"""
    reset_distance: float = 0.5


@dataclass
class ClearAroundRobotRequest:
    """清除机器人周围窗口，任一边长为0时等同于整体清除"""
    window_size_x: float = 0.5
    window_size_y: float = 0.5


@dataclass
class ClearEntireCostmapRequest:
    """整体清除"""


@dataclass
class ClearCostmapResponse:
    """清理结果"""
    success: bool
    message: str = ""
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "timestamp": self.timestamp.isoformat()
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)
