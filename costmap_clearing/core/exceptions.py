"""
代价地图清理异常定义

提供标准化的异常类型，用于清理服务的错误处理
"""

from typing import Dict, Any, Optional
from datetime import datetime


class CostmapClearingError(Exception):
    """清理服务基础异常"""

    def __init__(
        self,
        message: str,
        component: str,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.component = component
        self.context = context or {}
        self.timestamp = datetime.now()

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        return {
            "error_type": self.__class__.__name__,
            "message": str(self),
            "component": self.component,
            "context": self.context,
            "timestamp": self.timestamp.isoformat()
        }


class PoseUnavailableError(CostmapClearingError):
    """机器人位姿无法获取"""

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, component="pose", context=context)
        self.source = source


class ConfigurationError(CostmapClearingError):
    """配置错误"""

    def __init__(
        self,
        message: str,
        config_path: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, component="config", context=context)
        self.config_path = config_path


class UnknownServiceError(CostmapClearingError):
    """请求的服务不存在或请求类型不匹配"""

    def __init__(
        self,
        message: str,
        service_name: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, component="service", context=context)
        self.service_name = service_name
