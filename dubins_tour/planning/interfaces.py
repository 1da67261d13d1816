from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class ICostObserver(ABC):
    """
    代价计算观察者接口
    用于解耦 Dubins 求解/聚合 与 记录/调试/可视化 逻辑。
    支持三种模式：
    1. Efficient: 空实现，无开销
    2. Experiment: 记录关键数据用于可视化
    3. Debug: 详细日志记录用于问题排查
    """

    @abstractmethod
    def record_candidate(self, path_type: str, length: Optional[float], error: Optional[Exception] = None):
        """记录单个候选路径 (RSR/RSL/LSR/LSL) 的结果"""
        pass

    @abstractmethod
    def record_edge(self, start_id: Any, end_id: Any, cost: float):
        """记录一条已计算的边 (tour 或代价矩阵)"""
        pass

    @abstractmethod
    def record_failure(self, start_id: Any, end_id: Any, error: Exception):
        """记录一条计算失败的边"""
        pass

    @abstractmethod
    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        """
        结构化日志记录
        :param message: 日志消息
        :param level: 日志级别 'INFO', 'WARN', 'ERROR', 'DEBUG'
        :param payload: 额外的结构化数据 (如位姿、半径等)
        """
        pass
