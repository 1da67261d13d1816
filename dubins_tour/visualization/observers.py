import logging
import time
import os
from typing import Any, List, Tuple, Dict, Optional
from dubins_tour.planning.interfaces import ICostObserver

DEBUG_LOGGER_NAME = "DubinsDebug"


class EfficientObserver(ICostObserver):
    """
    高效运行模式
    除了必要的流程不额外进行信息记录。
    相当于 NoOp。
    """
    def record_candidate(self, path_type: str, length: Optional[float], error: Optional[Exception] = None): pass
    def record_edge(self, start_id: Any, end_id: Any, cost: float): pass
    def record_failure(self, start_id: Any, end_id: Any, error: Exception): pass
    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        # 仅在 ERROR 级别打印
        if level == 'ERROR':
            print(f"[ERROR] {message}")


class ExperimentObserver(ICostObserver):
    """
    实验模式
    记录候选路径、边代价和失败的边，用于统计和可视化。
    """
    def __init__(self):
        # 存储格式: List[Tuple[path_type, length or None]]
        self.candidates: List[Tuple[str, Optional[float]]] = []
        # 存储格式: List[Tuple[start_id, end_id, cost]]
        self.edges: List[Tuple[Any, Any, float]] = []
        # 存储格式: List[Tuple[start_id, end_id, error]]
        self.failures: List[Tuple[Any, Any, Exception]] = []
        self.messages: List[Tuple[str, str]] = []

    def record_candidate(self, path_type: str, length: Optional[float], error: Optional[Exception] = None):
        self.candidates.append((path_type, length))

    def record_edge(self, start_id: Any, end_id: Any, cost: float):
        self.edges.append((start_id, end_id, cost))

    def record_failure(self, start_id: Any, end_id: Any, error: Exception):
        self.failures.append((start_id, end_id, error))

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        # 实验模式只保留 WARN/ERROR，方便事后统计
        if level in ('WARN', 'ERROR'):
            self.messages.append((level, message))

    def feasible_counts(self) -> Dict[str, int]:
        """统计每种路径类型可行的次数"""
        counts: Dict[str, int] = {}
        for path_type, length in self.candidates:
            if length is not None:
                counts[path_type] = counts.get(path_type, 0) + 1
        return counts


class _SessionFilter(logging.Filter):
    """共享 logger 上只放行本会话的记录"""
    def __init__(self, session_id: int):
        super().__init__()
        self.session_id = session_id

    def filter(self, record):
        return getattr(record, "session_id", None) == self.session_id


class DebugObserver(ICostObserver):
    """
    Debug 模式
    用于详细分析某条边为什么代价异常甚至失败。
    将详细日志写入文件，同时保留实验数据以便对照。
    """
    def __init__(self, log_dir: str = "logs/dubins_debug"):
        self.viz_observer = ExperimentObserver()

        self.log_dir = log_dir
        os.makedirs(self.log_dir, exist_ok=True)

        timestamp = time.strftime("%Y%m%d_%H%M%S")
        self.log_file = os.path.join(self.log_dir, f"dubins_debug_{timestamp}.log")

        # 所有会话共用一个 logger, 每个会话只挂自己的 FileHandler
        base_logger = logging.getLogger(DEBUG_LOGGER_NAME)
        base_logger.setLevel(logging.DEBUG)
        base_logger.propagate = False

        self._handler = logging.FileHandler(self.log_file, encoding='utf-8')
        self._handler.setLevel(logging.DEBUG)
        formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
        self._handler.setFormatter(formatter)
        self._handler.addFilter(_SessionFilter(id(self)))
        base_logger.addHandler(self._handler)

        self.logger = logging.LoggerAdapter(base_logger, {"session_id": id(self)})

        self.logger.info("=== Debug Session Started ===")

    def record_candidate(self, path_type: str, length: Optional[float], error: Optional[Exception] = None):
        self.viz_observer.record_candidate(path_type, length, error)
        if error is not None:
            self.logger.debug(f"Candidate {path_type}: failed ({error})")
        else:
            self.logger.debug(f"Candidate {path_type}: L={length:.6f}")

    def record_edge(self, start_id: Any, end_id: Any, cost: float):
        self.viz_observer.record_edge(start_id, end_id, cost)
        self.logger.debug(f"Edge {start_id} -> {end_id}: cost={cost:.6f}")

    def record_failure(self, start_id: Any, end_id: Any, error: Exception):
        self.viz_observer.record_failure(start_id, end_id, error)
        self.logger.error(f"Edge {start_id} -> {end_id} failed: {error}")

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        if payload:
            message = f"{message} | Payload: {payload}"

        if level == 'DEBUG':
            self.logger.debug(message)
        elif level == 'WARN':
            self.logger.warning(message)
        elif level == 'ERROR':
            self.logger.error(message)
        else:
            self.logger.info(message)

    def close(self):
        self.logger.logger.removeHandler(self._handler)
        self._handler.close()

    # Proxy properties for ExperimentObserver compatibility
    @property
    def candidates(self): return self.viz_observer.candidates
    @property
    def edges(self): return self.viz_observer.edges
    @property
    def failures(self): return self.viz_observer.failures
