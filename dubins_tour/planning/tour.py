# dubins_tour/planning/tour.py
from dataclasses import dataclass, field
from typing import Callable, Dict, Hashable, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from dubins_tour.config import DEFAULT_CONFIG, DubinsConfig, validate_turn_radius
from dubins_tour.errors import DubinsError
from dubins_tour.planning.dubins import dubins_path_length
from dubins_tour.planning.interfaces import ICostObserver
from dubins_tour.types import Pose
from dubins_tour.visualization.observers import EfficientObserver

PoseLookup = Union[Callable[[Hashable], Pose], Mapping[Hashable, Pose]]
HeadingLookup = Union[Callable[[Hashable], float], Mapping[Hashable, float]]


def _as_callable(lookup):
    if lookup is None:
        return None
    if isinstance(lookup, Mapping):
        return lookup.__getitem__
    return lookup


def tour_edges(tour: Sequence[Hashable], include_return_edge: bool = False) -> List[Tuple[Hashable, Hashable]]:
    """
    按访问顺序列出 tour 的边
    include_return_edge=True 时追加 最后一个 -> 第一个
    """
    nodes = list(tour)
    if len(nodes) < 2:
        return []
    edges = list(zip(nodes[:-1], nodes[1:]))
    if include_return_edge:
        edges.append((nodes[-1], nodes[0]))
    return edges


def tour_cost(tour: Sequence[Hashable],
              pose_lookup: PoseLookup,
              heading_lookup: Optional[HeadingLookup],
              turn_radius: float,
              include_return_edge: bool = False,
              config: Optional[DubinsConfig] = None,
              observer: Optional[ICostObserver] = None) -> float:
    """
    Total Dubins length of visiting ``tour`` in order.

    ``pose_lookup`` maps an identifier to its Pose; ``heading_lookup`` (optional)
    overrides the heading assigned to each identifier. Tours with fewer than two
    poses cost 0. Any failing edge aborts the whole computation.
    """
    if observer is None:
        observer = EfficientObserver()
    get_pose = _as_callable(pose_lookup)
    get_heading = _as_callable(heading_lookup)

    edges = tour_edges(tour, include_return_edge)
    if not edges:
        return 0.0
    r = validate_turn_radius(turn_radius)

    def pose_of(node):
        pose = get_pose(node)
        if get_heading is None:
            return pose
        return Pose(pose.x, pose.y, get_heading(node))

    cost = 0.0
    for u, v in edges:
        try:
            w = dubins_path_length(pose_of(u), pose_of(v), r, config, observer)
        except DubinsError as e:
            observer.record_failure(u, v, e)
            raise
        observer.record_edge(u, v, w)
        cost += w
    return cost


@dataclass
class CostMatrix:
    """
    稠密的 ATSP 邻接矩阵
    data[index[u], index[v]] 为 u -> v 的 Dubins 路径长度
    """
    ids: List[Hashable]
    data: np.ndarray
    index: Dict[Hashable, int] = field(init=False)

    def __post_init__(self):
        self.index = {node: i for i, node in enumerate(self.ids)}
        if len(self.index) != len(self.ids):
            raise ValueError("cost matrix identifiers must be unique")
        n = len(self.ids)
        if self.data.shape != (n, n):
            raise ValueError(f"cost matrix data must have shape ({n}, {n}), got {self.data.shape}")

    def __len__(self):
        return len(self.ids)

    def cost(self, u: Hashable, v: Hashable) -> float:
        return float(self.data[self.index[u], self.index[v]])

    def tour_cost(self, tour: Sequence[Hashable], include_return_edge: bool = False) -> float:
        """直接查表计算 tour 代价"""
        return float(sum(self.cost(u, v) for u, v in tour_edges(tour, include_return_edge)))

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(self.data, index=list(self.ids), columns=list(self.ids))


def _normalize_poses(poses: Union[Sequence[Pose], Mapping[Hashable, Pose]]) -> Tuple[List[Hashable], List[Pose]]:
    if isinstance(poses, Mapping):
        ids = list(poses.keys())
        return ids, [poses[k] for k in ids]
    pose_list = list(poses)
    return list(range(len(pose_list))), pose_list


def build_cost_matrix(poses: Union[Sequence[Pose], Mapping[Hashable, Pose]],
                      turn_radius: float,
                      infeasible_cost: Optional[float] = None,
                      config: Optional[DubinsConfig] = None,
                      observer: Optional[ICostObserver] = None) -> CostMatrix:
    """
    计算所有有序位姿对的 Dubins 路径长度 (O(n^2))。

    :param poses: Pose 序列 (id 为 0..n-1) 或 {id: Pose}
    :param infeasible_cost: None 时任何失败的边都会抛出异常;
                            否则失败的边填入该值 (例如 MAX_EDGE_COST)
    :return: CostMatrix, 对角线恒为 config.max_edge_cost
    """
    if config is None:
        config = DEFAULT_CONFIG
    if observer is None:
        observer = EfficientObserver()
    r = validate_turn_radius(turn_radius)

    ids, pose_list = _normalize_poses(poses)
    n = len(pose_list)
    data = np.empty((n, n), dtype=float)

    for i in range(n):
        # 永远不要走自环
        data[i, i] = config.max_edge_cost
        for j in range(n):
            if i == j:
                continue
            try:
                w = dubins_path_length(pose_list[i], pose_list[j], r, config, observer)
            except DubinsError as e:
                observer.record_failure(ids[i], ids[j], e)
                if infeasible_cost is None:
                    raise
                observer.log(f"Edge {ids[i]} -> {ids[j]} marked infeasible", 'WARN', {'error': str(e)})
                w = infeasible_cost
            else:
                observer.record_edge(ids[i], ids[j], w)
            data[i, j] = w

    return CostMatrix(ids, data)


def build_cost_matrix_for(node_ids: Sequence[Hashable],
                          pose_lookup: PoseLookup,
                          heading_lookup: Optional[HeadingLookup],
                          turn_radius: float,
                          infeasible_cost: Optional[float] = None,
                          config: Optional[DubinsConfig] = None,
                          observer: Optional[ICostObserver] = None) -> CostMatrix:
    """与 tour_cost 相同的 lookup 接口, 用于外部图结构"""
    get_pose = _as_callable(pose_lookup)
    get_heading = _as_callable(heading_lookup)
    poses: Dict[Hashable, Pose] = {}
    for node in node_ids:
        pose = get_pose(node)
        if get_heading is not None:
            pose = Pose(pose.x, pose.y, get_heading(node))
        poses[node] = pose
    return build_cost_matrix(poses, turn_radius, infeasible_cost, config, observer)
