# 绘图逻辑 (Matplotlib)

import math
from typing import Hashable, Mapping, Optional, Sequence, Union

import matplotlib.pyplot as plt
import numpy as np

from dubins_tour.geometry.angles import heading_to_angle
from dubins_tour.planning.tour import CostMatrix, tour_edges
from dubins_tour.types import Pose


def plot_cost_matrix(matrix: CostMatrix, ax=None, mask_diagonal: bool = True):
    """
    代价矩阵热力图
    对角线 (MAX_EDGE_COST) 会淹没其他数值, 默认遮掉
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 5))

    data = np.array(matrix.data, dtype=float)
    if mask_diagonal and len(matrix) > 0:
        data = np.ma.masked_array(data, mask=np.eye(len(matrix), dtype=bool))

    im = ax.imshow(data, cmap='viridis', origin='upper')
    ax.figure.colorbar(im, ax=ax, label='Dubins length [m]')

    labels = [str(i) for i in matrix.ids]
    ax.set_xticks(range(len(labels)))
    ax.set_yticks(range(len(labels)))
    ax.set_xticklabels(labels)
    ax.set_yticklabels(labels)
    ax.set_xlabel('To')
    ax.set_ylabel('From')
    ax.set_title('Dubins Cost Matrix')
    return ax


def plot_tour(poses: Union[Sequence[Pose], Mapping[Hashable, Pose]],
              tour: Sequence[Hashable],
              include_return_edge: bool = False,
              ax=None,
              arrow_len: Optional[float] = None):
    """
    画出位姿 (箭头表示航向) 和 tour 的访问顺序 (直线连接, 不是真实的 Dubins 几何)
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 8))
    lookup = poses if isinstance(poses, Mapping) else dict(enumerate(poses))

    if arrow_len is None:
        xs = [p.x for p in lookup.values()]
        ys = [p.y for p in lookup.values()]
        span = max(max(xs) - min(xs), max(ys) - min(ys)) if xs else 1.0
        arrow_len = max(span * 0.05, 1e-3)

    for node, p in lookup.items():
        a = heading_to_angle(p.heading)
        ax.arrow(p.x, p.y, arrow_len * math.cos(a), arrow_len * math.sin(a),
                 head_width=arrow_len * 0.3, color='darkred', zorder=5)
        ax.annotate(str(node), (p.x, p.y), textcoords='offset points', xytext=(4, 4))

    for u, v in tour_edges(tour, include_return_edge):
        pu, pv = lookup[u], lookup[v]
        ax.plot([pu.x, pv.x], [pu.y, pv.y], 'b--', linewidth=1.0)

    ax.set_aspect('equal')
    ax.grid(True, linestyle=':', alpha=0.5)
    ax.set_xlabel("X Position [m]")
    ax.set_ylabel("Y Position [m]")
    ax.set_title("Tour Visiting Order")
    return ax
