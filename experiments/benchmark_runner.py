import sys
import os
import time
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

# --- 路径设置 ---
# 确保能找到 dubins_tour 包
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dubins_tour.poses import PoseGenerator
from dubins_tour.planning.tour import build_cost_matrix
from dubins_tour.visualization.observers import ExperimentObserver
from experiments.benchmark_config import BenchmarkConfig as Cfg


def run_benchmark() -> pd.DataFrame:
    results = []

    print(f"{'N':<6} | {'Time(ms)':<10} | {'Edges':<8} | {'Failed':<8} | {'Mean(m)':<10} | {'Ratio':<8}")
    print("-" * 64)

    for n in Cfg.POSE_COUNTS:
        times, means, ratios, failed, edges = [], [], [], [], []

        for i in range(Cfg.NUM_TRIALS):
            seed = Cfg.RANDOM_SEED_BASE + i + n * 100
            generator = PoseGenerator(Cfg.PHYS_WIDTH, Cfg.PHYS_HEIGHT, seed=seed)
            poses = generator.generate(n, Cfg.TURN_RADIUS, Cfg.DUBINS_CONFIG)

            observer = ExperimentObserver()
            t0 = time.perf_counter()
            matrix = build_cost_matrix(poses, Cfg.TURN_RADIUS, Cfg.INFEASIBLE_COST,
                                       Cfg.DUBINS_CONFIG, observer)
            t1 = time.perf_counter()

            # Dubins 长度 / 欧氏距离 (>= 1)
            off_diag = ~np.eye(n, dtype=bool)
            xy = np.array([[p.x, p.y] for p in poses])
            euclid = np.linalg.norm(xy[:, None, :] - xy[None, :, :], axis=-1)

            times.append((t1 - t0) * 1000)
            means.append(matrix.data[off_diag].mean())
            ratios.append((matrix.data[off_diag] / euclid[off_diag]).mean())
            failed.append(len(observer.failures))
            edges.append(len(observer.edges))

        row = {
            'N': n,
            'TimeMean': np.mean(times),
            'Edges': np.mean(edges),
            'Failed': np.mean(failed),
            'LengthMean': np.mean(means),
            'DetourRatio': np.mean(ratios),
        }
        print(f"{n:<6} | {row['TimeMean']:<10.2f} | {row['Edges']:<8.0f} | {row['Failed']:<8.1f} | "
              f"{row['LengthMean']:<10.2f} | {row['DetourRatio']:<8.3f}")
        results.append(row)

    return pd.DataFrame(results)


def plot_results(df: pd.DataFrame):
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    axes[0].plot(df['N'], df['TimeMean'], 'o-', color='blue')
    axes[0].set_xlabel('Number of poses')
    axes[0].set_ylabel('Build time (ms)')
    axes[0].set_title('Matrix Build Time (O(n^2))')
    axes[0].grid(True, linestyle=':', alpha=0.6)

    axes[1].plot(df['N'], df['DetourRatio'], 's-', color='orange')
    axes[1].set_xlabel('Number of poses')
    axes[1].set_ylabel('Dubins / Euclidean')
    axes[1].set_title('Detour Ratio')
    axes[1].grid(True, linestyle=':', alpha=0.6)

    plt.tight_layout()
    os.makedirs(Cfg.LOG_DIR, exist_ok=True)
    fig.savefig(os.path.join(Cfg.LOG_DIR, f"benchmark_{time.strftime('%Y%m%d_%H%M%S')}.png"))
    plt.show()


if __name__ == "__main__":
    print("=== Dubins 代价矩阵基准测试 ===")
    df_results = run_benchmark()
    os.makedirs(Cfg.LOG_DIR, exist_ok=True)
    df_results.to_csv(os.path.join(Cfg.LOG_DIR, "benchmark_results.csv"), index=False)
    print("\n实验结束，正在绘图...")
    plot_results(df_results)
