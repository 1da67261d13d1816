import sys
import os

# Ensure dubins_tour can be imported if this config is used standalone
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dubins_tour.config import DubinsConfig, MAX_EDGE_COST

class BenchmarkConfig:
    # --- Experiment Settings ---
    POSE_COUNTS = [5, 10, 20, 40]   # Matrix sizes to test
    NUM_TRIALS = 5                  # Number of trials per size
    RANDOM_SEED_BASE = 1000         # Base seed for reproducibility

    # --- Output Paths ---
    _BASE_DIR = os.path.dirname(os.path.abspath(__file__))
    _PROJECT_DIR = os.path.dirname(_BASE_DIR)
    LOG_DIR = os.path.join(_PROJECT_DIR, "logs", "experiments_dubins")

    # --- Area Parameters ---
    PHYS_WIDTH = 200.0             # meters
    PHYS_HEIGHT = 200.0            # meters

    # --- Vehicle ---
    TURN_RADIUS = 5.0              # meters

    # --- Solver ---
    DUBINS_CONFIG = DubinsConfig(min_distance_factor=3.0)
    INFEASIBLE_COST = MAX_EDGE_COST
