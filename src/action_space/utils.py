import math
from typing import List, Sequence

import numpy as np

from configs import ANGLE_MIN


def linspace(start: float, stop: float, num: int) -> List[float]:
    """Evenly spaced samples of [start, stop], both ends included."""
    return [float(v) for v in np.linspace(start, stop, int(num))]


def angle_normalization(angle: float) -> float:
    """Wrap an angle (rad) into [ANGLE_MIN, ANGLE_MIN + 2pi)."""
    wrapped = (angle - ANGLE_MIN) % (2 * math.pi) + ANGLE_MIN
    # float modulo can land exactly on the open upper bound
    if wrapped >= ANGLE_MIN + 2 * math.pi:
        wrapped -= 2 * math.pi
    return float(wrapped)


def euclidean_distance(a: Sequence[float], b: Sequence[float]) -> float:
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    if a.shape != b.shape:
        raise ValueError(f"shape mismatch: {a.shape} vs {b.shape}")
    return float(np.linalg.norm(a - b))
