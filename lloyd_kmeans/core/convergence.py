"""
Критерий остановки цикла Ллойда.

Сдвиг считается одним числом на весь набор центров: расстояние между
центроидом старых центров и центроидом новых. Центры, ушедшие в
противоположные стороны, частично компенсируют друг друга.
"""

from __future__ import annotations

import numpy as np

from .distance import distance


def means_shift(old_means: np.ndarray, new_means: np.ndarray) -> float:
    """Евклидово расстояние между центроидами двух наборов центров."""
    if old_means.shape != new_means.shape:
        raise ValueError(
            f"means shape mismatch: {old_means.shape} vs {new_means.shape}"
        )
    old_centroid = np.mean(old_means, axis=0, dtype=np.float64)
    new_centroid = np.mean(new_means, axis=0, dtype=np.float64)
    return distance(old_centroid, new_centroid)


def has_converged(shift: float, epsilon: float) -> bool:
    return shift <= epsilon
