"""
Метрики качества готовой кластеризации.

Используются для отчёта CLI и логов; на сам алгоритм не влияют.
"""

from __future__ import annotations

import numpy as np

from lloyd_kmeans.core.distance import distance_squared


def inertia(X: np.ndarray, means: np.ndarray, labels: np.ndarray) -> float:
    """
    Сумма квадратов расстояний от точек до центров их кластеров.

    Args:
        X: Точки (N, D)
        means: Центры (K, D)
        labels: Метки кластеров длины N

    Returns:
        Значение инерции (float64)

    Raises:
        ValueError: Если число меток не совпадает с числом точек
    """
    if len(labels) != len(X):
        raise ValueError(f"Expected {len(X)} labels, got {len(labels)}")
    if len(X) == 0:
        return 0.0
    X = np.asarray(X, dtype=np.float64)
    assigned = np.asarray(means, dtype=np.float64)[labels]
    return float(np.sum(distance_squared(X, assigned)))


def cluster_sizes(labels: np.ndarray, n_clusters: int) -> list[int]:
    """
    Число точек в каждом кластере 0..K-1, пустые кластеры дают 0.

    Raises:
        ValueError: Если метка лежит вне [0, n_clusters)
    """
    labels = np.asarray(labels, dtype=np.int64)
    if labels.size and (labels.min() < 0 or labels.max() >= n_clusters):
        raise ValueError(f"labels must lie in [0, {n_clusters})")
    return np.bincount(labels, minlength=n_clusters).tolist()
