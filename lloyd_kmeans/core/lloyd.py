# core/lloyd.py
from __future__ import annotations

from typing import Any

import numpy as np

from .base import KMeansBase
from .distance import pairwise_distance_squared
from .rng import RandomSource


def _average(points: np.ndarray) -> np.ndarray:
    # Для целых типов деление с отбрасыванием дробной части (к нулю)
    total = points.sum(axis=0, dtype=points.dtype)
    count = len(points)
    if np.issubdtype(points.dtype, np.integer):
        return (np.sign(total) * (np.abs(total) // count)).astype(points.dtype)
    return (total / count).astype(points.dtype)


class KMeansLloyd(KMeansBase):
    """Однопоточная реализация алгоритма Ллойда на NumPy."""

    def assign_clusters(self, X: np.ndarray, centroids: np.ndarray) -> np.ndarray:
        # argmin берёт первый минимум: при равенстве побеждает меньший индекс
        distances = pairwise_distance_squared(X, centroids)
        return np.argmin(distances, axis=1)

    def update_centroids(
        self, X: np.ndarray, labels: np.ndarray, old_centroids: np.ndarray
    ) -> np.ndarray:
        n = min(len(labels), len(X))
        X = X[:n]
        labels = np.asarray(labels)[:n]

        centroids = old_centroids.copy()
        for k in range(self.K):
            points = X[labels == k]
            # пустой кластер сохраняет прежний центр
            if len(points) > 0:
                centroids[k] = _average(points)

        return centroids


def kmeans_lloyd(
    data: Any,
    n_clusters: int,
    max_iter: int,
    seed: int | None = None,
    epsilon: float = 0.0,
    rng: RandomSource | None = None,
    logger: Any | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """
    K-means: инициализация k-means++ и итерации Ллойда.

    :param data: точки (N, D) знакового числового типа, N >= n_clusters
    :param n_clusters: число кластеров K > 0
    :param max_iter: предельное число итераций > 0
    :param seed: seed генератора; None — энтропия системы
    :param epsilon: порог сдвига центров для остановки
    :param rng: готовый источник случайности вместо seed
    :param logger: логгер для сообщений об итерациях
    :return: (центры (K, D), метки длины N в [0, K))
    """
    model = KMeansLloyd(
        n_clusters=n_clusters,
        n_iters=max_iter,
        epsilon=epsilon,
        seed=seed,
        rng=rng,
        logger=logger,
    )
    model.fit(data)
    return model.centroids, model.labels
