# core/init.py
from __future__ import annotations

import numpy as np

from lloyd_kmeans.data.points import as_points

from .distance import closest_distance
from .rng import RandomSource, make_random


def kmeans_plusplus(
    X: np.ndarray,
    n_clusters: int,
    seed: int | None = None,
    rng: RandomSource | None = None,
) -> np.ndarray:
    """
    Начальные центры по схеме k-means++.

    Первый центр выбирается равномерно из X, каждый следующий — с
    вероятностью, пропорциональной квадрату расстояния точки до
    ближайшего уже выбранного центра. Центры всегда копии строк X,
    dtype сохраняется.

    :param X: точки, массив (N, D)
    :param n_clusters: число центров K
    :param seed: seed генератора; игнорируется, если передан rng
    :param rng: готовый источник случайности
    :return: массив (K, D)
    """
    if n_clusters <= 0:
        raise ValueError(f"n_clusters must be positive, got {n_clusters}")
    X = as_points(X)
    if len(X) < n_clusters:
        raise ValueError(
            f"need at least {n_clusters} points for {n_clusters} clusters, got {len(X)}"
        )

    if rng is None:
        rng = make_random(seed)

    indices = [rng.uniform_index(len(X))]
    for _ in range(1, n_clusters):
        weights = closest_distance(X[indices], X)
        indices.append(rng.weighted_index(weights))

    return X[indices].copy()
