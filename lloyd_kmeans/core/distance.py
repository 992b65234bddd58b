# core/distance.py
"""
Евклидовы расстояния между точками и наборами центров.

Все функции считают в скалярном типе входных массивов: переполнение
целочисленных типов не отслеживается.
"""
from __future__ import annotations

import numpy as np


def distance_squared(point_a: np.ndarray, point_b: np.ndarray) -> np.ndarray:
    """Квадрат евклидова расстояния между двумя точками одной размерности."""
    delta = np.asarray(point_a) - np.asarray(point_b)
    return np.sum(delta * delta, axis=-1)


def distance(point_a: np.ndarray, point_b: np.ndarray) -> float:
    """Обычное (с корнем) евклидово расстояние, когда нужна величина, а не сравнение."""
    return float(np.sqrt(distance_squared(point_a, point_b)))


def pairwise_distance_squared(X: np.ndarray, means: np.ndarray) -> np.ndarray:
    # (N, K, D) → (N, K)
    diff = X[:, None, :] - means[None, :, :]
    return np.sum(diff * diff, axis=2)


def closest_distance(means: np.ndarray, X: np.ndarray) -> np.ndarray:
    """
    Для каждой точки X — квадрат расстояния до ближайшего из центров.

    Используется как веса выборки в k-means++.
    """
    return np.min(pairwise_distance_squared(X, means), axis=1)
