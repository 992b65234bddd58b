"""
k-means с инициализацией k-means++ и итерациями Ллойда.

Основная точка входа — :func:`kmeans_lloyd`, возвращающая пару
(центры, метки).
"""

from .core import KMeansLloyd, kmeans_lloyd, kmeans_plusplus
from .core.rng import LinearCongruentialRandom, make_random

__all__ = [
    "KMeansLloyd",
    "kmeans_lloyd",
    "kmeans_plusplus",
    "LinearCongruentialRandom",
    "make_random",
]
