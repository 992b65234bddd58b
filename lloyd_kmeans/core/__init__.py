from .base import KMeansBase
from .lloyd import KMeansLloyd, kmeans_lloyd
from .init import kmeans_plusplus
from .convergence import means_shift
from .rng import LinearCongruentialRandom, RandomSource, make_random

__all__ = [
    "KMeansBase",
    "KMeansLloyd",
    "kmeans_lloyd",
    "kmeans_plusplus",
    "means_shift",
    "LinearCongruentialRandom",
    "RandomSource",
    "make_random",
]
