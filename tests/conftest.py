"""
Общие фикстуры для всех тестов.
"""

import numpy as np
import pytest
from sklearn.datasets import make_blobs


@pytest.fixture
def small_dataset():
    """Фикстура с небольшим тестовым датасетом (2D, 2 кластера)."""
    rng = np.random.default_rng(42)
    # Два явно разделённых кластера
    cluster1 = rng.standard_normal((30, 2)) + [0, 0]
    cluster2 = rng.standard_normal((30, 2)) + [5, 5]
    X = np.vstack([cluster1, cluster2])
    initial_centroids = np.array([
        [-1.0, -1.0],
        [6.0, 6.0],
    ])
    return X, initial_centroids


@pytest.fixture
def blobs_dataset():
    """Фикстура из sklearn.make_blobs (5D, 4 хорошо разделённых кластера)."""
    X, y = make_blobs(
        n_samples=200,
        n_features=5,
        centers=4,
        cluster_std=0.5,
        center_box=(-20.0, 20.0),
        random_state=7,
    )
    return X, y


@pytest.fixture
def simple_2d_dataset():
    """Фикстура с очень простым 2D датасетом для базовых тестов."""
    X = np.array([
        [0.0, 0.0],
        [1.0, 1.0],
        [2.0, 2.0],
        [10.0, 10.0],
        [11.0, 11.0],
        [12.0, 12.0],
    ])
    initial_centroids = np.array([
        [0.5, 0.5],
        [11.0, 11.0],
    ])
    return X, initial_centroids


@pytest.fixture
def line_dataset():
    """Четыре одномерные точки, две пары."""
    return np.array([[0.0], [1.0], [10.0], [11.0]])
