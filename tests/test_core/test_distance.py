"""
Тесты функций расстояния.
"""

import numpy as np
import pytest
from lloyd_kmeans.core.distance import (
    closest_distance,
    distance,
    distance_squared,
    pairwise_distance_squared,
)


class TestDistance:
    def test_distance_squared_basic(self):
        assert distance_squared(np.array([0.0, 0.0]), np.array([3.0, 4.0])) == 25.0

    def test_distance_is_root(self):
        assert distance(np.array([0.0, 0.0]), np.array([3.0, 4.0])) == pytest.approx(5.0)

    def test_distance_squared_integer_type(self):
        """Расстояние считается в типе точек."""
        result = distance_squared(
            np.array([1, -2], dtype=np.int32), np.array([-1, 2], dtype=np.int32)
        )
        assert result == 20
        assert np.issubdtype(np.asarray(result).dtype, np.integer)

    def test_pairwise_shape(self, simple_2d_dataset):
        X, centroids = simple_2d_dataset
        d = pairwise_distance_squared(X, centroids)
        assert d.shape == (6, 2)
        assert d[0, 0] == pytest.approx(0.5)
        assert d[4, 1] == pytest.approx(0.0)

    def test_closest_distance(self):
        X = np.array([[0.0], [1.0], [10.0], [11.0]])
        means = np.array([[0.0], [10.0]])
        np.testing.assert_allclose(closest_distance(means, X), [0.0, 1.0, 0.0, 1.0])

    def test_closest_distance_chosen_points_zero(self, small_dataset):
        """Точки, уже ставшие центрами, получают нулевой вес."""
        X, _ = small_dataset
        d = closest_distance(X[[3, 17]], X)
        assert d[3] == 0.0
        assert d[17] == 0.0
        assert np.all(d >= 0)
