"""
Тесты таймера фаз алгоритма.
"""

import time

import numpy as np
from lloyd_kmeans.core.lloyd import KMeansLloyd
from lloyd_kmeans.metrics.timers import Timer


class TestTimer:
    """Тесты контекстного менеджера Timer."""

    def test_timer_basic(self):
        with Timer() as t:
            time.sleep(0.05)

        assert t.elapsed >= 0.05
        assert t.end > t.start
        assert abs(t.elapsed - (t.end - t.start)) < 1e-9

    def test_timer_reuse_overwrites(self):
        timer = Timer()

        with timer:
            time.sleep(0.02)
        first_end = timer.end

        with timer:
            pass

        assert timer.start >= first_end
        assert timer.elapsed >= 0

    def test_timer_nested(self):
        with Timer() as outer:
            time.sleep(0.03)
            with Timer() as inner:
                time.sleep(0.01)

        assert outer.elapsed > inner.elapsed


class TestFitTimings:
    """Тайминги, которые собирает цикл Ллойда."""

    def test_timings_reset_between_fits(self, small_dataset):
        X, initial_centroids = small_dataset
        model = KMeansLloyd(n_clusters=2, n_iters=3)

        model.fit(X, initial_centroids)
        first_iters = model.n_iters_actual
        model.fit(X, initial_centroids)

        assert model.n_iters_actual == first_iters
        assert model.t_init >= 0
        assert np.isclose(
            model.t_iter_total, model.t_assign_total + model.t_update_total
        )
