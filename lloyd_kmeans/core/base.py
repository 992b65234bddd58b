from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import numpy as np

from lloyd_kmeans.data.points import as_points, validate_means
from lloyd_kmeans.metrics.timers import Timer

from .convergence import has_converged, means_shift
from .init import kmeans_plusplus
from .rng import RandomSource


class KMeansBase(ABC):
    """
    Базовый класс цикла Ллойда.

    Отвечает за проверку контракта, инициализацию k-means++, цикл
    итераций и сбор таймингов:
    - T_инициализации: время выбора начальных центров;
    - T_назначения: время шага assign_clusters;
    - T_обновления: время шага update_centroids;
    - T_итерации: сумма двух предыдущих.
    """

    def __init__(
        self,
        n_clusters: int,
        n_iters: int = 100,
        epsilon: float = 0.0,
        seed: int | None = None,
        rng: RandomSource | None = None,
        logger: Any | None = None,
    ):
        if n_clusters <= 0:
            raise ValueError(f"n_clusters must be positive, got {n_clusters}")
        if n_iters <= 0:
            raise ValueError(f"n_iters must be positive, got {n_iters}")
        if not np.isfinite(epsilon) or epsilon < 0:
            raise ValueError(f"epsilon must be finite and non-negative, got {epsilon}")

        self.K = n_clusters
        self.n_iters = n_iters
        self.epsilon = epsilon  # Порог сходимости по сдвигу центроида всех центров
        self.seed = seed
        self.rng = rng
        self.logger = logger

        self.centroids: np.ndarray | None = None
        self.labels: np.ndarray | None = None

        self.t_init: float = 0.0
        self.t_assign_total: float = 0.0
        self.t_update_total: float = 0.0
        self.t_iter_total: float = 0.0

        self.n_iters_actual: int = 0
        self.shift: float = float("inf")
        self.converged: bool = False

    def fit(self, X: Any, initial_centroids: Any | None = None) -> KMeansBase:
        """
        Основной цикл: назначение → обновление → проверка сходимости.

        Алгоритм останавливается, когда:
        - сдвиг центроида набора центров <= epsilon, ИЛИ
        - выполнено n_iters итераций.

        Важно: итоговые labels посчитаны по центрам *до* последнего
        обновления, а centroids — уже обновлённые.
        """
        X = as_points(X)
        if len(X) < self.K:
            raise ValueError(
                f"need at least {self.K} points for {self.K} clusters, got {len(X)}"
            )

        self.t_assign_total = 0.0
        self.t_update_total = 0.0
        self.t_iter_total = 0.0
        self.n_iters_actual = 0
        self.shift = float("inf")
        self.converged = False

        with Timer() as t_init:
            if initial_centroids is None:
                centroids = kmeans_plusplus(X, self.K, seed=self.seed, rng=self.rng)
            else:
                centroids = validate_means(
                    initial_centroids, self.K, X.shape[1], X.dtype
                ).copy()
        self.t_init = t_init.elapsed
        self.centroids = centroids

        for i in range(self.n_iters):
            old_centroids = self.centroids

            with Timer() as t_assign:
                self.labels = self.assign_clusters(X, old_centroids)
            with Timer() as t_update:
                new_centroids = self.update_centroids(X, self.labels, old_centroids)

            t_assign_elapsed = t_assign.elapsed
            t_update_elapsed = t_update.elapsed

            self.t_assign_total += t_assign_elapsed
            self.t_update_total += t_update_elapsed
            self.t_iter_total += t_assign_elapsed + t_update_elapsed
            self.n_iters_actual = i + 1

            self.shift = means_shift(old_centroids, new_centroids)
            self.converged = has_converged(self.shift, self.epsilon)

            if self.logger and (i == 0 or (i + 1) % 10 == 0 or self.converged):
                status = " (converged)" if self.converged else ""
                self.logger.info(
                    f"  Iteration {i + 1}/{self.n_iters}{status} "
                    f"(T_assign={t_assign_elapsed:.6f}s, "
                    f"T_update={t_update_elapsed:.6f}s, "
                    f"shift={self.shift:.2e})"
                )

            # Буфер центров заменяется целиком, старый не мутируется
            self.centroids = new_centroids

            if self.converged:
                if self.logger:
                    self.logger.info(
                        f"  Convergence reached after {i + 1} iterations "
                        f"(shift={self.shift:.2e} <= epsilon={self.epsilon:.2e})"
                    )
                break

        return self

    @abstractmethod
    def assign_clusters(self, X: np.ndarray, centroids: np.ndarray) -> np.ndarray:
        """Шаг назначения точек кластерам."""
        raise NotImplementedError

    @abstractmethod
    def update_centroids(
        self, X: np.ndarray, labels: np.ndarray, old_centroids: np.ndarray
    ) -> np.ndarray:
        """Шаг обновления центров по присвоенным меткам."""
        raise NotImplementedError
