from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict

import numpy as np


@dataclass
class LloydConfig:
    """Параметры одного запуска k-means, которые CLI пробрасывает в kmeans_lloyd."""

    n_clusters: int
    max_iter: int = 100
    seed: int | None = None
    epsilon: float = 0.0

    def validate(self) -> None:
        if self.n_clusters <= 0:
            raise ValueError(f"n_clusters must be positive, got {self.n_clusters}")
        if self.max_iter <= 0:
            raise ValueError(f"max_iter must be positive, got {self.max_iter}")
        if not np.isfinite(self.epsilon) or self.epsilon < 0:
            raise ValueError(
                f"epsilon must be finite and non-negative, got {self.epsilon}"
            )

    def as_kwargs(self) -> Dict[str, Any]:
        self.validate()
        return asdict(self)
