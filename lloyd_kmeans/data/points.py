"""
Приведение входных точек к массиву (N, D) и проверка контракта.

Все точки и центры одного вызова имеют одну размерность D и один
скалярный тип, причём тип обязан быть знаковым числовым (float или
знаковый int).
"""

from __future__ import annotations

from typing import Any

import numpy as np


def is_signed_numeric(dtype: Any) -> bool:
    """True для знаковых целых и вещественных dtype (bool и complex — нет)."""
    dtype = np.dtype(dtype)
    return np.issubdtype(dtype, np.signedinteger) or np.issubdtype(
        dtype, np.floating
    )


def as_points(data: Any, dtype: Any | None = None) -> np.ndarray:
    """
    Превращает последовательность точек в массив (N, D).

    Args:
        data: Массив или последовательность точек одинаковой длины
        dtype: Желаемый скалярный тип; по умолчанию выводится numpy

    Returns:
        Двумерный массив точек

    Raises:
        ValueError: Разная длина точек, не двумерные данные или D == 0
        TypeError: Скалярный тип не знаковый числовой
    """
    if not isinstance(data, np.ndarray):
        lengths = {len(point) for point in data if hasattr(point, "__len__")}
        if len(lengths) > 1:
            raise ValueError(
                f"All points must have the same dimension, got {sorted(lengths)}"
            )

    X = np.asarray(data, dtype=dtype)
    if X.ndim != 2:
        raise ValueError(f"Expected a 2-D array of points, got ndim={X.ndim}")
    if X.shape[1] == 0:
        raise ValueError("Points must have at least one component")
    if not is_signed_numeric(X.dtype):
        raise TypeError(
            f"Point components must be a signed numeric type, got {X.dtype}"
        )
    return X


def validate_means(means: Any, n_clusters: int, dim: int, dtype: Any) -> np.ndarray:
    """Проверяет явно заданные начальные центры и приводит их к dtype данных."""
    M = as_points(means, dtype=dtype)
    if M.shape != (n_clusters, dim):
        raise ValueError(
            f"Expected means shape ({n_clusters}, {dim}), got {M.shape}"
        )
    return M
