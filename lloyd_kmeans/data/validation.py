"""
Сверка загруженного датасета с метаданными из заголовка файла.
"""

from __future__ import annotations

from lloyd_kmeans.data.dataset import Dataset


def validate_dataset(dataset: Dataset) -> None:
    """
    Проверяет, что размеры X совпадают с ``N`` и ``D`` из заголовка.

    Ключи, отсутствующие в заголовке, не проверяются.

    Raises:
        ValueError: Если размеры данных не соответствуют метаданным
    """
    meta = dataset.dataset_info

    if dataset.X is None:
        raise ValueError("Dataset data (X) is None")

    if "N" in meta and dataset.X.shape[0] != meta["N"]:
        raise ValueError(f"Expected {meta['N']} points, got {dataset.X.shape[0]}")
    if "D" in meta and dataset.X.shape[1] != meta["D"]:
        raise ValueError(
            f"Expected {meta['D']} dimensions, got {dataset.X.shape[1]}"
        )
