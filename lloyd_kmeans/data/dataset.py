"""
Загрузка точек из текстового файла для запуска из командной строки.

Формат файла:
- необязательная первая строка ``# {...}`` с метаданными в JSON
  (ключи ``N`` и ``D`` проверяются при валидации);
- прочие строки, начинающиеся с ``#``, и пустые строки пропускаются;
- остальные строки — координаты одной точки через пробел.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import numpy as np

from .points import as_points

logger = logging.getLogger(__name__)


class Dataset:
    """Набор точек, прочитанный из файла."""

    def __init__(self, path: str | Path, dtype: Any = np.float64) -> None:
        """
        Args:
            path: Путь к файлу с точками
            dtype: Скалярный тип координат (знаковый числовой)
        """
        self.path = Path(path)
        self.dtype = np.dtype(dtype)
        self.dataset_info: dict[str, Any] = {}
        self.X: np.ndarray | None = None

        logger.info(f"Loading dataset from {self.path}")
        self._load_data()

    def _load_data(self) -> None:
        rows: list[list[str]] = []

        with open(self.path, "r", encoding="utf-8") as f:
            for lineno, line in enumerate(f):
                line = line.strip()
                if not line:
                    continue
                if line.startswith("#"):
                    # JSON-метаданные допускаются только в первой строке
                    header = line.lstrip("#").strip()
                    if lineno == 0 and header.startswith("{"):
                        self.dataset_info = json.loads(header)
                    continue
                rows.append(line.split())

        if not rows:
            raise ValueError(f"No points found in {self.path}")

        self.X = as_points(rows, dtype=self.dtype)
        logger.info(f"Dataset loaded: X.shape={self.X.shape}, dtype={self.X.dtype}")
