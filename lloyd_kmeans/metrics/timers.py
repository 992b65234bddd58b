"""
Таймер для замеров фаз алгоритма (инициализация, назначение, обновление).
"""
from __future__ import annotations

import time
from typing import Any


class Timer:
    """
    Контекстный менеджер на time.perf_counter().

    Пример:
        with Timer() as t:
            labels = model.assign_clusters(X, means)
        t_assign = t.elapsed

    Повторный вход перезаписывает start/end/elapsed.
    """

    def __init__(self) -> None:
        self.start: float = 0.0
        self.end: float = 0.0
        self.elapsed: float = 0.0

    def __enter__(self) -> Timer:
        self.start = time.perf_counter()
        return self

    def __exit__(self, *args: Any) -> None:
        self.end = time.perf_counter()
        self.elapsed = self.end - self.start
