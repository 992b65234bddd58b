"""
Источник случайности для инициализации k-means++.

Генератор полностью определён (линейный конгруэнтный, фиксированные
множитель, приращение и модуль), поэтому запуск с явным seed
воспроизводится побитно на любой платформе. Без seed начальное состояние
берётся один раз из системного источника энтропии.
"""

from __future__ import annotations

import secrets
from typing import Protocol, Sequence

import numpy as np

LCG_MULTIPLIER = 6364136223846793005
LCG_INCREMENT = 1442695040888963407
LCG_MODULUS = 2**64 - 1

_UINT64 = 2**64


class RandomSource(Protocol):
    """Минимальный интерфейс, который нужен инициализатору."""

    def uniform_index(self, n: int) -> int:
        ...

    def weighted_index(self, weights: Sequence[float] | np.ndarray) -> int:
        ...


class LinearCongruentialRandom:
    """
    LCG: x' = (a * x + c) mod (2**64 - 1).

    Отрицательный seed трактуется как беззнаковое 64-битное число
    (дополнительный код), затем приводится по модулю генератора.
    """

    def __init__(self, seed: int) -> None:
        self.seed = int(seed)
        self.state = (self.seed % _UINT64) % LCG_MODULUS

    @classmethod
    def from_entropy(cls) -> LinearCongruentialRandom:
        return cls(secrets.randbits(64))

    def next_raw(self) -> int:
        """Продвигает состояние и возвращает его, значение в [0, 2**64 - 1)."""
        self.state = (LCG_MULTIPLIER * self.state + LCG_INCREMENT) % LCG_MODULUS
        return self.state

    def random(self) -> float:
        """Равномерное число в [0, 1) из старших 53 бит одного шага."""
        return (self.next_raw() >> 11) / float(1 << 53)

    def uniform_index(self, n: int) -> int:
        """Равномерный индекс в [0, n)."""
        if n <= 0:
            raise ValueError(f"n must be positive, got {n}")
        return self.next_raw() * n // LCG_MODULUS

    def weighted_index(self, weights: Sequence[float] | np.ndarray) -> int:
        """
        Индекс с вероятностью, пропорциональной весу.

        Всегда расходует ровно один шаг генератора. Выбирается первый
        индекс, чья накопленная сумма весов строго больше target. Если
        такого нет (нулевая сумма или округление довело target до суммы),
        индекс оказывается равен числу весов и заменяется на 0.
        """
        w = np.asarray(weights, dtype=np.float64)
        if w.ndim != 1 or w.size == 0:
            raise ValueError("weights must be a non-empty 1-D sequence")
        if not np.all(np.isfinite(w)) or np.any(w < 0):
            raise ValueError("weights must be finite and non-negative")

        cumulative = np.cumsum(w)
        target = self.random() * cumulative[-1]
        index = int(np.searchsorted(cumulative, target, side="right"))
        if index == w.size:
            index = 0
        return index


def make_random(seed: int | None = None) -> LinearCongruentialRandom:
    """Детерминированный генератор по seed или, при seed=None, из энтропии."""
    if seed is None:
        return LinearCongruentialRandom.from_entropy()
    return LinearCongruentialRandom(seed)
