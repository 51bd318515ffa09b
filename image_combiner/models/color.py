"""Цвет с плавающей точкой для накопления вкладов.

Принципы:
- Значимый тип (`frozen=True`): арифметика возвращает новые экземпляры.
- Каналы не ограничиваются при суммировании; ограничение только при выводе.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

MAX_CHANNEL_VALUE = 0xFFFF

RGBA64 = Tuple[int, int, int, int]


def quantize_channel(value: float) -> int:
    """Переводит канал [0, 1] в 16-битное значение.

    Значения >= 1.0 дают 0xFFFF, отрицательные дают 0, остальные округляются
    до ближайшего шага.
    """
    if value >= 1.0:
        return MAX_CHANNEL_VALUE
    if value <= 0.0:
        return 0
    return int(round(value * MAX_CHANNEL_VALUE))


@dataclass(frozen=True)
class FloatColor:
    """RGB-цвет с каналами float, номинально в диапазоне [0, 1]."""
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def __add__(self, other: "FloatColor") -> "FloatColor":
        if not isinstance(other, FloatColor):
            return NotImplemented
        return FloatColor(self.r + other.r, self.g + other.g, self.b + other.b)

    def __mul__(self, scale: float) -> "FloatColor":
        if isinstance(scale, FloatColor):
            return NotImplemented
        s = float(scale)
        return FloatColor(self.r * s, self.g * s, self.b * s)

    __rmul__ = __mul__

    @classmethod
    def from_rgba64(cls, r: int, g: int, b: int) -> "FloatColor":
        """Строит цвет из 16-битных значений каналов."""
        return cls(r / MAX_CHANNEL_VALUE, g / MAX_CHANNEL_VALUE, b / MAX_CHANNEL_VALUE)

    def rgba64(self) -> RGBA64:
        return to_rgba64(self)

    def as_array(self) -> np.ndarray:
        return np.array([self.r, self.g, self.b], dtype=np.float64)


def to_rgba64(color: FloatColor) -> RGBA64:
    """Возвращает непрозрачный 16-битный RGBA с ограничением каналов."""
    return (
        quantize_channel(color.r),
        quantize_channel(color.g),
        quantize_channel(color.b),
        MAX_CHANNEL_VALUE,
    )
