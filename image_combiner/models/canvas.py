from __future__ import annotations

import numpy as np

from image_combiner.models.color import MAX_CHANNEL_VALUE, FloatColor


class FloatCanvas:
    """Холст-аккумулятор: сетка float-цветов фиксированного размера.

    Хранится как numpy-массив (height, width, 3) float64, изначально чёрный.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self._data = np.zeros((self.height, self.width, 3), dtype=np.float64)

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def add_color(self, x: int, y: int, color: FloatColor) -> None:
        """Прибавляет цвет в точке (x, y); вне холста ничего не делает."""
        if not self.in_bounds(x, y):
            return
        self._data[y, x] += color.as_array()

    def add_block(self, block: np.ndarray) -> None:
        """Прибавляет массив (h, w, 3), выровненный по левому верхнему углу.

        Часть блока за пределами холста отбрасывается, как и в `add_color`.
        """
        h = min(block.shape[0], self.height)
        w = min(block.shape[1], self.width)
        if h <= 0 or w <= 0:
            return
        self._data[:h, :w] += block[:h, :w]

    def color_at(self, x: int, y: int) -> FloatColor:
        r, g, b = self._data[y, x]
        return FloatColor(float(r), float(g), float(b))

    def render(self) -> np.ndarray:
        """Сводит холст в массив uint16 (height, width, 3).

        Каналы >= 1.0 насыщаются до 0xFFFF; остальные округляются до ближайшего
        шага, поэтому порядок сложения вкладов не влияет на результат.
        """
        clipped = np.clip(self._data, 0.0, 1.0)
        return np.rint(clipped * MAX_CHANNEL_VALUE).astype(np.uint16)
