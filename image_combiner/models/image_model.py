"""Декодированное входное изображение.

Контракт пикселей: массив uint16 (height, width, 3), где 8-битные источники
расширены до 16 бит, а прозрачность уже домножена на цвет. Дальше по конвейеру
альфа-канала нет, поэтому яркость и оттенки серого считаются только по R, G, B.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np


@dataclass(frozen=True)
class DecodedImage:
    """Неизменяемая модель входного изображения в каноническом 16-битном RGB.

    Fields:
        path: Путь к исходному файлу.
        pixels: Массив uint16 формы (height, width, 3), альфа уже домножена.
        width: Ширина, px.
        height: Высота, px.
        mode: Режим PIL исходного файла, например "RGBA" или "I;16".
        format: Формат, определённый декодером ("PNG", "JPEG", ...), если известен.
    """
    path: Path
    pixels: np.ndarray
    width: int
    height: int
    mode: str
    format: Optional[str]

    def rgba64_at(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Цвет пикселя как 16-битный RGBA (непрозрачный после домножения)."""
        r, g, b = (int(v) for v in self.pixels[y, x])
        return r, g, b, 0xFFFF
