from __future__ import annotations

from typing import Sequence

import numpy as np

from image_combiner.models.canvas import FloatCanvas
from image_combiner.models.color import MAX_CHANNEL_VALUE, FloatColor
from image_combiner.models.config import MAX_CHANNELS
from image_combiner.models.image_model import DecodedImage


class ProcessService:
    # ---------- Скалярные версии ----------
    def pixel_brightness(self, rgba: Sequence[int]) -> float:
        """
        Яркость одного 16-битного пикселя: среднее R, G, B, нормированное в [0, 1].
        """
        r, g, b = rgba[:3]
        return (int(r) + int(g) + int(b)) / (3 * MAX_CHANNEL_VALUE)

    def pixel_grayscale(self, rgba: Sequence[int]) -> int:
        """
        Градация серого (R+G+B)//3 в том же 16-битном диапазоне, без нормировки.
        """
        r, g, b = rgba[:3]
        return (int(r) + int(g) + int(b)) // 3

    # ---------- Векторные версии ----------
    def brightness(self, pixels: np.ndarray) -> np.ndarray:
        """
        Возвращает float64-массив (h, w) в диапазоне [0, 1].
        """
        total = pixels[:, :, :3].sum(axis=2, dtype=np.uint32)
        return total / float(3 * MAX_CHANNEL_VALUE)

    def grayscale(self, pixels: np.ndarray) -> np.ndarray:
        """
        Возвращает uint16-массив (h, w): (R+G+B)//3, те же единицы, что у источника.
        """
        total = pixels[:, :, :3].sum(axis=2, dtype=np.uint32)
        return (total // 3).astype(np.uint16)

    # ---------- Накопление цвета ----------
    def accumulate(self, canvas: FloatCanvas, image: DecodedImage, color: FloatColor) -> None:
        """
        Добавляет на холст вклад изображения: яркость каждого пикселя * цвет.
        Обрабатываются только пиксели в границах самого изображения; остальной
        холст в этом проходе не меняется.
        """
        weights = self.brightness(image.pixels)
        contribution = weights[:, :, np.newaxis] * color.as_array()
        canvas.add_block(contribution)

    # ---------- Назначение каналов ----------
    def set_channel(self, dest: np.ndarray, image: DecodedImage, channel: int) -> None:
        """
        Записывает оттенки серого изображения в канал `channel` (0=R, 1=G, 2=B)
        массива `dest` (H, W, 3) uint16. Два других канала не трогаются.
        """
        if not 0 <= channel < MAX_CHANNELS:
            raise ValueError(f"Bad channel {channel}")
        gray = self.grayscale(image.pixels)
        h = min(gray.shape[0], dest.shape[0])
        w = min(gray.shape[1], dest.shape[1])
        dest[:h, :w, channel] = gray[:h, :w]

    def new_channel_canvas(self, width: int, height: int) -> np.ndarray:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        return np.zeros((height, width, MAX_CHANNELS), dtype=np.uint16)
