"""Загрузка изображений с диска, определение размеров и запись JPEG.

Принципы:
- SRP: класс отвечает только за декодирование/кодирование и приведение пикселей
  к каноническому 16-битному RGB.
- Файлы открываются в `with` и закрываются сразу после декодирования.
- Ошибки не подавляются: каждая причина оборачивается в исключение с именем файла.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Tuple

import numpy as np
from PIL import Image, UnidentifiedImageError

from image_combiner.errors import (
    CorruptImageError,
    ImageEncodeError,
    ImageOpenError,
    ImageTooLargeError,
    OutputOpenError,
    UnrecognizedFormatError,
)
from image_combiner.models.config import JPEG_QUALITY
from image_combiner.models.image_model import DecodedImage

log = logging.getLogger(__name__)

_8BIT_TO_16BIT = 0x101
_ALPHA_MODES = ("RGBA", "LA", "PA", "RGBa", "La")


class ImageService:
    def load_image(self, file_path: str | Path) -> DecodedImage:
        """Загружает изображение и возвращает пиксели в 16-битном RGB.

        Args:
            file_path: Путь до файла изображения (GIF, JPEG, PNG, BMP, PGM/PPM, ...).

        Returns:
            `DecodedImage` с массивом uint16 (height, width, 3).

        Raises:
            ImageOpenError: если файл нельзя открыть.
            UnrecognizedFormatError: если формат не распознан.
            CorruptImageError: если данные обрезаны или повреждены.
            ImageTooLargeError: если размер превышает `Image.MAX_IMAGE_PIXELS`.
        """
        path = Path(file_path)
        try:
            fh = open(path, "rb")
        except OSError as exc:
            raise ImageOpenError(path, f"Failed opening {path}: {exc}") from exc

        with fh:
            try:
                pil_image = Image.open(fh)
            except UnidentifiedImageError as exc:
                raise UnrecognizedFormatError(path, f"Failed decoding {path}: unknown image format") from exc
            except Image.DecompressionBombError as exc:
                raise ImageTooLargeError(path, f"Failed decoding {path}: {exc}") from exc
            with pil_image:
                try:
                    pil_image.load()
                    pixels = self.to_rgb16(pil_image)
                except Image.DecompressionBombError as exc:
                    raise ImageTooLargeError(path, f"Failed decoding {path}: {exc}") from exc
                except (OSError, SyntaxError, ValueError) as exc:
                    raise CorruptImageError(path, f"Failed decoding {path}: {exc}") from exc
                mode = pil_image.mode
                fmt = pil_image.format

        height, width = pixels.shape[:2]
        return DecodedImage(path=path, pixels=pixels, width=width, height=height, mode=mode, format=fmt)

    def to_rgb16(self, image: Image.Image) -> np.ndarray:
        """Приводит изображение PIL к массиву uint16 (h, w, 3).

        8-битные каналы расширяются умножением на 0x101; 16-битные градации серого
        ("I;16", "I") сохраняют полную точность; альфа домножается на цвет.
        """
        mode = image.mode
        if mode.startswith("I;16") or mode in ("I", "F"):
            gray = np.asarray(image)
            gray = np.clip(gray, 0, 0xFFFF).astype(np.uint16)
            return np.repeat(gray[:, :, np.newaxis], 3, axis=2)

        has_alpha = mode in _ALPHA_MODES or "transparency" in image.info
        if not has_alpha:
            rgb = np.asarray(image.convert("RGB"), dtype=np.uint16)
            return rgb * _8BIT_TO_16BIT

        rgba = np.asarray(image.convert("RGBA"), dtype=np.uint32)
        rgb16 = rgba[:, :, :3] * _8BIT_TO_16BIT
        alpha16 = rgba[:, :, 3:4] * _8BIT_TO_16BIT
        return (rgb16 * alpha16 // 0xFFFF).astype(np.uint16)

    def get_dimensions(self, file_path: str | Path) -> Tuple[int, int]:
        """Полностью декодирует файл и возвращает (width, height); пиксели не хранятся."""
        image = self.load_image(file_path)
        return image.width, image.height

    def get_max_dimensions(self, file_paths: Iterable[str | Path]) -> Tuple[int, int]:
        """Максимальные ширина и высота по всем файлам.

        Отдельный проход: каждый файл декодируется здесь и ещё раз при объединении.
        Первая же ошибка прерывает проход без частичного результата.
        """
        max_w, max_h = 0, 0
        for path in file_paths:
            log.info("Getting dimensions for %s...", path)
            w, h = self.get_dimensions(path)
            max_w = max(max_w, w)
            max_h = max(max_h, h)
        return max_w, max_h

    def save_jpeg(self, pixels: np.ndarray, file_path: str | Path, quality: int = JPEG_QUALITY) -> None:
        """Записывает 16-битный массив (h, w, 3) как JPEG.

        Файл создаётся до кодирования, поэтому при ошибке кодирования он может остаться.
        """
        path = Path(file_path)
        rgb8 = (np.asarray(pixels, dtype=np.uint16) >> 8).astype(np.uint8)
        try:
            fh = open(path, "wb")
        except OSError as exc:
            raise OutputOpenError(path, f"Error opening output file {path}: {exc}") from exc
        with fh:
            try:
                Image.fromarray(rgb8).save(fh, format="JPEG", quality=quality)
            except (OSError, ValueError) as exc:
                raise ImageEncodeError(path, f"Failed creating output JPEG image {path}: {exc}") from exc
