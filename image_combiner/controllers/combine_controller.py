"""Контроллеры объединения: оркестрация сервисов загрузки и обработки.

SOLID:
- SRP: контроллеры только управляют порядком проходов; арифметика в `ProcessService`,
  декодирование и запись в `ImageService`.
- Два независимых контроллера вместо общей абстракции: накопление float-цветов и
  запись каналов различаются слишком сильно.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

import numpy as np

from image_combiner.errors import ArgumentError, TooManyChannelsError
from image_combiner.models.canvas import FloatCanvas
from image_combiner.models.config import CHANNEL_NAMES, MAX_CHANNELS, AccumulateConfig, ChannelConfig, InputSpec
from image_combiner.services.image_service import ImageService
from image_combiner.services.process_service import ProcessService

log = logging.getLogger(__name__)


@dataclass
class AccumulateController:
    """Суммирует взвешенные по яркости цвета всех входов на float-холсте."""
    _image_service: ImageService = ImageService()
    _process_service: ProcessService = ProcessService()

    def combine(self, inputs: Sequence[InputSpec]) -> np.ndarray:
        """Возвращает итоговое изображение uint16 (H, W, 3).

        Холст имеет максимальные размеры среди входов; каждый вход накладывается
        от левого верхнего угла в пределах своих границ. Порядок входов на
        результат не влияет.
        """
        if not inputs:
            raise ArgumentError("At least one input image is required.")
        w, h = self._image_service.get_max_dimensions([spec.path for spec in inputs])
        log.info("Combining images into a %dx%d image.", w, h)
        canvas = FloatCanvas(w, h)
        for spec in inputs:
            image = self._image_service.load_image(spec.path)
            log.info("Adding %s (%s, %s) as %s...", spec.path, image.format, image.mode, spec.token or spec.color)
            self._process_service.accumulate(canvas, image, spec.color)
        return canvas.render()

    def run(self, config: AccumulateConfig) -> None:
        combined = self.combine(config.inputs)
        self._image_service.save_jpeg(combined, config.output, quality=config.quality)


@dataclass
class ChannelController:
    """Записывает оттенки серого каждого входа в свой канал R, G или B."""
    _image_service: ImageService = ImageService()
    _process_service: ProcessService = ProcessService()

    def combine(self, image_paths: Sequence[Optional[Path]]) -> np.ndarray:
        """Индекс пути в списке задаёт канал; `None` оставляет канал нулевым."""
        if len(image_paths) > MAX_CHANNELS:
            raise TooManyChannelsError(len(image_paths))
        supplied = [(i, p) for i, p in enumerate(image_paths) if p is not None]
        if not supplied:
            raise ArgumentError("An image must be supplied for at least one channel.")

        w, h = self._image_service.get_max_dimensions([p for _i, p in supplied])
        log.info("Combining images into a %dx%d image.", w, h)
        combined = self._process_service.new_channel_canvas(w, h)
        for channel, path in supplied:
            image = self._image_service.load_image(path)
            log.info("Setting channel %d (%s) using %s (%s, %s)...",
                     channel + 1, CHANNEL_NAMES[channel], path, image.format, image.mode)
            self._process_service.set_channel(combined, image, channel)
        return combined

    def run(self, config: ChannelConfig) -> None:
        combined = self.combine(config.channel_paths())
        self._image_service.save_jpeg(combined, config.output, quality=config.quality)
