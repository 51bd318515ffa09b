"""Конфигурация запуска, собранная один раз из аргументов командной строки."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from image_combiner.models.color import FloatColor

JPEG_QUALITY = 100
CHANNEL_NAMES: Tuple[str, str, str] = ("red", "green", "blue")
MAX_CHANNELS = len(CHANNEL_NAMES)


@dataclass(frozen=True)
class InputSpec:
    """Пара (файл, цвет); позиция в списке задаёт порядок проходов."""
    path: Path
    color: FloatColor
    token: str = ""


@dataclass(frozen=True)
class AccumulateConfig:
    inputs: Tuple[InputSpec, ...]
    output: Path
    quality: int = JPEG_QUALITY


@dataclass(frozen=True)
class ChannelConfig:
    red: Optional[Path]
    green: Optional[Path]
    blue: Optional[Path]
    output: Path
    quality: int = JPEG_QUALITY

    def channel_paths(self) -> List[Optional[Path]]:
        """Пути в порядке индексов каналов: 0=R, 1=G, 2=B."""
        return [self.red, self.green, self.blue]
