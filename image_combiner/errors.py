"""Иерархия исключений утилит объединения изображений.

Принципы:
- Все ошибки терминальны: сервисы только выбрасывают, ловят их лишь точки входа.
- Исходная причина сохраняется через `raise ... from exc`.
"""
from __future__ import annotations


class CombinerError(Exception):
    """Базовая ошибка; точки входа превращают её в код выхода 1."""


# ---- Аргументы командной строки ----
class ArgumentError(CombinerError):
    """Неверные аргументы: арность, отсутствующий флаг, плохой цвет."""


class ColorParseError(ArgumentError, ValueError):
    def __init__(self, token: str, reason: str) -> None:
        super().__init__(f"Invalid color {token!r}: {reason}")
        self.token = token


class TooManyChannelsError(ArgumentError):
    def __init__(self, count: int) -> None:
        super().__init__(f"Using more than 3 channels is unsupported (got {count}).")
        self.count = count


# ---- Чтение изображений ----
class ImageReadError(CombinerError):
    """Ошибка открытия или декодирования входного файла."""

    def __init__(self, path: object, message: str) -> None:
        super().__init__(message)
        self.path = path


class ImageOpenError(ImageReadError):
    pass


class UnrecognizedFormatError(ImageReadError, ValueError):
    pass


class CorruptImageError(ImageReadError, ValueError):
    pass


class ImageTooLargeError(ImageReadError):
    """Заявленный размер превышает лимит пикселей Pillow."""


# ---- Запись результата ----
class ImageWriteError(CombinerError):
    def __init__(self, path: object, message: str) -> None:
        super().__init__(message)
        self.path = path


class OutputOpenError(ImageWriteError):
    pass


class ImageEncodeError(ImageWriteError):
    pass
