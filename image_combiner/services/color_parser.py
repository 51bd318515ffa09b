"""Разбор цветовых токенов: имена SVG/CSS или HEX (24 и 48 бит)."""
from __future__ import annotations

import re

from PIL import ImageColor

from image_combiner.errors import ColorParseError
from image_combiner.models.color import FloatColor

_HEX_RE = re.compile(r"^[0-9a-fA-F]+$")


def parse_color(token: str) -> FloatColor:
    """Преобразует токен в `FloatColor`.

    Args:
        token: Имя цвета ("Red", "navy") без учёта регистра, либо HEX
            с необязательным "#": 6 цифр (8 бит на канал) или 12 цифр (16 бит).

    Returns:
        Цвет с каналами, нормированными в [0, 1].

    Raises:
        ColorParseError: если токен не распознан; сообщение содержит токен.
    """
    name = token.strip().lower()
    if name in ImageColor.colormap:
        r, g, b = ImageColor.getrgb(name)[:3]
        return FloatColor(r / 255.0, g / 255.0, b / 255.0)

    digits = name[1:] if name.startswith("#") else name
    if not digits or not _HEX_RE.match(digits):
        raise ColorParseError(token, "not a known color name or hex string")
    if len(digits) == 6:
        return _split_hex(digits, width=2, scale=0xFF)
    if len(digits) == 12:
        return _split_hex(digits, width=4, scale=0xFFFF)
    raise ColorParseError(token, f"hex colors need 6 or 12 digits, got {len(digits)}")


def _split_hex(digits: str, width: int, scale: int) -> FloatColor:
    r, g, b = (int(digits[i:i + width], 16) / scale for i in range(0, 3 * width, width))
    return FloatColor(r, g, b)
