"""Разбор аргументов командной строки в неизменяемые конфигурации.

Принципы:
- Ошибки argparse не завершают процесс с кодом 2, а превращаются в `ArgumentError`;
  код выхода и баннер использования выбирает точка входа.
- Цвета разбираются сразу, поэтому плохой токен — это ошибка аргументов.
"""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional, Sequence

from image_combiner.errors import ArgumentError
from image_combiner.models.config import JPEG_QUALITY, AccumulateConfig, ChannelConfig, InputSpec
from image_combiner.services.color_parser import parse_color

HELP_HINT = "Run with -h for more information."


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise ArgumentError(message)


def build_accumulate_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="image-combine",
        usage="%(prog)s [--] <image> <color> [<image> <color> ...] <output.jpg>",
        description=(
            "Sum brightness-weighted colors of several images into one JPEG. "
            "Colors are SVG/CSS names or hex strings (6 or 12 digits, optional '#'). "
            "Put '--' first when an image or output path starts with '-'."
        ),
    )
    parser.add_argument("items", nargs="*", metavar="ARG", help="image/color pairs followed by the output path")
    return parser


def parse_accumulate_args(argv: Optional[Sequence[str]] = None) -> AccumulateConfig:
    """Строит `AccumulateConfig` из `<image> <color> ... <output>`.

    Raises:
        ArgumentError: если число аргументов чётное или меньше 3.
        ColorParseError: если цветовой токен не распознан.
    """
    args = build_accumulate_parser().parse_args(argv)
    items: List[str] = list(args.items)
    if len(items) < 3 or len(items) % 2 == 0:
        raise ArgumentError(
            "Expected one or more <image> <color> pairs followed by an output path "
            f"(got {len(items)} arguments)."
        )
    pairs = items[:-1]
    inputs = tuple(
        InputSpec(path=Path(pairs[i]), color=parse_color(pairs[i + 1]), token=pairs[i + 1])
        for i in range(0, len(pairs), 2)
    )
    return AccumulateConfig(inputs=inputs, output=Path(items[-1]), quality=JPEG_QUALITY)


def build_channel_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="image-channels",
        description="Combine three (presumably grayscale) images into one JPEG, one image per color channel.",
    )
    parser.add_argument("-r", dest="red", default="", help="The image to use for the R channel.")
    parser.add_argument("-g", dest="green", default="", help="The image to use for the G channel.")
    parser.add_argument("-b", dest="blue", default="", help="The image to use for the B channel.")
    parser.add_argument(
        "-output", "--output", dest="output", default="",
        help="The filename to create. Output files will be JPEG-format.",
    )
    return parser


def parse_channel_args(argv: Optional[Sequence[str]] = None) -> ChannelConfig:
    args = build_channel_parser().parse_args(argv)
    if not (args.red and args.green and args.blue):
        raise ArgumentError("An image must be supplied for every color.")
    if not args.output:
        raise ArgumentError("An output filename is required.")
    return ChannelConfig(
        red=Path(args.red),
        green=Path(args.green),
        blue=Path(args.blue),
        output=Path(args.output),
        quality=JPEG_QUALITY,
    )
