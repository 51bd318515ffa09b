"""Точки входа утилит `image-combine` и `image-channels`."""
from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from image_combiner.cli import (
    HELP_HINT,
    build_accumulate_parser,
    parse_accumulate_args,
    parse_channel_args,
)
from image_combiner.controllers.combine_controller import AccumulateController, ChannelController
from image_combiner.errors import ArgumentError, CombinerError


def configure_logging(level: int = logging.INFO) -> None:
    """Печатает сообщения о ходе работы в stdout без префиксов.

    Обработчик вешается на логгер пакета и заменяется при каждом вызове,
    чтобы всегда писать в текущий `sys.stdout`.
    """
    logger = logging.getLogger("image_combiner")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)


def accumulate_main(argv: Optional[Sequence[str]] = None) -> int:
    """Запускает накопление цветов; возвращает код выхода (0 или 1)."""
    configure_logging()
    try:
        config = parse_accumulate_args(argv)
    except ArgumentError as exc:
        print(f"Error: {exc}")
        print(build_accumulate_parser().format_usage(), end="")
        return 1
    try:
        AccumulateController().run(config)
    except CombinerError as exc:
        print(f"Error combining images: {exc}")
        return 1
    return 0


def channels_main(argv: Optional[Sequence[str]] = None) -> int:
    """Запускает сборку каналов R/G/B; возвращает код выхода (0 или 1)."""
    configure_logging()
    try:
        config = parse_channel_args(argv)
    except ArgumentError as exc:
        print(exc)
        print(HELP_HINT)
        return 1
    try:
        ChannelController().run(config)
    except CombinerError as exc:
        print(f"Error combining images: {exc}")
        return 1
    return 0


def run_accumulate() -> None:
    sys.exit(accumulate_main())


def run_channels() -> None:
    sys.exit(channels_main())


if __name__ == "__main__":
    run_accumulate()
