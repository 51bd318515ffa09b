"""Shared fixtures: small synthetic images written with Pillow."""
import logging
import struct
import zlib
from pathlib import Path

import numpy as np
import pytest
from PIL import Image


@pytest.fixture
def make_image(tmp_path):
    """Write an RGB image filled with `fill` (or from `array`) and return its path."""
    def _make(name, size=(4, 4), fill=(255, 255, 255), array=None, mode="RGB", fmt=None):
        path = Path(tmp_path) / name
        if array is not None:
            image = Image.fromarray(np.asarray(array, dtype=np.uint8))
        else:
            image = Image.new(mode, size, fill)
        image.save(path, format=fmt)
        return path

    return _make


@pytest.fixture(autouse=True)
def reset_cli_logging():
    """Entry points attach a stdout handler; drop it so it never outlives capsys."""
    yield
    logger = logging.getLogger("image_combiner")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def huge_png(tmp_path):
    """A PNG header declaring 20000x20000 pixels, over Pillow's decompression-bomb limit."""
    def chunk(kind, data):
        return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", zlib.crc32(kind + data))

    path = Path(tmp_path) / "huge.png"
    ihdr = struct.pack(">IIBBBBB", 20000, 20000, 8, 2, 0, 0, 0)
    path.write_bytes(b"\x89PNG\r\n\x1a\n" + chunk(b"IHDR", ihdr) + chunk(b"IEND", b""))
    return path
