"""WPE (palette) parser."""
from typing import Any
import logging

import numpy as np
from construct import Struct, Int8ul, Padding

from ..base import BaseTableParser, BlockTable
from .entry import WpeColor

logger = logging.getLogger(__name__)


class WpeTable(BlockTable):
    """Decoded palette, one WpeColor per entry."""

    __slots__ = ()

    def as_array(self) -> np.ndarray:
        """Palette as a read-only (N, 3) uint8 array."""
        array = np.array([color.rgb() for color in self], dtype=np.uint8).reshape(-1, 3)
        array.setflags(write=False)
        return array


class WpeParser(BaseTableParser):
    """WPE (palette) parser.

    256-color RGB palette. Each entry is 4 bytes: red, green, blue and
    one unused padding byte.
    """

    NAME = 'WPE'
    STANDARD_COUNT = 256
    RECORD = Struct(
        "r" / Int8ul,
        "g" / Int8ul,
        "b" / Int8ul,
        Padding(1),
    )
    TABLE_CLASS = WpeTable

    def _build_record(self, parsed: Any) -> WpeColor:
        return WpeColor(parsed.r, parsed.g, parsed.b)


def decode_wpe(data: bytes, expected_count=None) -> WpeTable:
    """Decode a WPE buffer into a palette table."""
    return WpeParser(data, expected_count).parse()
