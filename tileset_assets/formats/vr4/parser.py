"""VR4 (minitile pixel index) parser."""
from typing import Any

from construct import Struct, Bytes

from ..base import BaseTableParser, BlockTable
from .block import PixelBlock, BLOCK_SIZE


class Vr4Parser(BaseTableParser):
    """VR4 (minitile image) parser.

    Each block is 64 bytes, one palette index per pixel of an 8x8 minitile.
    Referenced by VX4 entries.
    """

    NAME = 'VR4'
    RECORD = Struct(
        "indices" / Bytes(BLOCK_SIZE)
    )

    def _build_record(self, parsed: Any) -> PixelBlock:
        return PixelBlock(parsed.indices)


def decode_vr4(data: bytes, expected_count=None) -> BlockTable:
    """Decode a VR4 buffer into a table of PixelBlocks."""
    return Vr4Parser(data, expected_count).parse()
