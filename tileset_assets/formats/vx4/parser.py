"""VX4 (minitile image reference) parser."""
from typing import Any, Tuple

from construct import Struct, Array, Int16ul

from ..base import BaseTableParser, BlockTable
from .entry import Vx4Entry


class Vx4Parser(BaseTableParser):
    """VX4 (minitile image reference) parser.

    One block per megatile: 16 image pointers, 2 bytes each.
    """

    NAME = 'VX4'
    BLOCK_SIZE = 16  # Each megatile has 16 (4x4) minitiles
    RECORD = Struct(
        "entries" / Array(BLOCK_SIZE, Int16ul)
    )

    def _build_record(self, parsed: Any) -> Tuple[Vx4Entry, ...]:
        return tuple(Vx4Entry(value) for value in parsed.entries)


def decode_vx4(data: bytes, expected_count=None) -> BlockTable:
    """Decode a VX4 buffer into a table of 16-entry image reference blocks."""
    return Vx4Parser(data, expected_count).parse()
