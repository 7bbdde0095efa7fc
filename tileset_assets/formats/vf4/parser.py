"""VF4 (minitile flags) parser."""
from typing import Any, Tuple

from construct import Struct, Array, Int16ul

from ..base import BaseTableParser, BlockTable
from .entry import Vf4Entry


class Vf4Parser(BaseTableParser):
    """VF4 (minitile flags) parser.

    One block per megatile: 16 flag words (4x4 minitiles), 2 bytes each,
    32 bytes per block. Referenced by CV5.
    """

    NAME = 'VF4'
    BLOCK_SIZE = 16  # Each megatile has 16 (4x4) minitiles
    RECORD = Struct(
        "flags" / Array(BLOCK_SIZE, Int16ul)
    )

    def _build_record(self, parsed: Any) -> Tuple[Vf4Entry, ...]:
        return tuple(Vf4Entry(value) for value in parsed.flags)


def decode_vf4(data: bytes, expected_count=None) -> BlockTable:
    """Decode a VF4 buffer into a table of 16-entry flag blocks."""
    return Vf4Parser(data, expected_count).parse()
