"""CV5 (megatile reference) parser."""
from typing import Any

from construct import Struct, Array, Bytes, Int16ul

from ..base import BaseTableParser, BlockTable
from .entry import Cv5Group


class Cv5Parser(BaseTableParser):
    """CV5 (megatile reference) parser.

    Each group is referenced by the map's tile data and points at one
    VX4 block and one VF4 block per minitile.
    """

    NAME = 'CV5'
    HEADER_SIZE = 20
    MEGA_TILE_REFERENCE_COUNT = 16  # Each megatile has 16 (4x4) minitiles
    RECORD = Struct(
        # TODO: Handle flags in the header
        # see: http://www.staredit.net/wiki/index.php?title=Terrain_Format#CV5
        "header" / Bytes(HEADER_SIZE),
        "references" / Array(MEGA_TILE_REFERENCE_COUNT, Int16ul),
    )

    def _build_record(self, parsed: Any) -> Cv5Group:
        return Cv5Group(header=parsed.header, references=tuple(parsed.references))


def decode_cv5(data: bytes, expected_count=None) -> BlockTable:
    """Decode a CV5 buffer into a table of Cv5Groups."""
    return Cv5Parser(data, expected_count).parse()
