"""Resolution of megatile coordinates into colors and terrain flags.

A map tile points at a CV5 group and one of its 16 minitiles. The CV5
reference for that minitile selects a VX4 block (image) and a VF4 block
(flags); the minitile index then selects the entry inside each block.
VX4 entries point at a VR4 pixel block whose bytes index the WPE palette.
"""
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple
import logging

from .formats.base import BlockTable, TilesetError
from .formats.cv5 import Cv5Group
from .formats.vx4 import Vx4Entry
from .formats.vf4 import Vf4Entry
from .formats.vr4 import PixelBlock, BLOCK_SIZE
from .formats.wpe import WpeColor
from .parallel import parallel_map

logger = logging.getLogger(__name__)

SUBTILE_COUNT = 16  # 4x4 minitiles per megatile

RGB = Tuple[int, int, int]
SRGB = Tuple[float, float, float]


class MissingTableError(TilesetError):
    """Raised when a lookup needs a table the tileset was built without."""
    pass


@dataclass(frozen=True)
class MegaTile:
    """Position of one minitile inside a megatile group."""
    group_index: int
    subtile_index: int

    def __post_init__(self):
        if self.group_index < 0:
            raise ValueError(f"group_index must be non-negative, got {self.group_index}")
        if not 0 <= self.subtile_index < SUBTILE_COUNT:
            raise ValueError(
                f"subtile_index must be in [0, {SUBTILE_COUNT}), got {self.subtile_index}"
            )

    @classmethod
    def from_raw(cls, value: int) -> 'MegaTile':
        """Build from a packed map tile word (group in the upper 12 bits)."""
        return cls(value >> 4, value & 0xF)

    def to_raw(self) -> int:
        return (self.group_index << 4) | self.subtile_index


@dataclass(frozen=True)
class Tileset:
    """The decoded tables of one tileset.

    Any table may be left out when only part of the chain is needed,
    e.g. flag lookups only need CV5 and VF4.
    """
    cv5: Optional[BlockTable] = None
    vx4: Optional[BlockTable] = None
    vf4: Optional[BlockTable] = None
    vr4: Optional[BlockTable] = None
    wpe: Optional[BlockTable] = None

    def _table(self, name: str) -> BlockTable:
        table = getattr(self, name)
        if table is None:
            raise MissingTableError(f"Tileset has no {name.upper()} table")
        return table

    def sizes(self) -> Dict[str, Optional[int]]:
        """Entry count of each table, None for tables left out."""
        return {
            name: len(table) if table is not None else None
            for name, table in (
                ('cv5', self.cv5), ('vx4', self.vx4), ('vf4', self.vf4),
                ('vr4', self.vr4), ('wpe', self.wpe)
            )
        }

    def reference(self, megatile: MegaTile) -> int:
        return reference(self, megatile)

    def image_reference(self, megatile: MegaTile) -> Vx4Entry:
        return image_reference(self, megatile)

    def pixel_block(self, megatile: MegaTile) -> PixelBlock:
        return pixel_block(self, megatile)

    def palette_color(self, megatile: MegaTile, pixel_index: int = 0) -> WpeColor:
        return palette_color(self, megatile, pixel_index)

    def color(self, megatile: MegaTile, pixel_index: int = 0) -> RGB:
        return color(self, megatile, pixel_index)

    def srgb_color(self, megatile: MegaTile, pixel_index: int = 0) -> SRGB:
        return srgb_color(self, megatile, pixel_index)

    def flags(self, megatile: MegaTile) -> int:
        return flags(self, megatile)

    def terrain_flags(self, megatile: MegaTile) -> Vf4Entry:
        return terrain_flags(self, megatile)


def reference(tileset: Tileset, megatile: MegaTile) -> int:
    """CV5 reference for the megatile's minitile."""
    group: Cv5Group = tileset._table('cv5').get(megatile.group_index)
    return group.reference(megatile.subtile_index)


def image_reference(tileset: Tileset, megatile: MegaTile) -> Vx4Entry:
    """VX4 entry for the megatile's minitile."""
    block = tileset._table('vx4').get(reference(tileset, megatile))
    return block[megatile.subtile_index]


def pixel_block(tileset: Tileset, megatile: MegaTile) -> PixelBlock:
    """VR4 pixel block for the megatile's minitile, already mirrored if flipped."""
    entry = image_reference(tileset, megatile)
    block: PixelBlock = tileset._table('vr4').get(entry.pixel_block_index())
    if entry.is_horizontally_flipped():
        return block.mirrored()
    return block


def palette_color(tileset: Tileset, megatile: MegaTile, pixel_index: int = 0) -> WpeColor:
    """Palette entry of one pixel (row-major index) of the minitile.

    Raises:
        ValueError: If pixel_index is outside the 64 pixels of a minitile
        OutOfRangeError: If any reference along the chain is past its table
    """
    if not 0 <= pixel_index < BLOCK_SIZE:
        raise ValueError(f"pixel_index must be in [0, {BLOCK_SIZE}), got {pixel_index}")
    block = pixel_block(tileset, megatile)
    return tileset._table('wpe').get(block.indices[pixel_index])


def color(tileset: Tileset, megatile: MegaTile, pixel_index: int = 0) -> RGB:
    """Raw RGB color of one pixel (row-major index) of the minitile."""
    return palette_color(tileset, megatile, pixel_index).rgb()


def srgb_color(tileset: Tileset, megatile: MegaTile, pixel_index: int = 0) -> SRGB:
    """Gamma corrected color of one pixel of the minitile."""
    return palette_color(tileset, megatile, pixel_index).srgb()


def terrain_flags(tileset: Tileset, megatile: MegaTile) -> Vf4Entry:
    block = tileset._table('vf4').get(reference(tileset, megatile))
    return block[megatile.subtile_index]


def flags(tileset: Tileset, megatile: MegaTile) -> int:
    """Raw VF4 flag word for the megatile's minitile."""
    return terrain_flags(tileset, megatile).value


def resolve_colors(tileset: Tileset,
                   megatiles: Iterable[MegaTile],
                   pixel_index: int = 0,
                   max_workers: Optional[int] = None) -> List[RGB]:
    """Resolve colors for many megatiles, in input order."""
    return parallel_map(
        lambda megatile: color(tileset, megatile, pixel_index),
        megatiles,
        max_workers=max_workers
    )


def resolve_flags(tileset: Tileset,
                  megatiles: Iterable[MegaTile],
                  max_workers: Optional[int] = None) -> List[int]:
    """Resolve raw flag words for many megatiles, in input order."""
    return parallel_map(
        lambda megatile: flags(tileset, megatile),
        megatiles,
        max_workers=max_workers
    )
