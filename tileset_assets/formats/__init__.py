"""Tileset format decoders package."""
from .base import (
    BaseTableParser,
    BlockTable,
    TilesetError,
    DecodeError,
    TruncatedInputError,
    TrailingDataError,
    PartialRecordError,
    OutOfRangeError,
)
from .cv5 import Cv5Parser, Cv5Group, decode_cv5
from .vx4 import Vx4Parser, Vx4Entry, decode_vx4
from .vf4 import Vf4Parser, Vf4Entry, Vf4Flags, decode_vf4
from .vr4 import Vr4Parser, PixelBlock, decode_vr4
from .wpe import WpeParser, WpeTable, WpeColor, decode_wpe

__all__ = [
    'BaseTableParser',
    'BlockTable',
    'TilesetError',
    'DecodeError',
    'TruncatedInputError',
    'TrailingDataError',
    'PartialRecordError',
    'OutOfRangeError',
    'Cv5Parser',
    'Cv5Group',
    'decode_cv5',
    'Vx4Parser',
    'Vx4Entry',
    'decode_vx4',
    'Vf4Parser',
    'Vf4Entry',
    'Vf4Flags',
    'decode_vf4',
    'Vr4Parser',
    'PixelBlock',
    'decode_vr4',
    'WpeParser',
    'WpeTable',
    'WpeColor',
    'decode_wpe',
]
