"""Tileset asset decoders and megatile resolution."""
from .formats import (
    BlockTable,
    TilesetError,
    DecodeError,
    TruncatedInputError,
    TrailingDataError,
    PartialRecordError,
    OutOfRangeError,
    decode_cv5,
    decode_vx4,
    decode_vf4,
    decode_vr4,
    decode_wpe,
)
from .constants import TilesetFormat
from .resolver import MegaTile, Tileset, MissingTableError
from .loader import load_tileset

__version__ = '0.1.0'

__all__ = [
    'BlockTable',
    'TilesetError',
    'DecodeError',
    'TruncatedInputError',
    'TrailingDataError',
    'PartialRecordError',
    'OutOfRangeError',
    'MissingTableError',
    'decode_cv5',
    'decode_vx4',
    'decode_vf4',
    'decode_vr4',
    'decode_wpe',
    'TilesetFormat',
    'MegaTile',
    'Tileset',
    'load_tileset',
]
