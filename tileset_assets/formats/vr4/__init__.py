"""VR4 (minitile pixel index) format."""
from .parser import Vr4Parser, decode_vr4
from .block import PixelBlock, MINITILE_SIDE_LENGTH, BLOCK_SIZE

__all__ = ['Vr4Parser', 'PixelBlock', 'decode_vr4', 'MINITILE_SIDE_LENGTH', 'BLOCK_SIZE']
