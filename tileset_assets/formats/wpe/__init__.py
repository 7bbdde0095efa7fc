"""WPE (palette) format."""
from .parser import WpeParser, WpeTable, decode_wpe
from .entry import WpeColor, srgb

__all__ = ['WpeParser', 'WpeTable', 'WpeColor', 'decode_wpe', 'srgb']
