"""VX4 (minitile image reference) format."""
from .parser import Vx4Parser, decode_vx4
from .entry import Vx4Entry

__all__ = ['Vx4Parser', 'Vx4Entry', 'decode_vx4']
