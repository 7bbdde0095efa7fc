"""VF4 (minitile flags) format."""
from .parser import Vf4Parser, decode_vf4
from .entry import Vf4Entry
from .flags import Vf4Flags

__all__ = ['Vf4Parser', 'Vf4Entry', 'Vf4Flags', 'decode_vf4']
