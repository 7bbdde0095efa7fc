# tileset_assets/formats/vx4/entry.py
from dataclasses import dataclass
from typing import Dict, Any


@dataclass(frozen=True)
class Vx4Entry:
    """Minitile image pointer. Referenced by CV5.

    Bit 0 says whether the minitile is flipped horizontally, the upper
    15 bits are the index into the VR4 table.
    """
    value: int

    def is_horizontally_flipped(self) -> bool:
        return self.value & 1 == 1

    def pixel_block_index(self) -> int:
        return self.value >> 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert entry to dictionary format."""
        return {
            'raw_value': self.value,
            'flipped': self.is_horizontally_flipped(),
            'vr4_index': self.pixel_block_index()
        }
