from dataclasses import dataclass
from typing import Dict, Any

from .flags import Vf4Flags


@dataclass(frozen=True)
class Vf4Entry:
    """Flag word for a single minitile.

    Each predicate checks that every bit of its mask is set, so LOW is
    true only when both MID and HIGH are, and does not exclude them.
    """
    value: int

    def _has(self, mask: Vf4Flags) -> bool:
        return self.value & mask == mask

    def flags(self) -> Vf4Flags:
        return Vf4Flags(self.value)

    def is_walkable(self) -> bool:
        return self._has(Vf4Flags.WALKABLE)

    def is_elevation_mid(self) -> bool:
        return self._has(Vf4Flags.MID)

    def is_elevation_high(self) -> bool:
        return self._has(Vf4Flags.HIGH)

    def is_elevation_low(self) -> bool:
        return self._has(Vf4Flags.LOW)

    def blocks_view(self) -> bool:
        return self._has(Vf4Flags.BLOCKS_VIEW)

    def is_ramp(self) -> bool:
        return self._has(Vf4Flags.RAMP)

    def to_dict(self) -> Dict[str, Any]:
        """Convert entry to dictionary format."""
        return {
            'raw_value': self.value,
            'walkable': self.is_walkable(),
            'elevation_low': self.is_elevation_low(),
            'elevation_mid': self.is_elevation_mid(),
            'elevation_high': self.is_elevation_high(),
            'blocks_view': self.blocks_view(),
            'ramp': self.is_ramp()
        }
