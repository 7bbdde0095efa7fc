# tileset_assets/formats/wpe/entry.py
from dataclasses import dataclass
from typing import Dict, Tuple

GAMMA = 2.2


def srgb(x: int) -> float:
    """Gamma correction of a single raw channel value.

    Operates on the raw 0-255 magnitude, so 255 maps to about 12.41.
    see: https://www.cambridgeincolour.com/tutorials/gamma-correction.htm
    """
    return float(x) ** (1.0 / GAMMA)


@dataclass(frozen=True)
class WpeColor:
    """Single palette entry.

    Stored on disk as 4 bytes (R, G, B, unused).
    """
    r: int
    g: int
    b: int

    def rgb(self) -> Tuple[int, int, int]:
        """Raw rgb values without gamma correction."""
        return (self.r, self.g, self.b)

    def srgb(self) -> Tuple[float, float, float]:
        """Color after gamma correction, not re-quantized."""
        return (srgb(self.r), srgb(self.g), srgb(self.b))

    def to_dict(self) -> Dict[str, int]:
        return {'r': self.r, 'g': self.g, 'b': self.b}
