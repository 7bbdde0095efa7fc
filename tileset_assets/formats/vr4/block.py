from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

MINITILE_SIDE_LENGTH = 8  # Each minitile is 8x8 pixels
BLOCK_SIZE = MINITILE_SIDE_LENGTH * MINITILE_SIDE_LENGTH


@dataclass(frozen=True)
class PixelBlock:
    """8x8 minitile image stored as 64 palette indices in row-major order."""
    indices: bytes

    def __post_init__(self):
        if len(self.indices) != BLOCK_SIZE:
            raise ValueError(f"Pixel block needs {BLOCK_SIZE} indices, got {len(self.indices)}")
        object.__setattr__(self, 'indices', bytes(self.indices))

    def pixel(self, x: int, y: int) -> int:
        """Palette index at column x, row y."""
        if not (0 <= x < MINITILE_SIDE_LENGTH and 0 <= y < MINITILE_SIDE_LENGTH):
            raise ValueError(f"Pixel position ({x}, {y}) outside 8x8 minitile")
        return self.indices[y * MINITILE_SIDE_LENGTH + x]

    def rows(self) -> List[Tuple[int, ...]]:
        side = MINITILE_SIDE_LENGTH
        return [tuple(self.indices[row * side:(row + 1) * side]) for row in range(side)]

    def as_array(self) -> np.ndarray:
        """Read-only (8, 8) uint8 view of the block."""
        return np.frombuffer(self.indices, dtype=np.uint8).reshape(
            MINITILE_SIDE_LENGTH, MINITILE_SIDE_LENGTH
        )

    def mirrored(self) -> 'PixelBlock':
        """Block flipped left to right."""
        return PixelBlock(np.ascontiguousarray(self.as_array()[:, ::-1]).tobytes())

    def __len__(self) -> int:
        return BLOCK_SIZE
