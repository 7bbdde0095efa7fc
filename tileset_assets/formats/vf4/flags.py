# tileset_assets/formats/vf4/flags.py
from enum import IntFlag


class Vf4Flags(IntFlag):
    """Minitile terrain flags used in VF4 blocks.

    see: http://www.staredit.net/wiki/index.php?title=Terrain_Format#VF4
    """
    WALKABLE = 0x0001     # Minitile can be walked on
    MID = 0x0002          # Mid ground elevation
    HIGH = 0x0004         # High ground elevation
    LOW = 0x0004 | 0x0002  # Low ground: both elevation bits set
    BLOCKS_VIEW = 0x0008  # Obstructs line of sight
    RAMP = 0x0010         # Ramp between elevations
