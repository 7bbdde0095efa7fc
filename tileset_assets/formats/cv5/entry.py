from dataclasses import dataclass
from typing import Dict, Any, Tuple


@dataclass(frozen=True)
class Cv5Group:
    """Single CV5 group (one megatile).

    Each group is 52 bytes: a 20 byte header followed by 16 references,
    one per minitile, into the VX4 and VF4 tables.
    """
    header: bytes                  # Group flags, kept unparsed
    references: Tuple[int, ...]    # 16 VX4/VF4 block indices

    def reference(self, subtile_index: int) -> int:
        return self.references[subtile_index]

    def to_dict(self) -> Dict[str, Any]:
        """Convert group to dictionary format."""
        return {
            'header': self.header.hex(),
            'references': list(self.references)
        }
