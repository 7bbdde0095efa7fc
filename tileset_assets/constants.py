from enum import Enum

from .formats.cv5 import Cv5Parser
from .formats.vx4 import Vx4Parser
from .formats.vf4 import Vf4Parser
from .formats.vr4 import Vr4Parser
from .formats.wpe import WpeParser


class TilesetFormat(Enum):
    """The five files that make up a tileset, in resolution order."""
    CV5 = ('cv5', Cv5Parser)  # Megatile references
    VX4 = ('vx4', Vx4Parser)  # Minitile image references
    VF4 = ('vf4', Vf4Parser)  # Minitile flags
    VR4 = ('vr4', Vr4Parser)  # Minitile pixel indices
    WPE = ('wpe', WpeParser)  # Palette

    def __init__(self, extension, parser_class):
        self.extension = extension
        self.parser_class = parser_class

    @property
    def field_name(self) -> str:
        """Name of the Tileset attribute holding this format's table."""
        return self.extension

    @property
    def record_size(self) -> int:
        return self.parser_class.record_size()
