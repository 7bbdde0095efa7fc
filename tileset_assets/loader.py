"""Load tileset files from disk."""
from pathlib import Path
from typing import Iterable, Optional, Union
import logging

from .constants import TilesetFormat
from .formats.base import DecodeError
from .resolver import Tileset

logger = logging.getLogger(__name__)


def tileset_path(directory: Union[str, Path], name: str, fmt: TilesetFormat) -> Path:
    return Path(directory) / f"{name}.{fmt.extension}"


def load_table(path: Union[str, Path], fmt: TilesetFormat):
    """Read and decode a single tileset file.

    Raises:
        FileNotFoundError: If the file does not exist
        DecodeError: If the file is malformed
    """
    path = Path(path)
    with open(path, 'rb') as f:
        data = f.read()

    logger.info(f"Decoding {path} ({len(data)} bytes)")
    try:
        return fmt.parser_class(data).parse()
    except DecodeError as e:
        logger.error(f"Failed to decode {path}: {e}")
        raise


def load_tileset(directory: Union[str, Path],
                 name: str,
                 formats: Optional[Iterable[TilesetFormat]] = None) -> Tileset:
    """Load the files of a tileset, e.g. badlands.cv5, badlands.vx4, ...

    Args:
        directory: Directory holding the tileset files
        name: Tileset name (file stem)
        formats: Formats to load, all five by default

    Returns:
        Tileset with the requested tables
    """
    if formats is None:
        formats = list(TilesetFormat)

    tables = {}
    for fmt in formats:
        tables[fmt.field_name] = load_table(tileset_path(directory, name, fmt), fmt)

    tileset = Tileset(**tables)
    logger.debug(f"Loaded tileset {name}: {tileset.sizes()}")
    return tileset
