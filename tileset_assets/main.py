# tileset_assets/main.py
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .formats.base import TilesetError
from .loader import load_tileset
from .parallel import parallel_map
from .resolver import MegaTile, Tileset
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


def describe_megatile(tileset: Tileset, megatile: MegaTile, pixel_index: int = 0) -> Dict[str, Any]:
    """Resolve everything the tileset knows about one megatile.

    Lookup failures are reported in the result instead of raised, so one
    bad coordinate does not hide the others.
    """
    result: Dict[str, Any] = {
        'group_index': megatile.group_index,
        'subtile_index': megatile.subtile_index,
        'raw': megatile.to_raw(),
        'pixel_index': pixel_index
    }
    try:
        result['reference'] = tileset.reference(megatile)
        result['image_reference'] = tileset.image_reference(megatile).to_dict()
        result['color'] = list(tileset.color(megatile, pixel_index))
        result['srgb'] = list(tileset.srgb_color(megatile, pixel_index))
        result['flags'] = tileset.terrain_flags(megatile).to_dict()
    except (TilesetError, ValueError) as e:
        logger.warning(f"Failed to resolve {megatile}: {e}")
        result['error'] = str(e)
    return result


def build_report(tileset: Tileset,
                 name: str,
                 megatiles: List[MegaTile],
                 pixel_index: int = 0,
                 max_workers: Optional[int] = None) -> Dict[str, Any]:
    """Build the JSON report for a tileset and the requested megatiles."""
    return {
        'tileset': name,
        'tables': tileset.sizes(),
        'megatiles': parallel_map(
            lambda megatile: describe_megatile(tileset, megatile, pixel_index),
            megatiles,
            max_workers=max_workers
        )
    }


def parse_megatiles(args: argparse.Namespace) -> List[MegaTile]:
    megatiles = [MegaTile(group, subtile) for group, subtile in (args.megatile or [])]
    megatiles.extend(MegaTile.from_raw(value) for value in (args.raw or []))
    return megatiles


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description='Decode tileset files and resolve megatile colors and flags'
    )
    parser.add_argument('directory',
                        help='Directory containing tileset files')
    parser.add_argument('name',
                        help='Tileset name, e.g. badlands')
    parser.add_argument('--megatile',
                        nargs=2,
                        type=int,
                        action='append',
                        metavar=('GROUP', 'SUBTILE'),
                        help='Megatile to resolve (repeatable)')
    parser.add_argument('--raw',
                        type=lambda value: int(value, 0),
                        action='append',
                        help='Packed map tile value to resolve (repeatable)')
    parser.add_argument('--pixel',
                        type=int,
                        default=0,
                        help='Pixel index inside the minitile (0-63)')
    parser.add_argument('--workers',
                        type=int,
                        help='Worker threads for batch resolution')
    parser.add_argument('--output',
                        help='Write the JSON report to this file instead of stdout')
    parser.add_argument('--log-dir',
                        default='logs',
                        help='Log directory')
    parser.add_argument('--verbose', '-v',
                        action='store_true',
                        help='Enable verbose logging')

    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    setup_logging(args.log_dir, log_level)

    directory = Path(args.directory)
    if not directory.is_dir():
        logger.error(f"Directory not found: {directory}")
        return 1

    if args.workers is not None and args.workers < 1:
        logger.error(f"--workers must be at least 1, got {args.workers}")
        return 1

    try:
        megatiles = parse_megatiles(args)
    except ValueError as e:
        logger.error(f"Invalid megatile: {e}")
        return 1

    try:
        tileset = load_tileset(directory, args.name)
    except (OSError, TilesetError) as e:
        logger.error(f"Failed to load tileset {args.name}: {e}")
        if logger.isEnabledFor(logging.DEBUG):
            logger.exception("Detailed error:")
        return 1

    report = build_report(tileset, args.name, megatiles, args.pixel, args.workers)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(report, f, indent=2)
        logger.info(f"Report written to {output_path}")
    else:
        json.dump(report, sys.stdout, indent=2)
        sys.stdout.write('\n')

    return 0


if __name__ == "__main__":
    sys.exit(main())
