"""Order-preserving parallel map over table blocks."""
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, Optional, TypeVar
import logging

logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')


def parallel_map(func: Callable[[T], R],
                 items: Iterable[T],
                 max_workers: Optional[int] = None) -> List[R]:
    """Map func over items using a thread pool.

    Args:
        func: Function applied to each item
        items: Items to process
        max_workers: Thread count (None lets the executor decide, 1 runs inline)

    Returns:
        Results in the same order as items

    Raises:
        ValueError: If max_workers is less than 1
        Exception: The first exception raised by func, re-raised unchanged
    """
    if max_workers is not None and max_workers < 1:
        raise ValueError(f"max_workers must be at least 1, got {max_workers}")

    items = list(items)
    if max_workers == 1 or len(items) < 2:
        return [func(item) for item in items]

    logger.debug(f"Mapping {len(items)} items with max_workers={max_workers}")
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(func, items))
