"""Base table decoder and shared immutable table type."""
from typing import Any, Callable, Generic, Iterator, List, Optional, Sequence, TypeVar
import logging

from construct import ConstructError, Construct

from ..parallel import parallel_map

logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')


class TilesetError(Exception):
    """Base class for all tileset errors."""
    pass


class DecodeError(TilesetError):
    """Raised when a tileset buffer is structurally malformed.

    Attributes:
        format_name: Name of the format being decoded (e.g. 'CV5')
        offset: Byte offset at which decoding failed
        expected: Description of the record expected at that offset
    """

    def __init__(self, format_name: str, offset: int, expected: str, detail: str = ''):
        self.format_name = format_name
        self.offset = offset
        self.expected = expected
        self.detail = detail
        message = f"{format_name}: expected {expected} at offset {offset}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class TruncatedInputError(DecodeError):
    """Buffer ends in the middle of a record."""
    pass


class TrailingDataError(DecodeError):
    """Bytes remain after the last complete record."""
    pass


class PartialRecordError(TruncatedInputError, TrailingDataError):
    """A tail shorter than one record.

    For fixed-width formats the buffer then both ends mid-record and holds
    bytes past the last complete record, so this is either kind of error.
    """
    pass


class OutOfRangeError(TilesetError, IndexError):
    """Raised when a reference points past the end of the table it indexes."""

    def __init__(self, table: str, index: int, length: int):
        self.table = table
        self.index = index
        self.length = length
        super().__init__(f"{table} index {index} out of range (table length {length})")


class BlockTable(Generic[T]):
    """Immutable ordered sequence of decoded blocks.

    Built once by a decoder and then only read. Lookups go through get(),
    which raises OutOfRangeError instead of wrapping negative indices or
    silently clamping.
    """

    __slots__ = ('_name', '_blocks')

    def __init__(self, name: str, blocks: Sequence[T]):
        object.__setattr__(self, '_name', name)
        object.__setattr__(self, '_blocks', tuple(blocks))

    def __setattr__(self, key, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @property
    def name(self) -> str:
        return self._name

    def get(self, index: int) -> T:
        """Return block at index.

        Raises:
            OutOfRangeError: If index is negative or past the end of the table
        """
        if not 0 <= index < len(self._blocks):
            raise OutOfRangeError(self._name, index, len(self._blocks))
        return self._blocks[index]

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[T]:
        return iter(self._blocks)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, BlockTable):
            return NotImplemented
        return self._name == other._name and self._blocks == other._blocks

    def __hash__(self) -> int:
        return hash((self._name, self._blocks))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._name!r}, {len(self._blocks)} blocks)"

    def par_map(self, func: Callable[[T], R], max_workers: Optional[int] = None) -> List[R]:
        """Apply func to every top-level block, possibly in parallel.

        Results are returned in table order.
        """
        return parallel_map(func, self._blocks, max_workers=max_workers)


class BaseTableParser:
    """Base class for fixed-record tileset decoders.

    Subclasses set NAME and RECORD (a fixed-size construct Struct) and
    implement _build_record() to turn one parsed record into a table entry.
    """

    NAME = ''
    RECORD: Construct = None
    TABLE_CLASS = BlockTable

    def __init__(self, data: bytes, expected_count: Optional[int] = None):
        """Initialize table parser.

        Args:
            data: Raw file contents
            expected_count: Optional exact number of records the buffer must hold
        """
        self.data = bytes(data)
        self.expected_count = expected_count

    @classmethod
    def record_size(cls) -> int:
        return cls.RECORD.sizeof()

    @classmethod
    def describe_record(cls) -> str:
        return f"{cls.NAME} record of {cls.record_size()} bytes"

    def _validate_size(self) -> int:
        """Check the buffer holds whole records only.

        Returns:
            Number of records in the buffer

        Raises:
            TruncatedInputError: Buffer ends before the last record is complete
            TrailingDataError: Bytes remain after the last complete record
        """
        size = self.record_size()
        actual_size = len(self.data)

        if self.expected_count is not None:
            expected_size = self.expected_count * size
            if actual_size < expected_size:
                raise TruncatedInputError(
                    self.NAME, actual_size, self.describe_record(),
                    f"buffer holds {actual_size} of {expected_size} bytes"
                )
            if actual_size > expected_size:
                raise TrailingDataError(
                    self.NAME, expected_size, 'end of data',
                    f"{actual_size - expected_size} trailing bytes"
                )

        count, remainder = divmod(actual_size, size)
        if remainder:
            raise PartialRecordError(
                self.NAME, count * size, self.describe_record(),
                f"only {remainder} bytes remain"
            )
        return count

    def _build_record(self, parsed: Any) -> Any:
        raise NotImplementedError("Subclasses must implement _build_record()")

    def _build_table(self, records: List[Any]) -> BlockTable:
        return self.TABLE_CLASS(self.NAME, records)

    def parse(self) -> BlockTable:
        """Decode the whole buffer.

        Returns:
            Immutable table with one entry per record

        Raises:
            DecodeError: If the buffer is not made of whole records
        """
        count = self._validate_size()
        size = self.record_size()

        records = []
        for i in range(count):
            offset = i * size
            try:
                parsed = self.RECORD.parse(self.data[offset:offset + size])
            except ConstructError as e:
                raise TruncatedInputError(self.NAME, offset, self.describe_record(), str(e)) from e
            records.append(self._build_record(parsed))

        logger.debug(f"Decoded {count} {self.NAME} records from {len(self.data)} bytes")
        return self._build_table(records)
