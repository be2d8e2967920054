"""Common type definitions for the options compiler.

Enumerations mirror the engine's own option enums; values are the names the
engine (or configuration) uses for them.
"""

from __future__ import annotations

from enum import Enum
from os import PathLike

# Core primitive types
Bytes = int
Micros = int
StorePath = str | PathLike[str]


class CompressionType(Enum):
    """Block compression codecs understood by the engine."""

    NO_COMPRESSION = "none"
    SNAPPY_COMPRESSION = "snappy"
    ZLIB_COMPRESSION = "zlib"
    BZLIB2_COMPRESSION = "bzip2"
    LZ4_COMPRESSION = "lz4"
    LZ4HC_COMPRESSION = "lz4hc"


class CompactionStyle(Enum):
    """Compaction families."""

    LEVEL = "level"
    UNIVERSAL = "universal"
    FIFO = "fifo"


class CompactionStopStyle(Enum):
    """How universal compaction decides to stop picking files."""

    SIMILAR_SIZE = "CompactionStopStyleSimilarSize"
    TOTAL_SIZE = "CompactionStopStyleTotalSize"


class WALRecoveryMode(Enum):
    """Write-ahead log recovery behaviour on engine open."""

    TOLERATE_CORRUPTED_TAIL_RECORDS = "TolerateCorruptedTailRecords"
    ABSOLUTE_CONSISTENCY = "AbsoluteConsistency"
    POINT_IN_TIME_RECOVERY = "PointInTimeRecovery"
    SKIP_ANY_CORRUPTED_RECORDS = "SkipAnyCorruptedRecords"


class StoreMode(Enum):
    """Mode a store is being opened in."""

    NORMAL = "normal"
    BULK_LOAD = "bulk"
