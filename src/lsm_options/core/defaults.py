"""Defaults applied when a store's configuration is silent.

Shared by the compiler and its tests. Sizes are bytes, periods microseconds.
"""

from __future__ import annotations

KiB = 1024
MiB = 1024 * KiB

# Container-wide budgets, divided across tasks
CONTAINER_WRITE_BUFFER_SIZE_BYTES = 32 * MiB
CONTAINER_CACHE_SIZE_BYTES = 100 * MiB

WAL_ENABLED = False
COMPRESSION = "snappy"
BLOCK_SIZE_BYTES = 4 * KiB
NUM_WRITE_BUFFERS = 3

MAX_LOG_FILE_SIZE_BYTES = 64 * MiB
KEEP_LOG_FILE_NUM = 2
DELETE_OBSOLETE_FILES_PERIOD_MICROS = 21_600_000_000  # 6 hours
MAX_OPEN_FILES = -1  # unlimited
MAX_FILE_OPENING_THREADS = 16

# The engine's own manifest limit; callers usually pass their own
ENGINE_MAX_MANIFEST_FILE_SIZE = 1024 * MiB

COMPACTION_STYLE = "universal"

# Engine defaults are 1 and 2; compaction parallelism pays off for stores
MAX_BACKGROUND_COMPACTIONS = 4
MAX_BACKGROUND_JOBS = 4

# Bulk-ingest profile
BULK_LOAD_LEVEL0_TRIGGER = 1 << 30
BULK_LOAD_MAX_COMPACTION_BYTES = 1 << 60
BULK_LOAD_NUM_LEVELS = 2
BULK_LOAD_MAX_WRITE_BUFFER_NUMBER = 6
BULK_LOAD_MIN_WRITE_BUFFER_NUMBER_TO_MERGE = 1
BULK_LOAD_MAX_BACKGROUND_FLUSHES = 4
BULK_LOAD_MAX_BACKGROUND_COMPACTIONS = 2
BULK_LOAD_TARGET_FILE_SIZE_BASE = 256 * MiB
