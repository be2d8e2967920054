"""Engine option records produced by the compiler.

Every field the engine has a built-in default for starts as ``None``,
meaning "not overridden". Only fields the compiler sets explicitly carry a
value, so the engine's compiled-in defaults stand wherever configuration is
silent.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, is_dataclass
from enum import Enum
from typing import Any

from . import defaults
from .types import (
    Bytes,
    CompactionStopStyle,
    CompactionStyle,
    CompressionType,
    Micros,
    WALRecoveryMode,
)


@dataclass
class BlockBasedTableConfig:
    """Block-based table format settings.

    Attributes:
        block_cache_size: Per-task block cache capacity
        block_size: Uncompressed size of a data block
    """

    block_cache_size: Bytes | None = None
    block_size: Bytes | None = None


@dataclass
class UniversalCompactionOptions:
    """Sub-parameters of universal compaction."""

    max_size_amplification_percent: int | None = None
    size_ratio: int | None = None
    min_merge_width: int | None = None
    max_merge_width: int | None = None
    stop_style: CompactionStopStyle | None = None


@dataclass
class CompactionSpec:
    """Compaction family and its parameters.

    Attributes:
        style: Chosen compaction family
        num_levels: Number of LSM levels
        level0_file_num_compaction_trigger: Level-0 file count that starts a compaction
        level0_slowdown_writes_trigger: Level-0 file count that throttles writes
        level0_stop_writes_trigger: Level-0 file count that stops writes
        max_background_compactions: Concurrent background compactions
        max_background_jobs: Concurrent background flushes and compactions
        target_file_size_base: Target file size at level 1
        target_file_size_multiplier: Growth factor per level
        max_compaction_bytes: Upper bound on bytes in one compaction
        soft_pending_compaction_bytes_limit: Pending bytes before writes slow down
        hard_pending_compaction_bytes_limit: Pending bytes before writes stop
        disable_auto_compactions: Whether background compactions are off
        universal: Universal sub-parameters; set only for the universal style
    """

    style: CompactionStyle | None = None
    num_levels: int | None = None
    level0_file_num_compaction_trigger: int | None = None
    level0_slowdown_writes_trigger: int | None = None
    level0_stop_writes_trigger: int | None = None
    max_background_compactions: int | None = None
    max_background_jobs: int | None = None
    target_file_size_base: Bytes | None = None
    target_file_size_multiplier: int | None = None
    max_compaction_bytes: Bytes | None = None
    soft_pending_compaction_bytes_limit: Bytes | None = None
    hard_pending_compaction_bytes_limit: Bytes | None = None
    disable_auto_compactions: bool | None = None
    universal: UniversalCompactionOptions | None = None


@dataclass
class EngineOptions:
    """Complete option set handed to the engine's open routine.

    Constructed fresh per store; ownership passes to the caller.
    """

    # Durability
    manual_wal_flush: bool | None = None
    wal_recovery_mode: WALRecoveryMode | None = None

    # Memory and format
    write_buffer_size: Bytes | None = None
    max_write_buffer_number: int | None = None
    min_write_buffer_number_to_merge: int | None = None
    compression_type: CompressionType | None = None
    table_format_config: BlockBasedTableConfig | None = None

    compaction: CompactionSpec = field(default_factory=CompactionSpec)
    max_background_flushes: int | None = None

    # Creation semantics
    create_if_missing: bool | None = None
    error_if_exists: bool | None = None

    # Log and file bookkeeping
    max_log_file_size: Bytes | None = None
    keep_log_file_num: int | None = None
    delete_obsolete_files_period_micros: Micros | None = None
    max_open_files: int | None = None
    max_file_opening_threads: int | None = None
    max_manifest_file_size: Bytes | None = None

    prepared_for_bulk_load: bool = False

    def prepare_for_bulk_load(self) -> EngineOptions:
        """Reconfigure for maximum ingest throughput into an empty store.

        Stalls and automatic compactions are switched off so every flushed
        file stays in level 0 until a manual compaction after the load.
        """
        c = self.compaction
        c.level0_file_num_compaction_trigger = defaults.BULK_LOAD_LEVEL0_TRIGGER
        c.level0_slowdown_writes_trigger = defaults.BULK_LOAD_LEVEL0_TRIGGER
        c.level0_stop_writes_trigger = defaults.BULK_LOAD_LEVEL0_TRIGGER
        c.soft_pending_compaction_bytes_limit = 0
        c.hard_pending_compaction_bytes_limit = 0
        c.disable_auto_compactions = True
        c.max_compaction_bytes = defaults.BULK_LOAD_MAX_COMPACTION_BYTES
        c.num_levels = defaults.BULK_LOAD_NUM_LEVELS
        c.max_background_compactions = defaults.BULK_LOAD_MAX_BACKGROUND_COMPACTIONS
        c.target_file_size_base = defaults.BULK_LOAD_TARGET_FILE_SIZE_BASE

        self.max_write_buffer_number = defaults.BULK_LOAD_MAX_WRITE_BUFFER_NUMBER
        self.min_write_buffer_number_to_merge = defaults.BULK_LOAD_MIN_WRITE_BUFFER_NUMBER_TO_MERGE
        self.max_background_flushes = defaults.BULK_LOAD_MAX_BACKGROUND_FLUSHES
        self.prepared_for_bulk_load = True
        return self

    def to_dict(self) -> dict[str, Any]:
        """Render every field, unset ones as ``None``; enums by value."""
        return _render(self, drop_unset=False)

    def overrides(self) -> dict[str, Any]:
        """Render only the fields that were explicitly set."""
        return _render(self, drop_unset=True)


def _render(obj: Any, drop_unset: bool) -> Any:
    if isinstance(obj, Enum):
        return obj.value
    if not is_dataclass(obj):
        return obj

    out: dict[str, Any] = {}
    for f in fields(obj):
        value = _render(getattr(obj, f.name), drop_unset)
        if drop_unset and (value is None or value == {}):
            continue
        out[f.name] = value
    return out
