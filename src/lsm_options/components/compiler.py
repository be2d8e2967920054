"""Options compiler - main public API.

Turns a store's configuration into the engine options it is opened with.
"""

from __future__ import annotations

import logging

from ..core import defaults
from ..core.options import BlockBasedTableConfig, EngineOptions
from ..core.types import Bytes, StoreMode, StorePath, WALRecoveryMode
from ..interfaces.config import ConfigSource
from ..interfaces.storage import StoreExistenceOracle
from .bulk_load import should_prepare_bulk_load, store_exists
from .compaction import resolve_compaction
from .enums import read_choice, resolve_compression
from .option_table import OptionSpec, apply_options
from .partition import block_cache_size, write_buffer_size

logger = logging.getLogger(__name__)

WAL_ENABLED = "wal.enabled"
COMPRESSION = "compression"
BLOCK_SIZE_BYTES = "block.size.bytes"
MAX_MANIFEST_FILE_SIZE = "max.manifest.file.size"

ENGINE_OPTIONS: tuple[OptionSpec, ...] = (
    OptionSpec("num.write.buffers", "max_write_buffer_number", "int", defaults.NUM_WRITE_BUFFERS),
    OptionSpec("max.log.file.size.bytes", "max_log_file_size", "long", defaults.MAX_LOG_FILE_SIZE_BYTES),
    OptionSpec("keep.log.file.num", "keep_log_file_num", "long", defaults.KEEP_LOG_FILE_NUM),
    OptionSpec(
        "delete.obsolete.files.period.micros",
        "delete_obsolete_files_period_micros",
        "long",
        defaults.DELETE_OBSOLETE_FILES_PERIOD_MICROS,
    ),
    OptionSpec("max.open.files", "max_open_files", "int", defaults.MAX_OPEN_FILES),
    OptionSpec("max.file.opening.threads", "max_file_opening_threads", "int", defaults.MAX_FILE_OPENING_THREADS),
)


def compile_options(
    config: ConfigSource,
    task_count: int,
    default_max_manifest_file_size: Bytes,
    store_dir: StorePath,
    store_mode: StoreMode = StoreMode.NORMAL,
    *,
    exists: StoreExistenceOracle = store_exists,
    log: logging.Logger | None = None,
) -> EngineOptions:
    """Compile a store's configuration into engine options.

    Args:
        config: Store configuration, including container-wide budget keys
        task_count: Tasks sharing the container's memory budgets
        default_max_manifest_file_size: Manifest limit used when not configured
        store_dir: Directory the store is opened from
        store_mode: Requested open mode
        exists: Oracle reporting whether ``store_dir`` already holds a store
        log: Logger for warnings and bulk-load notices; module logger if omitted

    Returns:
        A fresh EngineOptions owned by the caller

    Raises:
        ValueError: If task_count is less than 1
        ConfigError: If a configured value is malformed
    """
    log = log or logger
    options = EngineOptions()

    if config.get_bool(WAL_ENABLED, defaults.WAL_ENABLED):
        # store flush issues an explicit synced WAL flush instead
        options.manual_wal_flush = True
        options.wal_recovery_mode = WALRecoveryMode.ABSOLUTE_CONSISTENCY

    options.write_buffer_size = write_buffer_size(config, task_count)

    raw_codec = read_choice(config, COMPRESSION, defaults.COMPRESSION)
    options.compression_type = resolve_compression(raw_codec, COMPRESSION, log)

    options.table_format_config = BlockBasedTableConfig(
        block_cache_size=block_cache_size(config, task_count),
        block_size=config.get_int(BLOCK_SIZE_BYTES, defaults.BLOCK_SIZE_BYTES),
    )

    options.compaction = resolve_compaction(config, log)

    options.create_if_missing = True
    options.error_if_exists = False
    apply_options(config, options, ENGINE_OPTIONS)
    options.max_manifest_file_size = config.get_long(MAX_MANIFEST_FILE_SIZE, default_max_manifest_file_size)

    if should_prepare_bulk_load(store_mode, store_dir, exists, log):
        log.info(f"Using prepare_for_bulk_load for restore to {store_dir}")
        options.prepare_for_bulk_load()

    return options
