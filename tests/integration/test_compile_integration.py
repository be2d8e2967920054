"""End-to-end tests for compiling store options.

Tests cover:
1. Durability settings
2. Resource partitioning
3. Codec and compaction fallbacks
4. Presence-gated compaction parameters
5. Bulk-load preparation against real directories
"""

import logging

import pytest

from lsm_options import (
    CompactionStyle,
    CompressionType,
    MapConfig,
    StoreMode,
    WALRecoveryMode,
    compile_options,
    store_config,
)
from lsm_options.core import defaults

MiB = 1024 * 1024


@pytest.fixture
def store_dir(tmp_path):
    """Directory for a store that does not exist yet."""
    return tmp_path / "store"


def test_wal_lz4_four_tasks(store_dir):
    """Test WAL, codec and write buffer for a four-task container."""
    config = MapConfig({
        "wal.enabled": True,
        "compression": "lz4",
        "container.write.buffer.size.bytes": 64 * MiB,
    })

    options = compile_options(config, 4, defaults.ENGINE_MAX_MANIFEST_FILE_SIZE, store_dir)

    assert options.write_buffer_size == 16 * MiB
    assert options.compression_type is CompressionType.LZ4_COMPRESSION
    assert options.manual_wal_flush is True
    assert options.wal_recovery_mode is WALRecoveryMode.ABSOLUTE_CONSISTENCY


def test_unknown_compaction_style_does_not_crash(store_dir, caplog):
    """Test an unknown style compiles to universal with a warning."""
    with caplog.at_level(logging.WARNING):
        options = compile_options(
            MapConfig({"compaction.style": "zzz"}), 1, 1024, store_dir
        )

    assert options.compaction.style is CompactionStyle.UNIVERSAL
    assert any("compaction.style" in r.getMessage() for r in caplog.records)


def test_silent_config_leaves_engine_defaults(store_dir):
    """Test compaction sub-parameters carry no override when unconfigured."""
    options = compile_options(MapConfig(), 2, 1024, store_dir)

    overrides = options.overrides()
    assert overrides["compaction"] == {"style": "universal"}
    for name in (
        "num_levels",
        "level0_file_num_compaction_trigger",
        "max_background_compactions",
        "target_file_size_base",
        "target_file_size_multiplier",
        "max_background_jobs",
    ):
        assert getattr(options.compaction, name) is None


def test_bulk_load_restore_then_reopen(store_dir):
    """Test bulk load applies to a fresh restore but not once data exists."""
    config = MapConfig()

    fresh = compile_options(config, 1, 1024, store_dir, StoreMode.BULK_LOAD)
    assert fresh.prepared_for_bulk_load is True

    store_dir.mkdir()
    (store_dir / "CURRENT").write_text("MANIFEST-000001\n")

    reopened = compile_options(config, 1, 1024, store_dir, StoreMode.BULK_LOAD)
    assert reopened.prepared_for_bulk_load is False
    assert reopened.create_if_missing is True
    assert reopened.error_if_exists is False


def test_job_config_per_store(store_dir):
    """Test two stores in one job compile independently."""
    job = MapConfig({
        "container.cache.size.bytes": 200 * MiB,
        "stores.orders.compression": "zlib",
        "stores.orders.compaction.style": "level",
        "stores.clicks.compaction.universal.size.ratio": 3,
    })

    orders = compile_options(store_config(job, "orders"), 4, 1024, store_dir)
    clicks = compile_options(store_config(job, "clicks"), 4, 1024, store_dir)

    assert orders.compression_type is CompressionType.ZLIB_COMPRESSION
    assert orders.compaction.style is CompactionStyle.LEVEL
    assert orders.compaction.universal is None
    assert clicks.compression_type is CompressionType.SNAPPY_COMPRESSION
    assert clicks.compaction.universal.size_ratio == 3
    assert orders.table_format_config.block_cache_size == 50 * MiB
    assert clicks.table_format_config.block_cache_size == 50 * MiB
