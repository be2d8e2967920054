"""LSM Options - compile store configuration into LSM engine options."""

from .components.bulk_load import should_prepare_bulk_load, store_exists
from .components.compaction import resolve_compaction
from .components.compiler import compile_options
from .components.partition import block_cache_size, per_task_share, write_buffer_size
from .core.config import MapConfig, store_config
from .core.errors import (
    ConfigError,
    ConfigValueError,
    MissingConfigError,
    OptionsError,
)
from .core.options import (
    BlockBasedTableConfig,
    CompactionSpec,
    EngineOptions,
    UniversalCompactionOptions,
)
from .core.types import (
    CompactionStopStyle,
    CompactionStyle,
    CompressionType,
    StoreMode,
    WALRecoveryMode,
)

__all__ = [
    "compile_options",
    "resolve_compaction",
    "per_task_share",
    "write_buffer_size",
    "block_cache_size",
    "should_prepare_bulk_load",
    "store_exists",
    "MapConfig",
    "store_config",
    "OptionsError",
    "ConfigError",
    "ConfigValueError",
    "MissingConfigError",
    "EngineOptions",
    "BlockBasedTableConfig",
    "CompactionSpec",
    "UniversalCompactionOptions",
    "CompressionType",
    "CompactionStyle",
    "CompactionStopStyle",
    "WALRecoveryMode",
    "StoreMode",
]
