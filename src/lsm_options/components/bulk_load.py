"""Bulk-load preparation decision.

Bulk-load tuning does not work with a store that already has data, so it is
only applied to a fresh restore into an empty directory.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.types import StoreMode, StorePath
from ..interfaces.storage import StoreExistenceOracle

logger = logging.getLogger(__name__)


def store_exists(store_dir: StorePath) -> bool:
    """Return True if ``store_dir`` is a directory with at least one entry."""
    path = Path(store_dir)
    if not path.is_dir():
        return False
    return any(path.iterdir())


def should_prepare_bulk_load(
    store_mode: StoreMode,
    store_dir: StorePath,
    exists: StoreExistenceOracle = store_exists,
    log: logging.Logger | None = None,
) -> bool:
    """Decide whether the engine should be opened with bulk-load tuning.

    Args:
        store_mode: Requested open mode
        store_dir: Directory the store lives in
        exists: Oracle reporting whether a store is already present
        log: Logger for the skip notice; module logger if omitted

    Returns:
        True only for BULK_LOAD mode against a directory with no store
    """
    if store_mode is not StoreMode.BULK_LOAD:
        return False
    present = exists(store_dir)
    if present:
        (log or logger).debug(f"Store already present at {store_dir}, skipping bulk-load preparation")
    return not present
