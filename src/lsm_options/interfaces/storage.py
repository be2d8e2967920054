"""Protocol definition for the on-disk store existence check."""

from __future__ import annotations

from typing import Protocol

from ..core.types import StorePath


class StoreExistenceOracle(Protocol):
    """Reports whether a directory already holds a store."""

    def __call__(self, store_dir: StorePath) -> bool:
        """Return True if ``store_dir`` contains an existing store.

        Invariants:
            - Filesystem errors propagate to the caller unmodified
        """
        ...
