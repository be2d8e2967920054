"""Per-task shares of container-wide memory budgets.

Write buffer and block cache budgets are configured per container and
split evenly across the tasks it hosts.
"""

from __future__ import annotations

from ..core import defaults
from ..core.types import Bytes
from ..interfaces.config import ConfigSource

CONTAINER_WRITE_BUFFER_SIZE_BYTES = "container.write.buffer.size.bytes"
CONTAINER_CACHE_SIZE_BYTES = "container.cache.size.bytes"


def per_task_share(total_bytes: Bytes, task_count: int) -> Bytes:
    """Return ``total_bytes // task_count``.

    No rounding up and no redistribution of the remainder.

    Raises:
        ValueError: If task_count is less than 1 or total_bytes is negative
    """
    if task_count < 1:
        raise ValueError(f"Invalid task count: {task_count}")  # noqa: TRY003
    if total_bytes < 0:
        raise ValueError(f"Invalid budget: {total_bytes} bytes")  # noqa: TRY003
    return total_bytes // task_count


def write_buffer_size(config: ConfigSource, task_count: int) -> Bytes:
    """Per-task write buffer size from the container budget."""
    total = config.get_long(CONTAINER_WRITE_BUFFER_SIZE_BYTES, defaults.CONTAINER_WRITE_BUFFER_SIZE_BYTES)
    return per_task_share(total, task_count)


def block_cache_size(config: ConfigSource, task_count: int) -> Bytes:
    """Per-task block cache size from the container budget."""
    total = config.get_long(CONTAINER_CACHE_SIZE_BYTES, defaults.CONTAINER_CACHE_SIZE_BYTES)
    return per_task_share(total, task_count)
