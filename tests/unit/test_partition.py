"""Unit tests for per-task resource partitioning."""

import pytest

from lsm_options.components.partition import (
    block_cache_size,
    per_task_share,
    write_buffer_size,
)
from lsm_options.core import defaults
from lsm_options.core.config import MapConfig

MiB = 1024 * 1024


@pytest.mark.parametrize("task_count", [1, 2, 7, 100])
def test_per_task_share_is_integer_division(task_count):
    """Test share equals floor division of the budget."""
    assert per_task_share(100 * MiB, task_count) == 100 * MiB // task_count


def test_per_task_share_drops_remainder():
    """Test the remainder is not redistributed."""
    assert per_task_share(10, 3) == 3
    assert per_task_share(0, 4) == 0


@pytest.mark.parametrize("task_count", [0, -1])
def test_per_task_share_rejects_non_positive_tasks(task_count):
    """Test non-positive task counts fail fast."""
    with pytest.raises(ValueError):
        per_task_share(100 * MiB, task_count)


def test_default_budgets():
    """Test container budgets fall back to defaults."""
    config = MapConfig()

    assert write_buffer_size(config, 4) == defaults.CONTAINER_WRITE_BUFFER_SIZE_BYTES // 4
    assert block_cache_size(config, 4) == defaults.CONTAINER_CACHE_SIZE_BYTES // 4
    assert block_cache_size(config, 1) == 100 * MiB


def test_configured_budgets():
    """Test configured container budgets are divided across tasks."""
    config = MapConfig({
        "container.write.buffer.size.bytes": 64 * MiB,
        "container.cache.size.bytes": str(1024 * MiB),
    })

    assert write_buffer_size(config, 4) == 16 * MiB
    assert block_cache_size(config, 8) == 128 * MiB


def test_per_task_share_rejects_negative_budget():
    """Test a negative budget fails fast instead of rounding."""
    with pytest.raises(ValueError):
        per_task_share(-10, 3)


def test_negative_configured_budget_rejected():
    """Test a negative container budget is rejected."""
    with pytest.raises(ValueError):
        block_cache_size(MapConfig({"container.cache.size.bytes": -1}), 2)
