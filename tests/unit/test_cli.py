"""Unit tests for the lsm-options command line."""

import json

import pytest

from lsm_options.cli.main import build_parser, main


@pytest.fixture
def toml_config(tmp_path):
    """Write a job-wide TOML config with two stores."""
    path = tmp_path / "job.toml"
    path.write_text(
        """
[container]
"write.buffer.size.bytes" = 67108864

[stores.orders]
compression = "lz4"
"wal.enabled" = true
"compaction.style" = "level"

[stores.sessions]
compression = "zlib"
""",
        encoding="utf-8",
    )
    return path


def test_parser_defaults():
    """Test parser defaults."""
    args = build_parser().parse_args(["cfg.toml"])

    assert args.tasks == 1
    assert args.store is None
    assert args.bulk_load is False
    assert args.default_manifest_size == 1024 * 1024 * 1024


def test_compile_store_from_toml(toml_config, tmp_path, capsys):
    """Test a store's options are printed as JSON."""
    code = main([
        str(toml_config),
        "--store", "orders",
        "--tasks", "4",
        "--store-dir", str(tmp_path / "orders"),
    ])

    assert code == 0
    out = json.loads(capsys.readouterr().out)
    assert out["write_buffer_size"] == 16 * 1024 * 1024
    assert out["compression_type"] == "lz4"
    assert out["manual_wal_flush"] is True
    assert out["wal_recovery_mode"] == "AbsoluteConsistency"
    assert out["compaction"]["style"] == "level"


def test_overrides_only(toml_config, tmp_path, capsys):
    """Test only explicitly set fields are printed."""
    code = main([
        str(toml_config),
        "--store", "sessions",
        "--store-dir", str(tmp_path),
        "--overrides-only",
    ])

    assert code == 0
    out = json.loads(capsys.readouterr().out)
    assert out["compression_type"] == "zlib"
    assert "manual_wal_flush" not in out
    assert "num_levels" not in out["compaction"]


def test_bulk_load_flag(tmp_path, capsys):
    """Test bulk-load mode against an empty directory."""
    path = tmp_path / "store.yaml"
    path.write_text("compression: snappy\n", encoding="utf-8")

    code = main([str(path), "--bulk-load", "--store-dir", str(tmp_path / "fresh")])

    assert code == 0
    out = json.loads(capsys.readouterr().out)
    assert out["prepared_for_bulk_load"] is True
    assert out["compaction"]["num_levels"] == 2


def test_yaml_nested_config(tmp_path, capsys):
    """Test nested YAML keys are flattened."""
    path = tmp_path / "store.yml"
    path.write_text(
        "compaction:\n  style: fifo\nblock:\n  size:\n    bytes: 8192\n",
        encoding="utf-8",
    )

    assert main([str(path), "--store-dir", str(tmp_path)]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["compaction"]["style"] == "fifo"
    assert out["table_format_config"]["block_size"] == 8192


def test_missing_config_file(tmp_path, capsys):
    """Test a missing file exits with status 2."""
    assert main([str(tmp_path / "nope.toml")]) == 2
    assert "Error loading config" in capsys.readouterr().err


def test_invalid_task_count(toml_config, tmp_path, capsys):
    """Test compile errors exit with status 1."""
    assert main([str(toml_config), "--tasks", "0", "--store-dir", str(tmp_path)]) == 1
    assert "Invalid task count" in capsys.readouterr().err
