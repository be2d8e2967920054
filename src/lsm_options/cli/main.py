# Minimal CLI using argparse that loads a TOML/YAML store config and prints compiled engine options.
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from lsm_options.components.compiler import compile_options
from lsm_options.core import defaults
from lsm_options.core.config import store_config
from lsm_options.core.errors import OptionsError
from lsm_options.core.loader import load_config_file
from lsm_options.core.types import StoreMode


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="lsm-options", description="Compile store configuration into LSM engine options"
    )
    p.add_argument("config", type=Path, help="Config file (.toml, .yaml or .yml)")
    p.add_argument(
        "--tasks", type=int, default=1, help="Tasks sharing the container budgets (default: 1)"
    )
    p.add_argument(
        "--store",
        type=str,
        help="Store name; reads keys under stores.<name>. plus container.* keys",
    )
    p.add_argument(
        "--store-dir", type=Path, default=Path("."), help="Store directory (default: .)"
    )
    p.add_argument(
        "--bulk-load", action="store_true", help="Request bulk-load mode"
    )
    p.add_argument(
        "--default-manifest-size",
        type=int,
        default=defaults.ENGINE_MAX_MANIFEST_FILE_SIZE,
        help="Manifest size limit when not configured (default: 1 GiB)",
    )
    p.add_argument(
        "--overrides-only",
        action="store_true",
        help="Print only explicitly set options",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(message)s",
        stream=sys.stderr,
    )

    try:
        config = load_config_file(args.config)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 2

    if args.store:
        config = store_config(config, args.store)

    mode = StoreMode.BULK_LOAD if args.bulk_load else StoreMode.NORMAL
    try:
        options = compile_options(
            config, args.tasks, args.default_manifest_size, args.store_dir, mode
        )
    except (OptionsError, ValueError) as e:
        print(f"Error compiling options: {e}", file=sys.stderr)
        return 1

    rendered = options.overrides() if args.overrides_only else options.to_dict()
    print(json.dumps(rendered, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
