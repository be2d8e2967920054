"""Compaction policy resolution.

Derives the compaction family and its parameters from configuration.
Every sub-parameter is presence-gated: when its key is absent nothing is
set and the engine's compiled-in default stands.
"""

from __future__ import annotations

import logging

from ..core import defaults
from ..core.options import CompactionSpec, UniversalCompactionOptions
from ..core.types import CompactionStyle
from ..interfaces.config import ConfigSource
from .enums import parse_stop_style, read_choice, resolve_compaction_style
from .option_table import OptionSpec, apply_options

logger = logging.getLogger(__name__)

COMPACTION_STYLE = "compaction.style"
COMPACTION_UNIVERSAL_STOP_STYLE = "compaction.universal.compaction.stop.style"

COMPACTION_OPTIONS: tuple[OptionSpec, ...] = (
    OptionSpec("compaction.num.levels", "num_levels", "int", gated=True),
    OptionSpec(
        "compaction.level0.file.num.compaction.trigger",
        "level0_file_num_compaction_trigger",
        "int",
        gated=True,
    ),
    OptionSpec(
        "compaction.max.background.compactions",
        "max_background_compactions",
        "int",
        default=defaults.MAX_BACKGROUND_COMPACTIONS,
        gated=True,
    ),
    OptionSpec("compaction.target.file.size.base", "target_file_size_base", "long", gated=True),
    OptionSpec("compaction.target.file.size.multiplier", "target_file_size_multiplier", "int", gated=True),
    OptionSpec(
        "max.background.jobs",
        "max_background_jobs",
        "int",
        default=defaults.MAX_BACKGROUND_JOBS,
        gated=True,
    ),
)

UNIVERSAL_OPTIONS: tuple[OptionSpec, ...] = (
    OptionSpec(
        "compaction.universal.max.size.amplification.percent",
        "max_size_amplification_percent",
        "int",
        gated=True,
    ),
    OptionSpec("compaction.universal.size.ratio", "size_ratio", "int", gated=True),
    OptionSpec("compaction.universal.min.merge.width", "min_merge_width", "int", gated=True),
    OptionSpec("compaction.universal.max.merge.width", "max_merge_width", "int", gated=True),
)


def resolve_compaction(config: ConfigSource, log: logging.Logger | None = None) -> CompactionSpec:
    """Build the compaction spec for a store.

    Args:
        config: Store configuration
        log: Logger for fallback warnings; module logger if omitted

    Returns:
        CompactionSpec with the family set and only configured parameters filled

    Raises:
        ConfigValueError: If a present key is malformed or the stop style is unknown
    """
    spec = CompactionSpec()
    apply_options(config, spec, COMPACTION_OPTIONS)

    raw_style = read_choice(config, COMPACTION_STYLE, defaults.COMPACTION_STYLE)
    spec.style = resolve_compaction_style(raw_style, COMPACTION_STYLE, log)

    if spec.style is CompactionStyle.UNIVERSAL:
        spec.universal = _resolve_universal(config)

    return spec


def _resolve_universal(config: ConfigSource) -> UniversalCompactionOptions:
    universal = UniversalCompactionOptions()
    apply_options(config, universal, UNIVERSAL_OPTIONS)

    if config.contains(COMPACTION_UNIVERSAL_STOP_STYLE):
        raw = config.get_str(COMPACTION_UNIVERSAL_STOP_STYLE, "")
        stop_style = parse_stop_style(raw, COMPACTION_UNIVERSAL_STOP_STYLE)
        if stop_style is not None:
            universal.stop_style = stop_style

    return universal
