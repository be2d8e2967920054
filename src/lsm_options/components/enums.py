"""Resolution of configured strings into engine enums.

Codec and compaction style lookups are total: an unrecognised string is
logged and replaced by the default, never rejected.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import TypeVar

from ..core import defaults
from ..core.errors import ConfigValueError
from ..core.types import CompactionStopStyle, CompactionStyle, CompressionType
from ..interfaces.config import ConfigSource

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

COMPRESSION_CODECS: Mapping[str, CompressionType] = {
    "snappy": CompressionType.SNAPPY_COMPRESSION,
    "bzip2": CompressionType.BZLIB2_COMPRESSION,
    "zlib": CompressionType.ZLIB_COMPRESSION,
    "lz4": CompressionType.LZ4_COMPRESSION,
    "lz4hc": CompressionType.LZ4HC_COMPRESSION,
    "none": CompressionType.NO_COMPRESSION,
}

COMPACTION_STYLES: Mapping[str, CompactionStyle] = {
    "universal": CompactionStyle.UNIVERSAL,
    "fifo": CompactionStyle.FIFO,
    "level": CompactionStyle.LEVEL,
}


def resolve_choice(
    raw: object,
    choices: Mapping[str, E],
    default: str,
    key: str,
    log: logging.Logger | None = None,
) -> E:
    """Map ``raw`` to one of ``choices``, falling back to ``choices[default]``.

    Args:
        raw: Configured value
        choices: Accepted names and the variant each selects
        default: Name of the fallback variant
        key: Configuration key, for the warning
        log: Logger receiving the warning; module logger if omitted

    Returns:
        The selected variant; the default for anything unrecognised
    """
    selected = choices.get(raw) if isinstance(raw, str) else None
    if selected is not None:
        return selected

    fallback = choices[default]
    (log or logger).warning(f"Unknown {key} {raw}, overwriting to {fallback.name}")
    return fallback


def read_choice(config: ConfigSource, key: str, default: str) -> str:
    """Read a choice key; a present but blank value stays blank so it is warned about."""
    if config.contains(key):
        return config.get_str(key, "")
    return default


def resolve_compression(raw: object, key: str, log: logging.Logger | None = None) -> CompressionType:
    return resolve_choice(raw, COMPRESSION_CODECS, defaults.COMPRESSION, key, log)


def resolve_compaction_style(raw: object, key: str, log: logging.Logger | None = None) -> CompactionStyle:
    return resolve_choice(raw, COMPACTION_STYLES, defaults.COMPACTION_STYLE, key, log)


def parse_stop_style(raw: str, key: str) -> CompactionStopStyle | None:
    """Parse a stop-style name; blank means "leave the engine default".

    Accepts the engine's name (``CompactionStopStyleTotalSize``) or the member
    name (``TOTAL_SIZE``). Anything else raises ``ConfigValueError``.
    """
    name = raw.strip()
    if not name:
        return None
    for style in CompactionStopStyle:
        if name in (style.value, style.name):
            return style
    raise ConfigValueError(key, raw, "one of " + ", ".join(s.value for s in CompactionStopStyle))
