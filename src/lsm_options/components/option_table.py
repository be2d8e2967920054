"""Declarative configuration-key to option-field tables.

Each row names a configuration key, the attribute it lands on, how to read
it, and whether it is always defaulted or only applied when present.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Literal

from ..interfaces.config import ConfigSource

logger = logging.getLogger(__name__)

Kind = Literal["str", "bool", "int", "long"]


@dataclass(frozen=True)
class OptionSpec:
    """One row of an option table.

    Attributes:
        key: Configuration key
        attr: Attribute set on the target record
        kind: Typed getter used to read the key
        default: Value used when the key is absent (or present but unspecified).
            ``None`` means the key is required once it is read.
        gated: If True the row is skipped entirely when the key is absent,
            leaving the engine's built-in default in place
    """

    key: str
    attr: str
    kind: Kind
    default: Any = None
    gated: bool = False

    def read(self, config: ConfigSource) -> Any:
        getter = getattr(config, f"get_{self.kind}")
        if self.default is None:
            return getter(self.key)
        return getter(self.key, self.default)


def apply_options(config: ConfigSource, target: object, table: Iterable[OptionSpec]) -> object:
    """Resolve every row of ``table`` against ``config`` onto ``target``."""
    for spec in table:
        if spec.gated and not config.contains(spec.key):
            continue
        value = spec.read(config)
        setattr(target, spec.attr, value)
        logger.debug(f"{spec.key} -> {type(target).__name__}.{spec.attr} = {value!r}")
    return target
