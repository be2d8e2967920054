"""Configuration source for the options compiler.

A read-only mapping of dotted string keys to values, with typed lookups
that fall back to a default when a key is absent.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from .errors import ConfigValueError, MissingConfigError

_NO_DEFAULT: Any = object()

INT_MIN, INT_MAX = -(1 << 31), (1 << 31) - 1
LONG_MIN, LONG_MAX = -(1 << 63), (1 << 63) - 1


class MapConfig(Mapping[str, Any]):
    """Immutable, mapping-backed configuration.

    Values may be native (``int``, ``bool``, ``str``) or strings as read from
    a properties-style source; typed getters parse strings on demand.

    Args:
        values: Key/value pairs; copied on construction

    Invariants:
        - Never mutated after construction
        - A key mapped to ``None`` or a blank string exists (``contains`` is
          true) but is treated as unspecified by typed getters, which then
          return the default
    """

    def __init__(self, values: Mapping[str, Any] | None = None):
        self._values: dict[str, Any] = dict(values or {})

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"MapConfig({self._values!r})"

    def contains(self, key: str) -> bool:
        """Return True if the key is present, regardless of its value."""
        return key in self._values

    def _lookup(self, key: str, default: Any) -> Any:
        value = self._values.get(key)
        if value is None or (isinstance(value, str) and not value.strip()):
            if default is _NO_DEFAULT:
                raise MissingConfigError(key)
            return default
        return value

    def get_str(self, key: str, default: Any = _NO_DEFAULT) -> str:
        value = self._lookup(key, default)
        return value if isinstance(value, str) else str(value)

    def get_bool(self, key: str, default: Any = _NO_DEFAULT) -> bool:
        value = self._lookup(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered == "true":
                return True
            if lowered == "false":
                return False
        raise ConfigValueError(key, value, "true or false")

    def get_int(self, key: str, default: Any = _NO_DEFAULT) -> int:
        return self._get_integer(key, default, INT_MIN, INT_MAX, "int")

    def get_long(self, key: str, default: Any = _NO_DEFAULT) -> int:
        return self._get_integer(key, default, LONG_MIN, LONG_MAX, "long")

    def _get_integer(self, key: str, default: Any, lo: int, hi: int, expected: str) -> int:
        value = self._lookup(key, default)
        if isinstance(value, bool):
            raise ConfigValueError(key, value, expected)
        if isinstance(value, str):
            try:
                value = int(value.strip())
            except ValueError:
                raise ConfigValueError(key, value, expected) from None
        if not isinstance(value, int) or not lo <= value <= hi:
            raise ConfigValueError(key, value, expected)
        return value

    def subset(self, prefix: str, strip_prefix: bool = True) -> MapConfig:
        """Return the keys under ``prefix`` as a new config."""
        return MapConfig(
            {
                (key[len(prefix):] if strip_prefix else key): value
                for key, value in self._values.items()
                if key.startswith(prefix)
            }
        )

    @classmethod
    def from_nested(cls, data: Mapping[str, Any]) -> MapConfig:
        """Flatten nested tables (as loaded from TOML/YAML) into dotted keys."""
        flat: dict[str, Any] = {}

        def walk(node: Mapping[str, Any], path: str) -> None:
            for key, value in node.items():
                full = f"{path}.{key}" if path else str(key)
                if isinstance(value, Mapping):
                    walk(value, full)
                else:
                    flat[full] = value

        walk(data, "")
        return cls(flat)


def store_config(config: MapConfig, store_name: str) -> MapConfig:
    """Cut one store's view out of a job-wide config.

    Keys under ``stores.<name>.`` lose their prefix; container-wide keys
    (``container.*``) are kept as-is so budgets stay visible to the store.
    """
    return MapConfig(
        {
            **config.subset("container.", strip_prefix=False),
            **config.subset(f"stores.{store_name}."),
        }
    )
