"""Protocol definition for configuration sources."""

from __future__ import annotations

from typing import Any, Protocol


class ConfigSource(Protocol):
    """Read-only typed lookup over string keys.

    Every getter returns ``default`` when the key is absent; without a
    default an absent key raises ``MissingConfigError``.
    """

    def contains(self, key: str) -> bool:
        """Return True if the key is present."""
        ...

    def get_str(self, key: str, default: Any = ...) -> str:
        """Return the value as a string."""
        ...

    def get_bool(self, key: str, default: Any = ...) -> bool:
        """Return the value as a bool; raises ConfigValueError if malformed."""
        ...

    def get_int(self, key: str, default: Any = ...) -> int:
        """Return the value as a 32-bit int; raises ConfigValueError if malformed."""
        ...

    def get_long(self, key: str, default: Any = ...) -> int:
        """Return the value as a 64-bit int; raises ConfigValueError if malformed."""
        ...
