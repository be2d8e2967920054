"""Exception hierarchy for the options compiler.

Unrecognised enumerated values (codec, compaction style) are never errors;
they are substituted with a default and logged. These exceptions cover
lookups that cannot produce a value at all.
"""

from __future__ import annotations


class OptionsError(Exception):
    """Base exception for all options compiler errors."""
    pass


class ConfigError(OptionsError):
    """Raised when a configuration lookup fails."""
    pass


class MissingConfigError(ConfigError):
    """Raised when a required key is absent and no default was given."""

    def __init__(self, key: str):
        super().__init__(f"Missing configuration key: {key}")
        self.key = key


class ConfigValueError(ConfigError):
    """Raised when a configured value cannot be parsed as the requested type."""

    def __init__(self, key: str, value: object, expected: str):
        super().__init__(f"Invalid value {value!r} for {key}: expected {expected}")
        self.key = key
        self.value = value
        self.expected = expected
