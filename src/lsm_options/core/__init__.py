"""Core records, types and configuration."""

from .config import MapConfig
from .options import EngineOptions

__all__ = ["MapConfig", "EngineOptions"]
