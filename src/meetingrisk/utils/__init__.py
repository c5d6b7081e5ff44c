"""Utility functions and helpers."""

from .logging import setup_logging, default_log_dir
from .numeric import clamp, clamp01, lerp

__all__ = [
    "setup_logging",
    "default_log_dir",
    "clamp",
    "clamp01",
    "lerp",
]
