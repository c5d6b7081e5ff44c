"""Input processing."""

from .validation import InputValidator

__all__ = ["InputValidator"]
