"""Money formatting."""

from .money import format_money, fallback_format_money, DEFAULT_LOCALE

__all__ = ["format_money", "fallback_format_money", "DEFAULT_LOCALE"]
