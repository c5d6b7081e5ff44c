"""Currency formatting with a deterministic fallback."""

import logging

from babel.numbers import format_currency

from meetingrisk.domain.models import Currency
from meetingrisk.utils.numeric import _isnum

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en_US"


def format_money(amount: float, currency, locale: str = DEFAULT_LOCALE) -> str:
    """
    Render amount in currency with exactly two fraction digits.

    Locale-aware formatting is tried first; if it fails for any reason the
    plain "{symbol}{amount:.2f}" rendering is used instead.
    """
    currency = Currency.parse(currency)
    if not _isnum(amount):
        logger.warning("Non-finite amount %r rendered as zero", amount)
        amount = 0.0

    try:
        return format_currency(
            amount,
            currency.value,
            locale=locale,
            format_type="standard",
            currency_digits=True,
        )
    except Exception as e:
        logger.warning(
            "Locale formatting failed for %s %s (locale=%s): %s", amount, currency.value, locale, e
        )
    return fallback_format_money(amount, currency)

def fallback_format_money(amount: float, currency) -> str:
    currency = Currency.parse(currency)
    return f"{currency.symbol}{amount:.2f}"
