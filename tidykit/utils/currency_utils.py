"""
Currency formatting utilities with locale support via Babel.

Each supported ISO 4217 code is bound to exactly one locale, which decides
grouping, decimal separator and symbol placement when formatting amounts.
"""
import re
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any, List, Union

from babel.numbers import (
    format_currency,
    get_currency_name,
    get_currency_precision,
    get_currency_symbol,
    )

from tidykit.logging_config import get_logger
from tidykit.utils.translation_utils import get_babel_locale

logger = get_logger(__name__)


# ============================================================================
# EXCEPTIONS
# ============================================================================

class InvalidAmountError(ValueError):
    """Raised when an amount cannot be converted to a number."""

    def __init__(self, amount: Any):
        self.amount = amount
        super().__init__(f"Invalid amount {amount!r}: failed to convert to a number")


class UnsupportedCurrencyError(ValueError):
    """Raised when a currency code is outside SupportedCurrency."""

    def __init__(self, code: Any):
        self.code = code
        super().__init__(
            f"Unsupported currency code: {code!r}. "
            f"Must be one of {', '.join(SupportedCurrency.list_all())}"
            )


# ============================================================================
# SUPPORTED CURRENCIES
# ============================================================================

class SupportedCurrency(str, Enum):
    """Currencies accepted by create_dollar_amount()."""
    AUD = "AUD"
    BRL = "BRL"
    CAD = "CAD"
    CHF = "CHF"
    CNY = "CNY"
    EUR = "EUR"
    GBP = "GBP"
    INR = "INR"
    JPY = "JPY"
    USD = "USD"

    @classmethod
    def from_code(cls, code: Union["SupportedCurrency", str]) -> "SupportedCurrency":
        """
        Resolve a currency code (case-insensitive, surrounding whitespace ignored).

        Raises:
            UnsupportedCurrencyError: If the code is not in the supported set

        Examples:
            >>> SupportedCurrency.from_code(" eur ")
            <SupportedCurrency.EUR: 'EUR'>
        """
        if isinstance(code, cls):
            return code
        if not isinstance(code, str):
            raise UnsupportedCurrencyError(code)
        try:
            return cls(code.strip().upper())
        except ValueError:
            raise UnsupportedCurrencyError(code) from None

    @classmethod
    def list_all(cls) -> list[str]:
        """Get list of all supported currency codes."""
        return [currency.value for currency in cls]


# EUR and CHF use German conventions (de-DE, de-CH)
CURRENCY_LOCALE_MAP = {
    SupportedCurrency.AUD: "en-AU",
    SupportedCurrency.BRL: "pt-BR",
    SupportedCurrency.CAD: "en-CA",
    SupportedCurrency.CHF: "de-CH",
    SupportedCurrency.CNY: "zh-CN",
    SupportedCurrency.EUR: "de-DE",
    SupportedCurrency.GBP: "en-GB",
    SupportedCurrency.INR: "en-IN",
    SupportedCurrency.JPY: "ja-JP",
    SupportedCurrency.USD: "en-US",
    }


def get_currency_locale(currency: Union[SupportedCurrency, str]) -> str:
    """
    Get the locale identifier bound to a supported currency.

    Examples:
        >>> get_currency_locale("EUR")
        'de-DE'
    """
    return CURRENCY_LOCALE_MAP[SupportedCurrency.from_code(currency)]


# ============================================================================
# FORMATTING
# ============================================================================

# Accepted numeric strings: "12", "-1.5", ".5", "5.", "1e3", "Infinity"
_DECIMAL_STRING_RE = re.compile(r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|Infinity)")
# Unsigned integer literals: "0x1F", "0o17", "0b101"
_PREFIXED_INT_RE = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def _parse_amount_string(text: str) -> Decimal:
    """Parse a stripped, non-empty amount string; underscores, "inf" and "nan" are rejected."""
    if _DECIMAL_STRING_RE.fullmatch(text):
        return Decimal(text)
    if _PREFIXED_INT_RE.fullmatch(text):
        return Decimal(int(text, 0))
    raise InvalidAmountError(text)


def _to_decimal(amount: Any) -> Decimal:
    """
    Convert a monetary amount to Decimal.

    None, "" and whitespace-only strings count as zero.

    Raises:
        InvalidAmountError: If the amount is not numeric or is NaN
    """
    if amount is None:
        return Decimal("0")
    if isinstance(amount, bool):
        raise InvalidAmountError(amount)
    if isinstance(amount, Decimal):
        value = amount
    elif isinstance(amount, (int, float)):
        value = Decimal(str(amount))
    elif isinstance(amount, str):
        cleaned = amount.strip()
        if not cleaned:
            return Decimal("0")
        try:
            value = _parse_amount_string(cleaned)
        except InvalidAmountError:
            raise InvalidAmountError(amount) from None
    else:
        raise InvalidAmountError(amount)

    if value.is_nan():
        raise InvalidAmountError(amount)
    return value


def _round_to_minor_units(value: Decimal, code: "SupportedCurrency") -> Decimal:
    """Round half away from zero to the currency's minor units (2.5 JPY -> 3)."""
    if not value.is_finite():
        return value
    quantum = Decimal(1).scaleb(-get_currency_precision(code.value))
    return value.quantize(quantum, rounding=ROUND_HALF_UP)


def create_dollar_amount(
    amount: Union[int, float, Decimal, str, None],
    currency: Union[SupportedCurrency, str] = SupportedCurrency.USD
    ) -> str:
    """
    Format a numeric value as a localized currency string.

    The locale comes from CURRENCY_LOCALE_MAP; fraction digits follow the
    currency's standard minor units (2 everywhere except JPY, which has 0),
    with ties rounded away from zero ($0.125 -> $0.13).

    Args:
        amount: Amount to format. A number or a numeric string; None and ""
            format as zero.
        currency: ISO code from SupportedCurrency (default: USD)

    Returns:
        Formatted currency string, or "Error formatting <CODE>" if the
        locale formatter itself fails (logged, never raised)

    Raises:
        InvalidAmountError: If amount cannot be converted to a number
        UnsupportedCurrencyError: If currency is not supported

    Examples:
        >>> create_dollar_amount(123.45)
        '$123.45'
        >>> create_dollar_amount(123.45, "GBP")
        '£123.45'
        >>> create_dollar_amount(123.45, "EUR")
        '123,45\\xa0€'
        >>> create_dollar_amount("")
        '$0.00'
    """
    code = SupportedCurrency.from_code(currency)
    value = _to_decimal(amount)
    locale_id = CURRENCY_LOCALE_MAP[code]

    try:
        return format_currency(
            _round_to_minor_units(value, code),
            code.value,
            locale=get_babel_locale(locale_id)
            )
    except Exception as e:
        logger.error(
            "Error formatting currency",
            currency=code.value,
            locale=locale_id,
            amount=str(value),
            error=str(e)
            )
        return f"Error formatting {code.value}"


def list_supported_currencies(language: str = 'en') -> List[dict]:
    """
    List supported currencies with localized names and symbols.

    Names are translated into `language`; symbols are the ones used by each
    currency's own locale (so USD shows "$" and CHF shows "CHF").

    Args:
        language: Language or locale code for the names (default: 'en')

    Returns:
        List of dicts with 'code', 'locale', 'name', 'symbol'
    """
    name_locale = get_babel_locale(language)
    currencies = []

    for code, locale_id in CURRENCY_LOCALE_MAP.items():
        currencies.append({
            "code": code.value,
            "locale": locale_id,
            "name": get_currency_name(code.value, locale=name_locale),
            "symbol": get_currency_symbol(code.value, locale=get_babel_locale(locale_id))
            })

    return currencies
