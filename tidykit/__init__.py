"""
tidykit - small, stateless normalization and formatting utilities.

Usage:
    from tidykit import create_dollar_amount, format_phone

    create_dollar_amount(1234.5, "EUR")   # '1.234,50 €'
    format_phone("+1 555 123 4567")       # '(555) 123-4567'
"""
from tidykit.schemas.common import Failure, Success, TryCatchResult
from tidykit.utils.async_utils import try_catch
from tidykit.utils.currency_utils import (
    CURRENCY_LOCALE_MAP,
    InvalidAmountError,
    SupportedCurrency,
    UnsupportedCurrencyError,
    create_dollar_amount,
    get_currency_locale,
    list_supported_currencies,
    )
from tidykit.utils.number_utils import extract_number
from tidykit.utils.phone_utils import format_phone
from tidykit.utils.record_utils import trim_string_properties
from tidykit.utils.text_utils import ELLIPSIS, capitalize_first_letters, truncate_text

__version__ = "0.1.0"

__all__ = [
    "CURRENCY_LOCALE_MAP",
    "ELLIPSIS",
    "Failure",
    "InvalidAmountError",
    "Success",
    "SupportedCurrency",
    "TryCatchResult",
    "UnsupportedCurrencyError",
    "capitalize_first_letters",
    "create_dollar_amount",
    "extract_number",
    "format_phone",
    "get_currency_locale",
    "list_supported_currencies",
    "trim_string_properties",
    "truncate_text",
    "try_catch",
    ]
