"""
Utility functions for tidykit.

This package contains:
- text_utils: Word capitalization and truncation
- currency_utils: Locale-aware currency formatting (Babel)
- number_utils: Number extraction from free-form text
- phone_utils: US phone number normalization
- record_utils: Whitespace trimming across record values
- async_utils: Success/failure wrapping of awaitables
- translation_utils: Locale lookup helpers
"""
