"""
Formatting configuration: immutable settings models and resolution.
"""

from snaccs.core.config.settings import (
    # Defaults
    DEFAULT_BYTE_UNITS,
    DEFAULT_CONFIG,
    DEFAULT_COUNTRY,
    DEFAULT_PHONE_FORMATS,
    PHONE_TEMPLATE_SLOT,
    # Models
    ByteSettings,
    CurrencyPosition,
    FormattingConfig,
    MoneySettings,
    PhoneCountryFormat,
    PhoneSettings,
    # Resolution
    ensure_config,
    resolve_config,
)

__all__ = [
    # Defaults
    "DEFAULT_BYTE_UNITS",
    "DEFAULT_CONFIG",
    "DEFAULT_COUNTRY",
    "DEFAULT_PHONE_FORMATS",
    "PHONE_TEMPLATE_SLOT",
    # Models
    "ByteSettings",
    "CurrencyPosition",
    "FormattingConfig",
    "MoneySettings",
    "PhoneCountryFormat",
    "PhoneSettings",
    # Resolution
    "ensure_config",
    "resolve_config",
]
