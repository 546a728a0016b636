"""
Formatters: значения → строки для отображения.

Форматтеры принимают валидированный ввод и падают сразу (InvalidArgument)
при нарушении предусловий. Конфигурация передаётся явно в каждый вызов.
"""

# Ordinal
from snaccs.core.format.ordinal import ordinal, ordinal_suffix

# Money
from snaccs.core.format.money import CENTS_PER_UNIT, format_money

# Byte size
from snaccs.core.format.byte_size import BYTES_STEP, DEFAULT_PRECISION, format_bytes

# Phone
from snaccs.core.format.phone import (
    apply_template,
    format_phone,
    resolve_phone_format,
    strip_calling_code,
)

__all__ = [
    # Ordinal
    "ordinal",
    "ordinal_suffix",
    # Money
    "CENTS_PER_UNIT",
    "format_money",
    # Byte size
    "BYTES_STEP",
    "DEFAULT_PRECISION",
    "format_bytes",
    # Phone
    "apply_template",
    "format_phone",
    "resolve_phone_format",
    "strip_calling_code",
]
