"""
Money formatter — целые центы → строка валюты

Сумма хранится как signed int в minor units (центах), дробных центов нет.
Все параметры отображения (символ, положение, маркеры отрицательной суммы,
разделители, показ ".00") берутся из MoneySettings.

Структура результата:
    [negative_prefix] [symbol] whole[thousands]…[decimal]cc [symbol] [negative_suffix]

Например, при negative_prefix="(", negative_suffix=")", symbol="€":
    -200 → "(€2.00)"
"""

from typing import Any, Final, Mapping

from snaccs.core.config import CurrencyPosition, FormattingConfig, ensure_config
from snaccs.core.errors import InvalidArgument
from snaccs.infrastructure.logging import get_logger

logger = get_logger(__name__)

# Minor units в одной единице валюты
CENTS_PER_UNIT: Final[int] = 100


def _group_thousands(whole: int, separator: str) -> str:
    grouped = f"{whole:,}"
    return grouped.replace(",", separator) if separator != "," else grouped


def format_money(
    cents: int,
    show_currency: bool = True,
    config: FormattingConfig | Mapping[str, Any] | None = None,
) -> str:
    """
    Форматирование суммы в центах.

    Args:
        cents: Сумма в minor units (может быть отрицательной)
        show_currency: Выводить символ валюты
        config: FormattingConfig, сырой mapping или None (defaults)

    Returns:
        Отформатированная сумма

    Raises:
        InvalidArgument: Если cents не int

    Examples:
        >>> format_money(123456)
        '$1,234.56'
        >>> format_money(-200)
        '-$2.00'
        >>> format_money(500, show_currency=False)
        '5.00'
    """
    if isinstance(cents, bool) or not isinstance(cents, int):
        logger.debug("Rejected money amount %r", cents)
        raise InvalidArgument(f"Money amount must be integer cents, got {cents!r}")

    settings = ensure_config(config).money

    whole, minor = divmod(abs(cents), CENTS_PER_UNIT)
    magnitude = _group_thousands(whole, settings.thousands_separator)
    if minor or settings.show_zero_cents:
        magnitude = f"{magnitude}{settings.decimal_separator}{minor:02d}"

    if show_currency:
        if settings.currency_position == CurrencyPosition.BEFORE:
            magnitude = f"{settings.currency_symbol}{magnitude}"
        else:
            magnitude = f"{magnitude}{settings.currency_symbol}"

    if cents < 0:
        return f"{settings.negative_prefix}{magnitude}{settings.negative_suffix}"

    return magnitude
