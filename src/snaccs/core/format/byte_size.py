"""
Byte-size formatter — количество байт → "1.75 kb"

Шаг единиц 1024. Метки берутся из ByteSettings.units как данные:
регистр ("kb" против "GB") не выводится из правила.
"""

from typing import Any, Final, Mapping

from snaccs.core.config import FormattingConfig, ensure_config
from snaccs.core.errors import InvalidArgument
from snaccs.infrastructure.logging import get_logger

logger = get_logger(__name__)

BYTES_STEP: Final[int] = 1024
DEFAULT_PRECISION: Final[int] = 2


def _trim_decimal(text: str) -> str:
    """Удаление хвостовых нулей форматирования: "1.750" → "1.75", "1.00" → "1"."""
    if "." not in text:
        return text
    return text.rstrip("0").rstrip(".")


def format_bytes(
    bytes: int,
    precision: int = DEFAULT_PRECISION,
    config: FormattingConfig | Mapping[str, Any] | None = None,
) -> str:
    """
    Человекочитаемый размер.

    Выбирается наибольшая единица, в которой значение >= 1
    (последняя метка таблицы, если байт больше, чем она покрывает).

    Args:
        bytes: Количество байт (>= 0)
        precision: Максимум знаков после запятой (>= 0)
        config: FormattingConfig, сырой mapping или None (defaults)

    Returns:
        Строка вида "<значение><separator><метка>"

    Raises:
        InvalidArgument: bytes < 0, precision < 0 или нецелые аргументы

    Examples:
        >>> format_bytes(1793)
        '1.75 kb'
        >>> format_bytes(1793, 3)
        '1.751 kb'
        >>> format_bytes(1073741824)
        '1 GB'
    """
    if isinstance(bytes, bool) or not isinstance(bytes, int):
        raise InvalidArgument(f"Byte count must be an integer, got {bytes!r}")
    if bytes < 0:
        logger.debug("Rejected negative byte count %d", bytes)
        raise InvalidArgument(f"Byte count cannot be negative: {bytes}")
    if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
        raise InvalidArgument(f"Precision must be a non-negative integer, got {precision!r}")

    settings = ensure_config(config).bytes

    power = 0
    while power < len(settings.units) - 1 and bytes >= BYTES_STEP ** (power + 1):
        power += 1

    text = f"{bytes / BYTES_STEP**power:.{precision}f}"

    # Округление до 1024 текущей единицы → 1 следующей ("1024 kb" → "1 MB")
    if power < len(settings.units) - 1 and float(text) >= BYTES_STEP:
        power += 1
        text = f"{bytes / BYTES_STEP**power:.{precision}f}"

    text = _trim_decimal(text)

    return f"{text}{settings.separator}{settings.units[power]}"
