"""
Phone parser — canonical форма телефонного номера

Canonical форма: только ASCII цифры и буквы в верхнем регистре, без
пунктуации. Буквы сохраняются для vanity номеров ("555-stanley").
Форматирование для отображения — snaccs.core.format.phone.
"""

from typing import Final

# NANP trunk prefix: "1" перед 10-значным номером
NANP_TRUNK_PREFIX: Final[str] = "1"
NANP_NUMBER_LENGTH: Final[int] = 10


def parse_phone(value: str | None) -> str | None:
    """
    Нормализация телефонного номера.

    Удаляет все символы кроме цифр и букв, буквы переводит в верхний
    регистр. NANP trunk prefix "1" перед 10 символами снимается.

    Args:
        value: Произвольный ввод пользователя

    Returns:
        Canonical строка, "" для пустого/пунктуационного ввода, None для None

    Examples:
        >>> parse_phone("1-555-111-2222")
        '5551112222'
        >>> parse_phone("555-stanley")
        '555STANLEY'
        >>> parse_phone("-.-(-.-)-.-")
        ''
    """
    if value is None:
        return None

    canonical = "".join(ch for ch in value if ch.isascii() and ch.isalnum()).upper()

    if len(canonical) == NANP_NUMBER_LENGTH + 1 and canonical.startswith(NANP_TRUNK_PREFIX):
        canonical = canonical[1:]

    return canonical
