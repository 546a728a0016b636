"""
Phone formatter — canonical номер → строка для отображения

Формат выбирается по ISO коду страны из PhoneSettings.formats:
каждая позиция 'X' шаблона получает один символ canonical номера.
Если номер начинается с calling_code и длиннее шаблона ровно на его
длину, calling_code снимается ("15551112222" для US, "4930901820" для DE).

Неизвестная страна → UnsupportedCountry (без generic fallback).
"""

from typing import Any, Mapping

from snaccs.core.config import (
    PHONE_TEMPLATE_SLOT,
    FormattingConfig,
    PhoneCountryFormat,
    ensure_config,
)
from snaccs.core.errors import InvalidArgument, UnsupportedCountry
from snaccs.core.parse.phone import parse_phone
from snaccs.infrastructure.logging import get_logger

logger = get_logger(__name__)


def resolve_phone_format(
    country: str | None,
    config: FormattingConfig | Mapping[str, Any] | None = None,
) -> PhoneCountryFormat:
    """
    Формат телефона для страны (None → default_country).

    Raises:
        UnsupportedCountry: Страны нет в таблице
    """
    settings = ensure_config(config).phone
    phone_format = settings.format_for(country)
    if phone_format is None:
        logger.debug("No phone format for country %r", country)
        raise UnsupportedCountry(country or settings.default_country)
    return phone_format


def strip_calling_code(canonical: str, phone_format: PhoneCountryFormat) -> str:
    """Снятие международного кода, если номер длиннее шаблона ровно на него."""
    code = phone_format.calling_code
    if canonical.startswith(code) and len(canonical) == len(code) + phone_format.slots:
        return canonical[len(code):]
    return canonical


def apply_template(canonical: str, template: str) -> str:
    """Подстановка символов номера в позиции 'X' шаблона."""
    chars = iter(canonical)
    return "".join(next(chars) if ch == PHONE_TEMPLATE_SLOT else ch for ch in template)


def format_phone(
    digits: str | None,
    country: str | None = None,
    config: FormattingConfig | Mapping[str, Any] | None = None,
) -> str | None:
    """
    Форматирование телефона для отображения.

    Args:
        digits: Номер (canonical или с пунктуацией, проходит через parse_phone)
        country: ISO код страны, None → default_country ("US")
        config: FormattingConfig, сырой mapping или None (defaults)

    Returns:
        Отформатированный номер, None для None

    Raises:
        UnsupportedCountry: Страны нет в таблице
        InvalidArgument: Длина номера не совпадает с шаблоном

    Examples:
        >>> format_phone("5551112222")
        '(555) 111-2222'
        >>> format_phone("4930901820", "DE")
        '+49 3090 1820'
    """
    if digits is None:
        return None

    phone_format = resolve_phone_format(country, config)
    canonical = strip_calling_code(parse_phone(digits), phone_format)

    if len(canonical) != phone_format.slots:
        raise InvalidArgument(
            f"Phone number {digits!r} has {len(canonical)} characters, "
            f"template {phone_format.template!r} expects {phone_format.slots}"
        )

    return apply_template(canonical, phone_format.template)
