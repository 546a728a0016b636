"""
PhoneRule — проверка телефонного номера

Порядок проверок:
1. Пустой ввод → fail
2. Буквы при allow_vanity=False → fail
3. Длина не подходит к шаблону страны (с calling_code или без) → fail
"""

from typing import Any, Mapping, Optional

from snaccs.core.config import FormattingConfig
from snaccs.core.format.phone import resolve_phone_format, strip_calling_code
from snaccs.core.parse.phone import parse_phone
from snaccs.rules.base import RuleResult


class PhoneRule:
    """Проверка номера по формату страны."""

    def __init__(
        self,
        country: Optional[str] = None,
        allow_vanity: bool = True,
        config: FormattingConfig | Mapping[str, Any] | None = None,
    ):
        """
        Args:
            country: ISO код страны (None → default_country конфигурации)
            allow_vanity: Разрешать буквы (vanity номера)
            config: Конфигурация форматтеров

        Raises:
            UnsupportedCountry: Страны нет в таблице
        """
        self.phone_format = resolve_phone_format(country, config)
        self.allow_vanity = allow_vanity

    def evaluate(self, value: Optional[str]) -> RuleResult:
        canonical = parse_phone(value)

        if not canonical:
            return RuleResult(
                passes=False,
                fail_reason="phone_empty",
                value=canonical,
                details="Phone number has no digits",
            )

        if not self.allow_vanity and not canonical.isdigit():
            return RuleResult(
                passes=False,
                fail_reason="phone_vanity_not_allowed",
                value=canonical,
                details=f"Phone number {canonical} contains letters",
            )

        local = strip_calling_code(canonical, self.phone_format)
        if len(local) != self.phone_format.slots:
            return RuleResult(
                passes=False,
                fail_reason="phone_length_mismatch",
                value=canonical,
                details=(
                    f"Phone number {canonical} has {len(local)} characters, "
                    f"expected {self.phone_format.slots}"
                ),
            )

        return RuleResult(
            passes=True,
            fail_reason="",
            value=canonical,
            details="Phone number matches country format",
        )
