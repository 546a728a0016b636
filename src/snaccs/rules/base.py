"""Общие типы validation rules."""

from dataclasses import dataclass
from typing import Iterable, Optional, Protocol


@dataclass(frozen=True)
class RuleResult:
    """Результат проверки значения правилом."""

    passes: bool
    fail_reason: str

    # Вывод парсера правила без дальнейших преобразований, одинаково для pass и fail
    # (None, если вход None)
    value: Optional[str]

    # Детали
    details: str


class Rule(Protocol):
    """Правило: stateless объект с evaluate()."""

    def evaluate(self, value: Optional[str]) -> RuleResult: ...


def evaluate_rules(value: Optional[str], rules: Iterable[Rule]) -> RuleResult:
    """
    Последовательная проверка правил.

    Returns:
        Первый непрошедший результат или последний прошедший

    Raises:
        ValueError: Пустой набор правил
    """
    result: Optional[RuleResult] = None
    for rule in rules:
        result = rule.evaluate(value)
        if not result.passes:
            return result
    if result is None:
        raise ValueError("evaluate_rules requires at least one rule")
    return result
