"""Validation rules: парсер + проверка формы значения.

Правила stateless: конструктор фиксирует параметры, evaluate(value)
возвращает RuleResult без исключений на некорректный ввод.
"""

from .base import Rule, RuleResult, evaluate_rules
from .domain_rule import DomainRule
from .handle_rule import DEFAULT_HANDLE_MAX_LENGTH, HandleRule
from .phone_rule import PhoneRule

__all__ = [
    "Rule",
    "RuleResult",
    "evaluate_rules",
    "DomainRule",
    "HandleRule",
    "DEFAULT_HANDLE_MAX_LENGTH",
    "PhoneRule",
]
