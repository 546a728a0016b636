"""
DomainRule — ограничение адреса сайта списком доменов

Значение нормализуется через parse_website → parse_domain, поэтому
"example.com", "http://www.example.com/path" и "https://shop.example.com"
сравниваются по хосту. Поддомены разрешённого домена проходят.
"""

from typing import Iterable, Optional

from snaccs.core.parse.url import WWW_LABEL, parse_domain, parse_website
from snaccs.rules.base import RuleResult


def _normalize_allowed(domain: str) -> str:
    domain = domain.strip().lower().rstrip(".")
    if domain.startswith(WWW_LABEL):
        domain = domain[len(WWW_LABEL):]
    return domain


class DomainRule:
    """Проверка, что сайт принадлежит одному из разрешённых доменов."""

    def __init__(self, allowed_domains: Iterable[str]):
        """
        Args:
            allowed_domains: Коллекция доменов (не строка)

        Raises:
            TypeError: allowed_domains передан одной строкой
            ValueError: После нормализации не осталось доменов
        """
        if isinstance(allowed_domains, str):
            raise TypeError(
                f"allowed_domains must be a collection of domains, got str {allowed_domains!r}"
            )

        normalized = (_normalize_allowed(d) for d in allowed_domains)
        self.allowed_domains = frozenset(d for d in normalized if d)
        if not self.allowed_domains:
            raise ValueError("DomainRule requires at least one allowed domain")

    def matches(self, domain: str) -> bool:
        """Совпадение с доменом или его поддоменом."""
        return any(
            domain == allowed or domain.endswith(f".{allowed}")
            for allowed in self.allowed_domains
        )

    def evaluate(self, value: Optional[str]) -> RuleResult:
        domain = parse_domain(parse_website(value))

        if not domain:
            return RuleResult(
                passes=False,
                fail_reason="domain_unparseable",
                value=domain,
                details=f"Cannot extract domain from {value!r}",
            )

        if not self.matches(domain):
            return RuleResult(
                passes=False,
                fail_reason="domain_not_allowed",
                value=domain,
                details=f"Domain {domain} not in {sorted(self.allowed_domains)}",
            )

        return RuleResult(
            passes=True,
            fail_reason="",
            value=domain,
            details="Domain allowed",
        )
