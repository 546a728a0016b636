"""
Тесты для validation rules (PhoneRule, DomainRule, HandleRule)

Проверяет:
1. Canonical значение в RuleResult
2. Причины отказа (fail_reason)
3. Последовательную проверку evaluate_rules
"""

import pytest

from snaccs.core.errors import UnsupportedCountry
from snaccs.rules import (
    DomainRule,
    HandleRule,
    PhoneRule,
    RuleResult,
    evaluate_rules,
)


@pytest.fixture
def us_phone_rule() -> PhoneRule:
    return PhoneRule()


@pytest.fixture
def shop_domain_rule() -> DomainRule:
    return DomainRule(["example.com", "www.Shop.io"])


# =============================================================================
# PHONE RULE
# =============================================================================


class TestPhoneRule:
    """Тесты для PhoneRule"""

    def test_valid_nanp(self, us_phone_rule) -> None:
        result = us_phone_rule.evaluate(" 1-555-111-2222 ")
        assert result.passes is True
        assert result.value == "5551112222"
        assert result.fail_reason == ""

    def test_empty_rejected(self, us_phone_rule) -> None:
        for value in [None, "", "---"]:
            result = us_phone_rule.evaluate(value)
            assert result.passes is False
            assert result.fail_reason == "phone_empty"

    def test_short_number_rejected(self, us_phone_rule) -> None:
        result = us_phone_rule.evaluate("555-1234")
        assert result.passes is False
        assert result.fail_reason == "phone_length_mismatch"
        assert "expected 10" in result.details

    def test_vanity_toggle(self) -> None:
        assert PhoneRule().evaluate("555-stanley").passes is True

        result = PhoneRule(allow_vanity=False).evaluate("555-stanley")
        assert result.passes is False
        assert result.fail_reason == "phone_vanity_not_allowed"

    def test_country_with_calling_code(self) -> None:
        rule = PhoneRule("DE")
        assert rule.evaluate("+49 3090 1820").value == "4930901820"
        assert rule.evaluate("3090 1820").passes is True
        assert rule.evaluate("5551112222").passes is False

    def test_value_is_parser_output_on_pass_and_fail(self) -> None:
        """RuleResult.value всегда равен parse_phone(value)"""
        rule = PhoneRule("DE")

        passed = rule.evaluate("+49 3090 1820")
        failed = rule.evaluate("+49 3090 182")

        assert passed.passes is True
        assert passed.value == "4930901820"
        assert failed.passes is False
        assert failed.value == "493090182"

    def test_country_from_config(self) -> None:
        rule = PhoneRule(config={"phone": {"default_country": "DE"}})
        assert rule.evaluate("4930901820").passes is True

    def test_unknown_country(self) -> None:
        with pytest.raises(UnsupportedCountry):
            PhoneRule("ZZ")


# =============================================================================
# DOMAIN RULE
# =============================================================================


class TestDomainRule:
    """Тесты для DomainRule"""

    def test_allowed_forms(self, shop_domain_rule) -> None:
        for value in [
            "example.com",
            "http://www.example.com/about",
            "https://blog.example.com",
            "shop.io",
            "HTTPS://WWW.SHOP.IO",
        ]:
            result = shop_domain_rule.evaluate(value)
            assert result.passes is True, value

    def test_canonical_domain_in_result(self, shop_domain_rule) -> None:
        assert shop_domain_rule.evaluate("www.example.com").value == "example.com"

    def test_lookalike_rejected(self, shop_domain_rule) -> None:
        """Суффикс без точки не считается поддоменом"""
        result = shop_domain_rule.evaluate("notexample.com")
        assert result.passes is False
        assert result.fail_reason == "domain_not_allowed"

    def test_unparseable(self, shop_domain_rule) -> None:
        for value in [None, "", "http://"]:
            result = shop_domain_rule.evaluate(value)
            assert result.passes is False
            assert result.fail_reason == "domain_unparseable"

    def test_requires_allowed_domains(self) -> None:
        with pytest.raises(ValueError, match="at least one allowed domain"):
            DomainRule(["", "  "])

        # "." и "..." нормализуются в пустую строку
        with pytest.raises(ValueError, match="at least one allowed domain"):
            DomainRule([".", " ... "])

    def test_single_string_rejected(self) -> None:
        """Строка не разбирается посимвольно в набор доменов"""
        with pytest.raises(TypeError, match="collection of domains"):
            DomainRule("example.com")

    def test_blank_entries_dropped(self) -> None:
        rule = DomainRule(["example.com", ".", ""])
        assert rule.allowed_domains == frozenset({"example.com"})
        assert rule.evaluate("http://evil.x").passes is False

    def test_trailing_dot_host_matches(self) -> None:
        """FQDN с завершающей точкой совпадает с разрешённым доменом"""
        rule = DomainRule(["example.com."])
        result = rule.evaluate("http://example.com./about")
        assert result.passes is True
        assert result.value == "example.com"


# =============================================================================
# HANDLE RULE
# =============================================================================


class TestHandleRule:
    """Тесты для HandleRule"""

    def test_valid_handles(self) -> None:
        rule = HandleRule()
        assert rule.evaluate("@ferretpapa").value == "ferretpapa"
        assert rule.evaluate("https://instagram.com/ferret.papa_").passes is True

    def test_empty(self) -> None:
        result = HandleRule().evaluate("  @  ")
        assert result.passes is False
        assert result.fail_reason == "handle_empty"

    def test_too_long(self) -> None:
        result = HandleRule(max_length=5).evaluate("ferretpapa")
        assert result.passes is False
        assert result.fail_reason == "handle_too_long"

    def test_invalid_chars(self) -> None:
        for value in ["ferret papa", "/ferretpapa", "ferret-papa"]:
            result = HandleRule().evaluate(value)
            assert result.passes is False, value
            assert result.fail_reason == "handle_invalid_chars"

    def test_invalid_max_length(self) -> None:
        with pytest.raises(ValueError, match="max_length must be positive"):
            HandleRule(max_length=0)


# =============================================================================
# EVALUATE RULES
# =============================================================================


def test_evaluate_rules_returns_first_failure():
    result = evaluate_rules("ferretpapa", [HandleRule(), HandleRule(max_length=3)])
    assert result.fail_reason == "handle_too_long"


def test_evaluate_rules_returns_last_pass():
    result = evaluate_rules("@ferretpapa", [HandleRule(), HandleRule(max_length=10)])
    assert result == RuleResult(
        passes=True,
        fail_reason="",
        value="ferretpapa",
        details="Handle valid",
    )


def test_evaluate_rules_requires_rules():
    with pytest.raises(ValueError, match="at least one rule"):
        evaluate_rules("x", [])
