import pytest

from apps.money.domain.context import MoneyContext, money_context
from apps.money.domain.formatting import FormatRule, format_money, money_to_s, normalize_rules
from apps.money.domain.money import Money


@pytest.fixture
def zero_is_free():
    with money_context(MoneyContext(zero="free")) as context:
        yield context


class TestFormat:
    """Tests for Money.format()."""

    def test_default_format(self):
        assert Money(100, "CAD").format() == "$1.00"

    def test_zero_without_zero_string(self):
        assert Money(0, "CAD").format() == "$0.00"

    def test_zero_string_overrides_everything(self, zero_is_free):
        assert Money(0, "CAD").format() == "free"
        assert Money(0, "CAD").format("with_currency", "html") == "free"

    def test_zero_string_ignored_for_non_zero(self, zero_is_free):
        assert Money(1, "CAD").format() == "$0.01"

    def test_empty_zero_string_is_used(self):
        with money_context(MoneyContext(zero="")):
            assert Money(0, "CAD").format() == ""

    def test_with_currency(self):
        assert Money.ca_dollar(100).format("with_currency") == "$1.00 CAD"
        assert Money.us_dollar(85).format("with_currency") == "$0.85 USD"

    @pytest.mark.parametrize(
        "amount, expected",
        [(100, "$1"), (599, "$5"), (39000, "$390")],
    )
    def test_no_fraction_truncates(self, amount, expected):
        assert Money.ca_dollar(amount).format("no_fraction") == expected

    def test_no_fraction_with_currency(self):
        assert Money(570, "CAD").format("no_fraction", "with_currency") == "$5 CAD"

    def test_html_with_currency(self):
        assert Money.ca_dollar(570).format("html", "with_currency") == '$5.70 <span class="currency">CAD</span>'

    def test_html_alone_changes_nothing(self):
        assert Money.ca_dollar(570).format("html") == "$5.70"

    def test_rules_as_enum_and_lists(self):
        m = Money.ca_dollar(570)

        assert m.format([FormatRule.NO_FRACTION, "with_currency"]) == "$5 CAD"
        assert m.format(FormatRule.WITH_CURRENCY) == "$5.70 CAD"

    def test_unknown_rule_raises(self):
        with pytest.raises(ValueError):
            Money.ca_dollar(100).format("bold")

    def test_unmapped_currency_has_no_symbol(self):
        assert Money(100, "XYZ").format() == "1.00"
        assert Money(100, "XYZ").format("with_currency") == "1.00 XYZ"

    def test_default_symbols(self):
        assert Money.euro(100).format() == "€1.00"
        assert Money(100, "GBP").format() == "£1.00"
        assert Money(500, "JPY", 0).format() == "¥500"

    def test_symbols_from_context(self):
        with money_context(MoneyContext(symbols={"CHF": "Fr."})):
            assert Money(250, "CHF").format() == "Fr.2.50"
            assert Money(250, "USD").format() == "2.50"

    def test_fraction_digits_follow_precision(self):
        assert Money(1234, "USD", 3).format() == "$1.234"

    def test_negative_amount(self):
        assert Money(-150, "USD").format() == "$-1.50"

    def test_explicit_context_argument(self):
        assert format_money(Money(0, "USD"), context=MoneyContext(zero="n/a")) == "n/a"

    def test_normalize_rules(self):
        assert normalize_rules(["html", ("no_fraction",)]) == {FormatRule.HTML, FormatRule.NO_FRACTION}


class TestToS:
    """Tests for Money.to_s() and str()."""

    def test_default_precision(self):
        assert Money.ca_dollar(100).to_s() == "1.00"
        assert str(Money.ca_dollar(100)) == "1.00"

    def test_more_digits_than_precision(self):
        assert Money(123, "USD").to_s(4) == "1.2300"

    def test_fewer_digits_rounds_half_away_from_zero(self):
        assert Money(125, "USD").to_s(1) == "1.3"
        assert Money(-125, "USD").to_s(1) == "-1.3"

    @pytest.mark.parametrize(
        "amount, expected",
        [(599, "5"), (-599, "-5"), (-50, "0"), (0, "0"), (100, "1")],
    )
    def test_zero_digits_truncates_toward_zero(self, amount, expected):
        assert Money(amount, "USD").to_s(0) == expected

    def test_large_amount_is_exact(self):
        m = Money(12345678901234567, "USD")

        assert m.to_s(0) == "123456789012345"
        assert m.to_s() == "123456789012345.67"

    def test_amount_wider_than_decimal_context(self):
        m = Money(10 ** 30 + 5, "USD")

        assert m.to_s() == "1" + "0" * 28 + ".05"
        assert m.to_s(0) == "1" + "0" * 28
        assert m.to_s(1) == "1" + "0" * 28 + ".1"
        assert (-m).to_s() == "-1" + "0" * 28 + ".05"

    def test_precision_zero(self):
        assert Money(500, "JPY", 0).to_s() == "500"

    def test_money_to_s_function(self):
        assert money_to_s(Money(1050, "USD", 3)) == "1.050"
