import pytest

from apps.money.domain.banks import NoExchangeBank, VariableExchangeBank
from apps.money.domain.context import (
    DEFAULT_SYMBOLS,
    MoneyContext,
    get_bank,
    get_context,
    get_default_context,
    money_context,
    set_bank,
    set_default_context,
)
from apps.money.domain.money import Money


@pytest.fixture
def restore_default_context():
    original = get_default_context()
    original_bank = original.bank
    yield original
    original.bank = original_bank
    set_default_context(original)


class TestMoneyContext:

    def test_defaults(self):
        context = MoneyContext()

        assert isinstance(context.bank, NoExchangeBank)
        assert context.default_currency == "EUR"
        assert context.zero is None
        assert context.symbols == DEFAULT_SYMBOLS

    def test_symbols_are_copied(self):
        context = MoneyContext()
        context.symbols["XYZ"] = "X"

        assert "XYZ" not in DEFAULT_SYMBOLS

    def test_symbol_for_unknown_currency_is_blank(self):
        assert MoneyContext().symbol_for("XYZ") == ""

    def test_default_context_comes_from_settings(self):
        """
        Test that the app installs the MONEY setting as the default context.
        """
        context = get_default_context()

        assert isinstance(context.bank, NoExchangeBank)
        assert context.default_currency == "EUR"
        assert get_context() is context


class TestScopedContext:

    def test_money_context_scopes_and_restores(self):
        outer = get_context()
        scoped = MoneyContext(default_currency="USD")

        with money_context(scoped) as active:
            assert active is scoped
            assert get_context() is scoped
            assert Money(1).currency == "USD"

        assert get_context() is outer

    def test_nested_contexts(self):
        first = MoneyContext(default_currency="USD")
        second = MoneyContext(default_currency="CAD")

        with money_context(first):
            with money_context(second):
                assert get_context() is second
            assert get_context() is first

    def test_restored_after_error(self):
        outer = get_context()

        with pytest.raises(RuntimeError):
            with money_context(MoneyContext()):
                raise RuntimeError("boom")

        assert get_context() is outer


class TestDefaultContext:

    def test_set_bank_replaces_default_bank(self, restore_default_context):
        bank = VariableExchangeBank({"USD": {"CAD": 1.24515}})

        set_bank(bank)

        assert get_bank() is bank
        assert Money(100, "USD").exchange_to("CAD") == Money(124, "CAD")

    def test_scoped_context_wins_over_default(self, restore_default_context):
        set_bank(VariableExchangeBank())
        scoped_bank = NoExchangeBank()

        with money_context(MoneyContext(bank=scoped_bank)):
            assert get_bank() is scoped_bank

    def test_set_default_context(self, restore_default_context):
        context = MoneyContext(default_currency="GBP")

        set_default_context(context)

        assert get_default_context() is context
        assert Money(1).currency == "GBP"
