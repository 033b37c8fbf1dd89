"""
Tests for pip values and position sizing.
"""
import pytest

from pip_calculations import (
    LotSizeResult,
    calculate_lot_size,
    derive_pips_from_money,
    get_contract_size,
    get_pip_value,
    normalize_pair,
)


class TestContractSize:

    @pytest.mark.parametrize("balance,expected", [
        (25000, 100000),
        (10000, 100000),
        (9999.99, 10000),
        (1000, 10000),
        (999, 1000),
        (0, 1000),
        (-5, 1000),
    ])
    def test_tiers(self, balance, expected):
        assert get_contract_size(balance) == expected


class TestPipValue:

    def test_major_pair(self):
        assert get_pip_value('EURUSD', 1000) == pytest.approx(0.1)

    def test_jpy_pair_checked_before_majors(self):
        assert get_pip_value('USDJPY', 1000) == pytest.approx(1.0)

    def test_metals(self):
        assert get_pip_value('XAUUSD', 10000) == pytest.approx(10.0)
        assert get_pip_value('XAGUSD', 10000) == pytest.approx(1.0)

    def test_indices(self):
        assert get_pip_value('US30', 1000) == pytest.approx(10.0)

    def test_unknown_symbol_priced_like_major(self):
        assert get_pip_value('BTCUSD', 500) == pytest.approx(0.01)

    def test_nzdjpy_priced_as_jpy_pair(self):
        assert get_pip_value('NZDJPY', 1000) == pytest.approx(1.0)
        assert derive_pips_from_money(10, 'NZDJPY', 1000) == 10.0

    def test_empty_pair(self):
        assert get_pip_value('', 1000) == 0
        assert get_pip_value(None, 1000) == 0

    def test_symbol_normalized(self):
        assert normalize_pair(' eur/usd ') == 'EURUSD'
        assert get_pip_value('usd/jpy', 1000) == get_pip_value('USDJPY', 1000)


class TestDerivePips:

    def test_money_to_pips(self):
        assert derive_pips_from_money(50, 'EURUSD', 1000) == 500.0

    def test_rounded_to_one_decimal(self):
        assert derive_pips_from_money(1.234, 'USDJPY', 1000) == 1.2

    def test_negative_money(self):
        assert derive_pips_from_money(-25, 'EURUSD', 1000) == -250.0

    def test_unknown_pip_value(self):
        assert derive_pips_from_money(50, None, 1000) is None


class TestLotSize:

    def test_major_pair(self):
        result = calculate_lot_size(10000, 2, 1.1000, 1.0950, 'EURUSD')
        assert result.lot_size == 0.4
        assert result.risk_amount == 200
        assert result.pips_at_risk == pytest.approx(50)
        assert result.pip_value == pytest.approx(10)

    def test_jpy_pair(self):
        result = calculate_lot_size(100000, 1, 150.00, 149.50, 'USDJPY')
        assert result.pips_at_risk == pytest.approx(50)
        assert result.pip_value == pytest.approx(1000)
        assert result.lot_size == 0.02

    def test_short_side_stop_above_entry(self):
        result = calculate_lot_size(10000, 2, 1.0950, 1.1000, 'EURUSD')
        assert result.lot_size == 0.4

    @pytest.mark.parametrize("entry,stop", [
        (None, 1.1),
        (1.1, None),
        (0, 1.1),
        (1.1, 1.1),
    ])
    def test_missing_or_equal_prices(self, entry, stop):
        assert calculate_lot_size(10000, 2, entry, stop, 'EURUSD') == LotSizeResult()
