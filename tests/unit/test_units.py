"""
Sanity-тест для лестницы единиц

Проверяет:
1. Мультипликативные соотношения единиц
2. Соответствие типизированных констант Amount коэффициентам
3. Таблицу денноминаций и unit_exponent
"""

import pytest

from btc_amount.core.domain import (
    ALL_BTC,
    ALL_BTC_SATS,
    BTC,
    DENOMINATIONS,
    MICRO_BTC,
    MILLI_BTC,
    SATOSHI,
    SATS_PER_BTC,
    SATS_PER_MICRO_BTC,
    SATS_PER_MILLI_BTC,
    SATS_PER_SATOSHI,
    Amount,
    InvalidUnitError,
    denomination_for,
    unit_exponent,
)


class TestUnitLadder:
    """Тесты лестницы единиц"""

    def test_multiplicative_relationships(self) -> None:
        """satoshi < uBTC < mBTC < BTC с фиксированными множителями"""
        assert MICRO_BTC == 100 * SATOSHI
        assert MILLI_BTC == 1000 * MICRO_BTC
        assert BTC == 1000 * MILLI_BTC
        assert BTC == 100_000_000

    def test_strict_order(self) -> None:
        assert SATOSHI < MICRO_BTC < MILLI_BTC < BTC

    def test_constants_are_amounts(self) -> None:
        for constant in (SATOSHI, MICRO_BTC, MILLI_BTC, BTC, ALL_BTC):
            assert isinstance(constant, Amount)

    def test_constants_match_factors(self) -> None:
        assert SATOSHI == SATS_PER_SATOSHI
        assert MICRO_BTC == SATS_PER_MICRO_BTC
        assert MILLI_BTC == SATS_PER_MILLI_BTC
        assert BTC == SATS_PER_BTC

    def test_all_btc(self) -> None:
        """Вся эмиссия: 20 999 999.9769 BTC"""
        assert ALL_BTC == 2_099_999_997_690_000
        assert ALL_BTC == ALL_BTC_SATS
        assert str(ALL_BTC) == "20999999.9769 BTC"


class TestDenominations:
    """Тесты таблицы денноминаций"""

    def test_ordered_largest_first(self) -> None:
        values = [d.value for d in DENOMINATIONS]
        assert values == sorted(values, reverse=True)

    def test_lookup(self) -> None:
        assert denomination_for(BTC).suffix == "BTC"
        assert denomination_for(MILLI_BTC).suffix == "mBTC"
        assert denomination_for(MICRO_BTC).suffix == "uBTC"
        assert denomination_for(SATOSHI).suffix == "sats"

    def test_lookup_unknown_unit(self) -> None:
        with pytest.raises(InvalidUnitError):
            denomination_for(10 * BTC)


class TestUnitExponent:
    """Тесты unit_exponent"""

    def test_named_units(self) -> None:
        assert unit_exponent(SATOSHI) == 0
        assert unit_exponent(MICRO_BTC) == 2
        assert unit_exponent(MILLI_BTC) == 5
        assert unit_exponent(BTC) == 8

    def test_units_above_btc(self) -> None:
        assert unit_exponent(10 * BTC) == 9
        assert unit_exponent(10_000 * BTC) == 12

    def test_invalid_units(self) -> None:
        for unit in (0, -1, 250, 3 * BTC):
            with pytest.raises(InvalidUnitError, match="positive power of ten"):
                unit_exponent(unit)
