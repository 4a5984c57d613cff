"""
Тесты для Amount

Проверяет:
1. Конструирование и оборачивание int64
2. Целочисленную арифметику, возвращающую Amount
3. abs / to_float
4. Семантику значения (равенство, hash, repr)
"""

import math

import pytest

from btc_amount.core.domain import BTC, MICRO_BTC, MILLI_BTC, SATOSHI, Amount, parse
from btc_amount.core.math import INT64_MAX, INT64_MIN


class TestConstruction:
    """Тесты создания Amount"""

    def test_default_is_zero(self) -> None:
        assert Amount() == 0

    def test_from_satoshis(self) -> None:
        assert Amount(250) == 250 * SATOSHI

    def test_literal_style(self) -> None:
        """250 * SATOSHI, 1400 * MILLI_BTC"""
        amount = 1400 * MILLI_BTC
        assert isinstance(amount, Amount)
        assert amount == parse("1.4")

    def test_out_of_range_wraps(self) -> None:
        assert Amount(INT64_MAX + 1) == INT64_MIN

    def test_parse_classmethod(self) -> None:
        assert Amount.parse("0.5") == 50_000_000

    def test_string_rejected(self) -> None:
        """Строки в BTC разбираются только через parse"""
        with pytest.raises(TypeError, match="use parse"):
            Amount("2")
        with pytest.raises(TypeError):
            Amount("1.5")

    def test_float_rejected(self) -> None:
        with pytest.raises(TypeError, match="float"):
            Amount(1.9)

    def test_from_amount(self) -> None:
        assert Amount(BTC) == BTC
        assert type(Amount(BTC)) is Amount

    def test_top_level_exports(self) -> None:
        import btc_amount

        assert btc_amount.parse("2") == 2 * btc_amount.BTC
        assert btc_amount.Amount is Amount
        assert btc_amount.SATOSHI == SATOSHI


class TestArithmetic:
    """Тесты арифметики"""

    def test_add_sub(self) -> None:
        result = BTC + 100 * MILLI_BTC - 5 * SATOSHI
        assert isinstance(result, Amount)
        assert result == 109_999_995

    def test_reflected_with_int(self) -> None:
        assert isinstance(5 + SATOSHI, Amount)
        assert isinstance(5 - SATOSHI, Amount)
        assert 5 - SATOSHI == 4

    def test_mul(self) -> None:
        assert isinstance(3 * MICRO_BTC, Amount)
        assert MICRO_BTC * 3 == 300

    def test_float_operand_rejected(self) -> None:
        with pytest.raises(TypeError):
            BTC * 1.5  # noqa: B018

    def test_negation(self) -> None:
        assert -parse("20.1") == parse("-20.1")
        assert isinstance(-BTC, Amount)
        assert +BTC is BTC

    def test_overflow_wraps_silently(self) -> None:
        big = Amount(INT64_MAX)
        assert big + SATOSHI == INT64_MIN
        assert Amount(INT64_MIN) - SATOSHI == INT64_MAX

    def test_comparisons(self) -> None:
        assert SATOSHI < MICRO_BTC
        assert -BTC < 0
        assert max(BTC, MILLI_BTC) is BTC


class TestAbsAndFloat:
    """Тесты abs и to_float"""

    def test_abs(self) -> None:
        assert parse("-2.5").abs() == parse("2.5")
        assert abs(parse("-2.5")) == parse("2.5")
        assert isinstance(abs(-BTC), Amount)
        assert BTC.abs() is BTC

    def test_abs_min_wraps(self) -> None:
        assert Amount(INT64_MIN).abs() == INT64_MIN

    def test_to_float(self) -> None:
        """1.5 BTC в mBTC → 1500.0"""
        assert parse("1.5").to_float(MILLI_BTC) == pytest.approx(1500.0)
        assert parse("1.5").to_float(BTC) == pytest.approx(1.5)

    def test_to_float_zero_unit(self) -> None:
        assert parse("1").to_float(0) == math.inf


class TestValueSemantics:
    """Тесты семантики значения"""

    def test_equal_values_indistinguishable(self) -> None:
        assert parse("1") == BTC
        assert hash(parse("1")) == hash(BTC)
        assert len({parse("1"), BTC, Amount(100_000_000)}) == 1

    def test_equals_plain_int(self) -> None:
        assert BTC == 100_000_000

    def test_repr(self) -> None:
        assert repr(parse("0.1")) == "Amount(10000000)"

    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            BTC.value = 1  # type: ignore[attr-defined]
