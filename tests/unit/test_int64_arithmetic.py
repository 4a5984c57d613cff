"""
Тесты для модуля Int64 Arithmetic

Проверяет:
1. Оборачивание значений за пределами int64
2. Деление с усечением к нулю
3. Определение показателя степени десяти
"""

import pytest

from btc_amount.core.math import (
    INT64_MAX,
    INT64_MIN,
    is_int64,
    power_of_ten_exponent,
    trunc_divmod,
    trunc_rem,
    wrap_int64,
)

# =============================================================================
# WRAP
# =============================================================================


class TestWrapInt64:
    """Тесты для wrap_int64"""

    def test_in_range_unchanged(self) -> None:
        """Значения в диапазоне не изменяются"""
        assert wrap_int64(0) == 0
        assert wrap_int64(-5) == -5
        assert wrap_int64(INT64_MAX) == INT64_MAX
        assert wrap_int64(INT64_MIN) == INT64_MIN

    def test_overflow_wraps_to_min(self) -> None:
        """MAX + 1 оборачивается в MIN"""
        assert wrap_int64(INT64_MAX + 1) == INT64_MIN

    def test_underflow_wraps_to_max(self) -> None:
        """MIN - 1 оборачивается в MAX"""
        assert wrap_int64(INT64_MIN - 1) == INT64_MAX

    def test_negating_min_is_min(self) -> None:
        """-MIN не представимо и остаётся MIN"""
        assert wrap_int64(-INT64_MIN) == INT64_MIN

    def test_is_int64(self) -> None:
        assert is_int64(INT64_MAX)
        assert is_int64(INT64_MIN)
        assert not is_int64(INT64_MAX + 1)
        assert not is_int64(INT64_MIN - 1)


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


class TestTruncDivmod:
    """Тесты для trunc_divmod"""

    def test_positive(self) -> None:
        assert trunc_divmod(7, 2) == (3, 1)

    def test_negative_dividend_truncates_toward_zero(self) -> None:
        """Остаток имеет знак делимого, в отличие от divmod"""
        assert trunc_divmod(-7, 2) == (-3, -1)
        assert divmod(-7, 2) == (-4, 1)

    def test_negative_divisor(self) -> None:
        assert trunc_divmod(7, -2) == (-3, 1)
        assert trunc_divmod(-7, -2) == (3, -1)

    def test_identity(self) -> None:
        """Инвариант: q * b + r == a"""
        for a in (-1012345678, -1, 0, 1, 112345678):
            for b in (1, 10, 100_000, 100_000_000, -10):
                q, r = trunc_divmod(a, b)
                assert q * b + r == a
                assert abs(r) < abs(b)

    def test_zero_divisor_raises(self) -> None:
        with pytest.raises(ZeroDivisionError):
            trunc_divmod(1, 0)

    def test_trunc_rem(self) -> None:
        assert trunc_rem(-112345678, 10_000) == -5678
        assert trunc_rem(112345678, 10_000) == 5678


# =============================================================================
# СТЕПЕНИ ДЕСЯТИ
# =============================================================================


class TestPowerOfTenExponent:
    """Тесты для power_of_ten_exponent"""

    def test_powers(self) -> None:
        assert power_of_ten_exponent(1) == 0
        assert power_of_ten_exponent(10) == 1
        assert power_of_ten_exponent(100_000_000) == 8
        assert power_of_ten_exponent(10**18) == 18

    def test_not_powers(self) -> None:
        assert power_of_ten_exponent(0) is None
        assert power_of_ten_exponent(-10) is None
        assert power_of_ten_exponent(250) is None
        assert power_of_ten_exponent(20) is None

    def test_exceeds_int64(self) -> None:
        """10**19 не помещается в int64"""
        assert power_of_ten_exponent(10**19) is None
