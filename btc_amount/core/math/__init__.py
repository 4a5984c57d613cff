"""
Core math modules для btc-amount

Целочисленные примитивы фиксированной ширины без использования float.
"""

from btc_amount.core.math.int64_arithmetic import (
    # Границы
    INT64_BITS,
    INT64_MAX,
    INT64_MIN,
    MAX_POWER_OF_TEN_EXPONENT,
    # Wrap
    is_int64,
    wrap_int64,
    # Деление
    trunc_divmod,
    trunc_rem,
    # Степени десяти
    power_of_ten_exponent,
)

__all__ = [
    # Границы
    "INT64_BITS",
    "INT64_MAX",
    "INT64_MIN",
    "MAX_POWER_OF_TEN_EXPONENT",
    # Wrap
    "is_int64",
    "wrap_int64",
    # Деление
    "trunc_divmod",
    "trunc_rem",
    # Степени десяти
    "power_of_ten_exponent",
]
