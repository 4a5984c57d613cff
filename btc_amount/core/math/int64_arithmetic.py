"""
Int64 Arithmetic — примитивы целочисленной арифметики фиксированной ширины

Python int не имеет ограничения разрядности, а Amount по контракту является
знаковым 64-битным целым. Модуль даёт единственный допустимый способ:
- приведения результата к диапазону int64 (two's-complement wrap)
- деления с усечением к нулю (знак остатка = знак делимого)
- определения показателя степени десяти

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Переполнение никогда не вызывает исключение, значение молча оборачивается
2. trunc_divmod(a, b) удовлетворяет q * b + r == a, |r| < |b|, sign(r) == sign(a)
3. Все операции детерминированы и не используют float
"""

from typing import Final

# =============================================================================
# ГРАНИЦЫ INT64
# =============================================================================

INT64_BITS: Final[int] = 64

INT64_MIN: Final[int] = -(1 << (INT64_BITS - 1))

INT64_MAX: Final[int] = (1 << (INT64_BITS - 1)) - 1

_INT64_MODULUS: Final[int] = 1 << INT64_BITS

# Максимальный показатель степени десяти, помещающийся в int64 (10**18)
MAX_POWER_OF_TEN_EXPONENT: Final[int] = 18


# =============================================================================
# WRAP
# =============================================================================


def wrap_int64(value: int) -> int:
    """
    Приведение целого к диапазону int64 с оборачиванием.

    Повторяет поведение машинной арифметики: значения за пределами
    [INT64_MIN, INT64_MAX] оборачиваются по модулю 2**64.

    Args:
        value: Произвольное целое

    Returns:
        Значение в диапазоне [INT64_MIN, INT64_MAX]

    Examples:
        >>> wrap_int64(INT64_MAX + 1) == INT64_MIN
        True
        >>> wrap_int64(-5)
        -5
    """
    if is_int64(value):
        return value

    wrapped = value % _INT64_MODULUS
    if wrapped > INT64_MAX:
        wrapped -= _INT64_MODULUS
    return wrapped


def is_int64(value: int) -> bool:
    """Проверка, что значение представимо в int64 без оборачивания."""
    return INT64_MIN <= value <= INT64_MAX


# =============================================================================
# ДЕЛЕНИЕ С УСЕЧЕНИЕМ К НУЛЮ
# =============================================================================


def trunc_divmod(dividend: int, divisor: int) -> tuple[int, int]:
    """
    Целочисленное деление с усечением к нулю.

    Встроенный divmod округляет к минус бесконечности, поэтому для
    отрицательных делимых остаток получает знак делителя. Здесь остаток
    всегда имеет знак делимого.

    Args:
        dividend: Делимое
        divisor: Делитель (не ноль)

    Returns:
        (quotient, remainder)

    Raises:
        ZeroDivisionError: Если divisor == 0

    Examples:
        >>> trunc_divmod(-7, 2)
        (-3, -1)
        >>> divmod(-7, 2)
        (-4, 1)
    """
    if divisor == 0:
        raise ZeroDivisionError("trunc_divmod by zero")

    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient

    return quotient, dividend - quotient * divisor


def trunc_rem(dividend: int, divisor: int) -> int:
    """Остаток от деления с усечением к нулю (знак делимого)."""
    return trunc_divmod(dividend, divisor)[1]


# =============================================================================
# СТЕПЕНИ ДЕСЯТИ
# =============================================================================


def power_of_ten_exponent(value: int) -> int | None:
    """
    Показатель степени десяти для value.

    Args:
        value: Проверяемое целое

    Returns:
        n, если value == 10**n и 0 <= n <= MAX_POWER_OF_TEN_EXPONENT,
        иначе None

    Examples:
        >>> power_of_ten_exponent(100_000_000)
        8
        >>> power_of_ten_exponent(1)
        0
        >>> power_of_ten_exponent(250) is None
        True
    """
    if value <= 0:
        return None

    exponent = 0
    while value % 10 == 0:
        value //= 10
        exponent += 1

    if value != 1 or exponent > MAX_POWER_OF_TEN_EXPONENT:
        return None

    return exponent
