"""
Parser — разбор десятичной строки в количество satoshi

Строка интерпретируется как значение в BTC: "1.4" → 1.4 BTC, "1" → 1 BTC.
Разбор однопроходный, слева направо, без float:

- целая часть: value = value * 10 + digit * BTC
- дробная часть: value += digit * mul, mul //= 10 (mul стартует с 0.1 BTC)
- '+' / '-' допустимы только в первой позиции
- '.' и ',' равнозначны, допустим только один разделитель

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пустая строка (и одиночные "+", "-", ".") → 0 без ошибки
2. Разряды после 8-го дробного ничего не добавляют (mul достигает 0)
3. Переполнение int64 оборачивается молча, ошибкой не является
"""

from btc_amount.core.domain.errors import (
    StrayMinusError,
    StrayPlusError,
    TooManyDecimalPointsError,
    UnknownCharacterError,
)
from btc_amount.core.domain.units import SATS_PER_BTC, SATS_PER_MILLI_BTC
from btc_amount.core.math.int64_arithmetic import wrap_int64

_DIGITS = "0123456789"
_DECIMAL_POINTS = ".,"


def parse_satoshis(text: str) -> int:
    """
    Разбор строки в количество satoshi.

    Args:
        text: Десятичное или целое значение в BTC ("20", "-0.5", "0,001")

    Returns:
        Количество satoshi (int64)

    Raises:
        StrayPlusError: '+' не в первой позиции
        StrayMinusError: '-' не в первой позиции
        TooManyDecimalPointsError: второй десятичный разделитель
        UnknownCharacterError: любой другой символ

    Examples:
        >>> parse_satoshis("0020.1")
        2010000000
        >>> parse_satoshis("-0.00000004")
        -4
    """
    value = 0
    decimals = False
    negative = False
    mul = 100 * SATS_PER_MILLI_BTC

    for pos, char in enumerate(text):
        if char == "+":
            if pos != 0:
                raise StrayPlusError(text, pos)

        elif char == "-":
            if pos != 0:
                raise StrayMinusError(text, pos)
            negative = True

        elif char in _DIGITS:
            digit = ord(char) - ord("0")
            if not decimals:
                value = wrap_int64(value * 10 + digit * SATS_PER_BTC)
            else:
                value = wrap_int64(value + digit * mul)
                mul //= 10

        elif char in _DECIMAL_POINTS:
            if decimals:
                raise TooManyDecimalPointsError(text, pos)
            decimals = True

        else:
            raise UnknownCharacterError(text, pos)

    if negative:
        return wrap_int64(-value)

    return value
