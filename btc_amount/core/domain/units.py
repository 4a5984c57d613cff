"""
Units — лестница денежных единиц биткоина

Единственный источник коэффициентов пересчёта между:
- satoshi (неделимая базовая единица)
- uBTC (100 satoshi)
- mBTC (100 000 satoshi)
- BTC (100 000 000 satoshi)

Все коэффициенты выражены в satoshi и выводятся умножением друг из друга,
а не задаются независимыми литералами. Типизированные константы Amount
строятся из этих коэффициентов в btc_amount.core.domain.amount.
"""

from dataclasses import dataclass
from typing import Final

from btc_amount.core.domain.errors import InvalidUnitError
from btc_amount.core.math.int64_arithmetic import power_of_ten_exponent

# =============================================================================
# КОЭФФИЦИЕНТЫ ПЕРЕСЧЁТА (в satoshi)
# =============================================================================

SATS_PER_SATOSHI: Final[int] = 1

SATS_PER_MICRO_BTC: Final[int] = 100 * SATS_PER_SATOSHI

SATS_PER_MILLI_BTC: Final[int] = 1000 * SATS_PER_MICRO_BTC

SATS_PER_BTC: Final[int] = 1000 * SATS_PER_MILLI_BTC

# Количество значащих дробных разрядов BTC (разрешение satoshi)
BTC_DECIMALS: Final[int] = 8

# Вся эмиссия биткоина: справочное значение, нигде не проверяется
ALL_BTC_SATS: Final[int] = 20_999_999 * SATS_PER_BTC + 97_690_000 * SATS_PER_SATOSHI


# =============================================================================
# ДЕНОМИНАЦИИ
# =============================================================================


@dataclass(frozen=True)
class Denomination:
    """
    Именованная единица отображения.

    Attributes:
        value: Размер единицы в satoshi
        suffix: Суффикс в отображаемой строке ("BTC", "mBTC", ...)
        name: Полное название
    """

    value: int
    suffix: str
    name: str


SATOSHI_DENOMINATION: Final[Denomination] = Denomination(SATS_PER_SATOSHI, "sats", "satoshi")
MICRO_BTC_DENOMINATION: Final[Denomination] = Denomination(SATS_PER_MICRO_BTC, "uBTC", "micro-bitcoin")
MILLI_BTC_DENOMINATION: Final[Denomination] = Denomination(SATS_PER_MILLI_BTC, "mBTC", "milli-bitcoin")
BTC_DENOMINATION: Final[Denomination] = Denomination(SATS_PER_BTC, "BTC", "bitcoin")

# От крупной к мелкой
DENOMINATIONS: Final[tuple[Denomination, ...]] = (
    BTC_DENOMINATION,
    MILLI_BTC_DENOMINATION,
    MICRO_BTC_DENOMINATION,
    SATOSHI_DENOMINATION,
)


def denomination_for(unit: int) -> Denomination:
    """
    Поиск именованной единицы по её размеру.

    Args:
        unit: Размер единицы в satoshi

    Returns:
        Denomination с value == unit

    Raises:
        InvalidUnitError: Если для unit нет именованной единицы
    """
    for denomination in DENOMINATIONS:
        if denomination.value == unit:
            return denomination

    raise InvalidUnitError(unit)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def unit_exponent(unit: int) -> int:
    """
    Количество десятичных разрядов между единицей разбиения и satoshi.

    Это ширина дробной части при разбиении по unit:
    unit_exponent(BTC) == 8, unit_exponent(satoshi) == 0,
    unit_exponent(10 * BTC) == 9.

    Args:
        unit: Единица разбиения в satoshi

    Returns:
        log10(unit)

    Raises:
        InvalidUnitError: Если unit не является положительной степенью десяти
    """
    exponent = power_of_ten_exponent(unit)
    if exponent is None:
        raise InvalidUnitError(unit)

    return exponent
