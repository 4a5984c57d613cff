"""
Formatting — разбиение фиксированной точки и отображение с суффиксом единицы

Разбиение по произвольной единице (unit, в satoshi):
    right = amount rem unit          (усечение к нулю, знак делимого)
    left  = (amount - right) / unit
    → (left, |right|)

Строковое представление:
- left — десятичная запись, "-0" для отрицательных сумм меньше единицы
- right — остаток, дополненный нулями слева до log10(unit) разрядов,
  с отброшенными хвостовыми нулями (но не короче одного символа)

Автоматический выбор единицы (str): строгие сравнения "больше",
поэтому ровно 1 BTC отображается как "1000 mBTC".
"""

from dataclasses import dataclass
from typing import Final

from btc_amount.core.domain.units import (
    BTC_DENOMINATION,
    MILLI_BTC_DENOMINATION,
    SATOSHI_DENOMINATION,
    Denomination,
    unit_exponent,
)
from btc_amount.core.math.int64_arithmetic import trunc_rem

# Сентинел split() для нулевой единицы
ZERO_UNIT_SENTINEL: Final[tuple[int, int]] = (0, -1)


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class DisplayConfig:
    """
    Конфигурация автоматического выбора единицы для str(amount).

    Пороги проверяются по порядку: первая единица, для которой
    |amount| > value, используется для отображения. Ноль всегда
    отображается в первой единице. Если ни один порог не подошёл,
    используется fallback.
    """

    thresholds: tuple[Denomination, ...] = (BTC_DENOMINATION, MILLI_BTC_DENOMINATION)
    fallback: Denomination = SATOSHI_DENOMINATION


DEFAULT_DISPLAY_CONFIG: Final[DisplayConfig] = DisplayConfig()


# =============================================================================
# РАЗБИЕНИЕ
# =============================================================================


def split(amount: int, unit: int) -> tuple[int, int]:
    """
    Разбиение суммы на целую часть и модуль остатка по единице unit.

    Args:
        amount: Сумма в satoshi (int или Amount)
        unit: Единица разбиения в satoshi

    Returns:
        (left, |right|) как обычные int; (0, 0) для нулевой суммы при любом unit;
        (0, -1) для нулевой единицы

    Examples:
        >>> split(112345678, 100_000_000)
        (1, 12345678)
        >>> split(-112345678, 10_000)
        (-11234, 5678)
    """
    amount, unit = int(amount), int(unit)

    if amount == 0:
        return 0, 0

    if unit == 0:
        return ZERO_UNIT_SENTINEL

    right = trunc_rem(amount, unit)
    left = (amount - right) // unit

    return left, abs(right)


def split_string(amount: int, unit: int) -> tuple[str, str]:
    """
    Разбиение суммы на две строки по единице unit.

    split_string(105500000, BTC) → ("1", "055").

    Args:
        amount: Сумма в satoshi
        unit: Единица разбиения, положительная степень десяти

    Returns:
        (left_str, right_str)

    Raises:
        InvalidUnitError: Если unit не является положительной степенью десяти
    """
    amount, unit = int(amount), int(unit)
    width = unit_exponent(unit)
    left, right = split(amount, unit)

    left_str = f"{left:d}"
    if amount < 0 and left == 0:
        left_str = "-0"

    right_str = f"{right:d}".zfill(width)
    right_str = right_str.rstrip("0") or right_str[0]

    return left_str, right_str


# =============================================================================
# ОТОБРАЖЕНИЕ
# =============================================================================


def join_parts(left: str, right: str) -> str:
    """Склейка частей через '.', разделитель опускается при right == "0"."""
    if right == "0":
        return left

    return f"{left}.{right}"


def format_amount(amount: int, unit: int) -> str:
    """
    Строка суммы в единицах unit без суффикса.

    Examples:
        >>> format_amount(201000000, 100_000_000)
        '2.01'
        >>> format_amount(10_000_000, 100_000)
        '100'
    """
    return join_parts(*split_string(amount, unit))


def format_with_suffix(amount: int, denomination: Denomination) -> str:
    """Строка суммы в единицах denomination с суффиксом ("2.01 BTC")."""
    return f"{format_amount(amount, denomination.value)} {denomination.suffix}"


def choose_denomination(amount: int, config: DisplayConfig = DEFAULT_DISPLAY_CONFIG) -> Denomination:
    """
    Выбор единицы отображения по величине суммы.

    Args:
        amount: Сумма в satoshi
        config: Пороги выбора

    Returns:
        Единица для отображения
    """
    if amount == 0 and config.thresholds:
        return config.thresholds[0]

    magnitude = abs(int(amount))
    for denomination in config.thresholds:
        if magnitude > denomination.value:
            return denomination

    return config.fallback


def display_string(amount: int, config: DisplayConfig = DEFAULT_DISPLAY_CONFIG) -> str:
    """
    Человекочитаемая строка с автоматически выбранной единицей.

    Examples:
        >>> display_string(0)
        '0 BTC'
        >>> display_string(200_000)
        '2 mBTC'
        >>> display_string(23_000)
        '23000 sats'
    """
    return format_with_suffix(amount, choose_denomination(amount, config))
