"""
Amount — сумма биткоина в satoshi с фиксированной точкой

Immutable целочисленный тип: значение всегда хранится в satoshi,
0.1 BTC представлено как 10_000_000. Amount ведёт себя как int64:

    amount = 250 * SATOSHI
    amount = 1400 * MILLI_BTC

Арифметика (+, -, *) возвращает Amount и оборачивается по модулю 2**64
без ошибки. Две суммы с одинаковым числом satoshi неразличимы.

Amount можно использовать как тип поля Pydantic модели: в JSON он
сериализуется текстовой формой ("1.5"), а при валидации принимает
строку или голое JSON число (целое разбирается точно, дробное
через float fallback).
"""

import math
from typing import Any, Final

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from btc_amount.core.domain import formatting, marshal
from btc_amount.core.domain.formatting import DEFAULT_DISPLAY_CONFIG, DisplayConfig
from btc_amount.core.domain.marshal import DEFAULT_JSON_DECODE_CONFIG, JsonDecodeConfig
from btc_amount.core.domain.parser import parse_satoshis
from btc_amount.core.domain.units import (
    BTC_DENOMINATION,
    MICRO_BTC_DENOMINATION,
    MILLI_BTC_DENOMINATION,
    SATOSHI_DENOMINATION,
    SATS_PER_BTC,
    denomination_for,
)
from btc_amount.core.math.int64_arithmetic import wrap_int64

# Шаблон канонической текстовой формы для JSON Schema
AMOUNT_TEXT_PATTERN: Final[str] = r"^[+-]?[0-9]*([.,][0-9]*)?$"


class Amount(int):
    """
    Сумма в satoshi (знаковое 64-битное целое).

    Конструируется из int (количество satoshi) или через parse(text)
    для строк в BTC.
    """

    __slots__ = ()

    def __new__(cls, satoshis: int = 0) -> "Amount":
        return super().__new__(cls, wrap_int64(_int_operand(satoshis)))

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def parse(cls, text: str) -> "Amount":
        """
        Разбор десятичной строки в BTC.

        Raises:
            AmountParseError: См. btc_amount.core.domain.parser
        """
        return cls(parse_satoshis(text))

    @classmethod
    def unmarshal_text(cls, data: bytes | str) -> "Amount":
        """Обратная операция к marshal_text."""
        return cls(marshal.unmarshal_text(data))

    @classmethod
    def unmarshal_json(
        cls,
        data: bytes | str,
        config: JsonDecodeConfig = DEFAULT_JSON_DECODE_CONFIG,
    ) -> "Amount":
        """JSON строка или голое JSON число (с потерей точности float64)."""
        return cls(marshal.unmarshal_json(data, config))

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def __add__(self, other: object) -> "Amount":
        return Amount(int(self) + _int_operand(other))

    __radd__ = __add__

    def __sub__(self, other: object) -> "Amount":
        return Amount(int(self) - _int_operand(other))

    def __rsub__(self, other: object) -> "Amount":
        return Amount(_int_operand(other) - int(self))

    def __mul__(self, other: object) -> "Amount":
        return Amount(int(self) * _int_operand(other))

    __rmul__ = __mul__

    def __neg__(self) -> "Amount":
        return Amount(-int(self))

    def __pos__(self) -> "Amount":
        return self

    def __abs__(self) -> "Amount":
        return self.abs()

    def abs(self) -> "Amount":
        """Модуль суммы (для INT64_MIN оборачивается в себя)."""
        if self < 0:
            return -self
        return self

    def to_float(self, unit: int) -> float:
        """
        Сумма в долях unit как float.

        to_float(MILLI_BTC) для 1.5 BTC → 1500.0.
        Только для отображения: точность не гарантируется.

        Returns:
            float(self) / float(unit); +inf при unit == 0
        """
        if unit == 0:
            return math.inf

        return float(self) / float(unit)

    # =========================================================================
    # РАЗБИЕНИЕ И ФОРМАТИРОВАНИЕ
    # =========================================================================

    def split(self, unit: int) -> tuple[int, int]:
        """(целая часть, модуль остатка) по единице unit."""
        return formatting.split(int(self), int(unit))

    def split_string(self, unit: int) -> tuple[str, str]:
        """
        Разбиение на две строки по единице unit.

        split_string(BTC) для 1.055 BTC → ("1", "055").
        """
        return formatting.split_string(int(self), int(unit))

    def format(self, unit: int = SATS_PER_BTC) -> str:
        """Строка в единицах unit без суффикса ("2.01")."""
        return formatting.format_amount(int(self), int(unit))

    def display(self, unit: int) -> str:
        """
        Строка в именованной единице unit с суффиксом ("2.01 BTC").

        Raises:
            InvalidUnitError: Если unit не является именованной единицей
        """
        return formatting.format_with_suffix(int(self), denomination_for(int(unit)))

    def btc(self) -> str:
        return formatting.format_with_suffix(int(self), BTC_DENOMINATION)

    def milli_btc(self) -> str:
        return formatting.format_with_suffix(int(self), MILLI_BTC_DENOMINATION)

    def micro_btc(self) -> str:
        return formatting.format_with_suffix(int(self), MICRO_BTC_DENOMINATION)

    def satoshi(self) -> str:
        return formatting.format_with_suffix(int(self), SATOSHI_DENOMINATION)

    def to_display_string(self, config: DisplayConfig = DEFAULT_DISPLAY_CONFIG) -> str:
        """Строка с автоматически выбранной единицей."""
        return formatting.display_string(int(self), config)

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({int(self)})"

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return int(self).__format__(format_spec)

    # =========================================================================
    # МАРШАЛИНГ
    # =========================================================================

    def marshal_text(self) -> bytes:
        """Текстовая форма "<left>.<right>" в BTC, точка присутствует всегда."""
        return marshal.marshal_text(int(self))

    def marshal_json(self) -> bytes:
        return marshal.marshal_json(int(self))

    # =========================================================================
    # PYDANTIC
    # =========================================================================

    @classmethod
    def _validate_python(cls, value: Any) -> "Amount":
        if isinstance(value, Amount):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Amount cannot be built from bool: {value}")
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, (str, bytes)):
            return cls.unmarshal_text(value)
        raise ValueError(f"Amount expects int satoshis or a decimal BTC string, got {type(value).__name__}")

    @classmethod
    def _validate_json(cls, value: Any) -> "Amount":
        if isinstance(value, str):
            return cls.unmarshal_text(value)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"Amount expects a JSON string or number, got {type(value).__name__}")
        # Целое JSON число разбирается точно, без float
        if isinstance(value, int):
            return cls.unmarshal_text(str(value))
        return cls.unmarshal_json(repr(value))

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.json_or_python_schema(
            json_schema=core_schema.no_info_plain_validator_function(cls._validate_json),
            python_schema=core_schema.no_info_plain_validator_function(cls._validate_python),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda amount: amount.marshal_text().decode("ascii"),
                when_used="json",
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {
            "oneOf": [
                {"type": "string", "pattern": AMOUNT_TEXT_PATTERN},
                {"type": "number"},
            ],
            "description": "Bitcoin amount in BTC (decimal string or number)",
        }


def _int_operand(other: object) -> int:
    """Целое число satoshi для конструктора и арифметики (str и float не допускаются)."""
    if not isinstance(other, int):
        raise TypeError(
            f"Amount requires integer satoshis, got {type(other).__name__}; use parse() for BTC strings"
        )
    return int(other)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

SATOSHI: Final[Amount] = Amount(1)

MICRO_BTC: Final[Amount] = 100 * SATOSHI

MILLI_BTC: Final[Amount] = 1000 * MICRO_BTC

BTC: Final[Amount] = 1000 * MILLI_BTC

# Вся эмиссия биткоина: справочное значение, нигде не проверяется
ALL_BTC: Final[Amount] = 20_999_999 * BTC + 97_690_000 * SATOSHI


def parse(text: str) -> Amount:
    """
    Разбор десятичной строки в BTC.

    parse("1.4") → 1.4 BTC, parse("1") → 1 BTC, parse("") → 0.

    Raises:
        AmountParseError: См. btc_amount.core.domain.parser
    """
    return Amount.parse(text)
