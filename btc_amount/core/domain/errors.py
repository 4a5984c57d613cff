"""
Errors — таксономия ошибок разбора и форматирования Amount

Все ошибки наследуют ValueError и поднимаются синхронно.
Ошибки разбора несут исходную строку и позицию символа, чтобы
вызывающий код мог построить сообщение без повторного разбора.
Адаптеры маршалинга пробрасывают их без изменений.
"""


# =============================================================================
# ОШИБКИ РАЗБОРА
# =============================================================================


class AmountParseError(ValueError):
    """
    Базовая ошибка разбора строки в Amount.

    Attributes:
        text: Исходная строка
        position: Индекс символа, на котором остановился разбор
    """

    reason: str = "parse error"

    def __init__(self, text: str, position: int):
        self.text = text
        self.position = position
        super().__init__(self._message())

    def _message(self) -> str:
        return self.reason


class StrayPlusError(AmountParseError):
    """'+' не в первой позиции."""

    reason = "parse error, stray +"


class StrayMinusError(AmountParseError):
    """'-' не в первой позиции."""

    reason = "parse error, stray -"


class TooManyDecimalPointsError(AmountParseError):
    """Второй десятичный разделитель ('.' или ',')."""

    reason = "parse error, too many decimal points"


class UnknownCharacterError(AmountParseError):
    """
    Символ вне множества [0-9+-.,].

    Attributes:
        character: Недопустимый символ
    """

    reason = "parse error, unknown character"

    def __init__(self, text: str, position: int):
        self.character = text[position]
        super().__init__(text, position)

    def _message(self) -> str:
        return f"{self.reason}: {self.character} of '{self.text}'"


# =============================================================================
# ОШИБКИ ФОРМАТИРОВАНИЯ
# =============================================================================


class InvalidUnitError(ValueError):
    """
    Единица разбиения не является положительной степенью десяти.

    Attributes:
        unit: Отклонённое значение единицы (в сатоши)
    """

    def __init__(self, unit: int):
        self.unit = unit
        super().__init__(f"unit must be a positive power of ten in satoshis, got {int(unit)}")
