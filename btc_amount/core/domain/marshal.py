"""
Marshal — текстовые и JSON адаптеры для Amount

Текст:
- marshal_text: "<left>.<right>" по единице BTC, точка присутствует всегда
- unmarshal_text: parser без изменений, ошибки пробрасываются как есть

JSON:
- marshal_json: текстовая форма в виде JSON строки
- unmarshal_json: снимает одну пару кавычек и выполняет unmarshal_text;
  при ошибке, если payload является голым JSON числом, число
  форматируется как "%.8f" и разбирается повторно.

Float fallback существует только для совместимости с числовой JSON
кодировкой суммы и теряет точность за пределами float64. Если оба пути
не сработали, поднимается исходная ошибка текстового разбора.
"""

import json
import logging
from dataclasses import dataclass
from typing import Final

from btc_amount.core.domain.errors import AmountParseError
from btc_amount.core.domain.formatting import split_string
from btc_amount.core.domain.parser import parse_satoshis
from btc_amount.core.domain.units import BTC_DECIMALS, SATS_PER_BTC

logger = logging.getLogger(__name__)


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class JsonDecodeConfig:
    """
    Конфигурация JSON декодирования.

    Attributes:
        allow_float_fallback: Разрешить повторный разбор голого JSON числа
        float_decimals: Количество дробных разрядов при форматировании float
    """

    allow_float_fallback: bool = True
    float_decimals: int = BTC_DECIMALS

    def __post_init__(self) -> None:
        if self.float_decimals < 0:
            raise ValueError(f"float_decimals must be non-negative, got {self.float_decimals}")


DEFAULT_JSON_DECODE_CONFIG: Final[JsonDecodeConfig] = JsonDecodeConfig()


# =============================================================================
# ТЕКСТ
# =============================================================================


def marshal_text(amount: int) -> bytes:
    """
    Текстовая форма суммы с полной точностью satoshi.

    Examples:
        >>> marshal_text(150_000_000)
        b'1.5'
        >>> marshal_text(200_000_000)
        b'2.0'
    """
    left, right = split_string(amount, SATS_PER_BTC)
    return f"{left}.{right}".encode("ascii")


def unmarshal_text(data: bytes | str) -> int:
    """
    Разбор текстовой формы суммы.

    Raises:
        AmountParseError: Ошибка парсера без изменений
    """
    return parse_satoshis(_as_text(data))


# =============================================================================
# JSON
# =============================================================================


def marshal_json(amount: int) -> bytes:
    """JSON строка с текстовой формой суммы (b'"1.5"')."""
    return json.dumps(marshal_text(amount).decode("ascii")).encode("ascii")


def unmarshal_json(data: bytes | str, config: JsonDecodeConfig = DEFAULT_JSON_DECODE_CONFIG) -> int:
    """
    Разбор JSON представления суммы.

    Args:
        data: JSON строка ('"1.5"') или голое JSON число ('1.5', '1e-3')
        config: Конфигурация декодирования

    Returns:
        Количество satoshi

    Raises:
        AmountParseError: Исходная ошибка текстового разбора, если ни
            текстовый, ни float путь не дали результата
    """
    text = _strip_quotes(_as_text(data))

    try:
        return parse_satoshis(text)
    except AmountParseError as err:
        if not config.allow_float_fallback:
            raise

        number = _json_number(text)
        if number is None:
            raise

        fixed = f"{number:.{config.float_decimals}f}"
        logger.debug("Lossy float fallback for amount payload %r → %s", text, fixed)

        try:
            return parse_satoshis(fixed)
        except AmountParseError:
            raise err from None


# =============================================================================
# HELPERS
# =============================================================================


def _as_text(data: bytes | str) -> str:
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode("utf-8", errors="replace")
    return data


def _strip_quotes(text: str) -> str:
    """Снятие одной ведущей и одной завершающей кавычки."""
    if len(text) > 2 and text[0] == '"' and text[-1] == '"':
        return text[1:-1]
    return text


def _reject_constant(name: str) -> float:
    raise ValueError(f"non-finite JSON number: {name}")


def _json_number(text: str) -> float | None:
    """
    Интерпретация text как голого JSON числа.

    Returns:
        float значение или None, если text не является конечным JSON числом
    """
    try:
        value = json.loads(text, parse_constant=_reject_constant)
    except ValueError:
        return None

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None

    return float(value)
