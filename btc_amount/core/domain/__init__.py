"""
Domain models и value objects.

Содержит Amount и всё, что нужно для его разбора и отображения:
лестницу единиц, парсер, разбиение по единице и маршалинг.
"""

from btc_amount.core.domain.amount import (
    ALL_BTC,
    AMOUNT_TEXT_PATTERN,
    BTC,
    MICRO_BTC,
    MILLI_BTC,
    SATOSHI,
    Amount,
    parse,
)
from btc_amount.core.domain.errors import (
    AmountParseError,
    InvalidUnitError,
    StrayMinusError,
    StrayPlusError,
    TooManyDecimalPointsError,
    UnknownCharacterError,
)
from btc_amount.core.domain.formatting import (
    DEFAULT_DISPLAY_CONFIG,
    DisplayConfig,
    choose_denomination,
    display_string,
    format_amount,
    format_with_suffix,
    split,
    split_string,
)
from btc_amount.core.domain.marshal import (
    DEFAULT_JSON_DECODE_CONFIG,
    JsonDecodeConfig,
    marshal_json,
    marshal_text,
    unmarshal_json,
    unmarshal_text,
)
from btc_amount.core.domain.parser import parse_satoshis
from btc_amount.core.domain.units import (
    ALL_BTC_SATS,
    BTC_DECIMALS,
    DENOMINATIONS,
    SATS_PER_BTC,
    SATS_PER_MICRO_BTC,
    SATS_PER_MILLI_BTC,
    SATS_PER_SATOSHI,
    Denomination,
    denomination_for,
    unit_exponent,
)

__all__ = [
    # Amount
    "Amount",
    "parse",
    "SATOSHI",
    "MICRO_BTC",
    "MILLI_BTC",
    "BTC",
    "ALL_BTC",
    "AMOUNT_TEXT_PATTERN",
    # Errors
    "AmountParseError",
    "StrayPlusError",
    "StrayMinusError",
    "TooManyDecimalPointsError",
    "UnknownCharacterError",
    "InvalidUnitError",
    # Units
    "SATS_PER_SATOSHI",
    "SATS_PER_MICRO_BTC",
    "SATS_PER_MILLI_BTC",
    "SATS_PER_BTC",
    "BTC_DECIMALS",
    "ALL_BTC_SATS",
    "Denomination",
    "DENOMINATIONS",
    "denomination_for",
    "unit_exponent",
    # Parser
    "parse_satoshis",
    # Formatting
    "DisplayConfig",
    "DEFAULT_DISPLAY_CONFIG",
    "split",
    "split_string",
    "format_amount",
    "format_with_suffix",
    "choose_denomination",
    "display_string",
    # Marshal
    "JsonDecodeConfig",
    "DEFAULT_JSON_DECODE_CONFIG",
    "marshal_text",
    "unmarshal_text",
    "marshal_json",
    "unmarshal_json",
]
