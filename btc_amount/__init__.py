"""
btc-amount — fixed-point bitcoin amounts

Integer satoshi value type, decimal BTC parser and unit-suffixed formatter.

Usage:
    from btc_amount import SATOSHI, parse
    fee = 250 * SATOSHI
    str(parse("0.00023"))  # "23000 sats"
"""

from btc_amount.core.domain import (
    ALL_BTC,
    BTC,
    MICRO_BTC,
    MILLI_BTC,
    SATOSHI,
    Amount,
    AmountParseError,
    InvalidUnitError,
    parse,
)

__all__ = [
    # Amount
    "Amount",
    "parse",
    # Units
    "SATOSHI",
    "MICRO_BTC",
    "MILLI_BTC",
    "BTC",
    "ALL_BTC",
    # Errors
    "AmountParseError",
    "InvalidUnitError",
]
