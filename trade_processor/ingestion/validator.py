"""Validation rules applied to each comma separated trade line."""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Sequence

from trade_processor.ingestion.diagnostics import DiagnosticSink, LoggingSink

FIELD_COUNT = 3
CURRENCY_PAIR_LENGTH = 6

# Amounts are 32-bit signed integers.
MIN_TRADE_AMOUNT = -(2**31)
MAX_TRADE_AMOUNT = 2**31 - 1

_INTEGER_RE = re.compile(r"\s*[+-]?\d+\s*")
_DECIMAL_RE = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)\s*")


def parse_trade_amount(value: str) -> int | None:
    """Return ``value`` as an ``int`` or ``None`` when it is not a plain 32-bit integer."""

    if not _INTEGER_RE.fullmatch(value):
        return None
    try:
        amount = int(value)
    except ValueError:  # longer than the interpreter will convert
        return None
    if not MIN_TRADE_AMOUNT <= amount <= MAX_TRADE_AMOUNT:
        return None
    return amount


def parse_trade_price(value: str) -> Decimal | None:
    """Return ``value`` as a ``Decimal`` or ``None`` when it is not a plain decimal."""

    if not _DECIMAL_RE.fullmatch(value):
        return None
    try:
        return Decimal(value.strip())
    except InvalidOperation:  # pragma: no cover - the pattern already rules this out
        return None


class TradeValidator:
    """Accept or reject raw field tuples, warning about the first problem found."""

    def __init__(self, sink: DiagnosticSink | None = None) -> None:
        self.sink: DiagnosticSink = sink or LoggingSink()

    def validate(self, fields: Sequence[str], line_number: int) -> bool:
        if len(fields) != FIELD_COUNT:
            self.sink.warning(
                "Line %s malformed. Only %s field(s) found.", line_number, len(fields)
            )
            return False

        if len(fields[0]) != CURRENCY_PAIR_LENGTH:
            self.sink.warning(
                "Trade currencies on line %s malformed: '%s'", line_number, fields[0]
            )
            return False

        if parse_trade_amount(fields[1]) is None:
            self.sink.warning(
                "Trade amount on line %s not a valid integer: '%s'", line_number, fields[1]
            )
            return False

        if parse_trade_price(fields[2]) is None:
            self.sink.warning(
                "Trade price on line %s not a valid decimal: '%s'", line_number, fields[2]
            )
            return False

        return True


__all__ = [
    "CURRENCY_PAIR_LENGTH",
    "FIELD_COUNT",
    "MAX_TRADE_AMOUNT",
    "MIN_TRADE_AMOUNT",
    "TradeValidator",
    "parse_trade_amount",
    "parse_trade_price",
]
